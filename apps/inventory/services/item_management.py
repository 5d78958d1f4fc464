"""Item CRUD operations service."""

import logging
from decimal import Decimal
from typing import Optional, Dict, Any, List
from uuid import UUID

from django.conf import settings
from django.db import transaction

from apps.stores.models import Aisle
from ..models import Item, PriceHistoryEntry
from .exceptions import (
    ItemNotFoundError,
    DuplicateBarcodeError,
    NoFieldsToUpdateError,
    AisleNotFoundError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = [
    'barcode', 'name', 'category', 'image_link',
    'price', 'promo', 'stock', 'location',
]


def _clean_barcode(barcode: Optional[str]) -> Optional[str]:
    barcode = (barcode or '').strip()
    return barcode or None


def _check_barcode_free(barcode: Optional[str], exclude_id: Optional[UUID] = None) -> None:
    if barcode is None:
        return
    clash = Item.objects.filter(barcode=barcode)
    if exclude_id is not None:
        clash = clash.exclude(id=exclude_id)
    if clash.exists():
        raise DuplicateBarcodeError(f"Barcode '{barcode}' is already assigned to another item")


def _resolve_aisle(location_id: Optional[UUID]) -> Optional[Aisle]:
    if location_id is None:
        return None
    try:
        return Aisle.objects.get(id=location_id)
    except Aisle.DoesNotExist:
        raise AisleNotFoundError(f"Aisle {location_id} not found")


@transaction.atomic
def create_item(
    *,
    name: str,
    price: Decimal = Decimal('0.00'),
    barcode: Optional[str] = None,
    category: str = '',
    image_link: str = '',
    promo: bool = False,
    stock: Optional[int] = None,
    location_id: Optional[UUID] = None,
) -> Item:
    """
    Create a new inventory item and record its opening price.

    Args:
        name: Display name
        price: Shelf price
        barcode: Scanner barcode (blank means none)
        category: Free-text category
        image_link: Product image URL
        promo: Whether the item is on promotion
        stock: Units on hand, None if not tracked
        location_id: Aisle the item is stocked in

    Returns:
        Created Item instance

    Raises:
        DuplicateBarcodeError: If another item has the barcode
        AisleNotFoundError: If location_id is unknown
    """
    barcode = _clean_barcode(barcode)
    _check_barcode_free(barcode)

    item = Item.objects.create(
        name=name,
        price=price,
        barcode=barcode,
        category=category,
        image_link=image_link,
        promo=promo,
        stock=stock,
        location=_resolve_aisle(location_id),
    )
    PriceHistoryEntry.objects.create(item=item, price=item.price)

    logger.info("Created item %s (%s) at %s", item.name, item.barcode or 'no barcode', item.price)
    return item


@transaction.atomic
def update_item(*, item_id: UUID, data: Dict[str, Any]) -> Item:
    """
    Update editable fields of an item.

    A price change appends a price history entry. Unknown keys are ignored.

    Args:
        item_id: Item UUID
        data: Fields to update; 'location' is an aisle UUID or None

    Returns:
        Updated Item instance

    Raises:
        ItemNotFoundError: If item doesn't exist
        NoFieldsToUpdateError: If data holds no editable field
        DuplicateBarcodeError: If the new barcode belongs to another item
        AisleNotFoundError: If the new location is unknown
    """
    updates = {field: value for field, value in data.items() if field in EDITABLE_FIELDS}
    if not updates:
        raise NoFieldsToUpdateError("No valid fields to update")

    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item {item_id} not found")

    old_price = item.price

    if 'barcode' in updates:
        updates['barcode'] = _clean_barcode(updates['barcode'])
        _check_barcode_free(updates['barcode'], exclude_id=item.id)

    if 'location' in updates:
        updates['location'] = _resolve_aisle(updates['location'])

    for field, value in updates.items():
        setattr(item, field, value)
    item.save()

    if 'price' in updates and Decimal(item.price) != old_price:
        PriceHistoryEntry.objects.create(item=item, price=item.price)
        logger.info("Price of %s changed from %s to %s", item.name, old_price, item.price)

    return item


@transaction.atomic
def set_promo(*, item_id: UUID, promo: bool) -> Item:
    """
    Toggle the promotion flag of an item.

    Raises:
        ItemNotFoundError: If item doesn't exist
    """
    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item {item_id} not found")

    item.promo = promo
    item.save(update_fields=['promo', 'updated_at'])
    return item


@transaction.atomic
def delete_item(*, item_id: UUID) -> None:
    """
    Delete an item with its reviews and price history.

    Raises:
        ItemNotFoundError: If item doesn't exist
    """
    deleted, _ = Item.objects.filter(id=item_id).delete()
    if not deleted:
        raise ItemNotFoundError(f"Item {item_id} not found")
    logger.info("Deleted item %s", item_id)


def get_item_by_barcode(*, barcode: str) -> Item:
    """
    Look up a scanned barcode.

    Raises:
        ItemNotFoundError: If no item has the barcode
    """
    try:
        return Item.objects.select_related('location').get(barcode=barcode)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"No item with barcode '{barcode}'")


def get_price_history(*, item: Item, limit: Optional[int] = None) -> List[PriceHistoryEntry]:
    """Latest price history entries of an item, newest first."""
    if limit is None:
        limit = settings.PRICE_HISTORY_LIMIT
    return list(item.price_history.order_by('-recorded_at')[:limit])

"""Item search and filtering service."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..models import Item


def _parse_bool(value) -> Optional[bool]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('1', 'true', 'yes')


def search_items(
    *,
    search: Optional[str] = None,
    category: Optional[str] = None,
    promo=None,
) -> QuerySet[Item]:
    """
    Search and filter inventory items.

    Args:
        search: Search term for name, category, barcode
        category: Exact category (case-insensitive)
        promo: 'true'/'false' or bool to filter on the promo flag

    Returns:
        Filtered QuerySet of Item ordered by name
    """
    queryset = Item.objects.select_related('location')

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(category__icontains=search) |
            Q(barcode__icontains=search)
        )

    if category:
        queryset = queryset.filter(category__iexact=category)

    promo_flag = _parse_bool(promo)
    if promo_flag is not None:
        queryset = queryset.filter(promo=promo_flag)

    return queryset.order_by('name')


def get_promotions() -> QuerySet[Item]:
    """Items currently on promotion."""
    return search_items(promo=True)


def get_all_categories() -> list[str]:
    """
    Get list of all distinct categories.

    Returns:
        Sorted list of non-empty category names
    """
    categories = (
        Item.objects
        .exclude(category='')
        .values_list('category', flat=True)
        .distinct()
        .order_by('category')
    )
    return list(categories)

"""
Cart Services Module
====================

Business logic for the shopper's cart and checkout.

The cart follows the same rules as the app's local cart state, so a cart
edited offline and one edited through the API end up identical:

    add        new line with quantity 1 (or the requested quantity),
               existing line incremented
    set        quantity <= 0 removes the line, otherwise replaces it;
               setting a line that is not in the cart does nothing
    remove     deletes the line; removing a missing line does nothing
    clear      deletes every line

Totals are computed in ``Decimal`` with tax rounded half-up to the cent.

Classes:
    CartService: Cart mutations and the priced cart summary.
    CheckoutService: Turns a cart into a receipt.

Example:
    Scanning two cartons of milk and paying::

        from apps.carts.services import CartService, CheckoutService

        CartService.add_item(user, barcode='0123456789012')
        CartService.add_item(user, barcode='0123456789012')
        summary = CartService.get_summary(user)
        # summary['item_count'] == 2

        receipt = CheckoutService.checkout(user)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.db import transaction
from django.db.models import F

from apps.inventory.models import Item
from apps.recipes.models import Recipe
from .exceptions import (
    CartItemNotFoundError,
    RecipeNotFoundError,
    ReceiptNotFoundError,
    EmptyCartError,
    AmbiguousCartItemError,
)
from .models import CartItem, Receipt, ReceiptLine

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def calculate_totals(lines, tax_rate=None):
    """
    Price a cart.

    Args:
        lines: Iterable of (unit_price, quantity) pairs. A missing quantity
            counts as 1.
        tax_rate (Decimal, optional): Defaults to settings.TAX_RATE.

    Returns:
        CartTotals: subtotal, tax and total, each rounded to the cent.

    Example:
        >>> calculate_totals([(Decimal('10.00'), 2)], Decimal('0.0825'))
        CartTotals(subtotal=Decimal('20.00'), tax=Decimal('1.65'), total=Decimal('21.65'))
    """
    if tax_rate is None:
        tax_rate = settings.TAX_RATE

    subtotal = sum(
        (Decimal(price) * (quantity or 1) for price, quantity in lines),
        Decimal('0.00'),
    ).quantize(CENTS, rounding=ROUND_HALF_UP)
    tax = (subtotal * Decimal(tax_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)

    return CartTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


class CartService:
    """
    Server-side cart for one user.

    Every mutation runs in a transaction and locks the affected rows so
    two devices of the same household do not lose increments.
    """

    @staticmethod
    def get_lines(user):
        return list(
            CartItem.objects
            .filter(user=user)
            .select_related('item')
        )

    @staticmethod
    def get_summary(user):
        """
        Priced view of the cart.

        Returns:
            dict: ``items`` (CartItem list), ``item_count`` (sum of
            quantities), ``subtotal``, ``tax`` and ``total``.
        """
        lines = CartService.get_lines(user)
        totals = calculate_totals((line.item.price, line.quantity) for line in lines)
        return {
            'items': lines,
            'item_count': sum(line.quantity for line in lines),
            'subtotal': totals.subtotal,
            'tax': totals.tax,
            'total': totals.total,
        }

    @staticmethod
    def _resolve_item(item_id=None, barcode=None):
        if (item_id is None) == (not barcode):
            raise AmbiguousCartItemError()

        lookup = {'id': item_id} if item_id is not None else {'barcode': barcode}
        try:
            return Item.objects.get(**lookup)
        except Item.DoesNotExist:
            raise CartItemNotFoundError()

    @staticmethod
    def add_item(user, item_id=None, barcode=None, quantity=1):
        """
        Add an item by id or by scanned barcode.

        Args:
            user (User): Cart owner.
            item_id (UUID, optional): Catalogue item.
            barcode (str, optional): Scanned barcode.
            quantity (int, optional): Units to add. Defaults to 1.

        Returns:
            CartItem: The new or incremented line.

        Raises:
            AmbiguousCartItemError: If neither or both identifiers are given.
            CartItemNotFoundError: If no such item exists.
        """
        item = CartService._resolve_item(item_id=item_id, barcode=barcode)

        with transaction.atomic():
            line, created = (
                CartItem.objects
                .select_for_update()
                .get_or_create(user=user, item=item, defaults={'quantity': quantity})
            )
            if not created:
                line.quantity = F('quantity') + quantity
                line.save(update_fields=['quantity', 'updated_at'])
                line.refresh_from_db()

        return line

    @staticmethod
    def set_quantity(user, item_id, quantity):
        """
        Set the quantity of a line; zero or less removes it.

        Returns:
            CartItem or None: The updated line, or None when the line was
            removed or was never in the cart.
        """
        with transaction.atomic():
            line = (
                CartItem.objects
                .select_for_update()
                .filter(user=user, item_id=item_id)
                .first()
            )
            if line is None:
                return None

            if quantity <= 0:
                line.delete()
                return None

            line.quantity = quantity
            line.save(update_fields=['quantity', 'updated_at'])
            return line

    @staticmethod
    def remove_item(user, item_id):
        CartItem.objects.filter(user=user, item_id=item_id).delete()

    @staticmethod
    def clear(user):
        CartItem.objects.filter(user=user).delete()

    @staticmethod
    def add_recipe(user, recipe_id):
        """
        Add one unit of every ingredient of a recipe.

        Raises:
            RecipeNotFoundError: If the recipe doesn't exist.
        """
        try:
            recipe = Recipe.objects.prefetch_related('ingredients').get(id=recipe_id)
        except Recipe.DoesNotExist:
            raise RecipeNotFoundError()

        with transaction.atomic():
            for ingredient in recipe.ingredients.all():
                CartService.add_item(user, item_id=ingredient.id)

        return recipe


class CheckoutService:
    """Converts a cart into a receipt."""

    @staticmethod
    def checkout(user, store_id=None):
        """
        Check out the user's cart.

        The receipt stores a price snapshot of every line. Tracked stock is
        decremented and never goes below zero. The cart is emptied.

        Args:
            user (User): Cart owner.
            store_id (str, optional): Defaults to settings.DEFAULT_STORE_ID.

        Returns:
            Receipt: The created receipt with its lines.

        Raises:
            EmptyCartError: If the cart has no lines.

        Note:
            Wrapped in a transaction; a failure leaves cart and stock untouched.
        """
        with transaction.atomic():
            lines = list(
                CartItem.objects
                .select_for_update()
                .filter(user=user)
                .select_related('item')
            )
            if not lines:
                raise EmptyCartError()

            totals = calculate_totals((line.item.price, line.quantity) for line in lines)

            receipt = Receipt.objects.create(
                user=user,
                store_id=store_id or settings.DEFAULT_STORE_ID,
                subtotal=totals.subtotal,
                tax=totals.tax,
                amount=totals.total,
                paid_full_amount=True,
            )
            ReceiptLine.objects.bulk_create([
                ReceiptLine(
                    receipt=receipt,
                    item=line.item,
                    name=line.item.name,
                    unit_price=line.item.price,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in lines
            ])

            for line in lines:
                item = Item.objects.select_for_update().get(id=line.item_id)
                if item.stock is not None:
                    item.stock = max(item.stock - line.quantity, 0)
                    item.save(update_fields=['stock', 'updated_at'])

            CartItem.objects.filter(user=user).delete()

        logger.info(
            "Checkout by %s: %s line(s), total %s",
            user.username, len(lines), totals.total
        )
        return receipt

    @staticmethod
    def get_receipt(user, receipt_id):
        try:
            return Receipt.objects.prefetch_related('lines').get(id=receipt_id, user=user)
        except Receipt.DoesNotExist:
            raise ReceiptNotFoundError()

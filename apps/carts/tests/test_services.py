import uuid
import pytest
from decimal import Decimal
from apps.carts.exceptions import (
    CartItemNotFoundError,
    EmptyCartError,
    AmbiguousCartItemError,
    RecipeNotFoundError,
)
from apps.carts.models import CartItem, Receipt
from apps.carts.services import CartService, CheckoutService, calculate_totals
from apps.recipes.services import create_recipe


class TestCalculateTotals:

    def test_empty(self):
        totals = calculate_totals([], Decimal('0.0825'))

        assert totals.subtotal == Decimal('0.00')
        assert totals.tax == Decimal('0.00')
        assert totals.total == Decimal('0.00')

    def test_tax_on_subtotal(self):
        totals = calculate_totals([(Decimal('10.00'), 2)], Decimal('0.0825'))

        assert totals.subtotal == Decimal('20.00')
        assert totals.tax == Decimal('1.65')
        assert totals.total == Decimal('21.65')

    def test_missing_quantity_counts_as_one(self):
        totals = calculate_totals([(Decimal('2.00'), None)], Decimal('0'))

        assert totals.subtotal == Decimal('2.00')

    def test_tax_rounds_half_up(self):
        # 3.00 * 0.0825 = 0.2475 -> 0.25
        totals = calculate_totals([(Decimal('3.00'), 1)], Decimal('0.0825'))

        assert totals.tax == Decimal('0.25')

    def test_default_rate_from_settings(self, settings):
        settings.TAX_RATE = Decimal('0.10')
        totals = calculate_totals([(Decimal('5.00'), 1)])

        assert totals.tax == Decimal('0.50')


@pytest.mark.django_db
class TestCartReducer:

    def test_add_new_line(self, user, apples):
        line = CartService.add_item(user, item_id=apples.id)

        assert line.quantity == 1

    def test_add_existing_increments(self, user, apples):
        CartService.add_item(user, item_id=apples.id)
        line = CartService.add_item(user, barcode='4011', quantity=3)

        assert line.quantity == 4
        assert CartItem.objects.filter(user=user).count() == 1

    def test_add_unknown(self, user):
        with pytest.raises(CartItemNotFoundError):
            CartService.add_item(user, item_id=uuid.uuid4())

    def test_add_needs_exactly_one_key(self, user, apples):
        with pytest.raises(AmbiguousCartItemError):
            CartService.add_item(user)
        with pytest.raises(AmbiguousCartItemError):
            CartService.add_item(user, item_id=apples.id, barcode='4011')

    def test_set_quantity(self, filled_cart, apples):
        line = CartService.set_quantity(filled_cart, apples.id, 7)

        assert line.quantity == 7

    def test_set_zero_removes(self, filled_cart, apples):
        assert CartService.set_quantity(filled_cart, apples.id, 0) is None
        assert not CartItem.objects.filter(user=filled_cart, item=apples).exists()

    def test_set_missing_line_is_noop(self, user, apples):
        assert CartService.set_quantity(user, apples.id, 3) is None
        assert not CartItem.objects.filter(user=user).exists()

    def test_remove_missing_is_noop(self, filled_cart):
        CartService.remove_item(filled_cart, uuid.uuid4())

        assert CartItem.objects.filter(user=filled_cart).count() == 2

    def test_clear(self, filled_cart, other_user, apples):
        CartItem.objects.create(user=other_user, item=apples)

        CartService.clear(filled_cart)

        assert not CartItem.objects.filter(user=filled_cart).exists()
        assert CartItem.objects.filter(user=other_user).exists()

    def test_add_recipe(self, user, apples, soap):
        recipe = create_recipe(name='Apple Pie', ingredient_ids=[apples.id, soap.id])
        CartService.add_item(user, item_id=apples.id)

        CartService.add_recipe(user, recipe.id)

        quantities = dict(CartItem.objects.filter(user=user).values_list('item__name', 'quantity'))
        assert quantities == {'Apples': 2, 'Soap': 1}

    def test_add_unknown_recipe(self, user):
        with pytest.raises(RecipeNotFoundError):
            CartService.add_recipe(user, uuid.uuid4())

    def test_summary(self, filled_cart):
        summary = CartService.get_summary(filled_cart)

        assert summary['item_count'] == 3
        assert summary['subtotal'] == Decimal('23.33')
        # 23.33 * 0.0825 = 1.924725
        assert summary['tax'] == Decimal('1.92')
        assert summary['total'] == Decimal('25.25')


@pytest.mark.django_db
class TestCheckout:

    def test_checkout_creates_receipt(self, filled_cart, apples, soap):
        receipt = CheckoutService.checkout(filled_cart)

        assert receipt.amount == Decimal('25.25')
        assert receipt.store_id == 'default'
        assert receipt.lines.count() == 2
        assert set(receipt.item_ids) == {apples.id, soap.id}
        assert not CartItem.objects.filter(user=filled_cart).exists()

    def test_stock_decremented_and_floored(self, filled_cart, apples, soap):
        apples.stock = 1
        apples.save()

        CheckoutService.checkout(filled_cart)

        apples.refresh_from_db()
        soap.refresh_from_db()
        assert apples.stock == 0
        assert soap.stock is None

    def test_price_snapshot_survives_price_change(self, filled_cart, apples):
        receipt = CheckoutService.checkout(filled_cart)
        apples.price = Decimal('99.00')
        apples.save()

        line = receipt.lines.get(name='Apples')
        assert line.unit_price == Decimal('10.00')
        assert line.line_total == Decimal('20.00')

    def test_empty_cart(self, user):
        with pytest.raises(EmptyCartError):
            CheckoutService.checkout(user)
        assert not Receipt.objects.exists()

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class CartItem(models.Model):
    """One line of a shopper's cart."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='cart_items'
    )
    item = models.ForeignKey(
        'inventory.Item',
        on_delete=models.CASCADE,
        related_name='cart_entries'
    )
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    added_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_items'
        unique_together = [['user', 'item']]
        ordering = ['added_at']

    def __str__(self):
        return f"{self.user} - {self.item} x{self.quantity}"

    @property
    def line_total(self):
        return self.item.price * self.quantity


class Receipt(models.Model):
    """Checked-out cart. Prices are snapshots taken at checkout."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='receipts'
    )
    store_id = models.SlugField(max_length=64, default='default')

    # Financial details
    subtotal = models.DecimalField(max_digits=10, decimal_places=2)
    tax = models.DecimalField(max_digits=10, decimal_places=2)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    paid_full_amount = models.BooleanField(default=True)

    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'receipts'
        indexes = [
            models.Index(fields=['user', '-date'], name='receipts_user_date_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"Receipt {self.id} - {self.amount}"

    @property
    def item_ids(self):
        return [line.item_id for line in self.lines.all() if line.item_id]


class ReceiptLine(models.Model):
    """Item snapshot on a receipt; survives deletion of the item."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    receipt = models.ForeignKey(Receipt, on_delete=models.CASCADE, related_name='lines')
    item = models.ForeignKey(
        'inventory.Item',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='receipt_lines'
    )
    name = models.CharField(max_length=200)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    line_total = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'receipt_lines'

    def __str__(self):
        return f"{self.name} x{self.quantity}"

from django.contrib import admin
from .models import CartItem, Receipt, ReceiptLine


@admin.register(CartItem)
class CartItemAdmin(admin.ModelAdmin):
    list_display = ['user', 'item', 'quantity', 'added_at']
    search_fields = ['user__username', 'item__name']
    raw_id_fields = ['user', 'item']


class ReceiptLineInline(admin.TabularInline):
    """Inline admin for receipt lines."""
    model = ReceiptLine
    extra = 0
    fields = ['name', 'unit_price', 'quantity', 'line_total']
    readonly_fields = fields
    can_delete = False


@admin.register(Receipt)
class ReceiptAdmin(admin.ModelAdmin):
    """Admin interface for receipts."""

    list_display = ['id', 'user', 'store_id', 'amount', 'paid_full_amount', 'date']
    list_filter = ['paid_full_amount', 'store_id', 'date']
    search_fields = ['user__username']
    readonly_fields = ['subtotal', 'tax', 'amount', 'date']
    date_hierarchy = 'date'
    inlines = [ReceiptLineInline]

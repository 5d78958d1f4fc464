from django.contrib import admin
from .models import Item, PriceHistoryEntry, ItemReview


class PriceHistoryInline(admin.TabularInline):
    """Inline admin for price history."""
    model = PriceHistoryEntry
    extra = 0
    fields = ['price', 'recorded_at']
    readonly_fields = ['price', 'recorded_at']
    can_delete = False


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """Admin interface for inventory items."""

    list_display = [
        'name',
        'barcode',
        'category',
        'price',
        'promo',
        'stock',
        'location',
        'avg_rating',
    ]
    list_filter = [
        'promo',
        'category',
        'created_at'
    ]
    search_fields = [
        'name',
        'barcode',
        'category'
    ]
    readonly_fields = [
        'name_normalized',
        'avg_rating',
        'review_count',
        'created_at',
        'updated_at'
    ]
    inlines = [PriceHistoryInline]

    actions = ['start_promo', 'end_promo']

    @admin.action(description='Put selected items on promotion')
    def start_promo(self, request, queryset):
        count = queryset.update(promo=True)
        self.message_user(request, f'{count} item(s) on promotion.')

    @admin.action(description='Take selected items off promotion')
    def end_promo(self, request, queryset):
        count = queryset.update(promo=False)
        self.message_user(request, f'{count} item(s) off promotion.')


@admin.register(ItemReview)
class ItemReviewAdmin(admin.ModelAdmin):
    list_display = ['item', 'reviewer', 'rating', 'created_at']
    list_filter = ['rating', 'created_at']
    search_fields = ['item__name', 'reviewer__username', 'review_text']
    readonly_fields = ['created_at', 'updated_at']

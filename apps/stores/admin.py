from django.contrib import admin
from .models import StoreMap, Aisle, WallSegment


class AisleInline(admin.TabularInline):
    """Inline admin for aisles."""
    model = Aisle
    extra = 0
    fields = ['x', 'y', 'label']


class WallSegmentInline(admin.TabularInline):
    model = WallSegment
    extra = 0
    fields = ['start_x', 'start_y', 'end_x', 'end_y']


@admin.register(StoreMap)
class StoreMapAdmin(admin.ModelAdmin):
    """Admin interface for store maps."""

    list_display = ['store_id', 'width', 'height', 'aisle_count', 'updated_at']
    search_fields = ['store_id']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [AisleInline, WallSegmentInline]

    def aisle_count(self, obj):
        return obj.aisles.count()
    aisle_count.short_description = 'Aisles'


@admin.register(Aisle)
class AisleAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'store_map', 'x', 'y', 'created_at']
    list_filter = ['store_map']
    search_fields = ['label']

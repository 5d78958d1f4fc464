from django.contrib import admin
from .models import Recipe


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin interface for recipes."""

    list_display = ['name', 'feeds', 'total_cost', 'cost_per_serving', 'created_by', 'created_at']
    search_fields = ['name', 'description']
    filter_horizontal = ['ingredients']
    readonly_fields = ['created_at', 'updated_at']

from rest_framework import serializers
from apps.inventory.serializers import ItemListSerializer
from .models import Recipe


class RecipeSerializer(serializers.ModelSerializer):
    """Recipe with ingredient details and costs."""

    ingredients = ItemListSerializer(many=True, read_only=True)
    total_cost = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    cost_per_serving = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Recipe
        fields = [
            'id',
            'name',
            'description',
            'image_link',
            'feeds',
            'ingredients',
            'total_cost',
            'cost_per_serving',
            'created_by',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class RecipeWriteSerializer(serializers.Serializer):
    """Input for creating and editing recipes."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    image_link = serializers.URLField(max_length=500, required=False, allow_blank=True)
    feeds = serializers.IntegerField(min_value=1, required=False)
    ingredient_ids = serializers.ListField(
        child=serializers.UUIDField(),
        required=False,
    )

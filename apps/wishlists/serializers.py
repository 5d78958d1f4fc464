from rest_framework import serializers
from apps.inventory.serializers import ItemListSerializer
from .models import Wishlist


class WishlistSerializer(serializers.ModelSerializer):

    items = ItemListSerializer(many=True, read_only=True)

    class Meta:
        model = Wishlist
        fields = ['id', 'name', 'items', 'created_at', 'updated_at']
        read_only_fields = fields


class WishlistCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)


class WishlistItemSerializer(serializers.Serializer):
    item_id = serializers.UUIDField()

from decimal import Decimal
from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Item, PriceHistoryEntry, ItemReview


class ItemSerializer(serializers.ModelSerializer):
    """Main serializer for items."""

    class Meta:
        model = Item
        fields = [
            'id',
            'barcode',
            'name',
            'category',
            'image_link',
            'price',
            'promo',
            'stock',
            'location',
            'avg_rating',
            'review_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ItemListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    class Meta:
        model = Item
        fields = [
            'id',
            'barcode',
            'name',
            'category',
            'image_link',
            'price',
            'promo',
            'location',
            'avg_rating',
        ]
        read_only_fields = fields


class ItemWriteSerializer(serializers.Serializer):
    """Input for creating and editing items from the back-office."""

    barcode = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    name = serializers.CharField(max_length=200)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    image_link = serializers.URLField(max_length=500, required=False, allow_blank=True)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
    )
    promo = serializers.BooleanField(required=False)
    stock = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    location = serializers.UUIDField(required=False, allow_null=True)


class PromoUpdateSerializer(serializers.Serializer):
    promo = serializers.BooleanField()


class PriceHistoryEntrySerializer(serializers.ModelSerializer):

    class Meta:
        model = PriceHistoryEntry
        fields = ['price', 'recorded_at']
        read_only_fields = fields


class ItemReviewSerializer(serializers.ModelSerializer):
    """Review with a public view of its author."""

    reviewer = UserPublicSerializer(read_only=True)

    class Meta:
        model = ItemReview
        fields = ['id', 'item', 'reviewer', 'rating', 'review_text', 'created_at']
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review_text = serializers.CharField(required=False, allow_blank=True, default='')


class BarcodeLookupSerializer(ItemSerializer):
    """Scan result: the item with its reviews and recent prices."""

    reviews = ItemReviewSerializer(many=True, read_only=True)
    price_history = serializers.SerializerMethodField()

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ['reviews', 'price_history']
        read_only_fields = fields

    def get_price_history(self, obj):
        entries = self.context.get('price_history', [])
        return PriceHistoryEntrySerializer(entries, many=True).data


class DuplicatePairSerializer(serializers.Serializer):
    items = ItemListSerializer(many=True)
    similarity = serializers.IntegerField()
    same_category = serializers.BooleanField()

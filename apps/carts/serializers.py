from rest_framework import serializers
from apps.inventory.serializers import ItemListSerializer
from .models import CartItem, Receipt, ReceiptLine


class CartItemSerializer(serializers.ModelSerializer):
    """Cart line with the item it refers to."""

    item = ItemListSerializer(read_only=True)
    line_total = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = CartItem
        fields = ['item', 'quantity', 'line_total', 'added_at']
        read_only_fields = fields


class CartSerializer(serializers.Serializer):
    """Output of CartService.get_summary."""

    items = CartItemSerializer(many=True)
    item_count = serializers.IntegerField()
    subtotal = serializers.DecimalField(max_digits=10, decimal_places=2)
    tax = serializers.DecimalField(max_digits=10, decimal_places=2)
    total = serializers.DecimalField(max_digits=10, decimal_places=2)


class CartAddSerializer(serializers.Serializer):
    """Add by catalogue id or by scanned barcode, exactly one of them."""

    item_id = serializers.UUIDField(required=False)
    barcode = serializers.CharField(max_length=64, required=False)
    quantity = serializers.IntegerField(min_value=1, required=False, default=1)

    def validate(self, attrs):
        if ('item_id' in attrs) == ('barcode' in attrs):
            raise serializers.ValidationError('Provide exactly one of item_id or barcode.')
        return attrs


class CartQuantitySerializer(serializers.Serializer):
    # Zero or negative removes the line
    quantity = serializers.IntegerField()


class CheckoutSerializer(serializers.Serializer):
    store_id = serializers.SlugField(max_length=64, required=False)


class ReceiptLineSerializer(serializers.ModelSerializer):

    class Meta:
        model = ReceiptLine
        fields = ['item', 'name', 'unit_price', 'quantity', 'line_total']
        read_only_fields = fields


class ReceiptSerializer(serializers.ModelSerializer):
    """Receipt with its item ids and line snapshots."""

    items = serializers.ListField(source='item_ids', child=serializers.UUIDField(), read_only=True)
    lines = ReceiptLineSerializer(many=True, read_only=True)

    class Meta:
        model = Receipt
        fields = [
            'id',
            'date',
            'store_id',
            'subtotal',
            'tax',
            'amount',
            'items',
            'lines',
            'paid_full_amount',
        ]
        read_only_fields = fields

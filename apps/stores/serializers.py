from rest_framework import serializers
from .models import StoreMap, Aisle, WallSegment


class CoordinateSerializer(serializers.Serializer):
    x = serializers.IntegerField(min_value=0)
    y = serializers.IntegerField(min_value=0)


class MapSizeSerializer(serializers.Serializer):
    width = serializers.IntegerField()
    height = serializers.IntegerField()


class AisleSerializer(serializers.ModelSerializer):
    """Aisle as the apps draw it: coordinate plus the items stocked there."""

    coordinate = serializers.SerializerMethodField()
    products = serializers.SerializerMethodField()

    class Meta:
        model = Aisle
        fields = ['id', 'coordinate', 'label', 'products']
        read_only_fields = fields

    def get_coordinate(self, obj):
        return {'x': obj.x, 'y': obj.y}

    def get_products(self, obj):
        return [str(item.id) for item in obj.products.all()]


class WallSegmentSerializer(serializers.ModelSerializer):

    start = serializers.SerializerMethodField()
    end = serializers.SerializerMethodField()

    class Meta:
        model = WallSegment
        fields = ['start', 'end']
        read_only_fields = fields

    def get_start(self, obj):
        return {'x': obj.start_x, 'y': obj.start_y}

    def get_end(self, obj):
        return {'x': obj.end_x, 'y': obj.end_y}


class StoreMapSerializer(serializers.ModelSerializer):
    """Full store map payload."""

    map_size = serializers.SerializerMethodField()
    aisles = AisleSerializer(many=True, read_only=True)
    wall_coordinates = WallSegmentSerializer(source='walls', many=True, read_only=True)

    class Meta:
        model = StoreMap
        fields = ['id', 'store_id', 'map_size', 'aisles', 'wall_coordinates']
        read_only_fields = fields

    def get_map_size(self, obj):
        return {'width': obj.width, 'height': obj.height}


class StoreGridSerializer(serializers.Serializer):
    """Rendered grid, documentation only."""

    store_id = serializers.CharField()
    width = serializers.IntegerField()
    height = serializers.IntegerField()
    cells = serializers.ListField(
        child=serializers.ListField(child=serializers.CharField(allow_null=True))
    )
    product_counts = serializers.DictField(child=serializers.IntegerField())


# Editor input

class AisleInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False, allow_null=True)
    coordinate = CoordinateSerializer()
    label = serializers.CharField(max_length=100, required=False, allow_blank=True)


class WallInputSerializer(serializers.Serializer):
    start = CoordinateSerializer()
    end = CoordinateSerializer()


class MapSaveSerializer(serializers.Serializer):
    """Whole map as submitted by the editor."""

    store_id = serializers.SlugField(max_length=64, required=False)
    map_size = MapSizeSerializer()
    aisles = AisleInputSerializer(many=True, required=False, default=list)
    wall_coordinates = WallInputSerializer(many=True, required=False, default=list)

    def to_service_kwargs(self, default_store_id):
        """Flatten nested coordinates into the shape save_store_map expects."""
        data = self.validated_data
        aisles = []
        for aisle in data['aisles']:
            entry = {'x': aisle['coordinate']['x'], 'y': aisle['coordinate']['y']}
            if aisle.get('id'):
                entry['id'] = aisle['id']
            if 'label' in aisle:
                entry['label'] = aisle['label']
            aisles.append(entry)

        walls = [
            {
                'start_x': wall['start']['x'],
                'start_y': wall['start']['y'],
                'end_x': wall['end']['x'],
                'end_y': wall['end']['y'],
            }
            for wall in data['wall_coordinates']
        ]

        return {
            'store_id': data.get('store_id') or default_store_id,
            'width': data['map_size']['width'],
            'height': data['map_size']['height'],
            'aisles': aisles,
            'walls': walls,
        }


class CellToggleSerializer(serializers.Serializer):
    store_id = serializers.SlugField(max_length=64, required=False)
    tool = serializers.ChoiceField(choices=['aisle', 'wall'])
    x = serializers.IntegerField(min_value=0)
    y = serializers.IntegerField(min_value=0)

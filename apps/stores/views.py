from django.conf import settings
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsStoreStaff
from .serializers import (
    StoreMapSerializer,
    StoreGridSerializer,
    MapSaveSerializer,
    CellToggleSerializer,
)
from .services import (
    default_map_payload,
    get_store_map,
    render_store_grid,
    save_store_map,
    toggle_map_cell,
    StoresServiceError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class MapSavedResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    map_id = serializers.UUIDField()


def _map_payload(store_id):
    store_map = get_store_map(store_id=store_id)
    if store_map is None:
        return default_map_payload(store_id)
    return StoreMapSerializer(store_map).data


@extend_schema(
    responses={200: StoreMapSerializer},
    description="Store map with aisles and walls. Unmapped stores get an empty 10x10 map.",
    tags=['stores'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def map_detail(request, store_id):
    """Get the map of a store."""
    return Response(_map_payload(store_id))


@extend_schema(
    responses={200: StoreGridSerializer},
    description="Rendered grid: cells[y][x] is null, 'wall' or an aisle id.",
    tags=['stores'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def map_grid(request, store_id):
    """Get the rendered grid of a store."""
    return Response(render_store_grid(store_id=store_id))


@extend_schema(
    request=MapSaveSerializer,
    responses={
        200: MapSavedResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Save the whole map from the editor (manager or admin).",
    tags=['admin'],
)
@api_view(['PUT'])
@permission_classes([IsStoreStaff])
def admin_save_map(request):
    """Upsert a store map."""
    serializer = MapSaveSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        store_map = save_store_map(
            **serializer.to_service_kwargs(settings.DEFAULT_STORE_ID)
        )
    except StoresServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'success': True, 'map_id': str(store_map.id)})


@extend_schema(
    request=CellToggleSerializer,
    responses={
        200: StoreMapSerializer,
        400: ErrorResponseSerializer,
    },
    description="Toggle an aisle or a single-cell wall at one grid cell (manager or admin).",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsStoreStaff])
def admin_toggle_cell(request):
    """Apply one editor click."""
    serializer = CellToggleSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    store_id = serializer.validated_data.get('store_id') or settings.DEFAULT_STORE_ID

    try:
        toggle_map_cell(
            store_id=store_id,
            tool=serializer.validated_data['tool'],
            x=serializer.validated_data['x'],
            y=serializer.validated_data['y'],
        )
    except StoresServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_map_payload(store_id))

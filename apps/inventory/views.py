from rest_framework import viewsets, mixins, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsStoreStaff
from .models import Item
from .serializers import (
    ItemSerializer,
    ItemListSerializer,
    ItemWriteSerializer,
    PromoUpdateSerializer,
    ItemReviewSerializer,
    ReviewCreateSerializer,
    BarcodeLookupSerializer,
    DuplicatePairSerializer,
)
from .services import (
    search_items,
    get_promotions,
    get_all_categories,
    get_item_by_barcode,
    get_price_history,
    create_item,
    update_item,
    set_promo,
    delete_item,
    batch_find_duplicates,
    create_review,
    get_item_reviews,
    ItemNotFoundError,
    DuplicateBarcodeError,
    NoFieldsToUpdateError,
    AisleNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
)


class ItemPagination(PageNumberPagination):
    """Custom pagination for items."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


UUID_REGEX = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

ITEM_FILTERS = [
    OpenApiParameter('search', str, description='Search in name, category and barcode'),
    OpenApiParameter('category', str, description='Exact category'),
    OpenApiParameter('promo', bool, description='Only items with this promo flag'),
]


class ItemFilterMixin:
    """Shared query parameter filtering for item listings."""

    def get_queryset(self):
        """
        Filter items based on query parameters.

        Filters:
        - search: Search in name, category, barcode
        - category: Exact category
        - promo: true/false
        """
        return search_items(
            search=self.request.query_params.get('search'),
            category=self.request.query_params.get('category'),
            promo=self.request.query_params.get('promo'),
        )


class ItemViewSet(ItemFilterMixin, viewsets.ReadOnlyModelViewSet):
    """
    Public catalogue used by the shopper app.

    list: Items ordered by name (with filters)
    retrieve: One item
    """

    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    permission_classes = [AllowAny]
    pagination_class = ItemPagination
    lookup_value_regex = UUID_REGEX

    def get_serializer_class(self):
        if self.action in ('list', 'promos'):
            return ItemListSerializer
        return ItemSerializer

    @extend_schema(parameters=ITEM_FILTERS)
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(responses={200: ItemListSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def promos(self, request):
        """Items currently on promotion."""
        page = self.paginate_queryset(get_promotions())
        serializer = ItemListSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(responses={200: BarcodeLookupSerializer, 404: ErrorResponseSerializer})
    @action(detail=False, methods=['get'], url_path=r'barcode/(?P<barcode>[^/]+)')
    def barcode(self, request, barcode=None):
        """Scan lookup: item, reviews and recent price history."""
        try:
            item = get_item_by_barcode(barcode=barcode)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        serializer = BarcodeLookupSerializer(
            item,
            context={'request': request, 'price_history': get_price_history(item=item)},
        )
        return Response(serializer.data)

    @extend_schema(responses={200: serializers.ListField(child=serializers.CharField())})
    @action(detail=False, methods=['get'])
    def categories(self, request):
        """Get list of all categories."""
        return Response(get_all_categories())

    @extend_schema(
        methods=['GET'],
        responses={200: ItemReviewSerializer(many=True), 404: ErrorResponseSerializer},
    )
    @extend_schema(
        methods=['POST'],
        request=ReviewCreateSerializer,
        responses={201: ItemReviewSerializer, 400: ErrorResponseSerializer},
    )
    @action(
        detail=True,
        methods=['get', 'post'],
        permission_classes=[IsAuthenticatedOrReadOnly],
    )
    def reviews(self, request, pk=None):
        """List the reviews of an item or add one."""
        if request.method == 'GET':
            try:
                reviews = get_item_reviews(item_id=pk)
            except ItemNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
            return Response(ItemReviewSerializer(reviews, many=True).data)

        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = create_review(
                reviewer=request.user,
                item_id=pk,
                **serializer.validated_data
            )
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (DuplicateReviewError, InvalidRatingError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ItemReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class AdminItemViewSet(
    ItemFilterMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Back-office inventory management (manager or admin).

    list: Inventory listing (same filters as the catalogue)
    create: Add an item
    partial_update: Edit an item
    destroy: Delete an item
    """

    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    permission_classes = [IsStoreStaff]
    pagination_class = ItemPagination
    lookup_value_regex = UUID_REGEX

    @extend_schema(parameters=ITEM_FILTERS)
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        request=ItemWriteSerializer,
        responses={201: ItemSerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request, *args, **kwargs):
        """Create a new item."""
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data.copy()
        if 'location' in data:
            data['location_id'] = data.pop('location')

        try:
            item = create_item(**data)
        except (DuplicateBarcodeError, AisleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ItemWriteSerializer,
        responses={200: ItemSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    )
    def partial_update(self, request, *args, **kwargs):
        """Edit an item; a price change is recorded in its history."""
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(item_id=kwargs.get('pk'), data=serializer.validated_data)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (NoFieldsToUpdateError, DuplicateBarcodeError, AisleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ItemSerializer(item).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an item."""
        try:
            delete_item(item_id=kwargs.get('pk'))
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=PromoUpdateSerializer,
        responses={200: ItemSerializer, 404: ErrorResponseSerializer},
    )
    @action(detail=True, methods=['patch'])
    def promo(self, request, pk=None):
        """Put an item on or off promotion."""
        serializer = PromoUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = set_promo(item_id=pk, promo=serializer.validated_data['promo'])
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ItemSerializer(item).data)

    @extend_schema(responses={200: DuplicatePairSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def duplicates(self, request):
        """Potential duplicate items for cleanup."""
        return Response(DuplicatePairSerializer(batch_find_duplicates(), many=True).data)

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.models import User
from apps.accounts.permissions import IsAccountOwnerOrAdmin
from .models import Receipt
from .serializers import (
    CartSerializer,
    CartAddSerializer,
    CartQuantitySerializer,
    CheckoutSerializer,
    ReceiptSerializer,
)
from .services import CartService, CheckoutService


class ReceiptPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _cart_response(owner, status_code=status.HTTP_200_OK):
    return Response(CartSerializer(CartService.get_summary(owner)).data, status=status_code)


@extend_schema(
    methods=['GET'],
    responses={200: CartSerializer},
    description="Cart lines with subtotal, tax and total.",
    tags=['cart'],
)
@extend_schema(
    methods=['POST'],
    request=CartAddSerializer,
    responses={201: CartSerializer},
    description="Add an item by item_id or scanned barcode. Adding an item already in the cart increments it.",
    tags=['cart'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None},
    description="Empty the cart.",
    tags=['cart'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAccountOwnerOrAdmin])
def cart(request, user_id):
    """Get, add to or clear a user's cart."""
    owner = get_object_or_404(User, id=user_id)

    if request.method == 'GET':
        return _cart_response(owner)

    if request.method == 'DELETE':
        CartService.clear(owner)
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = CartAddSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    CartService.add_item(owner, **serializer.validated_data)
    return _cart_response(owner, status.HTTP_201_CREATED)


@extend_schema(
    methods=['PATCH'],
    request=CartQuantitySerializer,
    responses={200: CartSerializer},
    description="Set a line's quantity; zero or less removes the line.",
    tags=['cart'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None},
    description="Remove one line. Removing an item that is not in the cart is a no-op.",
    tags=['cart'],
)
@api_view(['PATCH', 'DELETE'])
@permission_classes([IsAccountOwnerOrAdmin])
def cart_line(request, user_id, item_id):
    """Change or remove one cart line."""
    owner = get_object_or_404(User, id=user_id)

    if request.method == 'DELETE':
        CartService.remove_item(owner, item_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = CartQuantitySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    CartService.set_quantity(owner, item_id, serializer.validated_data['quantity'])
    return _cart_response(owner)


@extend_schema(
    request=None,
    responses={200: CartSerializer},
    description="Add every ingredient of a recipe to the cart.",
    tags=['cart'],
)
@api_view(['POST'])
@permission_classes([IsAccountOwnerOrAdmin])
def cart_add_recipe(request, user_id, recipe_id):
    """Add a recipe's ingredients."""
    owner = get_object_or_404(User, id=user_id)
    CartService.add_recipe(owner, recipe_id)
    return _cart_response(owner)


@extend_schema(
    request=CheckoutSerializer,
    responses={201: ReceiptSerializer},
    description="Pay for the cart: creates a receipt, updates stock and empties the cart.",
    tags=['cart'],
)
@api_view(['POST'])
@permission_classes([IsAccountOwnerOrAdmin])
def cart_checkout(request, user_id):
    """Check out the cart."""
    owner = get_object_or_404(User, id=user_id)

    serializer = CheckoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    receipt = CheckoutService.checkout(owner, **serializer.validated_data)
    receipt = CheckoutService.get_receipt(owner, receipt.id)
    return Response(ReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ReceiptSerializer(many=True)},
    description="Receipts of a user, newest first.",
    tags=['receipts'],
)
@api_view(['GET'])
@permission_classes([IsAccountOwnerOrAdmin])
def receipt_list(request, user_id):
    """List receipts."""
    owner = get_object_or_404(User, id=user_id)
    receipts = Receipt.objects.filter(user=owner).prefetch_related('lines')

    paginator = ReceiptPagination()
    page = paginator.paginate_queryset(receipts, request)
    return paginator.get_paginated_response(ReceiptSerializer(page, many=True).data)


@extend_schema(
    responses={200: ReceiptSerializer},
    tags=['receipts'],
)
@api_view(['GET'])
@permission_classes([IsAccountOwnerOrAdmin])
def receipt_detail(request, user_id, pk):
    """Get one receipt."""
    owner = get_object_or_404(User, id=user_id)
    receipt = CheckoutService.get_receipt(owner, pk)
    return Response(ReceiptSerializer(receipt).data)

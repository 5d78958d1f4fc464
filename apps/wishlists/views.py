from django.shortcuts import get_object_or_404
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.models import User
from apps.accounts.permissions import IsAccountOwnerOrAdmin
from .serializers import (
    WishlistSerializer,
    WishlistCreateSerializer,
    WishlistItemSerializer,
)
from .services import (
    get_user_wishlists,
    get_wishlist,
    create_wishlist,
    delete_wishlist,
    add_item_to_wishlist,
    remove_item_from_wishlist,
    WishlistNotFoundError,
    DuplicateWishlistError,
    ItemNotFoundError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: WishlistSerializer(many=True)},
    tags=['wishlists'],
)
@extend_schema(
    methods=['POST'],
    request=WishlistCreateSerializer,
    responses={201: WishlistSerializer, 400: ErrorResponseSerializer},
    tags=['wishlists'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAccountOwnerOrAdmin])
def wishlist_list(request, user_id):
    """List or create a user's wishlists."""
    owner = get_object_or_404(User, id=user_id)

    if request.method == 'GET':
        return Response(WishlistSerializer(get_user_wishlists(user=owner), many=True).data)

    serializer = WishlistCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        wishlist = create_wishlist(user=owner, **serializer.validated_data)
    except DuplicateWishlistError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(WishlistSerializer(wishlist).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: WishlistSerializer, 404: ErrorResponseSerializer},
    tags=['wishlists'],
)
@api_view(['GET', 'DELETE'])
@permission_classes([IsAccountOwnerOrAdmin])
def wishlist_detail(request, user_id, pk):
    """Get or delete one wishlist."""
    owner = get_object_or_404(User, id=user_id)

    try:
        if request.method == 'DELETE':
            delete_wishlist(user=owner, wishlist_id=pk)
            return Response(status=status.HTTP_204_NO_CONTENT)
        wishlist = get_wishlist(user=owner, wishlist_id=pk)
    except WishlistNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(WishlistSerializer(wishlist).data)


@extend_schema(
    request=WishlistItemSerializer,
    responses={200: WishlistSerializer, 201: WishlistSerializer, 404: ErrorResponseSerializer},
    description="Add an item. Adding an item that is already listed returns 200.",
    tags=['wishlists'],
)
@api_view(['POST'])
@permission_classes([IsAccountOwnerOrAdmin])
def wishlist_add_item(request, user_id, pk):
    """Add an item to a wishlist."""
    owner = get_object_or_404(User, id=user_id)

    serializer = WishlistItemSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        wishlist, added = add_item_to_wishlist(
            user=owner,
            wishlist_id=pk,
            item_id=serializer.validated_data['item_id'],
        )
    except (WishlistNotFoundError, ItemNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(
        WishlistSerializer(wishlist).data,
        status=status.HTTP_201_CREATED if added else status.HTTP_200_OK
    )


@extend_schema(
    responses={200: WishlistSerializer, 404: ErrorResponseSerializer},
    tags=['wishlists'],
)
@api_view(['DELETE'])
@permission_classes([IsAccountOwnerOrAdmin])
def wishlist_remove_item(request, user_id, pk, item_id):
    """Remove an item from a wishlist."""
    owner = get_object_or_404(User, id=user_id)

    try:
        wishlist = remove_item_from_wishlist(user=owner, wishlist_id=pk, item_id=item_id)
    except WishlistNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(WishlistSerializer(wishlist).data)

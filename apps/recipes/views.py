from rest_framework import viewsets, mixins, status, serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsStoreStaff
from .models import Recipe
from .serializers import RecipeSerializer, RecipeWriteSerializer
from .services import (
    create_recipe,
    update_recipe,
    delete_recipe,
    get_recipe_by_id,
    RecipeNotFoundError,
    UnknownIngredientError,
)


class RecipePagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


UUID_REGEX = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class RecipeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public recipes.

    list: All recipes with ingredients and costs
    retrieve: One recipe
    """

    queryset = Recipe.objects.prefetch_related('ingredients')
    serializer_class = RecipeSerializer
    permission_classes = [AllowAny]
    pagination_class = RecipePagination
    lookup_value_regex = UUID_REGEX


class AdminRecipeViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Back-office recipe management (manager or admin)."""

    queryset = Recipe.objects.prefetch_related('ingredients')
    serializer_class = RecipeSerializer
    permission_classes = [IsStoreStaff]
    pagination_class = RecipePagination
    lookup_value_regex = UUID_REGEX

    @extend_schema(
        request=RecipeWriteSerializer,
        responses={201: RecipeSerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request, *args, **kwargs):
        """Create a recipe."""
        serializer = RecipeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            recipe = create_recipe(created_by=request.user, **serializer.validated_data)
        except UnknownIngredientError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        recipe = get_recipe_by_id(recipe_id=recipe.id)
        return Response(RecipeSerializer(recipe).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=RecipeWriteSerializer,
        responses={200: RecipeSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    )
    def partial_update(self, request, *args, **kwargs):
        """Edit a recipe."""
        serializer = RecipeWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            recipe = update_recipe(recipe_id=kwargs.get('pk'), data=serializer.validated_data)
        except RecipeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnknownIngredientError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        recipe = get_recipe_by_id(recipe_id=recipe.id)
        return Response(RecipeSerializer(recipe).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a recipe."""
        try:
            delete_recipe(recipe_id=kwargs.get('pk'))
        except RecipeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

"""Recipe CRUD operations service."""

import logging
from typing import Optional, Dict, Any, List
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.inventory.models import Item
from ..models import Recipe
from .exceptions import RecipeNotFoundError, UnknownIngredientError

logger = logging.getLogger(__name__)


def _resolve_ingredients(ingredient_ids: List[UUID]) -> List[Item]:
    unique_ids = list(dict.fromkeys(str(i) for i in ingredient_ids))
    items = list(Item.objects.filter(id__in=unique_ids))
    if len(items) != len(unique_ids):
        found = {str(item.id) for item in items}
        missing = [i for i in unique_ids if i not in found]
        raise UnknownIngredientError(f"Unknown ingredient(s): {', '.join(missing)}")
    return items


@transaction.atomic
def create_recipe(
    *,
    name: str,
    created_by: Optional[User] = None,
    description: str = '',
    image_link: str = '',
    feeds: int = 4,
    ingredient_ids: Optional[List[UUID]] = None,
) -> Recipe:
    """
    Create a recipe from existing items.

    Args:
        name: Recipe name
        created_by: Back-office user creating it
        description: Preparation notes
        image_link: Picture URL
        feeds: Number of servings
        ingredient_ids: Item UUIDs; repeats are ignored

    Returns:
        Created Recipe instance

    Raises:
        UnknownIngredientError: If an ingredient id matches no item
    """
    items = _resolve_ingredients(ingredient_ids or [])

    recipe = Recipe.objects.create(
        name=name,
        description=description,
        image_link=image_link,
        feeds=feeds,
        created_by=created_by,
    )
    recipe.ingredients.set(items)

    logger.info("Created recipe %s with %s ingredients", recipe.name, len(items))
    return recipe


@transaction.atomic
def update_recipe(*, recipe_id: UUID, data: Dict[str, Any]) -> Recipe:
    """
    Update a recipe. 'ingredient_ids', when given, replaces the ingredient set.

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
        UnknownIngredientError: If an ingredient id matches no item
    """
    try:
        recipe = Recipe.objects.select_for_update().get(id=recipe_id)
    except Recipe.DoesNotExist:
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")

    allowed_fields = ['name', 'description', 'image_link', 'feeds']
    for field, value in data.items():
        if field in allowed_fields:
            setattr(recipe, field, value)
    recipe.save()

    if 'ingredient_ids' in data:
        recipe.ingredients.set(_resolve_ingredients(data['ingredient_ids']))

    return recipe


@transaction.atomic
def delete_recipe(*, recipe_id: UUID) -> None:
    """
    Delete a recipe. Its ingredients stay in the inventory.

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
    """
    deleted, _ = Recipe.objects.filter(id=recipe_id).delete()
    if not deleted:
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")


def get_recipe_by_id(*, recipe_id: UUID) -> Recipe:
    """
    Raises:
        RecipeNotFoundError: If recipe doesn't exist
    """
    try:
        return Recipe.objects.prefetch_related('ingredients').get(id=recipe_id)
    except Recipe.DoesNotExist:
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")

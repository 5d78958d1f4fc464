"""Services for recipes."""

from .exceptions import (
    RecipesServiceError,
    RecipeNotFoundError,
    UnknownIngredientError,
)
from .recipe_management import (
    create_recipe,
    update_recipe,
    delete_recipe,
    get_recipe_by_id,
)

__all__ = [
    # Exceptions
    'RecipesServiceError',
    'RecipeNotFoundError',
    'UnknownIngredientError',
    # Recipe management
    'create_recipe',
    'update_recipe',
    'delete_recipe',
    'get_recipe_by_id',
]

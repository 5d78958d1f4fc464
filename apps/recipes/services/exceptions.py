"""Domain-specific exceptions for recipe services."""


class RecipesServiceError(Exception):
    """Base exception for recipe services."""
    pass


class RecipeNotFoundError(RecipesServiceError):
    """Raised when recipe does not exist."""
    pass


class UnknownIngredientError(RecipesServiceError):
    """Raised when an ingredient id matches no item."""
    pass

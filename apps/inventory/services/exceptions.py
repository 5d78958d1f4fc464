"""Domain-specific exceptions for inventory services."""


class InventoryServiceError(Exception):
    """Base exception for inventory services."""
    pass


class ItemNotFoundError(InventoryServiceError):
    """Raised when item does not exist."""
    pass


class DuplicateBarcodeError(InventoryServiceError):
    """Raised when another item already carries the barcode."""
    pass


class NoFieldsToUpdateError(InventoryServiceError):
    """Raised when an update names no editable field."""
    pass


class AisleNotFoundError(InventoryServiceError):
    """Raised when an item is placed in an aisle that does not exist."""
    pass


class DuplicateReviewError(InventoryServiceError):
    """Raised when a shopper reviews the same item twice."""
    pass


class InvalidRatingError(InventoryServiceError):
    """Raised when rating is outside 1-5."""
    pass

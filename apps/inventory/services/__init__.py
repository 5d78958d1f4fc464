"""Services for inventory items, price history and reviews."""

from .exceptions import (
    InventoryServiceError,
    ItemNotFoundError,
    DuplicateBarcodeError,
    NoFieldsToUpdateError,
    AisleNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
)
from .item_management import (
    create_item,
    update_item,
    set_promo,
    delete_item,
    get_item_by_barcode,
    get_price_history,
)
from .item_search import (
    search_items,
    get_promotions,
    get_all_categories,
)
from .item_deduplication import batch_find_duplicates
from .review_management import (
    create_review,
    get_item_reviews,
)

__all__ = [
    # Exceptions
    'InventoryServiceError',
    'ItemNotFoundError',
    'DuplicateBarcodeError',
    'NoFieldsToUpdateError',
    'AisleNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    # Item management
    'create_item',
    'update_item',
    'set_promo',
    'delete_item',
    'get_item_by_barcode',
    'get_price_history',
    # Search
    'search_items',
    'get_promotions',
    'get_all_categories',
    # Deduplication
    'batch_find_duplicates',
    # Reviews
    'create_review',
    'get_item_reviews',
]

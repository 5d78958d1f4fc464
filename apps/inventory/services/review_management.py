"""Item review service."""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from ..models import Item, ItemReview
from .exceptions import ItemNotFoundError, DuplicateReviewError, InvalidRatingError

logger = logging.getLogger(__name__)


@transaction.atomic
def create_review(
    *,
    reviewer: User,
    item_id: UUID,
    rating: int,
    review_text: str = '',
) -> ItemReview:
    """
    Create a review and refresh the item's rating aggregates.

    Args:
        reviewer: User writing the review
        item_id: Reviewed item
        rating: 1-5
        review_text: Optional free text

    Returns:
        Created ItemReview instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        ItemNotFoundError: If item doesn't exist
        DuplicateReviewError: If the reviewer already reviewed this item
    """
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")

    try:
        item = Item.objects.select_for_update().get(id=item_id)
    except Item.DoesNotExist:
        raise ItemNotFoundError(f"Item {item_id} not found")

    if ItemReview.objects.filter(item=item, reviewer=reviewer).exists():
        raise DuplicateReviewError("You have already reviewed this item")

    try:
        with transaction.atomic():
            review = ItemReview.objects.create(
                item=item,
                reviewer=reviewer,
                rating=rating,
                review_text=review_text,
            )
    except IntegrityError:
        raise DuplicateReviewError("You have already reviewed this item")

    item.update_aggregate_rating()
    logger.debug("Review %s/5 on %s by %s", rating, item.name, reviewer.username)
    return review


def get_item_reviews(*, item_id: UUID) -> QuerySet[ItemReview]:
    """
    Reviews of an item, newest first.

    Raises:
        ItemNotFoundError: If item doesn't exist
    """
    if not Item.objects.filter(id=item_id).exists():
        raise ItemNotFoundError(f"Item {item_id} not found")
    return ItemReview.objects.filter(item_id=item_id).select_related('reviewer')

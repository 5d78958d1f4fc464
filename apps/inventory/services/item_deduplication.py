"""Item deduplication service using fuzzy matching."""

from collections import defaultdict
from typing import List

from fuzzywuzzy import fuzz

from ..models import Item


# Thresholds for fuzzy matching
HIGH_SIMILARITY_THRESHOLD = 90
CROSS_CATEGORY_PENALTY = 10


def batch_find_duplicates(*, threshold: int = HIGH_SIMILARITY_THRESHOLD) -> List[dict]:
    """
    Scan the inventory for items that are probably the same product.
    Used for back-office cleanup after bulk entry.

    Pairs inside one category are compared on normalized name. Pairs across
    categories must clear a stricter threshold, so "Milk" under "Dairy"
    and "milk" with no category still match.

    Args:
        threshold: Minimum similarity score (0-100)

    Returns:
        List of duplicate pairs, highest similarity first:
        [
            {
                'items': [item1, item2],
                'similarity': int,
                'same_category': bool,
            }
        ]
    """
    items = list(Item.objects.all())

    by_category = defaultdict(list)
    for item in items:
        by_category[item.category.strip().lower()].append(item)

    pairs = []

    # Step 1: same category
    for category_items in by_category.values():
        for i, item1 in enumerate(category_items):
            for item2 in category_items[i + 1:]:
                similarity = fuzz.ratio(item1.name_normalized, item2.name_normalized)
                if similarity >= threshold:
                    pairs.append({
                        'items': [item1, item2],
                        'similarity': similarity,
                        'same_category': True,
                    })

    # Step 2: across categories
    cross_threshold = min(100, threshold + CROSS_CATEGORY_PENALTY)
    categories = sorted(by_category)
    for i, category1 in enumerate(categories):
        for category2 in categories[i + 1:]:
            for item1 in by_category[category1]:
                for item2 in by_category[category2]:
                    similarity = fuzz.ratio(item1.name_normalized, item2.name_normalized)
                    if similarity >= cross_threshold:
                        pairs.append({
                            'items': [item1, item2],
                            'similarity': similarity,
                            'same_category': False,
                        })

    pairs.sort(key=lambda pair: (not pair['same_category'], -pair['similarity']))
    return pairs

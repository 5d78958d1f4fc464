from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid
import re


class Item(models.Model):
    """Product on the shelves, looked up by barcode from the scanner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    barcode = models.CharField(max_length=64, unique=True, null=True, blank=True)
    name = models.CharField(max_length=200, db_index=True)
    name_normalized = models.CharField(max_length=200, db_index=True, editable=False)
    category = models.CharField(max_length=100, blank=True, db_index=True)
    image_link = models.URLField(max_length=500, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    promo = models.BooleanField(default=False)

    # None means stock is not tracked
    stock = models.PositiveIntegerField(null=True, blank=True)

    location = models.ForeignKey(
        'stores.Aisle',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )

    avg_rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal('0.00'))
    review_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'items'
        indexes = [
            models.Index(fields=['category'], name='items_category_idx'),
            models.Index(fields=['promo'], name='items_promo_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.name_normalized = self._normalize_string(self.name)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'name' in update_fields:
            kwargs['update_fields'] = list(update_fields) + ['name_normalized']
        super().save(*args, **kwargs)

    @staticmethod
    def _normalize_string(text):
        text = text.lower().strip()
        text = re.sub(r'\s+', ' ', text)
        text = re.sub(r'[^\w\s-]', '', text)
        return text

    def update_aggregate_rating(self):
        from django.db.models import Avg, Count
        aggregates = self.reviews.aggregate(avg=Avg('rating'), count=Count('id'))
        self.avg_rating = Decimal(str(round(aggregates['avg'] or 0, 2)))
        self.review_count = aggregates['count']
        self.save(update_fields=['avg_rating', 'review_count', 'updated_at'])


class PriceHistoryEntry(models.Model):
    """Price of an item from recorded_at until the next entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name='price_history')
    price = models.DecimalField(max_digits=10, decimal_places=2)
    recorded_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'price_history'
        ordering = ['-recorded_at']
        verbose_name_plural = 'price history entries'

    def __str__(self):
        return f"{self.item.name} @ {self.price}"


class ItemReview(models.Model):
    """Shopper review of an item. One per reviewer and item."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name='reviews')
    reviewer = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='item_reviews'
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    review_text = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        unique_together = [['item', 'reviewer']]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.reviewer} on {self.item}: {self.rating}/5"

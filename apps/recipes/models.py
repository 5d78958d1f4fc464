from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal, ROUND_HALF_UP
import uuid

CENTS = Decimal('0.01')


class Recipe(models.Model):
    """Meal built from inventory items; shoppers add all ingredients to the cart at once."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)
    image_link = models.URLField(max_length=500, blank=True)
    feeds = models.PositiveSmallIntegerField(default=4, validators=[MinValueValidator(1)])
    ingredients = models.ManyToManyField(
        'inventory.Item',
        related_name='recipes',
        blank=True
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_recipes'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipes'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def total_cost(self):
        """Sum of ingredient shelf prices."""
        return sum((item.price for item in self.ingredients.all()), Decimal('0.00'))

    @property
    def cost_per_serving(self):
        return (self.total_cost / self.feeds).quantize(CENTS, rounding=ROUND_HALF_UP)

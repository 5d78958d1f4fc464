from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class StoreMap(models.Model):
    """Grid floor plan of one store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store_id = models.SlugField(max_length=64, unique=True)
    width = models.PositiveSmallIntegerField(
        default=10,
        validators=[MinValueValidator(1), MaxValueValidator(50)]
    )
    height = models.PositiveSmallIntegerField(
        default=10,
        validators=[MinValueValidator(1), MaxValueValidator(50)]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'store_maps'
        ordering = ['store_id']

    def __str__(self):
        return f"{self.store_id} ({self.width}x{self.height})"

    def contains(self, x, y):
        """True if (x, y) is a cell of this map."""
        return 0 <= x < self.width and 0 <= y < self.height


class Aisle(models.Model):
    """Shelf cell on the map. Items point at the aisle they are stocked in."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store_map = models.ForeignKey(
        StoreMap,
        on_delete=models.CASCADE,
        related_name='aisles'
    )
    x = models.PositiveSmallIntegerField()
    y = models.PositiveSmallIntegerField()
    label = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'aisles'
        unique_together = [['store_map', 'x', 'y']]
        ordering = ['y', 'x']

    def __str__(self):
        return self.label or f"Aisle ({self.x}, {self.y})"


class WallSegment(models.Model):
    """Inclusive rectangle of wall cells; a single cell has start == end."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store_map = models.ForeignKey(
        StoreMap,
        on_delete=models.CASCADE,
        related_name='walls'
    )
    start_x = models.PositiveSmallIntegerField()
    start_y = models.PositiveSmallIntegerField()
    end_x = models.PositiveSmallIntegerField()
    end_y = models.PositiveSmallIntegerField()

    class Meta:
        db_table = 'wall_coordinates'
        ordering = ['start_y', 'start_x']

    def __str__(self):
        return f"Wall ({self.start_x}, {self.start_y}) - ({self.end_x}, {self.end_y})"

    def is_single_cell_at(self, x, y):
        return self.start_x == self.end_x == x and self.start_y == self.end_y == y

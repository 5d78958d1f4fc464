from django.db import models
import uuid


class Wishlist(models.Model):
    """Named list of items a shopper wants to buy later."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='wishlists'
    )
    name = models.CharField(max_length=100)
    items = models.ManyToManyField('inventory.Item', related_name='wishlists', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'wishlists'
        unique_together = [['user', 'name']]
        ordering = ['name']

    def __str__(self):
        return f"{self.user} - {self.name}"

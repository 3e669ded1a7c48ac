from django.db import models
import uuid


class Client(models.Model):
    """
    A laundry customer (hotel, restaurant, spa...).

    Clients are never physically deleted because batches and invoices
    refer to them; deleting one only sets is_active=False.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    contact_number = models.CharField(max_length=20, blank=True)
    # NULL rather than '' so that several clients may omit it
    email = models.EmailField(max_length=255, unique=True, null=True, blank=True)
    address = models.CharField(max_length=500, blank=True)
    logo_url = models.URLField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True)

    favorite_categories = models.ManyToManyField(
        'catalog.LinenCategory',
        through='ClientFavoriteCategory',
        related_name='favorited_by',
        blank=True,
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'clients'
        indexes = [
            models.Index(fields=['is_active', 'name'], name='clients_active_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name


class ClientFavoriteCategory(models.Model):
    """Linen category a client usually sends, shown first on batch entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    client = models.ForeignKey(
        Client,
        on_delete=models.CASCADE,
        related_name='favorites'
    )
    linen_category = models.ForeignKey(
        'catalog.LinenCategory',
        on_delete=models.CASCADE,
        related_name='client_favorites'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'client_favorite_categories'
        unique_together = [['client', 'linen_category']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.client.name} ♥ {self.linen_category.name}"

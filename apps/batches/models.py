from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


MAX_ITEM_QUANTITY = 10000


class BatchStatus(models.TextChoices):
    PICKUP = 'pickup', 'Pickup'
    WASHING = 'washing', 'Washing'
    COMPLETED = 'completed', 'Completed'
    DELIVERED = 'delivered', 'Delivered'


class Batch(models.Model):
    """
    A set of linen items picked up together from one client.

    paper_batch_id is the number written on the paper slip by staff;
    system_batch_id (RSL-YYYY-NNNNNN) is generated on creation.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.PROTECT,
        related_name='batches'
    )
    paper_batch_id = models.CharField(max_length=50, unique=True)
    system_batch_id = models.CharField(max_length=30, unique=True, editable=False)

    pickup_date = models.DateField()
    delivery_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=BatchStatus.choices,
        default=BatchStatus.PICKUP,
        db_index=True
    )

    notes = models.TextField(blank=True)
    washing_notes = models.TextField(blank=True)
    completed_notes = models.TextField(blank=True)
    delivery_notes = models.TextField(blank=True)

    # Denormalized from items; reports recompute from items
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )
    has_discrepancy = models.BooleanField(default=False, db_index=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='batches_created'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'batches'
        verbose_name_plural = 'batches'
        indexes = [
            models.Index(fields=['client', 'pickup_date'], name='batches_client_pickup_idx'),
            models.Index(fields=['pickup_date'], name='batches_pickup_date_idx'),
        ]
        ordering = ['-pickup_date', '-created_at']

    def __str__(self):
        return f"{self.system_batch_id} ({self.client.name})"

    def refresh_totals(self, save=True):
        """Recompute total_amount and has_discrepancy from the items."""
        total = Decimal('0.00')
        discrepancy = False
        for item in self.items.all():
            total += item.quantity_sent * item.price_per_item
            if item.quantity_sent != item.quantity_received:
                discrepancy = True

        self.total_amount = total.quantize(Decimal('0.01'))
        self.has_discrepancy = discrepancy
        if save:
            self.save(update_fields=['total_amount', 'has_discrepancy', 'updated_at'])


class BatchItem(models.Model):
    """Quantities of one linen category within a batch."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    batch = models.ForeignKey(
        Batch,
        on_delete=models.CASCADE,
        related_name='items'
    )
    linen_category = models.ForeignKey(
        'catalog.LinenCategory',
        on_delete=models.PROTECT,
        related_name='batch_items'
    )
    quantity_sent = models.PositiveIntegerField(
        validators=[MaxValueValidator(MAX_ITEM_QUANTITY)]
    )
    quantity_received = models.PositiveIntegerField(
        validators=[MaxValueValidator(MAX_ITEM_QUANTITY)]
    )
    # Snapshot of the category price when the batch was recorded
    price_per_item = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    express_delivery = models.BooleanField(default=False)
    discrepancy_details = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'batch_items'
        unique_together = [['batch', 'linen_category']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.linen_category.name}: {self.quantity_sent}/{self.quantity_received}"

    @property
    def discrepancy(self):
        return self.quantity_sent - self.quantity_received

    def save(self, *args, **kwargs):
        self.subtotal = (self.quantity_sent * self.price_per_item).quantize(Decimal('0.01'))
        super().save(*args, **kwargs)


class BatchStatusChange(models.Model):
    """Append-only history of a batch's status."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    batch = models.ForeignKey(
        Batch,
        on_delete=models.CASCADE,
        related_name='status_changes'
    )
    # Blank on the row written at creation
    from_status = models.CharField(max_length=20, choices=BatchStatus.choices, blank=True)
    to_status = models.CharField(max_length=20, choices=BatchStatus.choices)
    notes = models.TextField(blank=True)
    changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='batch_status_changes'
    )
    changed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'batch_status_changes'
        ordering = ['changed_at']

    def __str__(self):
        return f"{self.batch_id}: {self.from_status or '-'} -> {self.to_status}"

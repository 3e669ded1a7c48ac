from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class CategorySection(models.TextChoices):
    FRONT_OF_HOUSE = 'front_of_house', 'Front of House'
    HOUSEKEEPING = 'housekeeping', 'Housekeeping'
    KITCHEN = 'kitchen', 'Kitchen'
    OTHER = 'other', 'Other'


class LinenCategory(models.Model):
    """
    A kind of linen item with its current unit price.

    Batch items snapshot the price when they are recorded, so
    changing price_per_item only affects batches captured afterwards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    price_per_item = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal('0.00')),
            MaxValueValidator(Decimal('999999.99')),
        ]
    )
    section = models.CharField(
        max_length=20,
        choices=CategorySection.choices,
        default=CategorySection.OTHER,
    )
    is_active = models.BooleanField(default=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'linen_categories'
        verbose_name_plural = 'linen categories'
        indexes = [
            models.Index(fields=['is_active', 'name'], name='linen_cat_active_name_idx'),
            models.Index(fields=['section'], name='linen_cat_section_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} (R{self.price_per_item})"

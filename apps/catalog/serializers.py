from decimal import Decimal

from rest_framework import serializers

from config.pagination import PaginationQuerySerializer
from .models import LinenCategory


PRICE_ERRORS = {
    'invalid': 'Price must be a number',
    'min_value': 'Price must be a non-negative number below 1,000,000',
    'max_value': 'Price must be a non-negative number below 1,000,000',
}


# =============================================================================
# Input Serializers
# =============================================================================

class CategoryListQuerySerializer(PaginationQuerySerializer):
    """
    Query parameters for listing categories.

    Query Parameters:
        includeInactive (bool): Include deactivated categories
        search (str): Name contains
        stats (bool): Return catalog statistics instead of the list
        grouped (bool): Return categories grouped by section
    """

    includeInactive = serializers.BooleanField(required=False, default=False)
    search = serializers.CharField(required=False, allow_blank=True, max_length=255)
    stats = serializers.BooleanField(required=False, default=False)
    grouped = serializers.BooleanField(required=False, default=False)


class CategoryBulkPriceSerializer(serializers.Serializer):
    """Body of PATCH /api/categories/: {"updates": [{"id", "price"}, ...]}."""

    updates = serializers.ListField(
        child=serializers.DictField(),
        allow_empty=False,
        max_length=100,
        error_messages={
            'empty': 'Updates must be a non-empty list of at most 100 entries',
            'max_length': 'Updates must be a non-empty list of at most 100 entries',
            'not_a_list': 'Updates must be a non-empty list of at most 100 entries',
        },
    )


class CategoryUpdateSerializer(serializers.Serializer):
    price = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('999999.99'),
        required=False,
        error_messages=PRICE_ERRORS,
    )
    name = serializers.CharField(min_length=1, max_length=255, required=False)
    is_active = serializers.BooleanField(required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('No fields to update')
        return attrs


class PriceLookupQuerySerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, error_messages={
        'required': 'Category name is required',
        'blank': 'Category name is required',
    })


# =============================================================================
# Output Serializers
# =============================================================================

class LinenCategorySerializer(serializers.ModelSerializer):
    """Linen category with its current unit price."""

    section_display = serializers.CharField(source='get_section_display', read_only=True)

    class Meta:
        model = LinenCategory
        fields = [
            'id',
            'name',
            'price_per_item',
            'section',
            'section_display',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CategoryStatsSerializer(serializers.Serializer):
    total_categories = serializers.IntegerField()
    active_categories = serializers.IntegerField()
    average_price = serializers.FloatField()
    price_range = serializers.DictField(child=serializers.FloatField())


class BulkPriceResultSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
    failed = serializers.IntegerField()
    errors = serializers.ListField(child=serializers.DictField())


class PriceLookupSerializer(serializers.Serializer):
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    matched_name = serializers.CharField(allow_null=True)
    match_type = serializers.CharField()
    score = serializers.IntegerField()
    category_id = serializers.UUIDField(allow_null=True)

from decimal import Decimal

from rest_framework import serializers

from apps.clients.serializers import ClientSummarySerializer
from config.pagination import PaginationQuerySerializer
from .aggregation import aggregate_batch_items
from .models import Batch, BatchStatus, BatchStatusChange, MAX_ITEM_QUANTITY
from .services import MAX_ITEMS_PER_BATCH
from .workflow import allowed_transitions


QUANTITY_ERRORS = {
    'invalid': 'Quantities must be whole numbers',
    'min_value': f'Quantities must be between 0 and {MAX_ITEM_QUANTITY}',
    'max_value': f'Quantities must be between 0 and {MAX_ITEM_QUANTITY}',
}

ITEM_PRICE_ERRORS = {
    'invalid': 'Price must be a number',
    'min_value': 'Price must be between 0 and 1000',
    'max_value': 'Price must be between 0 and 1000',
}

STATUS_ERRORS = {
    'invalid_choice': 'Status must be one of: pickup, washing, completed, delivered',
}


# =============================================================================
# Input Serializers
# =============================================================================

class BatchItemInputSerializer(serializers.Serializer):
    """
    One line of a batch.

    Fields:
        linen_category_id (uuid): Category of the items
        quantity_sent (int): 0..10000
        quantity_received (int): 0..10000, defaults to quantity_sent
        price_per_item (decimal): 0..1000, defaults to the category price
        express_delivery (bool): Express handling requested
        discrepancy_details (str): Explanation of a count mismatch
    """

    linen_category_id = serializers.UUIDField()
    quantity_sent = serializers.IntegerField(
        min_value=0,
        max_value=MAX_ITEM_QUANTITY,
        error_messages=QUANTITY_ERRORS,
    )
    quantity_received = serializers.IntegerField(
        min_value=0,
        max_value=MAX_ITEM_QUANTITY,
        required=False,
        allow_null=True,
        error_messages=QUANTITY_ERRORS,
    )
    price_per_item = serializers.DecimalField(
        max_digits=7,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('1000'),
        required=False,
        allow_null=True,
        error_messages=ITEM_PRICE_ERRORS,
    )
    express_delivery = serializers.BooleanField(required=False, default=False)
    discrepancy_details = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        allow_null=True,
    )


class BatchItemsSerializer(serializers.Serializer):
    """Body of PUT /api/batches/{id}/items/."""

    items = BatchItemInputSerializer(many=True, allow_empty=False)

    def validate_items(self, items):
        if len(items) > MAX_ITEMS_PER_BATCH:
            raise serializers.ValidationError(
                f'A batch can have at most {MAX_ITEMS_PER_BATCH} items'
            )
        category_ids = [item['linen_category_id'] for item in items]
        if len(set(category_ids)) != len(category_ids):
            raise serializers.ValidationError('Duplicate linen categories in items')
        return items


class BatchCreateSerializer(BatchItemsSerializer):
    """Body of POST /api/batches/."""

    client_id = serializers.UUIDField(error_messages={'required': 'Client is required'})
    paper_batch_id = serializers.CharField(max_length=50, required=False, allow_blank=True)
    pickup_date = serializers.DateField(error_messages={'required': 'Pickup date is required'})
    delivery_date = serializers.DateField(required=False, allow_null=True)
    status = serializers.ChoiceField(
        choices=BatchStatus.choices,
        default=BatchStatus.PICKUP,
        error_messages=STATUS_ERRORS,
    )
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True, default='')


class BatchUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=BatchStatus.choices,
        required=False,
        error_messages=STATUS_ERRORS,
    )
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    pickup_date = serializers.DateField(required=False)
    delivery_date = serializers.DateField(required=False, allow_null=True)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('No fields to update')
        return attrs


class BatchListQuerySerializer(PaginationQuerySerializer):
    """
    Query parameters for listing batches.

    Query Parameters:
        client_id (uuid), status (str), date_from / date_to (YYYY-MM-DD),
        has_discrepancy (bool), search (str), page, page_size
    """

    client_id = serializers.UUIDField(required=False)
    status = serializers.ChoiceField(
        choices=BatchStatus.choices,
        required=False,
        error_messages=STATUS_ERRORS,
    )
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    has_discrepancy = serializers.BooleanField(required=False, allow_null=True, default=None)
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get('date_from') and attrs.get('date_to') and attrs['date_from'] > attrs['date_to']:
            raise serializers.ValidationError('date_from must be on or before date_to')
        return attrs


# =============================================================================
# Output Serializers
# =============================================================================

class CategoryRefSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price_per_item = serializers.DecimalField(max_digits=10, decimal_places=2)


class ItemDiscrepancySerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    percentage = serializers.FloatField()
    value_impact = serializers.DecimalField(max_digits=12, decimal_places=2)


class ItemPricingSerializer(serializers.Serializer):
    price_per_item = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_sent_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_received_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    discrepancy_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    price_source = serializers.CharField()


class AggregatedItemSerializer(serializers.Serializer):
    """Batch item with its discrepancy and pricing breakdown."""

    id = serializers.UUIDField()
    linen_category = CategoryRefSerializer()
    quantity_sent = serializers.IntegerField()
    quantity_received = serializers.IntegerField()
    express_delivery = serializers.BooleanField()
    discrepancy_details = serializers.CharField(allow_blank=True)
    discrepancy = ItemDiscrepancySerializer()
    pricing = ItemPricingSerializer()


class BatchFinancialSummarySerializer(serializers.Serializer):
    total_items_sent = serializers.IntegerField()
    total_items_received = serializers.IntegerField()
    total_sent_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_received_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_discrepancy_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    items_with_discrepancy = serializers.IntegerField()
    discrepancy_percentage = serializers.FloatField()
    express_surcharge = serializers.DecimalField(max_digits=12, decimal_places=2)
    average_item_price = serializers.DecimalField(max_digits=10, decimal_places=2)


class BatchItemsResponseSerializer(serializers.Serializer):
    items = AggregatedItemSerializer(many=True)
    summary = BatchFinancialSummarySerializer()


class BatchStatusChangeSerializer(serializers.ModelSerializer):
    changed_by = serializers.EmailField(source='changed_by.email', read_only=True, default=None)

    class Meta:
        model = BatchStatusChange
        fields = ['from_status', 'to_status', 'notes', 'changed_by', 'changed_at']
        read_only_fields = fields


class BatchListSerializer(serializers.ModelSerializer):
    """Batch row for lists; expects the annotations of annotated_batches()."""

    client_id = serializers.UUIDField(read_only=True)
    client_name = serializers.CharField(source='client.name', read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    total_items_sent = serializers.IntegerField(read_only=True)
    total_items_received = serializers.IntegerField(read_only=True)

    class Meta:
        model = Batch
        fields = [
            'id',
            'paper_batch_id',
            'system_batch_id',
            'client_id',
            'client_name',
            'pickup_date',
            'delivery_date',
            'status',
            'total_amount',
            'has_discrepancy',
            'item_count',
            'total_items_sent',
            'total_items_received',
            'created_at',
        ]
        read_only_fields = fields


class BatchDetailSerializer(serializers.ModelSerializer):
    """
    Full batch view.

    Items carry their discrepancy/pricing breakdown, and next_statuses
    lists where the batch can move from here.
    """

    client = ClientSummarySerializer(read_only=True)
    status_history = BatchStatusChangeSerializer(source='status_changes', many=True, read_only=True)
    next_statuses = serializers.SerializerMethodField()

    class Meta:
        model = Batch
        fields = [
            'id',
            'paper_batch_id',
            'system_batch_id',
            'client',
            'pickup_date',
            'delivery_date',
            'status',
            'notes',
            'washing_notes',
            'completed_notes',
            'delivery_notes',
            'total_amount',
            'has_discrepancy',
            'status_history',
            'next_statuses',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_next_statuses(self, obj):
        return allowed_transitions(obj.status)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        items, summary = aggregate_batch_items(instance.items.all())
        data['items'] = AggregatedItemSerializer(items, many=True).data
        data['financial_summary'] = BatchFinancialSummarySerializer(summary).data
        return data


class NextPaperIdSerializer(serializers.Serializer):
    next_paper_batch_id = serializers.CharField()

"""
Serializers for reports app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation only; the views return the
   plain dictionaries built by apps.reports.aggregations

Input Serializers:
    ReportMonthQuerySerializer - YYYY-MM / YYYY-all report period
    DashboardStatsQuerySerializer - Dashboard statistics type and period
    RecentBatchesQuerySerializer - Limit/offset window of recent batches
    BatchInvoiceQuerySerializer - Batch to invoice
    ClientBatchesQuerySerializer - Client and report period
"""

from django.conf import settings
from django.utils import timezone
from rest_framework import serializers

from .periods import Period


MONTH_FORMAT_ERROR = 'Month must be in YYYY-MM or YYYY-all format'


def validate_report_year(year: int) -> int:
    if not settings.REPORT_MIN_YEAR <= year <= settings.REPORT_MAX_YEAR:
        raise serializers.ValidationError(
            f'Year must be between {settings.REPORT_MIN_YEAR} and {settings.REPORT_MAX_YEAR}'
        )
    return year


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class ReportMonthQuerySerializer(serializers.Serializer):
    """
    Validate the report period.

    Query Parameters:
        month (str): 'YYYY-MM' for one month or 'YYYY-all' for the whole year

    The validated data carries a `period` (Period) instead of `month`.
    """

    month = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2]|all)$',
        error_messages={
            'invalid': MONTH_FORMAT_ERROR,
            'required': 'Month is required',
            'blank': 'Month is required',
        },
    )

    def validate_month(self, value):
        validate_report_year(int(value[:4]))
        return value

    def validate(self, attrs):
        attrs['period'] = Period.parse(attrs.pop('month'))
        return attrs


class DashboardStatsQuerySerializer(serializers.Serializer):
    """
    Validate dashboard statistics parameters.

    Query Parameters:
        type (str): overview, monthly, revenue, clients or discrepancies
        year (int): Report year, defaults to the current year
        month (int): 1..12, defaults to the current month for monthly stats
        limit (int): Number of clients for type=clients (1-50)
    """

    TYPE_CHOICES = ['overview', 'monthly', 'revenue', 'clients', 'discrepancies']

    type = serializers.ChoiceField(
        choices=TYPE_CHOICES,
        default='overview',
        error_messages={
            'invalid_choice': 'Type must be one of: ' + ', '.join(TYPE_CHOICES),
        },
    )
    year = serializers.IntegerField(required=False)
    month = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=12,
        error_messages={
            'min_value': 'Month must be between 1 and 12',
            'max_value': 'Month must be between 1 and 12',
        },
    )
    limit = serializers.IntegerField(
        required=False,
        default=10,
        min_value=1,
        max_value=50,
        error_messages={
            'min_value': 'Limit must be between 1 and 50',
            'max_value': 'Limit must be between 1 and 50',
        },
    )

    def validate_year(self, value):
        return validate_report_year(value)

    def validate(self, attrs):
        today = timezone.localdate()
        attrs.setdefault('year', today.year)
        if attrs['type'] == 'monthly':
            attrs.setdefault('month', today.month)
        return attrs


class RecentBatchesQuerySerializer(serializers.Serializer):
    """
    Validate the recent batches window.

    Query Parameters:
        limit (int): 1..100, default 10
        offset (int): >= 0, default 0
        date_from (date): Pickup date lower bound
        date_to (date): Pickup date upper bound
    """

    limit = serializers.IntegerField(
        required=False,
        default=10,
        min_value=1,
        max_value=100,
        error_messages={
            'min_value': 'Limit must be between 1 and 100',
            'max_value': 'Limit must be between 1 and 100',
        },
    )
    offset = serializers.IntegerField(
        required=False,
        default=0,
        min_value=0,
        error_messages={'min_value': 'Offset must be zero or greater'},
    )
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'date_to must be after date_from'
            })
        return attrs


class BatchInvoiceQuerySerializer(serializers.Serializer):
    batchId = serializers.UUIDField(
        error_messages={
            'required': 'Batch ID is required',
            'invalid': 'Batch ID must be a valid UUID',
        },
    )


class ClientBatchesQuerySerializer(ReportMonthQuerySerializer):
    clientId = serializers.UUIDField(
        error_messages={
            'required': 'Client ID is required',
            'invalid': 'Client ID must be a valid UUID',
        },
    )


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class PeriodSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField(allow_null=True)
    month_name = serializers.CharField()


class InvoiceRowSerializer(serializers.Serializer):
    client_id = serializers.UUIDField()
    client_name = serializers.CharField()
    logo_url = serializers.URLField(allow_null=True)
    total_items_washed = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    vat_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_incl_vat = serializers.DecimalField(max_digits=12, decimal_places=2)
    batch_count = serializers.IntegerField()
    discrepancy_batches = serializers.IntegerField()


class ReportSummarySerializer(serializers.Serializer):
    total_clients = serializers.IntegerField()
    total_items_washed = serializers.IntegerField()
    total_revenue_before_vat = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_vat_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_revenue_incl_vat = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_batches = serializers.IntegerField()
    total_discrepancies = serializers.IntegerField()
    discrepancy_rate = serializers.FloatField()
    average_batch_value = serializers.DecimalField(max_digits=12, decimal_places=2)
    average_items_per_batch = serializers.FloatField()


class InvoiceSummarySerializer(serializers.Serializer):
    period = PeriodSerializer()
    vat_rate = serializers.FloatField()
    clients = InvoiceRowSerializer(many=True)
    summary = ReportSummarySerializer()


class TopClientSerializer(serializers.Serializer):
    client_id = serializers.UUIDField()
    client_name = serializers.CharField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    batch_count = serializers.IntegerField()


class PdfStatsSerializer(serializers.Serializer):
    period = PeriodSerializer()
    summary = ReportSummarySerializer()
    top_client = TopClientSerializer(allow_null=True)
    client_details = serializers.ListField(child=serializers.DictField())
    generated_at = serializers.DateTimeField()


class RecentBatchesResponseSerializer(serializers.Serializer):
    results = serializers.ListField(child=serializers.DictField())
    total = serializers.IntegerField()
    limit = serializers.IntegerField()
    offset = serializers.IntegerField()

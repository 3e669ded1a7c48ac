from django.contrib import admin
from django.utils.html import format_html
from .models import Batch, BatchItem, BatchStatus, BatchStatusChange


STATUS_COLOURS = {
    BatchStatus.PICKUP: '#F59E0B',
    BatchStatus.WASHING: '#3B82F6',
    BatchStatus.COMPLETED: '#8B5CF6',
    BatchStatus.DELIVERED: '#10B981',
}


class BatchItemInline(admin.TabularInline):
    model = BatchItem
    extra = 0
    fields = [
        'linen_category',
        'quantity_sent',
        'quantity_received',
        'price_per_item',
        'subtotal',
        'express_delivery',
    ]
    readonly_fields = ['subtotal']


class BatchStatusChangeInline(admin.TabularInline):
    model = BatchStatusChange
    extra = 0
    can_delete = False
    readonly_fields = ['from_status', 'to_status', 'notes', 'changed_by', 'changed_at']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Batch)
class BatchAdmin(admin.ModelAdmin):
    """
    Admin interface for batches.

    Status changes should go through the API so the workflow and
    history are enforced; the admin shows them read-only.
    """

    list_display = [
        'system_batch_id',
        'paper_batch_id',
        'client',
        'pickup_date',
        'status_badge',
        'total_amount',
        'has_discrepancy',
    ]

    list_filter = [
        'status',
        'has_discrepancy',
        'pickup_date',
    ]

    search_fields = [
        'paper_batch_id',
        'system_batch_id',
        'client__name',
    ]

    date_hierarchy = 'pickup_date'
    ordering = ['-pickup_date']

    readonly_fields = [
        'id',
        'system_batch_id',
        'status',
        'total_amount',
        'has_discrepancy',
        'created_by',
        'created_at',
        'updated_at',
    ]

    inlines = [BatchItemInline, BatchStatusChangeInline]

    def status_badge(self, obj):
        """Display status as colored badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLOURS.get(obj.status, '#9CA3AF'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        form.instance.refresh_totals()

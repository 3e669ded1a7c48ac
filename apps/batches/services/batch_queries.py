"""Batch list filtering."""

from datetime import date
from typing import Optional
from uuid import UUID

from django.db.models import Count, Q, QuerySet, Sum
from django.db.models.functions import Coalesce

from ..models import Batch


def annotated_batches() -> QuerySet:
    """Batches with item counts and quantity totals."""
    return (
        Batch.objects
        .select_related('client')
        .annotate(
            item_count=Count('items'),
            total_items_sent=Coalesce(Sum('items__quantity_sent'), 0),
            total_items_received=Coalesce(Sum('items__quantity_received'), 0),
        )
    )


def list_batches(
    *,
    client_id: Optional[UUID] = None,
    status: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    has_discrepancy: Optional[bool] = None,
    search: Optional[str] = None
) -> QuerySet:
    """
    Batches matching the filters, newest pickup first.

    Args:
        client_id: Only this client's batches
        status: Only batches in this status
        date_from / date_to: Inclusive pickup date range
        has_discrepancy: Only batches with (or without) a discrepancy
        search: Paper id, system id or client name contains
    """
    queryset = annotated_batches()

    if client_id:
        queryset = queryset.filter(client_id=client_id)
    if status:
        queryset = queryset.filter(status=status)
    if date_from:
        queryset = queryset.filter(pickup_date__gte=date_from)
    if date_to:
        queryset = queryset.filter(pickup_date__lte=date_to)
    if has_discrepancy is not None:
        queryset = queryset.filter(has_discrepancy=has_discrepancy)
    if search:
        search = search.strip()
        queryset = queryset.filter(
            Q(paper_batch_id__icontains=search) |
            Q(system_batch_id__icontains=search) |
            Q(client__name__icontains=search)
        )

    return queryset.order_by('-pickup_date', '-created_at')

"""Batch creation, updates and status transitions."""

from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from apps.clients.exceptions import ClientNotFoundError, InactiveClientError
from apps.clients.models import Client
from ..exceptions import (
    BatchNotFoundError,
    DuplicatePaperBatchIdError,
    InvalidStatusTransitionError,
    InvalidBatchDatesError,
)
from ..models import Batch, BatchStatus, BatchStatusChange
from ..workflow import can_transition, transition_error, INITIAL_STATUS, STAGE_NOTES_FIELD
from .identifiers import next_paper_batch_id, next_system_batch_id
from .item_management import resolve_categories, build_items

User = get_user_model()
logger = logging.getLogger(__name__)


def _check_dates(pickup_date: date, delivery_date: Optional[date]) -> None:
    if delivery_date and pickup_date and delivery_date < pickup_date:
        raise InvalidBatchDatesError()


@transaction.atomic
def create_batch(
    *,
    client_id: UUID,
    pickup_date: date,
    items: List[Dict[str, Any]],
    paper_batch_id: Optional[str] = None,
    status: str = INITIAL_STATUS,
    delivery_date: Optional[date] = None,
    notes: str = '',
    created_by: Optional[User] = None
) -> Batch:
    """
    Create a batch together with its items.

    Args:
        client_id: Client the linen belongs to (must be active)
        pickup_date: Date the linen was collected
        items: [{linen_category_id, quantity_sent, quantity_received?,
                 price_per_item?, express_delivery?, discrepancy_details?}]
        paper_batch_id: Number on the paper slip; generated when omitted
        status: Initial status (default pickup)
        delivery_date: Optional delivery date
        notes: Free text
        created_by: Operator recording the batch

    Returns:
        Created Batch with totals computed from its items

    Raises:
        ClientNotFoundError: If the client doesn't exist
        InactiveClientError: If the client is deactivated
        DuplicatePaperBatchIdError: If the paper id is already used
        InvalidBatchItemsError: If the items fail validation
    """
    try:
        client = Client.objects.get(id=client_id)
    except Client.DoesNotExist:
        raise ClientNotFoundError()

    if not client.is_active:
        raise InactiveClientError('Cannot create a batch for an inactive client')

    _check_dates(pickup_date, delivery_date)
    if status == BatchStatus.DELIVERED and delivery_date is None:
        delivery_date = timezone.localdate()

    paper_batch_id = (paper_batch_id or '').strip() or next_paper_batch_id()
    if Batch.objects.filter(paper_batch_id=paper_batch_id).exists():
        raise DuplicatePaperBatchIdError()

    categories = resolve_categories(items)

    batch = Batch.objects.create(
        client=client,
        paper_batch_id=paper_batch_id,
        system_batch_id=next_system_batch_id(),
        pickup_date=pickup_date,
        delivery_date=delivery_date,
        status=status,
        notes=notes,
        created_by=created_by,
    )
    build_items(batch, items, categories)
    batch.refresh_totals()

    BatchStatusChange.objects.create(
        batch=batch,
        from_status='',
        to_status=status,
        notes=notes,
        changed_by=created_by,
    )

    logger.info(
        "Batch created: %s (paper %s) for %s, %d items, total %s",
        batch.system_batch_id, batch.paper_batch_id, client.name,
        len(items), batch.total_amount
    )
    return batch


@transaction.atomic
def change_status(
    *,
    batch_id: UUID,
    status: str,
    notes: str = '',
    changed_by: Optional[User] = None
) -> Batch:
    """
    Move a batch to the next status.

    The row is locked so two concurrent requests cannot both advance
    the batch from the same status. Notes go to the stage column and
    the general notes.

    Raises:
        BatchNotFoundError: If the batch doesn't exist
        InvalidStatusTransitionError: If the workflow forbids the move
    """
    try:
        batch = Batch.objects.select_for_update().get(id=batch_id)
    except Batch.DoesNotExist:
        raise BatchNotFoundError()

    previous = batch.status
    if not can_transition(previous, status):
        raise InvalidStatusTransitionError(transition_error(previous, status))

    batch.status = status
    if notes:
        setattr(batch, STAGE_NOTES_FIELD[status], notes)
        batch.notes = notes

    if status == BatchStatus.DELIVERED and batch.delivery_date is None:
        batch.delivery_date = timezone.localdate()

    batch.save()

    BatchStatusChange.objects.create(
        batch=batch,
        from_status=previous,
        to_status=status,
        notes=notes,
        changed_by=changed_by,
    )

    logger.info("Batch %s status: %s -> %s", batch.system_batch_id, previous, status)
    return batch


@transaction.atomic
def update_batch(
    *,
    batch_id: UUID,
    data: Dict[str, Any],
    updated_by: Optional[User] = None
) -> Batch:
    """
    Partially update a batch.

    A 'status' key goes through the workflow (with 'notes' as the stage
    notes); otherwise notes, pickup_date and delivery_date are set directly.
    """
    data = dict(data)

    if 'status' in data:
        change_status(
            batch_id=batch_id,
            status=data.pop('status'),
            notes=data.pop('notes', '') or '',
            changed_by=updated_by,
        )

    try:
        batch = Batch.objects.select_for_update().get(id=batch_id)
    except Batch.DoesNotExist:
        raise BatchNotFoundError()

    allowed_fields = ['notes', 'pickup_date', 'delivery_date']
    changed = False
    for field, value in data.items():
        if field in allowed_fields:
            setattr(batch, field, value)
            changed = True

    if changed:
        _check_dates(batch.pickup_date, batch.delivery_date)
        batch.save()

    return batch


def get_batch(*, batch_id: UUID) -> Batch:
    try:
        return (
            Batch.objects
            .select_related('client')
            .prefetch_related('items__linen_category', 'status_changes__changed_by')
            .get(id=batch_id)
        )
    except Batch.DoesNotExist:
        raise BatchNotFoundError()

"""Batch item validation and replacement."""

from typing import Any, Dict, List
from uuid import UUID
import logging

from django.db import transaction

from apps.catalog.models import LinenCategory
from ..exceptions import BatchNotFoundError, InvalidBatchItemsError
from ..models import Batch, BatchItem


logger = logging.getLogger(__name__)

MAX_ITEMS_PER_BATCH = 100


def resolve_categories(items: List[Dict[str, Any]]) -> Dict[UUID, LinenCategory]:
    """
    Load the categories referenced by an item list.

    Raises:
        InvalidBatchItemsError: If the list is empty, too long, repeats a
            category, or names a missing or inactive category
    """
    if not items:
        raise InvalidBatchItemsError('At least one item is required')
    if len(items) > MAX_ITEMS_PER_BATCH:
        raise InvalidBatchItemsError(f'A batch can have at most {MAX_ITEMS_PER_BATCH} items')

    category_ids = [item['linen_category_id'] for item in items]
    if len(set(category_ids)) != len(category_ids):
        raise InvalidBatchItemsError('Duplicate linen categories in items')

    categories = LinenCategory.objects.in_bulk(category_ids)

    missing = [str(cid) for cid in category_ids if cid not in categories]
    if missing:
        raise InvalidBatchItemsError(f"Linen categories not found: {', '.join(missing)}")

    inactive = [c.name for c in categories.values() if not c.is_active]
    if inactive:
        raise InvalidBatchItemsError(f"Linen categories are inactive: {', '.join(sorted(inactive))}")

    return categories


def build_items(batch: Batch, items: List[Dict[str, Any]], categories: Dict[UUID, LinenCategory]) -> List[BatchItem]:
    """
    Create BatchItems for a batch.

    quantity_received defaults to quantity_sent and price_per_item to
    the category's current price.
    """
    created = []
    for item in items:
        category = categories[item['linen_category_id']]
        quantity_sent = item['quantity_sent']
        quantity_received = item.get('quantity_received')
        price = item.get('price_per_item')

        batch_item = BatchItem(
            batch=batch,
            linen_category=category,
            quantity_sent=quantity_sent,
            quantity_received=quantity_sent if quantity_received is None else quantity_received,
            price_per_item=category.price_per_item if price is None else price,
            express_delivery=item.get('express_delivery', False),
            discrepancy_details=item.get('discrepancy_details') or '',
        )
        batch_item.save()
        created.append(batch_item)
    return created


@transaction.atomic
def replace_items(*, batch_id: UUID, items: List[Dict[str, Any]]) -> Batch:
    """
    Replace the whole item set of a batch and refresh its totals.

    Raises:
        BatchNotFoundError: If the batch doesn't exist
        InvalidBatchItemsError: Same rules as batch creation
    """
    try:
        batch = Batch.objects.select_for_update().get(id=batch_id)
    except Batch.DoesNotExist:
        raise BatchNotFoundError()

    categories = resolve_categories(items)

    batch.items.all().delete()
    build_items(batch, items, categories)
    batch.refresh_totals()

    logger.info(
        "Batch %s items replaced: %d items, total %s",
        batch.system_batch_id, len(items), batch.total_amount
    )
    return batch

"""Services for batch business logic."""

from .batch_management import (
    create_batch,
    change_status,
    update_batch,
    get_batch,
)
from .batch_queries import (
    annotated_batches,
    list_batches,
)
from .identifiers import (
    next_paper_batch_id,
    next_system_batch_id,
)
from .item_management import (
    MAX_ITEMS_PER_BATCH,
    resolve_categories,
    build_items,
    replace_items,
)

__all__ = [
    # Batch Management
    'create_batch',
    'change_status',
    'update_batch',
    'get_batch',
    # Queries
    'annotated_batches',
    'list_batches',
    # Identifiers
    'next_paper_batch_id',
    'next_system_batch_id',
    # Items
    'MAX_ITEMS_PER_BATCH',
    'resolve_categories',
    'build_items',
    'replace_items',
]

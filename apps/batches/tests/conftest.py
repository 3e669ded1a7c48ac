import pytest
from datetime import date

from apps.batches.services import create_batch


@pytest.fixture
def batch_items(categories):
    """Item payload: 25 towels (one missing), 15 sheets, 8 duvet covers."""
    return [
        {'linen_category_id': categories['towel'].id, 'quantity_sent': 25, 'quantity_received': 24},
        {'linen_category_id': categories['sheet'].id, 'quantity_sent': 15},
        {'linen_category_id': categories['duvet'].id, 'quantity_sent': 8, 'quantity_received': 8},
    ]


@pytest.fixture
def batch(linen_client, batch_items, user):
    """Create and return a batch in pickup status."""
    return create_batch(
        client_id=linen_client.id,
        pickup_date=date(2024, 3, 5),
        paper_batch_id='041',
        items=batch_items,
        notes='Collected at loading bay',
        created_by=user,
    )

import pytest
from datetime import date

from apps.batches.services import create_batch
from apps.clients.models import Client


@pytest.fixture
def second_client(db):
    return Client.objects.create(name='Harbour Lodge', email='billing@harbourlodge.example.com')


@pytest.fixture
def report_batches(linen_client, second_client, categories, user):
    """
    Three March 2024 batches and one February 2024 batch.

    Ocean View Hotel, March: 397.50 (one sheet missing) + 50.00
    Harbour Lodge, March: 465.00
    Ocean View Hotel, February: 70.00
    """
    towel, sheet, duvet = categories['towel'], categories['sheet'], categories['duvet']

    def make(client, pickup_date, items):
        return create_batch(
            client_id=client.id,
            pickup_date=pickup_date,
            items=[
                {'linen_category_id': category.id, 'quantity_sent': sent, 'quantity_received': received}
                for category, sent, received in items
            ],
            created_by=user,
        )

    return {
        'february': make(linen_client, date(2024, 2, 10), [(sheet, 8, 8)]),
        'ocean_march': make(linen_client, date(2024, 3, 5), [(towel, 20, 20), (sheet, 10, 9)]),
        'ocean_march_2': make(linen_client, date(2024, 3, 12), [(duvet, 2, 2)]),
        'harbour_march': make(second_client, date(2024, 3, 20), [(towel, 30, 30)]),
    }

import uuid
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.batches.models import Batch, BatchStatus
from apps.clients.models import Client


def _payload(linen_client, categories, **overrides):
    payload = {
        'client_id': str(linen_client.id),
        'pickup_date': '2024-03-05',
        'items': [
            {'linen_category_id': str(categories['towel'].id), 'quantity_sent': 20},
            {'linen_category_id': str(categories['sheet'].id), 'quantity_sent': 15},
            {'linen_category_id': str(categories['duvet'].id), 'quantity_sent': 8},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestBatchCreate:
    """Tests for POST /api/batches/"""

    def test_create(self, authenticated_client, linen_client, categories):
        response = authenticated_client.post(
            reverse('batches:batch-list'), _payload(linen_client, categories), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.data['data']
        assert data['paper_batch_id'] == '001'
        assert data['status'] == 'pickup'
        assert data['client']['name'] == 'Ocean View Hotel'
        assert data['financial_summary']['total_sent_value'] == Decimal('641.25')
        assert data['financial_summary']['discrepancy_percentage'] == 0
        assert data['next_statuses'] == ['washing']
        assert len(data['items']) == 3

    def test_requires_auth(self, api_client, linen_client, categories):
        response = api_client.post(
            reverse('batches:batch-list'), _payload(linen_client, categories), format='json'
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_client_404(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, client_id=str(uuid.uuid4()))
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Client not found'

    def test_inactive_client_400(self, authenticated_client, linen_client, categories):
        Client.objects.filter(id=linen_client.id).update(is_active=False)
        response = authenticated_client.post(
            reverse('batches:batch-list'), _payload(linen_client, categories), format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_duplicate_paper_id_409(self, authenticated_client, linen_client, categories):
        url = reverse('batches:batch-list')
        authenticated_client.post(url, _payload(linen_client, categories, paper_batch_id='77'), format='json')
        response = authenticated_client.post(
            url, _payload(linen_client, categories, paper_batch_id='77'), format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error'] == 'Paper batch ID already exists'

    def test_paper_id_too_long(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, paper_batch_id='9' * 51)
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_empty_items(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, items=[])
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'items' in response.data['error']

    def test_duplicate_categories(self, authenticated_client, linen_client, categories):
        towel_id = str(categories['towel'].id)
        payload = _payload(linen_client, categories, items=[
            {'linen_category_id': towel_id, 'quantity_sent': 1},
            {'linen_category_id': towel_id, 'quantity_sent': 2},
        ])
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Duplicate linen categories' in response.data['error']

    @pytest.mark.parametrize('quantity', [-1, 10001, 2.5, 'ten'])
    def test_invalid_quantity(self, authenticated_client, linen_client, categories, quantity):
        payload = _payload(linen_client, categories, items=[
            {'linen_category_id': str(categories['towel'].id), 'quantity_sent': quantity},
        ])
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Batch.objects.count() == 0

    def test_price_above_limit(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, items=[
            {'linen_category_id': str(categories['towel'].id), 'quantity_sent': 1, 'price_per_item': 1000.01},
        ])
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_notes_too_long(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, notes='x' * 1001)
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_category(self, authenticated_client, linen_client, categories):
        payload = _payload(linen_client, categories, items=[
            {'linen_category_id': str(uuid.uuid4()), 'quantity_sent': 1},
        ])
        response = authenticated_client.post(reverse('batches:batch-list'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'not found' in response.data['error']


@pytest.mark.django_db
class TestBatchList:
    """Tests for GET /api/batches/"""

    def test_list(self, authenticated_client, batch):
        response = authenticated_client.get(reverse('batches:batch-list'))

        data = response.data['data']
        assert data['total'] == 1
        row = data['results'][0]
        assert row['paper_batch_id'] == '041'
        assert row['client_name'] == 'Ocean View Hotel'
        assert row['item_count'] == 3
        assert row['total_items_sent'] == 48
        assert row['total_items_received'] == 47

    def test_filters(self, authenticated_client, batch):
        url = reverse('batches:batch-list')

        assert authenticated_client.get(url, {'status': 'washing'}).data['data']['total'] == 0
        assert authenticated_client.get(url, {'has_discrepancy': 'true'}).data['data']['total'] == 1
        assert authenticated_client.get(url, {'has_discrepancy': 'false'}).data['data']['total'] == 0
        assert authenticated_client.get(url, {'date_from': '2024-03-06'}).data['data']['total'] == 0
        assert authenticated_client.get(url, {'date_to': '2024-03-05'}).data['data']['total'] == 1
        assert authenticated_client.get(url, {'search': 'ocean'}).data['data']['total'] == 1
        assert authenticated_client.get(url, {'client_id': str(uuid.uuid4())}).data['data']['total'] == 0

    def test_invalid_status_filter(self, authenticated_client):
        response = authenticated_client.get(reverse('batches:batch-list'), {'status': 'lost'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_page_size_out_of_range(self, authenticated_client):
        response = authenticated_client.get(reverse('batches:batch-list'), {'page_size': 500})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Page size must be between 1 and 100' in response.data['error']

    def test_next_paper_id(self, authenticated_client, batch):
        response = authenticated_client.get(reverse('batches:next-paper-id'))
        assert response.data['data'] == {'next_paper_batch_id': '042'}


@pytest.mark.django_db
class TestBatchDetail:
    """Tests for GET/PATCH /api/batches/{id}/"""

    def test_detail_has_aggregates(self, authenticated_client, batch, categories):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.get(url)

        data = response.data['data']
        towel = next(i for i in data['items'] if i['linen_category']['id'] == str(categories['towel'].id))
        assert towel['discrepancy'] == {
            'quantity': 1,
            'percentage': 4.0,
            'value_impact': Decimal('15.50'),
        }
        assert towel['pricing']['price_source'] == 'item'
        assert data['financial_summary']['items_with_discrepancy'] == 1
        assert data['status_history'][0]['to_status'] == 'pickup'

    def test_missing(self, authenticated_client):
        url = reverse('batches:batch-detail', kwargs={'pk': uuid.uuid4()})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Batch not found'

    def test_patch_status(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.patch(url, {'status': 'washing', 'notes': 'Hot wash'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['status'] == 'washing'
        assert data['washing_notes'] == 'Hot wash'
        assert data['next_statuses'] == ['completed', 'delivered']

    def test_patch_skip_to_delivered_rejected(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.patch(url, {'status': 'delivered'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        batch.refresh_from_db()
        assert batch.status == BatchStatus.PICKUP

    def test_patch_washing_to_delivered(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        authenticated_client.patch(url, {'status': 'washing'}, format='json')
        response = authenticated_client.patch(url, {'status': 'delivered'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['delivery_date'] is not None

    def test_patch_dates(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.patch(url, {'delivery_date': '2024-03-07'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert str(response.data['data']['delivery_date']) == '2024-03-07'

    def test_patch_empty_body(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.patch(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_not_allowed(self, authenticated_client, batch):
        url = reverse('batches:batch-detail', kwargs={'pk': batch.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestBatchItems:
    """Tests for GET/PUT /api/batches/{id}/items/"""

    def test_get_items(self, authenticated_client, batch):
        url = reverse('batches:batch-items', kwargs={'pk': batch.id})
        response = authenticated_client.get(url)

        data = response.data['data']
        assert len(data['items']) == 3
        assert data['summary']['total_items_sent'] == 48

    def test_replace_items(self, authenticated_client, batch, categories):
        url = reverse('batches:batch-items', kwargs={'pk': batch.id})
        response = authenticated_client.put(url, {'items': [
            {'linen_category_id': str(categories['duvet'].id), 'quantity_sent': 4, 'quantity_received': 3},
        ]}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['summary']['total_sent_value'] == Decimal('100.00')
        batch.refresh_from_db()
        assert batch.total_amount == Decimal('100.00')
        assert batch.has_discrepancy is True

    def test_replace_items_validation(self, authenticated_client, batch):
        url = reverse('batches:batch-items', kwargs={'pk': batch.id})
        response = authenticated_client.put(url, {'items': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

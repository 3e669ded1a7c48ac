import io
import uuid
from decimal import Decimal

import pytest
from django.urls import reverse
from openpyxl import load_workbook
from rest_framework import status

from apps.reports.excel import sheet_title


@pytest.mark.django_db
class TestInvoiceReport:
    """Tests for GET /api/dashboard/reports/"""

    def test_month(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:invoice-report'), {'month': '2024-03'})

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['period'] == {'year': 2024, 'month': 3, 'month_name': 'March'}
        assert len(data['clients']) == 2
        assert data['summary']['total_revenue_incl_vat'] == Decimal('1049.38')

    def test_whole_year(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:invoice-report'), {'month': '2024-all'})

        assert response.data['data']['summary']['total_batches'] == 4

    @pytest.mark.parametrize('month', ['2024-13', '2024-3', 'March', '2024-00', ''])
    def test_invalid_format(self, authenticated_client, month):
        response = authenticated_client.get(reverse('reports:invoice-report'), {'month': month})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False

    def test_year_out_of_range(self, authenticated_client):
        response = authenticated_client.get(reverse('reports:invoice-report'), {'month': '2019-05'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Year must be between 2020 and 2030' in response.data['error']

    def test_month_required(self, authenticated_client):
        response = authenticated_client.get(reverse('reports:invoice-report'))
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_auth(self, api_client):
        response = api_client.get(reverse('reports:invoice-report'), {'month': '2024-03'})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestReportDetails:

    def test_pdf_stats(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:pdf-stats'), {'month': '2024-03'})

        data = response.data['data']
        assert data['top_client']['client_name'] == 'Harbour Lodge'
        assert len(data['client_details']) == 2

    def test_batch_invoice(self, authenticated_client, report_batches):
        batch = report_batches['harbour_march']
        response = authenticated_client.get(reverse('reports:batch-invoice'), {'batchId': str(batch.id)})

        data = response.data['data']
        assert data['subtotal'] == Decimal('465.00')
        assert data['vat_amount'] == Decimal('69.75')

    def test_batch_invoice_missing(self, authenticated_client):
        response = authenticated_client.get(reverse('reports:batch-invoice'), {'batchId': str(uuid.uuid4())})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Batch not found'

    def test_batch_invoice_requires_id(self, authenticated_client):
        response = authenticated_client.get(reverse('reports:batch-invoice'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Batch ID is required' in response.data['error']

    def test_client_batches(self, authenticated_client, report_batches, linen_client):
        response = authenticated_client.get(
            reverse('reports:client-batches'),
            {'clientId': str(linen_client.id), 'month': '2024-03'},
        )

        data = response.data['data']
        assert [b['pickup_date'].isoformat() for b in data['batches']] == ['2024-03-05', '2024-03-12']
        assert data['totals']['total_amount'] == Decimal('447.50')

    def test_client_batches_unknown_client(self, authenticated_client):
        response = authenticated_client.get(
            reverse('reports:client-batches'),
            {'clientId': str(uuid.uuid4()), 'month': '2024-03'},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestDashboardStats:
    """Tests for GET /api/dashboard/stats/"""

    def test_overview(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:dashboard-stats'))

        data = response.data['data']
        assert set(data) == {
            'current_month', 'recent_batches', 'top_clients', 'discrepancy_report', 'last_updated',
        }
        assert len(data['recent_batches']) == 4

    def test_monthly(self, authenticated_client, report_batches):
        response = authenticated_client.get(
            reverse('reports:dashboard-stats'), {'type': 'monthly', 'year': 2024, 'month': 3}
        )
        assert response.data['data']['total_revenue'] == Decimal('912.50')

    def test_revenue(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:dashboard-stats'), {'type': 'revenue', 'year': 2024})
        assert len(response.data['data']) == 12

    def test_clients_limit(self, authenticated_client, report_batches):
        url = reverse('reports:dashboard-stats')

        assert len(authenticated_client.get(url, {'type': 'clients', 'limit': 1}).data['data']) == 1
        assert authenticated_client.get(url, {'type': 'clients', 'limit': 51}).status_code == 400

    def test_discrepancies(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:dashboard-stats'), {'type': 'discrepancies'})
        assert len(response.data['data']) == 1

    @pytest.mark.parametrize('params', [
        {'type': 'weekly'},
        {'type': 'monthly', 'month': 13},
        {'type': 'monthly', 'year': 2031},
    ])
    def test_invalid_params(self, authenticated_client, params):
        response = authenticated_client.get(reverse('reports:dashboard-stats'), params)
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestRecentBatches:
    """Tests for GET /api/dashboard/batches/"""

    def test_window(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:recent-batches'), {'limit': 2, 'offset': 1})

        data = response.data['data']
        assert data['total'] == 4
        assert (data['limit'], data['offset']) == (2, 1)
        assert len(data['results']) == 2

    def test_date_filter(self, authenticated_client, report_batches):
        response = authenticated_client.get(
            reverse('reports:recent-batches'), {'date_from': '2024-03-01', 'date_to': '2024-03-31'}
        )
        assert response.data['data']['total'] == 3

    @pytest.mark.parametrize('params', [{'limit': 0}, {'limit': 101}, {'offset': -1}])
    def test_out_of_range(self, authenticated_client, params):
        response = authenticated_client.get(reverse('reports:recent-batches'), params)
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestExcelExport:

    def test_workbook(self, authenticated_client, report_batches):
        response = authenticated_client.get(reverse('reports:export-excel'), {'month': '2024-03'})

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Disposition'] == 'attachment; filename="linen-report-2024-03.xlsx"'
        workbook = load_workbook(io.BytesIO(response.content))
        assert workbook.sheetnames == ['Summary', 'Harbour Lodge', 'Ocean View Hotel']
        summary = workbook['Summary']
        assert summary['A2'].value == 'Harbour Lodge'
        assert summary['A4'].value == 'Total'
        assert workbook['Ocean View Hotel'].max_row == 3

    def test_control_characters_in_client_name(self, authenticated_client, report_batches, linen_client):
        linen_client.name = 'Ocean\x07View'
        linen_client.save(update_fields=['name'])

        response = authenticated_client.get(reverse('reports:export-excel'), {'month': '2024-03'})

        assert response.status_code == status.HTTP_200_OK
        workbook = load_workbook(io.BytesIO(response.content))
        assert workbook.sheetnames == ['Summary', 'Harbour Lodge', 'OceanView']
        assert workbook['Summary']['A3'].value == 'OceanView'

    def test_invalid_month(self, authenticated_client):
        response = authenticated_client.get(reverse('reports:export-excel'), {'month': 'nope'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestSheetTitle:

    def test_truncates_and_deduplicates(self):
        taken = {'summary'}
        name = 'The Grand Atlantic Seaside Resort & Spa'

        first = sheet_title(name, taken)
        second = sheet_title(name, taken)

        assert first == name[:31]
        assert len(second) == 31
        assert second.endswith(' (2)')

    def test_invalid_characters(self):
        assert sheet_title('Bed/Breakfast [Main]', set()) == 'Bed Breakfast  Main'

    def test_control_characters_removed(self):
        assert sheet_title('Ocean\x07View', set()) == 'OceanView'

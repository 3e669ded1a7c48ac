from django.http import HttpResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.batches.serializers import BatchListSerializer
from config.responses import success_response
from .aggregations import ReportQueries, DashboardQueries
from .excel import XLSX_CONTENT_TYPE, export_filename, export_report
from .periods import Period
from .serializers import (
    # Input serializers
    ReportMonthQuerySerializer,
    DashboardStatsQuerySerializer,
    RecentBatchesQuerySerializer,
    BatchInvoiceQuerySerializer,
    ClientBatchesQuerySerializer,
    # Response serializers
    InvoiceSummarySerializer,
    PdfStatsSerializer,
    RecentBatchesResponseSerializer,
)


MONTH_PARAMETER = OpenApiParameter(
    'month', OpenApiTypes.STR, required=True,
    description="Report period, 'YYYY-MM' or 'YYYY-all'",
)


def _report_period(request) -> Period:
    query = ReportMonthQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data['period']


@extend_schema(
    parameters=[DashboardStatsQuerySerializer],
    description=(
        "Dashboard statistics. type=overview (default), monthly, revenue, "
        "clients or discrepancies."
    ),
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_stats(request):
    """Dashboard statistics - thin HTTP handler."""
    query = DashboardStatsQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data
    stats_type = params['type']

    if stats_type == 'monthly':
        data = DashboardQueries.monthly_stats(Period(params['year'], params['month']))
    elif stats_type == 'revenue':
        data = DashboardQueries.revenue_trend(params['year'])
    elif stats_type == 'clients':
        data = DashboardQueries.client_rankings(limit=params['limit'])
    elif stats_type == 'discrepancies':
        period = Period(params['year'], params['month']) if 'month' in params else None
        data = DashboardQueries.discrepancy_report(period)
    else:
        data = DashboardQueries.overview()
        data['recent_batches'] = BatchListSerializer(data['recent_batches'], many=True).data

    return success_response(data)


@extend_schema(
    parameters=[RecentBatchesQuerySerializer],
    responses={200: RecentBatchesResponseSerializer},
    description="Most recently created batches, newest first.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def recent_batches(request):
    query = RecentBatchesQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data
    limit, offset = params['limit'], params['offset']

    batches = DashboardQueries.recent_batches(
        date_from=params.get('date_from'),
        date_to=params.get('date_to'),
    )

    return success_response({
        'results': BatchListSerializer(batches[offset:offset + limit], many=True).data,
        'total': batches.count(),
        'limit': limit,
        'offset': offset,
    })


@extend_schema(
    parameters=[MONTH_PARAMETER],
    responses={200: InvoiceSummarySerializer},
    description="Per-client invoice summary with VAT for a month or a whole year.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def invoice_report(request):
    return success_response(ReportQueries.invoice_summary(_report_period(request)))


@extend_schema(
    parameters=[MONTH_PARAMETER],
    responses={200: PdfStatsSerializer},
    description="Statistics for the printable monthly report.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pdf_stats(request):
    return success_response(ReportQueries.pdf_stats(_report_period(request)))


@extend_schema(
    parameters=[BatchInvoiceQuerySerializer],
    description="Invoice lines, subtotal and VAT for one batch.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def batch_invoice(request):
    query = BatchInvoiceQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return success_response(ReportQueries.batch_invoice(query.validated_data['batchId']))


@extend_schema(
    parameters=[ClientBatchesQuerySerializer],
    description="A client's batches and totals for a month or a whole year.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def client_batches(request):
    query = ClientBatchesQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    params = query.validated_data
    return success_response(ReportQueries.client_batches(params['clientId'], params['period']))


@extend_schema(
    parameters=[MONTH_PARAMETER],
    responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY},
    description="Download the invoice report as an Excel workbook.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def export_excel(request):
    """Excel download; the only report endpoint answering outside the envelope."""
    period = _report_period(request)
    response = HttpResponse(export_report(period), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{export_filename(period)}"'
    return response

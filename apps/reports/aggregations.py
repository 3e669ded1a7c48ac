"""
Report Aggregations Module
==========================

Read-only queries behind the dashboard and the monthly invoicing reports.

Batch totals are always recomputed from the batch items
(quantity_sent x snapshot price) rather than read from the stored
Batch.total_amount, so reports stay correct even if a stored total drifted.

Classes:
    ReportQueries: Invoice summaries with VAT, PDF statistics, per-batch
        invoices and per-client batch listings.
    DashboardQueries: Monthly statistics, revenue trend, client rankings,
        discrepancy report and the combined overview.

Example:
    Monthly invoice summary::

        from apps.reports.aggregations import ReportQueries
        from apps.reports.periods import Period

        report = ReportQueries.invoice_summary(Period(2024, 3))
        for row in report['clients']:
            print(row['client_name'], row['total_incl_vat'])

Note:
    All methods return plain dictionaries and lists, ready to be placed
    in the response envelope.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
import calendar

from django.conf import settings
from django.db.models import F, Q
from django.utils import timezone

from apps.batches.aggregation import aggregate_batch_items, money, percentage
from apps.batches.exceptions import BatchNotFoundError
from apps.batches.models import Batch, BatchStatus
from apps.batches.services import annotated_batches
from apps.clients.exceptions import ClientNotFoundError
from apps.clients.models import Client
from .periods import Period


ZERO = Decimal('0.00')


def vat_rate() -> Decimal:
    return Decimal(str(settings.VAT_RATE))


def vat_breakdown(total_amount, rate: Optional[Decimal] = None):
    """
    VAT on a pre-VAT amount.

    Returns:
        (vat_amount, total_incl_vat), both rounded half-up to cents
    """
    rate = vat_rate() if rate is None else rate
    amount = Decimal(total_amount)
    vat = money(amount * rate)
    return vat, money(amount + vat)


def batch_figures(batch) -> Dict:
    """Amount, quantities and discrepancy of one batch, from its items."""
    amount = ZERO
    sent = received = mismatched = 0
    for item in batch.items.all():
        amount += item.quantity_sent * item.price_per_item
        sent += item.quantity_sent
        received += item.quantity_received
        mismatched += abs(item.quantity_sent - item.quantity_received)

    return {
        'amount': money(amount),
        'items_sent': sent,
        'items_received': received,
        'discrepancy_items': mismatched,
        'has_discrepancy': mismatched > 0,
    }


def batch_row(batch, figures: Dict) -> Dict:
    return {
        'id': batch.id,
        'paper_batch_id': batch.paper_batch_id,
        'system_batch_id': batch.system_batch_id,
        'pickup_date': batch.pickup_date,
        'delivery_date': batch.delivery_date,
        'status': batch.status,
        'items_sent': figures['items_sent'],
        'items_received': figures['items_received'],
        'amount': figures['amount'],
        'discrepancy': figures['items_sent'] - figures['items_received'],
        'has_discrepancy': figures['has_discrepancy'],
    }


def client_totals(batches) -> List[Dict]:
    """
    Per-client totals in the order clients are first encountered.

    Each entry also lists the client's batch rows.
    """
    rate = vat_rate()
    by_client: Dict = {}

    for batch in batches:
        figures = batch_figures(batch)
        entry = by_client.get(batch.client_id)
        if entry is None:
            entry = by_client[batch.client_id] = {
                'client_id': batch.client_id,
                'client_name': batch.client.name,
                'logo_url': batch.client.logo_url or None,
                'total_items_washed': 0,
                'items_sent': 0,
                'items_received': 0,
                'discrepancy_items': 0,
                'total_amount': ZERO,
                'batch_count': 0,
                'discrepancy_batches': 0,
                'batches': [],
            }

        entry['total_items_washed'] += figures['items_received']
        entry['items_sent'] += figures['items_sent']
        entry['items_received'] += figures['items_received']
        entry['discrepancy_items'] += figures['discrepancy_items']
        entry['total_amount'] += figures['amount']
        entry['batch_count'] += 1
        entry['discrepancy_batches'] += int(figures['has_discrepancy'])
        entry['batches'].append(batch_row(batch, figures))

    for entry in by_client.values():
        entry['total_amount'] = money(entry['total_amount'])
        entry['vat_amount'], entry['total_incl_vat'] = vat_breakdown(entry['total_amount'], rate)
        entry['discrepancy_rate'] = percentage(entry['discrepancy_batches'], entry['batch_count'])

    return list(by_client.values())


def invoice_row(entry: Dict) -> Dict:
    """The invoice summary columns of a client_totals entry."""
    return {
        'client_id': entry['client_id'],
        'client_name': entry['client_name'],
        'logo_url': entry['logo_url'],
        'total_items_washed': entry['total_items_washed'],
        'total_amount': entry['total_amount'],
        'vat_amount': entry['vat_amount'],
        'total_incl_vat': entry['total_incl_vat'],
        'batch_count': entry['batch_count'],
        'discrepancy_batches': entry['discrepancy_batches'],
    }


def summarize_clients(entries: List[Dict]) -> Dict:
    """Totals across all clients of a report."""
    total_batches = sum(e['batch_count'] for e in entries)
    revenue = sum((e['total_amount'] for e in entries), ZERO)
    items = sum(e['total_items_washed'] for e in entries)
    discrepancies = sum(e['discrepancy_batches'] for e in entries)

    return {
        'total_clients': len(entries),
        'total_items_washed': items,
        'total_revenue_before_vat': money(revenue),
        'total_vat_amount': money(sum((e['vat_amount'] for e in entries), ZERO)),
        'total_revenue_incl_vat': money(sum((e['total_incl_vat'] for e in entries), ZERO)),
        'total_batches': total_batches,
        'total_discrepancies': discrepancies,
        'discrepancy_rate': percentage(discrepancies, total_batches),
        'average_batch_value': money(revenue / total_batches) if total_batches else ZERO,
        'average_items_per_batch': round(items / total_batches, 2) if total_batches else 0,
    }


def top_client(entries: List[Dict]) -> Optional[Dict]:
    """Client with the highest pre-VAT total; the first one wins a tie."""
    best = None
    for entry in entries:
        if best is None or entry['total_amount'] > best['total_amount']:
            best = entry
    if best is None:
        return None
    return {
        'client_id': best['client_id'],
        'client_name': best['client_name'],
        'total_amount': best['total_amount'],
        'batch_count': best['batch_count'],
    }


def growth(current, previous) -> float:
    """Percentage change against the previous value; 0 when it was 0."""
    return percentage(Decimal(current) - Decimal(previous), previous)


class ReportQueries:
    """
    Invoicing reports.

    Methods:
        batches_in_period: Batches picked up in a period, items prefetched.
        invoice_summary: Per-client invoice rows with VAT and totals.
        pdf_stats: Statistics payload for the monthly PDF report.
        batch_invoice: Invoice lines for a single batch.
        client_batches: One client's batches in a period with totals.
    """

    @staticmethod
    def batches_in_period(period: Period, client_id=None):
        batches = (
            Batch.objects
            .filter(pickup_date__range=(period.start, period.end))
            .select_related('client')
            .prefetch_related('items__linen_category')
            .order_by('pickup_date', 'created_at')
        )
        if client_id:
            batches = batches.filter(client_id=client_id)
        return batches

    @staticmethod
    def invoice_summary(period: Period) -> Dict:
        """
        Per-client invoice summary.

        Returns:
            dict: period, vat_rate, clients (rows sorted by client name)
                and summary (totals across clients)
        """
        entries = client_totals(ReportQueries.batches_in_period(period))
        rows = sorted((invoice_row(e) for e in entries), key=lambda r: r['client_name'].lower())

        return {
            'period': period.as_dict(),
            'vat_rate': float(vat_rate()),
            'clients': rows,
            'summary': summarize_clients(entries),
        }

    @staticmethod
    def pdf_stats(period: Period) -> Dict:
        entries = client_totals(ReportQueries.batches_in_period(period))

        client_details = [
            {
                **invoice_row(entry),
                'items_sent': entry['items_sent'],
                'items_received': entry['items_received'],
                'discrepancy_items': entry['discrepancy_items'],
                'discrepancy_rate': entry['discrepancy_rate'],
                'batches': entry['batches'],
            }
            for entry in entries
        ]
        client_details.sort(key=lambda d: d['total_amount'], reverse=True)

        return {
            'period': period.as_dict(),
            'summary': summarize_clients(entries),
            'top_client': top_client(entries),
            'client_details': client_details,
            'generated_at': timezone.now(),
        }

    @staticmethod
    def batch_invoice(batch_id) -> Dict:
        """
        Invoice lines for one batch.

        Raises:
            BatchNotFoundError: If the batch doesn't exist
        """
        try:
            batch = (
                Batch.objects
                .select_related('client')
                .prefetch_related('items__linen_category')
                .get(id=batch_id)
            )
        except Batch.DoesNotExist:
            raise BatchNotFoundError()

        lines = [
            {
                'linen_category_id': item.linen_category_id,
                'category_name': item.linen_category.name,
                'quantity_sent': item.quantity_sent,
                'quantity_received': item.quantity_received,
                'price_per_item': item.price_per_item,
                'amount': money(item.quantity_sent * item.price_per_item),
                'express_delivery': item.express_delivery,
                'discrepancy': item.quantity_sent - item.quantity_received,
            }
            for item in batch.items.all()
        ]
        figures = batch_figures(batch)
        vat, total_incl_vat = vat_breakdown(figures['amount'])

        return {
            'batch': batch_row(batch, figures),
            'client': {
                'id': batch.client.id,
                'name': batch.client.name,
                'email': batch.client.email,
                'contact_number': batch.client.contact_number,
                'address': batch.client.address,
                'logo_url': batch.client.logo_url or None,
            },
            'lines': lines,
            'subtotal': figures['amount'],
            'vat_rate': float(vat_rate()),
            'vat_amount': vat,
            'total_incl_vat': total_incl_vat,
        }

    @staticmethod
    def client_batches(client_id, period: Period) -> Dict:
        """
        One client's batches in a period.

        Raises:
            ClientNotFoundError: If the client doesn't exist
        """
        try:
            client = Client.objects.get(id=client_id)
        except Client.DoesNotExist:
            raise ClientNotFoundError()

        entries = client_totals(ReportQueries.batches_in_period(period, client_id=client.id))
        entry = entries[0] if entries else None
        total_amount = entry['total_amount'] if entry else ZERO
        vat, total_incl_vat = vat_breakdown(total_amount)

        return {
            'client': {'id': client.id, 'name': client.name, 'logo_url': client.logo_url or None},
            'period': period.as_dict(),
            'batches': entry['batches'] if entry else [],
            'totals': {
                'batch_count': entry['batch_count'] if entry else 0,
                'items_sent': entry['items_sent'] if entry else 0,
                'items_received': entry['items_received'] if entry else 0,
                'discrepancy_batches': entry['discrepancy_batches'] if entry else 0,
                'total_amount': total_amount,
                'vat_amount': vat,
                'total_incl_vat': total_incl_vat,
            },
        }


class DashboardQueries:
    """
    Dashboard statistics.

    Methods:
        monthly_stats: Figures for one month with month-over-month growth.
        revenue_trend: Twelve monthly revenue rows for a year.
        client_rankings: Top clients by revenue.
        discrepancy_report: Batches with discrepant items.
        recent_batches: Newest batches (queryset, for pagination).
        overview: Everything the dashboard home screen shows.
    """

    @staticmethod
    def _month_figures(period: Period) -> Dict:
        batches = list(ReportQueries.batches_in_period(period))
        revenue = ZERO
        items = 0
        delivered = 0
        discrepancies = 0
        clients: Dict = {}
        categories: Dict = {}

        for batch in batches:
            figures = batch_figures(batch)
            revenue += figures['amount']
            items += figures['items_received']
            delivered += int(batch.status == BatchStatus.DELIVERED)
            discrepancies += int(figures['has_discrepancy'])

            client = clients.setdefault(batch.client_id, {
                'client_id': batch.client_id,
                'client_name': batch.client.name,
                'total_revenue': ZERO,
                'batch_count': 0,
            })
            client['total_revenue'] += figures['amount']
            client['batch_count'] += 1

            for item in batch.items.all():
                category = categories.setdefault(item.linen_category_id, {
                    'category_id': item.linen_category_id,
                    'category_name': item.linen_category.name,
                    'total_items': 0,
                    'revenue': ZERO,
                })
                category['total_items'] += item.quantity_received
                category['revenue'] += item.quantity_received * item.price_per_item

        for row in clients.values():
            row['total_revenue'] = money(row['total_revenue'])
        for row in categories.values():
            row['revenue'] = money(row['revenue'])

        return {
            'total_batches': len(batches),
            'total_revenue': money(revenue),
            'total_items_processed': items,
            'completed_batches': delivered,
            'discrepancy_count': discrepancies,
            'clients': clients,
            'categories': categories,
        }

    @staticmethod
    def monthly_stats(period: Period) -> Dict:
        current = DashboardQueries._month_figures(period)
        previous = DashboardQueries._month_figures(period.previous_month())
        total = current['total_batches']

        top_clients = sorted(current['clients'].values(), key=lambda c: c['total_revenue'], reverse=True)[:5]
        top_categories = sorted(current['categories'].values(), key=lambda c: c['revenue'], reverse=True)[:5]

        return {
            'month': period.month_name,
            'year': period.year,
            'total_batches': total,
            'total_revenue': current['total_revenue'],
            'total_items_processed': current['total_items_processed'],
            'average_batch_value': money(current['total_revenue'] / total) if total else ZERO,
            'completed_batches': current['completed_batches'],
            'pending_batches': total - current['completed_batches'],
            'discrepancy_count': current['discrepancy_count'],
            'discrepancy_percentage': percentage(current['discrepancy_count'], total),
            'top_clients': top_clients,
            'top_categories': top_categories,
            'month_over_month': {
                'batch_growth': growth(total, previous['total_batches']),
                'revenue_growth': growth(current['total_revenue'], previous['total_revenue']),
                'items_growth': growth(current['total_items_processed'], previous['total_items_processed']),
            },
        }

    @staticmethod
    def revenue_trend(year: int) -> List[Dict]:
        rows = {
            month: {'revenue': ZERO, 'batch_count': 0}
            for month in range(1, 13)
        }
        for batch in ReportQueries.batches_in_period(Period(year)):
            row = rows[batch.pickup_date.month]
            row['revenue'] += batch_figures(batch)['amount']
            row['batch_count'] += 1

        return [
            {
                'month': calendar.month_abbr[month],
                'year': year,
                'revenue': money(row['revenue']),
                'batch_count': row['batch_count'],
                'average_batch_value': (
                    money(row['revenue'] / row['batch_count']) if row['batch_count'] else ZERO
                ),
            }
            for month, row in rows.items()
        ]

    @staticmethod
    def client_rankings(limit: int = 10) -> List[Dict]:
        """Clients ranked by all-time revenue."""
        rankings: Dict = {}
        batches = (
            Batch.objects
            .select_related('client')
            .prefetch_related('items')
            .order_by('pickup_date', 'created_at')
        )
        for batch in batches:
            row = rankings.setdefault(batch.client_id, {
                'client_id': batch.client_id,
                'client_name': batch.client.name,
                'total_revenue': ZERO,
                'batch_count': 0,
                'last_pickup_date': None,
            })
            row['total_revenue'] += batch_figures(batch)['amount']
            row['batch_count'] += 1
            row['last_pickup_date'] = batch.pickup_date

        for row in rankings.values():
            row['total_revenue'] = money(row['total_revenue'])
            row['average_batch_value'] = money(row['total_revenue'] / row['batch_count'])

        ranked = sorted(rankings.values(), key=lambda r: r['total_revenue'], reverse=True)
        return ranked[:limit]

    @staticmethod
    def discrepancy_report(period: Optional[Period] = None) -> List[Dict]:
        """Every batch with at least one item where sent != received."""
        batches = (
            Batch.objects
            .filter(
                Q(items__quantity_sent__gt=F('items__quantity_received')) |
                Q(items__quantity_sent__lt=F('items__quantity_received'))
            )
            .distinct()
            .select_related('client')
            .prefetch_related('items__linen_category')
            .order_by('-pickup_date', '-created_at')
        )
        if period is not None:
            batches = batches.filter(pickup_date__range=(period.start, period.end))

        report = []
        for batch in batches:
            aggregated, summary = aggregate_batch_items(batch.items.all())
            items = [
                {
                    'category_name': entry['linen_category'].name,
                    'quantity_sent': entry['quantity_sent'],
                    'quantity_received': entry['quantity_received'],
                    'discrepancy': entry['discrepancy']['quantity'],
                    'discrepancy_value': entry['pricing']['discrepancy_value'],
                    'discrepancy_details': entry['discrepancy_details'] or None,
                }
                for entry in aggregated
                if entry['discrepancy']['quantity'] != 0
            ]
            report.append({
                'batch_id': batch.id,
                'paper_batch_id': batch.paper_batch_id,
                'system_batch_id': batch.system_batch_id,
                'client_name': batch.client.name,
                'pickup_date': batch.pickup_date,
                'status': batch.status,
                'total_discrepancy': sum(i['discrepancy'] for i in items),
                'discrepancy_value': summary['total_discrepancy_value'],
                'items': items,
            })
        return report

    @staticmethod
    def recent_batches(date_from: Optional[date] = None, date_to: Optional[date] = None):
        batches = annotated_batches().order_by('-created_at')
        if date_from:
            batches = batches.filter(pickup_date__gte=date_from)
        if date_to:
            batches = batches.filter(pickup_date__lte=date_to)
        return batches

    @staticmethod
    def overview(today: Optional[date] = None) -> Dict:
        today = today or timezone.localdate()
        return {
            'current_month': DashboardQueries.monthly_stats(Period(today.year, today.month)),
            'recent_batches': DashboardQueries.recent_batches()[:5],
            'top_clients': DashboardQueries.client_rankings(limit=5),
            'discrepancy_report': DashboardQueries.discrepancy_report(),
            'last_updated': timezone.now(),
        }

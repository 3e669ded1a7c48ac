"""
Excel export of the monthly invoice report.

One summary sheet with a row per client, then one sheet per client with
its batches.
"""

import io
import re

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

from .aggregations import ReportQueries
from .periods import Period


XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

SUMMARY_COLUMNS = [
    ('Client', 'client_name'),
    ('Batches', 'batch_count'),
    ('Items Washed', 'total_items_washed'),
    ('Discrepancy Batches', 'discrepancy_batches'),
    ('Amount (excl. VAT)', 'total_amount'),
    ('VAT', 'vat_amount'),
    ('Total (incl. VAT)', 'total_incl_vat'),
]

BATCH_COLUMNS = [
    ('Paper Batch ID', 'paper_batch_id'),
    ('System Batch ID', 'system_batch_id'),
    ('Pickup Date', 'pickup_date'),
    ('Delivery Date', 'delivery_date'),
    ('Status', 'status'),
    ('Items Sent', 'items_sent'),
    ('Items Received', 'items_received'),
    ('Discrepancy', 'discrepancy'),
    ('Amount', 'amount'),
]

INVALID_TITLE_CHARS = re.compile(r'[\[\]:*?/\\]')
MAX_TITLE_LENGTH = 31


def cell_value(value):
    """Strings without the control characters Excel cannot store."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub('', value)
    return value


def sheet_title(name: str, taken: set) -> str:
    """Excel-safe sheet title, unique within `taken` (which it updates)."""
    base = INVALID_TITLE_CHARS.sub(' ', cell_value(name)).strip() or 'Client'
    title = base[:MAX_TITLE_LENGTH]
    counter = 2
    while title.lower() in taken:
        suffix = f' ({counter})'
        title = base[:MAX_TITLE_LENGTH - len(suffix)] + suffix
        counter += 1
    taken.add(title.lower())
    return title


def _write_table(sheet, columns, rows):
    sheet.append([header for header, _ in columns])
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    for row in rows:
        sheet.append([cell_value(row[key]) for _, key in columns])
    for index, (header, _) in enumerate(columns, start=1):
        sheet.column_dimensions[sheet.cell(row=1, column=index).column_letter].width = max(12, len(header) + 2)


def build_workbook(period: Period) -> Workbook:
    stats = ReportQueries.pdf_stats(period)
    summary = stats['summary']

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = 'Summary'
    taken = {'summary'}

    clients = sorted(stats['client_details'], key=lambda d: d['client_name'].lower())
    _write_table(sheet, SUMMARY_COLUMNS, clients)
    sheet.append([
        'Total',
        summary['total_batches'],
        summary['total_items_washed'],
        summary['total_discrepancies'],
        summary['total_revenue_before_vat'],
        summary['total_vat_amount'],
        summary['total_revenue_incl_vat'],
    ])
    for cell in sheet[sheet.max_row]:
        cell.font = Font(bold=True)

    for client in clients:
        client_sheet = workbook.create_sheet(sheet_title(client['client_name'], taken))
        _write_table(client_sheet, BATCH_COLUMNS, client['batches'])

    return workbook


def export_report(period: Period) -> bytes:
    """The report workbook as .xlsx bytes."""
    buffer = io.BytesIO()
    build_workbook(period).save(buffer)
    return buffer.getvalue()


def export_filename(period: Period) -> str:
    return f'linen-report-{period.label}.xlsx'

"""
RFID scanner data import.

Scanner exports arrive as rows keyed by the export's column headers
('RFID Number', 'QTY Washed', ...). Counts that don't parse become 0 and
dates that don't parse become NULL; a bad cell never rejects the row.
"""

import logging
import re
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from dateutil import parser as date_parser
from django.db import transaction
from django.utils import timezone

from .models import RFIDRecord


logger = logging.getLogger(__name__)

# Export column -> (model field, blank value)
TEXT_COLUMNS = {
    'RFID Number': ('rfid_number', ''),
    'Category': ('category', ''),
    'Status': ('status', ''),
    'Condition': ('condition', None),
    'Location': ('location', None),
    'User': ('user_name', None),
    'Assigned Location': ('assigned_location', None),
}
COUNT_COLUMNS = {
    'QTY Washed': 'qty_washed',
    'Washes Remaining': 'washes_remaining',
}
DATE_COLUMNS = {
    'Date Assigned': 'date_assigned',
    'Date/Time': 'date_time',
}

LEADING_INTEGER = re.compile(r'^\s*([+-]?\d+)')

# IntegerField range
MIN_COUNT, MAX_COUNT = -2147483648, 2147483647


def parse_count(value) -> int:
    """Leading integer of the value ('12 washes' -> 12), 0 otherwise or when out of range."""
    if value is None:
        return 0
    match = LEADING_INTEGER.match(str(value))
    if not match:
        return 0
    count = int(match.group(1))
    return count if MIN_COUNT <= count <= MAX_COUNT else 0


def parse_timestamp(value) -> Optional[datetime]:
    """Timezone-aware datetime, or None for blank and unparseable values."""
    if value is None or not str(value).strip():
        return None
    try:
        parsed = date_parser.parse(str(value))
    except (ValueError, OverflowError):
        return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def _text(value, blank, max_length):
    if value is None:
        return blank
    value = str(value).strip()[:max_length].strip()
    return value or blank


def record_from_row(row: Dict) -> RFIDRecord:
    fields = {}
    for column, (field, blank) in TEXT_COLUMNS.items():
        max_length = RFIDRecord._meta.get_field(field).max_length
        fields[field] = _text(row.get(column), blank, max_length)
    for column, field in COUNT_COLUMNS.items():
        fields[field] = parse_count(row.get(column))
    for column, field in DATE_COLUMNS.items():
        fields[field] = parse_timestamp(row.get(column))
    return RFIDRecord(**fields)


@transaction.atomic
def import_records(rows: Iterable[Dict]) -> List[RFIDRecord]:
    """Store every row of a scanner export; all or nothing."""
    records = RFIDRecord.objects.bulk_create([record_from_row(row) for row in rows])
    logger.info("Imported %d RFID records", len(records))
    return records


def list_records():
    return RFIDRecord.objects.all()


@transaction.atomic
def clear_records() -> int:
    deleted, _ = RFIDRecord.objects.all().delete()
    logger.info("Deleted %d RFID records", deleted)
    return deleted

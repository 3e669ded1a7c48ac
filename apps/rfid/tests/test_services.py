from datetime import datetime
from unittest.mock import patch

import pytest
from django.utils import timezone

from apps.rfid.models import RFIDRecord
from apps.rfid.services import (
    clear_records,
    import_records,
    parse_count,
    parse_timestamp,
    record_from_row,
)


class TestParsing:

    @pytest.mark.parametrize('value, expected', [
        ('12', 12),
        (7, 7),
        ('15 washes', 15),
        ('', 0),
        (None, 0),
        ('n/a', 0),
        ('2147483647', 2147483647),
        ('99999999999999999999', 0),
        ('-2147483649', 0),
    ])
    def test_parse_count(self, value, expected):
        assert parse_count(value) == expected

    def test_parse_timestamp(self):
        parsed = parse_timestamp('2024-03-05 14:30')

        assert timezone.is_aware(parsed)
        assert timezone.localtime(parsed).replace(tzinfo=None) == datetime(2024, 3, 5, 14, 30)

    def test_us_style_date(self):
        assert parse_timestamp('03/05/24').date().isoformat() == '2024-03-05'

    @pytest.mark.parametrize('value', ['', '   ', None, 'yesterday-ish'])
    def test_unparseable_timestamp(self, value):
        assert parse_timestamp(value) is None

    def test_record_from_row(self):
        record = record_from_row({
            'RFID Number': ' E2000017221101 ',
            'Category': 'Bath Towel',
            'Status': 'In Use',
            'Condition': '',
            'QTY Washed': '42',
            'Washes Remaining': 'unknown',
        })

        assert record.rfid_number == 'E2000017221101'
        assert record.condition is None
        assert record.location is None
        assert record.qty_washed == 42
        assert record.washes_remaining == 0
        assert record.date_time is None

    def test_long_text_is_cut_to_column_length(self):
        record = record_from_row({'RFID Number': 'E' * 150, 'Category': 'Towel ' * 60})

        assert record.rfid_number == 'E' * 100
        assert len(record.category) <= 255

    def test_missing_columns(self):
        record = record_from_row({})

        assert record.rfid_number == ''
        assert record.status == ''
        assert record.user_name is None


@pytest.mark.django_db
class TestImport:

    def test_import_and_clear(self):
        with patch('apps.rfid.services.logger') as mock_logger:
            records = import_records([
                {'RFID Number': 'A1', 'Category': 'Bath Towel'},
                {'RFID Number': 'A2', 'Category': 'Napkin'},
            ])
            mock_logger.info.assert_called_once_with("Imported %d RFID records", 2)

        assert len(records) == 2
        assert RFIDRecord.objects.count() == 2

        assert clear_records() == 2
        assert RFIDRecord.objects.count() == 0

    def test_oversized_count_does_not_reject_row(self):
        records = import_records([
            {'RFID Number': 'A1', 'QTY Washed': '99999999999999999999', 'Washes Remaining': '40'},
        ])

        stored = RFIDRecord.objects.get(id=records[0].id)
        assert stored.qty_washed == 0
        assert stored.washes_remaining == 40

"""Reporting periods: a calendar month or a whole year."""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class Period:
    year: int
    month: Optional[int] = None  # None means the whole year

    @classmethod
    def parse(cls, value: str) -> 'Period':
        """Parse 'YYYY-MM' or 'YYYY-all' (format checked by the caller)."""
        year, month = value.split('-')
        return cls(int(year), None if month == 'all' else int(month))

    @property
    def start(self) -> date:
        return date(self.year, self.month or 1, 1)

    @property
    def end(self) -> date:
        """Last day of the period (inclusive)."""
        if self.month is None:
            return date(self.year, 12, 31)
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month] if self.month else 'All months'

    @property
    def label(self) -> str:
        return f"{self.year}-{self.month:02d}" if self.month else f"{self.year}-all"

    def previous_month(self) -> 'Period':
        previous = self.start - relativedelta(months=1)
        return Period(previous.year, previous.month)

    def as_dict(self) -> dict:
        return {
            'year': self.year,
            'month': self.month,
            'month_name': self.month_name,
        }

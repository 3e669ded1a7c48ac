"""Batch identifier generation."""

from typing import Optional

from django.conf import settings
from django.utils import timezone

from ..models import Batch


PAPER_ID_WIDTH = 3
SYSTEM_SEQUENCE_WIDTH = 6


def next_paper_batch_id() -> str:
    """
    Next numeric paper batch id, zero-padded to at least 3 digits.

    Non-numeric ids entered by hand are ignored.
    """
    numeric_ids = (
        Batch.objects
        .filter(paper_batch_id__regex=r'^[0-9]+$')
        .values_list('paper_batch_id', flat=True)
    )
    highest = max((int(value) for value in numeric_ids), default=0)
    return str(highest + 1).zfill(PAPER_ID_WIDTH)


def next_system_batch_id(year: Optional[int] = None) -> str:
    """
    Next system id for the year, e.g. RSL-2024-000042.

    The sequence restarts at 1 every year.
    """
    year = year or timezone.localdate().year
    prefix = f"{settings.SYSTEM_BATCH_PREFIX}-{year}-"

    existing = (
        Batch.objects
        .filter(system_batch_id__startswith=prefix)
        .values_list('system_batch_id', flat=True)
    )
    highest = 0
    for value in existing:
        suffix = value[len(prefix):]
        if suffix.isdigit():
            highest = max(highest, int(suffix))

    return f"{prefix}{str(highest + 1).zfill(SYSTEM_SEQUENCE_WIDTH)}"

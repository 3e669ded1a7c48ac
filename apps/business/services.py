"""
Business settings persistence.

Free-text values are trimmed and blank values stored as NULL. Values that
look like URLs are kept only when they are valid http(s) URLs, and
placeholder image URLs are always dropped.
"""

import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from django.db import transaction

from .models import BusinessSettings


logger = logging.getLogger(__name__)

PLACEHOLDER_HOSTS = ('via.placeholder.com',)

OPTIONAL_FIELDS = [
    'logo_url',
    'address',
    'phone',
    'email',
    'website',
    'bank_name',
    'bank_account_name',
    'bank_account_number',
    'bank_branch_code',
    'bank_account_type',
    'bank_payment_reference',
]

_validate_url = URLValidator(schemes=['http', 'https'])


def sanitize(value: Optional[str]) -> Optional[str]:
    """Trimmed value, or None for blank, placeholder and broken URL values."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if any(host in value for host in PLACEHOLDER_HOSTS):
        return None
    if value.startswith(('http://', 'https://')):
        try:
            _validate_url(value)
        except ValidationError:
            return None
    return value


def get_business_settings() -> Optional[BusinessSettings]:
    return BusinessSettings.objects.order_by('-updated_at').first()


@transaction.atomic
def save_business_settings(*, company_name: str, **fields) -> BusinessSettings:
    """
    Update the current settings row, or create it if none exists.

    Optional text fields missing from `fields` are cleared.
    payment_terms_days is kept when not given.
    """
    settings_row = (
        BusinessSettings.objects
        .select_for_update()
        .order_by('-updated_at')
        .first()
    ) or BusinessSettings()

    settings_row.company_name = company_name.strip()
    for field in OPTIONAL_FIELDS:
        setattr(settings_row, field, sanitize(fields.get(field)))
    if fields.get('payment_terms_days') is not None:
        settings_row.payment_terms_days = fields['payment_terms_days']

    created = settings_row._state.adding
    settings_row.save()

    logger.info(
        "Business settings %s for %s",
        'created' if created else 'updated',
        settings_row.company_name,
    )
    return settings_row

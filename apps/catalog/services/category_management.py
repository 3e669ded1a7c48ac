"""Linen category queries and price maintenance."""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional
from uuid import UUID
import logging

from django.db import transaction
from django.db.models import Avg, Count, Max, Min, Q, QuerySet

from ..exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidPriceError,
    BulkUpdateLimitError,
)
from ..models import LinenCategory, CategorySection


logger = logging.getLogger(__name__)

MAX_PRICE = Decimal('999999.99')
MAX_BULK_UPDATES = 100


def parse_price(value: Any) -> Decimal:
    """
    Parse and validate a unit price.

    Raises:
        InvalidPriceError: If the value is not a number in [0, 999999.99]
    """
    if isinstance(value, bool) or value is None:
        raise InvalidPriceError()
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidPriceError()

    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        raise InvalidPriceError()

    return price.quantize(Decimal('0.01'))


def list_categories(
    *,
    include_inactive: bool = False,
    search: Optional[str] = None
) -> QuerySet:
    """
    Categories ordered by name.

    Args:
        include_inactive: Also return deactivated categories
        search: Case-insensitive substring of the name
    """
    queryset = LinenCategory.objects.all()

    if not include_inactive:
        queryset = queryset.filter(is_active=True)

    if search:
        queryset = queryset.filter(name__icontains=search.strip())

    return queryset.order_by('name')


def group_by_section(categories) -> Dict[str, List[LinenCategory]]:
    """Group categories under their section label, in section order."""
    grouped: Dict[str, List[LinenCategory]] = {
        label: [] for _, label in CategorySection.choices
    }
    for category in categories:
        grouped[CategorySection(category.section).label].append(category)
    return {label: items for label, items in grouped.items() if items}


def get_category(*, category_id: UUID) -> LinenCategory:
    try:
        return LinenCategory.objects.get(id=category_id)
    except LinenCategory.DoesNotExist:
        raise CategoryNotFoundError()


@transaction.atomic
def update_category(
    *,
    category_id: UUID,
    price: Any = None,
    name: Optional[str] = None,
    is_active: Optional[bool] = None
) -> LinenCategory:
    """
    Update a single category.

    The new price applies to batches recorded from now on; existing
    batch items keep the price they were captured with.

    Raises:
        CategoryNotFoundError: If the category doesn't exist
        DuplicateCategoryError: If the new name is taken
        InvalidPriceError: If price is out of range
    """
    try:
        category = LinenCategory.objects.select_for_update().get(id=category_id)
    except LinenCategory.DoesNotExist:
        raise CategoryNotFoundError()

    if price is not None:
        category.price_per_item = parse_price(price)

    if name is not None:
        name = name.strip()
        if LinenCategory.objects.filter(name__iexact=name).exclude(id=category.id).exists():
            raise DuplicateCategoryError()
        category.name = name

    if is_active is not None:
        category.is_active = is_active

    category.save()
    return category


@transaction.atomic
def bulk_update_prices(*, updates: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Apply a list of {id, price} updates.

    Invalid entries are reported per item and do not stop the others.

    Returns:
        Dict with 'updated', 'failed' counts and 'errors' [{id, error}]
    """
    if not isinstance(updates, list) or not updates or len(updates) > MAX_BULK_UPDATES:
        raise BulkUpdateLimitError()

    updated = 0
    errors = []

    for entry in updates:
        entry_id = entry.get('id') if isinstance(entry, dict) else None
        if not entry_id:
            errors.append({'id': None, 'error': 'Missing category id'})
            continue

        try:
            category_uuid = UUID(str(entry_id))
        except ValueError:
            errors.append({'id': str(entry_id), 'error': 'Invalid category id'})
            continue

        try:
            price = parse_price(entry.get('price'))
        except InvalidPriceError as e:
            errors.append({'id': str(entry_id), 'error': str(e.detail)})
            continue

        rows = LinenCategory.objects.filter(id=category_uuid).update(price_per_item=price)
        if rows:
            updated += 1
        else:
            errors.append({'id': str(entry_id), 'error': 'Category not found'})

    logger.info("Bulk price update: %d updated, %d failed", updated, len(errors))

    return {
        'updated': updated,
        'failed': len(errors),
        'errors': errors,
    }


def category_stats() -> Dict[str, Any]:
    """Counts and price range across all categories."""
    stats = LinenCategory.objects.aggregate(
        total=Count('id'),
        active=Count('id', filter=Q(is_active=True)),
        average=Avg('price_per_item', filter=Q(is_active=True)),
        lowest=Min('price_per_item', filter=Q(is_active=True)),
        highest=Max('price_per_item', filter=Q(is_active=True)),
    )

    def _money(value):
        return float(round(Decimal(value), 2)) if value is not None else 0.0

    return {
        'total_categories': stats['total'],
        'active_categories': stats['active'],
        'average_price': _money(stats['average']),
        'price_range': {
            'min': _money(stats['lowest']),
            'max': _money(stats['highest']),
        },
    }

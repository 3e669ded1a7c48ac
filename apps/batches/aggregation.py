"""
Discrepancy and pricing aggregation for batch items.

Pure functions over item values; nothing here touches the database,
so they can be applied to saved BatchItems and to unsaved payloads alike.

Money is Decimal rounded half-up to cents, percentages are floats
rounded to two places.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

from apps.catalog.services import lookup_price, default_unit_price


logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
EXPRESS_SURCHARGE_RATE = Decimal('0.50')

PRICE_SOURCES = ('explicit', 'item', 'category', 'price_list', 'default')


def money(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def percentage(part, whole) -> float:
    """part / whole * 100 rounded to 2 places; 0 when whole is 0."""
    if not whole:
        return 0.0
    value = Decimal(part) / Decimal(whole) * 100
    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


@dataclass
class ItemValues:
    """The fields of a batch item that pricing and discrepancy depend on."""

    quantity_sent: int
    quantity_received: int
    price_per_item: Optional[Decimal] = None
    category_price: Optional[Decimal] = None
    category_name: Optional[str] = None
    explicit_price: Optional[Decimal] = None
    express_delivery: bool = False

    @classmethod
    def from_batch_item(cls, item) -> 'ItemValues':
        category = item.linen_category
        return cls(
            quantity_sent=item.quantity_sent,
            quantity_received=item.quantity_received,
            price_per_item=item.price_per_item,
            category_price=category.price_per_item if category else None,
            category_name=category.name if category else None,
            express_delivery=item.express_delivery,
        )


def resolve_unit_price(item: ItemValues) -> Tuple[Decimal, str]:
    """
    Pick the unit price for an item.

    Order: explicit price, the item's stored snapshot, the category's
    current price, the standard price list by category name, and finally
    the configured default price.

    Returns:
        (price, source) where source is one of PRICE_SOURCES
    """
    if item.explicit_price is not None:
        return _to_decimal(item.explicit_price), 'explicit'
    if item.price_per_item is not None:
        return _to_decimal(item.price_per_item), 'item'
    if item.category_price is not None:
        return _to_decimal(item.category_price), 'category'

    if item.category_name:
        match = lookup_price(item.category_name)
        if not match.is_default:
            return match.price, 'price_list'
        return match.price, 'default'

    fallback = default_unit_price()
    logger.warning("Batch item has no price or category, using default unit price %s", fallback)
    return fallback, 'default'


def aggregate_item(item: ItemValues) -> Dict[str, Any]:
    """
    Discrepancy and pricing figures for one item.

    A positive discrepancy quantity means items are missing, a negative
    one means more came back than were sent.
    """
    unit_price, source = resolve_unit_price(item)
    sent = item.quantity_sent
    received = item.quantity_received
    quantity = sent - received
    discrepancy_value = money(quantity * unit_price)

    return {
        'quantity_sent': sent,
        'quantity_received': received,
        'express_delivery': item.express_delivery,
        'discrepancy': {
            'quantity': quantity,
            'percentage': percentage(quantity, sent),
            'value_impact': discrepancy_value,
        },
        'pricing': {
            'price_per_item': money(unit_price),
            'total_sent_value': money(sent * unit_price),
            'total_received_value': money(received * unit_price),
            'discrepancy_value': discrepancy_value,
            'price_source': source,
        },
    }


def summarize(aggregated: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Batch-level totals over the output of aggregate_item."""
    aggregated = list(aggregated)

    total_sent = sum(a['quantity_sent'] for a in aggregated)
    total_received = sum(a['quantity_received'] for a in aggregated)
    sent_value = sum((a['pricing']['total_sent_value'] for a in aggregated), Decimal('0'))
    received_value = sum((a['pricing']['total_received_value'] for a in aggregated), Decimal('0'))
    discrepancy_value = sum((a['pricing']['discrepancy_value'] for a in aggregated), Decimal('0'))
    with_discrepancy = sum(1 for a in aggregated if a['discrepancy']['quantity'] != 0)
    express_value = sum(
        (a['pricing']['total_sent_value'] for a in aggregated if a['express_delivery']),
        Decimal('0'),
    )

    average_price = money(sent_value / total_sent) if total_sent else money(0)

    return {
        'total_items_sent': total_sent,
        'total_items_received': total_received,
        'total_sent_value': money(sent_value),
        'total_received_value': money(received_value),
        'total_discrepancy_value': money(discrepancy_value),
        'items_with_discrepancy': with_discrepancy,
        'discrepancy_percentage': percentage(with_discrepancy, len(aggregated)),
        'express_surcharge': money(express_value * EXPRESS_SURCHARGE_RATE),
        'average_item_price': average_price,
    }


def aggregate_items(items: Iterable[ItemValues]) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    """Aggregate every item and the batch summary in one pass."""
    aggregated = [aggregate_item(item) for item in items]
    return aggregated, summarize(aggregated)


def aggregate_batch_items(batch_items) -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    """
    Aggregate saved BatchItems.

    Each aggregated entry also carries the item id and its category so
    API payloads can be built from it directly.
    """
    batch_items = list(batch_items)
    aggregated, summary = aggregate_items(ItemValues.from_batch_item(i) for i in batch_items)

    for item, entry in zip(batch_items, aggregated):
        entry['id'] = item.id
        entry['linen_category'] = item.linen_category
        entry['discrepancy_details'] = item.discrepancy_details

    return aggregated, summary

"""Services for the linen catalog."""

from .category_management import (
    parse_price,
    list_categories,
    group_by_section,
    get_category,
    update_category,
    bulk_update_prices,
    category_stats,
)
from .price_list import (
    PRICE_LIST,
    PRICE_LIST_BY_SECTION,
    CATEGORY_ALIASES,
)
from .price_lookup import (
    PriceMatch,
    normalize_text,
    default_unit_price,
    lookup_price,
)

__all__ = [
    # Category Management
    'parse_price',
    'list_categories',
    'group_by_section',
    'get_category',
    'update_category',
    'bulk_update_prices',
    'category_stats',
    # Price List
    'PRICE_LIST',
    'PRICE_LIST_BY_SECTION',
    'CATEGORY_ALIASES',
    # Price Lookup
    'PriceMatch',
    'normalize_text',
    'default_unit_price',
    'lookup_price',
]

"""Resolve a unit price from a free-text category name."""

from dataclasses import dataclass
from decimal import Decimal
import logging
import re

from django.conf import settings
from fuzzywuzzy import fuzz

from .price_list import PRICE_LIST, CATEGORY_ALIASES


logger = logging.getLogger(__name__)

# Minimum fuzz.ratio score accepted as the same category
FUZZY_MATCH_THRESHOLD = 90


@dataclass(frozen=True)
class PriceMatch:
    price: Decimal
    matched_name: str | None
    match_type: str  # 'exact', 'case_insensitive', 'alias', 'fuzzy', 'default'
    score: int = 100

    @property
    def is_default(self) -> bool:
        return self.match_type == 'default'


def normalize_text(text: str) -> str:
    """
    Normalize a category name for comparison.

    Args:
        text: Category name as typed

    Returns:
        Lowercase text with collapsed whitespace
    """
    text = text.lower().strip()
    text = re.sub(r'\s+', ' ', text)
    return text


def default_unit_price() -> Decimal:
    return Decimal(str(settings.DEFAULT_UNIT_PRICE))


def lookup_price(name: str) -> PriceMatch:
    """
    Look up the standard unit price for a category name.

    Tries, in order: exact name, case-insensitive name, known alias,
    fuzzy match against the price list. Falls back to the configured
    default unit price and logs a warning.
    """
    if name in PRICE_LIST:
        return PriceMatch(PRICE_LIST[name], name, 'exact')

    normalized = normalize_text(name or '')

    for candidate, price in PRICE_LIST.items():
        if normalize_text(candidate) == normalized:
            return PriceMatch(price, candidate, 'case_insensitive')

    alias = CATEGORY_ALIASES.get(normalized)
    if alias:
        return PriceMatch(PRICE_LIST[alias], alias, 'alias')

    best_name, best_score = None, 0
    for candidate in PRICE_LIST:
        score = fuzz.ratio(normalized, normalize_text(candidate))
        if score > best_score:
            best_name, best_score = candidate, score

    if best_name and best_score >= FUZZY_MATCH_THRESHOLD:
        return PriceMatch(PRICE_LIST[best_name], best_name, 'fuzzy', best_score)

    fallback = default_unit_price()
    logger.warning(
        "No price found for category %r, using default unit price %s",
        name, fallback
    )
    return PriceMatch(fallback, None, 'default', 0)

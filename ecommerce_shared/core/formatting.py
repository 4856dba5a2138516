"""Formatting — currency, date, and slug rendering for storefront display.

Invariants:
    - Pure functions, no IO; output depends only on the arguments
    - Date patterns are Unicode LDML patterns ("MMM dd, yyyy"), not strftime codes
    - Invalid date strings raise ValueError from datetime.fromisoformat (not swallowed)
    - slugify output contains only [a-z0-9_-] for ASCII input

Design Decisions:
    - Babel over hand-rolled locale tables: CLDR currency symbols, grouping, and
      pattern tokens match what the browser-side Intl/date-fns formatting produced
    - Naive datetimes are formatted as-is (no timezone shift)
"""

import re
from datetime import date, datetime, time
from decimal import Decimal

from babel.dates import format_datetime
from babel.numbers import format_currency

DEFAULT_CURRENCY = "USD"
DEFAULT_DATE_PATTERN = "MMM dd, yyyy"
DEFAULT_LOCALE = "en_US"

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_REPEATED_HYPHENS = re.compile(r"\-\-+")


def format_price(
    price: float | Decimal,
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format an amount as a localized currency string, e.g. 1234.5 -> "$1,234.50"."""
    return format_currency(price, currency, locale=locale)


def format_date(
    value: datetime | date | str,
    pattern: str = DEFAULT_DATE_PATTERN,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format a datetime, date, or ISO-8601 string with an LDML pattern.

    >>> format_date("2024-03-05T10:00:00Z")
    'Mar 05, 2024'
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    elif not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return format_datetime(value, format=pattern, locale=locale)


def slugify(text: str) -> str:
    """URL-safe slug: "Men's  T-Shirt!!" -> "mens-t-shirt"."""
    slug = str(text).lower().strip()
    slug = _WHITESPACE.sub("-", slug)
    slug = _NON_WORD.sub("", slug)
    return _REPEATED_HYPHENS.sub("-", slug)

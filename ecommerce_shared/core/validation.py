"""Validation — boolean shape checks for user-entered contact and form data.

Invariants:
    - Every predicate is total: returns bool, never raises for its documented input type
    - Email check is a shape check (local@domain.tld), not RFC 5322
    - Phone check ignores whitespace, allows one leading '+', 1-16 digits, no leading 0

Design Decisions:
    - Precompiled regexes with fullmatch: no trailing-newline leniency from `$`
    - URL check is structural (urlsplit), with no DNS or reachability check
"""

import re
from typing import Any
from urllib.parse import urlsplit

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE = re.compile(r"\+?[1-9]\d{0,15}")
_WHITESPACE = re.compile(r"\s")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes whose URLs must name a host ("http://" alone is not a URL).
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_valid_email(email: str) -> bool:
    return _EMAIL.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    return _PHONE.fullmatch(_WHITESPACE.sub("", phone)) is not None


def is_valid_url(url: str) -> bool:
    """True when *url* parses as an absolute URL."""
    try:
        parts = urlsplit(url.strip())
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def validate_required(value: Any) -> bool:
    """Non-blank string, non-empty collection, or any other non-None value."""
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    return value is not None

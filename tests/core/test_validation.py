"""Validation — verifies the email, phone, URL, and required predicates.

Tests:
    - Each predicate returns a bool for valid and invalid shapes
    - No predicate raises on odd input
"""

import pytest

from ecommerce_shared.core.validation import (
    is_valid_email, is_valid_phone, is_valid_url, validate_required,
)


@pytest.mark.parametrize("email, expected", [
    ("a@b.com", True),
    ("first.last+tag@shop.example.co", True),
    ("a@b", False),
    ("a b@c.com", False),
    ("@b.com", False),
    ("a@@b.com", False),
    ("a@b.com\n", False),
    ("", False),
])
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


@pytest.mark.parametrize("phone, expected", [
    ("+1 555 123 4567", True),
    ("5551234567", True),
    ("+44 20 7946 0958", True),
    ("0123456", False),
    ("+", False),
    ("555-123-4567", False),
    ("12345678901234567", False),
    ("", False),
])
def test_is_valid_phone(phone, expected):
    assert is_valid_phone(phone) is expected


@pytest.mark.parametrize("url, expected", [
    ("https://shop.example.com/products?id=42", True),
    ("http://localhost:3001", True),
    ("mailto:orders@example.com", True),
    ("http://", False),
    ("example.com", False),
    ("not a url", False),
    ("http://example.com:99999", False),
    ("", False),
])
def test_is_valid_url(url, expected):
    assert is_valid_url(url) is expected


@pytest.mark.parametrize("value, expected", [
    ("text", True),
    ("   ", False),
    ("", False),
    ([1], True),
    ([], False),
    ((), False),
    (0, True),
    (False, True),
    (None, False),
])
def test_validate_required(value, expected):
    assert validate_required(value) is expected

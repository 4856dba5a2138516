"""Root conftest — shared payload fixtures and a mock-transport client factory.

Invariants:
    - No test touches the network: every ApiClient is built on httpx.MockTransport
    - Payload fixtures are camelCase wire JSON, exactly as the backend sends them

Design Decisions:
    - make_client returns (client, captured requests): tests assert on both the
      envelope and what went over the wire
"""

import httpx
import pytest

from ecommerce_shared.infrastructure.api_client import create_api_client

BASE_URL = "http://api.test"


@pytest.fixture
def make_client():
    """Factory: handler(request) -> httpx.Response, returns (client, sent_requests)."""

    def _make(handler):
        sent: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = create_api_client(BASE_URL, transport=httpx.MockTransport(_recording))
        return client, sent

    return _make


@pytest.fixture
def product_payload():
    return {
        "id": "42",
        "name": "Widget",
        "description": "A very useful widget",
        "price": 19.99,
        "compareAtPrice": 24.99,
        "images": [
            {"id": "img-1", "url": "https://cdn.test/1.jpg", "alt": "front", "isPrimary": False, "order": 0},
            {"id": "img-2", "url": "https://cdn.test/2.jpg", "alt": "side", "isPrimary": True, "order": 1},
        ],
        "category": {"id": "cat-1", "name": "Gadgets", "slug": "gadgets", "isActive": True},
        "tags": ["new", "sale"],
        "variants": [
            {
                "id": "var-1",
                "name": "Blue / M",
                "price": 19.99,
                "sku": "WID-BLU-M",
                "inventory": 7,
                "options": [{"name": "Color", "value": "Blue"}, {"name": "Size", "value": "M"}],
                "isActive": True,
            },
        ],
        "inventory": {
            "trackInventory": True,
            "quantity": 3,
            "lowStockThreshold": 5,
            "allowBackorders": False,
        },
        "seo": {"title": "Widget", "keywords": ["widget"]},
        "isActive": True,
        "createdAt": "2024-03-05T10:00:00Z",
        "updatedAt": "2024-03-06T12:30:00Z",
    }


@pytest.fixture
def address_payload():
    return {
        "id": "addr-1",
        "type": "shipping",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "address1": "1 Analytical St",
        "city": "London",
        "state": "LDN",
        "country": "GB",
        "postalCode": "N1 9GU",
        "isDefault": True,
    }


@pytest.fixture
def user_payload(address_payload):
    billing = {**address_payload, "id": "addr-2", "type": "billing", "isDefault": False}
    return {
        "id": "u-1",
        "email": "ada@example.com",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "role": "customer",
        "isActive": True,
        "emailVerified": True,
        "addresses": [address_payload, billing],
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
    }


@pytest.fixture
def order_payload(product_payload, user_payload, address_payload):
    return {
        "id": "o-1",
        "orderNumber": "1001",
        "customer": user_payload,
        "items": [
            {"id": "li-1", "product": product_payload, "quantity": 2, "price": 19.99, "total": 39.98},
        ],
        "status": "confirmed",
        "paymentStatus": "paid",
        "fulfillmentStatus": "unfulfilled",
        "shippingAddress": address_payload,
        "billingAddress": {**address_payload, "type": "billing"},
        "subtotal": 39.98,
        "tax": 3.2,
        "shipping": 5.0,
        "discount": 0.0,
        "total": 48.18,
        "currency": "USD",
        "createdAt": "2024-03-07T09:00:00Z",
        "updatedAt": "2024-03-07T09:00:00Z",
    }

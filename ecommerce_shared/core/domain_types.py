"""Domain Types — identity types and enumerated status values for the commerce domain.

Invariants:
    - UserId, ProductId, OrderId, CartId wrap backend string ids; never mix them up
    - Order status lives on three independent axes (order, payment, fulfillment)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON as their value without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ProductId = NewType("ProductId", str)
OrderId = NewType("OrderId", str)
CartId = NewType("CartId", str)


# ─── Users ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Account role — drives storefront vs admin access."""
    CUSTOMER = "customer"
    ADMIN = "admin"
    STAFF = "staff"


class AddressType(str, Enum):
    """Address purpose. At most one default address per type (upheld by the backend)."""
    SHIPPING = "shipping"
    BILLING = "billing"


# ─── Orders ──────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle states."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    """Payment axis of an order, independent of OrderStatus."""
    PENDING = "pending"
    PAID = "paid"
    PARTIALLY_PAID = "partially_paid"
    REFUNDED = "refunded"
    FAILED = "failed"


class FulfillmentStatus(str, Enum):
    """Fulfillment axis of an order, independent of OrderStatus."""
    UNFULFILLED = "unfulfilled"
    PARTIALLY_FULFILLED = "partially_fulfilled"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


# ─── Queries & UI ────────────────────────────────────────────────

class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class LoadingState(str, Enum):
    """Client-side fetch state for consumers rendering API results."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# ─── Transport ───────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """The four verbs the API client binds."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

"""Order & Cart Schemas — checkout snapshots and the mutable pre-checkout cart.

Invariants:
    - Order status lives on three independent axes: status, payment_status, fulfillment_status
    - total == subtotal + tax + shipping - discount (backend contract, not validated here)
    - OrderItem/CartItem embed product and variant snapshots, not references

Design Decisions:
    - CartItem mirrors OrderItem field-for-field but stays a separate type:
      cart lines are mutable until checkout, order lines are history
"""

from datetime import datetime

from ecommerce_shared.core.domain_types import (
    FulfillmentStatus, OrderStatus, PaymentStatus,
)
from ecommerce_shared.schemas.base import ApiModel
from ecommerce_shared.schemas.product import Product, ProductVariant
from ecommerce_shared.schemas.user import Address, User


class OrderItem(ApiModel):
    id: str
    product: Product
    variant: ProductVariant | None = None
    quantity: int
    price: float
    total: float


class Order(ApiModel):
    id: str
    order_number: str
    customer: User
    items: list[OrderItem]
    status: OrderStatus
    payment_status: PaymentStatus
    fulfillment_status: FulfillmentStatus
    shipping_address: Address
    billing_address: Address
    subtotal: float
    tax: float
    shipping: float
    discount: float
    total: float
    currency: str
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class CartItem(ApiModel):
    id: str
    product: Product
    variant: ProductVariant | None = None
    quantity: int
    price: float
    total: float


class Cart(ApiModel):
    id: str
    items: list[CartItem] = []
    subtotal: float
    tax: float
    total: float
    currency: str

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

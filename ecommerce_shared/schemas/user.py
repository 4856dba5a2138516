"""User Schemas — accounts, addresses, and auth payloads.

Invariants:
    - At most one default Address per AddressType (upheld by the backend, not validated here)
    - AuthUser is the trimmed identity returned by auth endpoints

Design Decisions:
    - LoginCredentials/RegisterData are request bodies: posted as-is through the client
"""

from datetime import datetime

from ecommerce_shared.core.domain_types import AddressType, UserRole
from ecommerce_shared.schemas.base import ApiModel


class Address(ApiModel):
    id: str
    type: AddressType
    first_name: str
    last_name: str
    company: str | None = None
    address1: str
    address2: str | None = None
    city: str
    state: str
    country: str
    postal_code: str
    phone: str | None = None
    is_default: bool = False


class User(ApiModel):
    """Full account record."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    email_verified: bool
    avatar: str | None = None
    addresses: list[Address] = []
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def default_address(self, address_type: AddressType) -> Address | None:
        """The address of *address_type* flagged default, or None."""
        for address in self.addresses:
            if address.type == address_type and address.is_default:
                return address
        return None


class AuthUser(ApiModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    avatar: str | None = None


class LoginCredentials(ApiModel):
    email: str
    password: str


class RegisterData(ApiModel):
    email: str
    password: str
    first_name: str
    last_name: str

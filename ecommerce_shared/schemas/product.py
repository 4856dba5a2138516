"""Product Schemas — catalog entries with images, variants, inventory, and SEO.

Invariants:
    - At most one ProductImage is flagged primary (backend contract)
    - ProductVariant.options keeps the backend's order
    - ProductVariant.inventory is a plain stock count; Product.inventory is the full record
"""

from datetime import datetime

from ecommerce_shared.schemas.base import ApiModel
from ecommerce_shared.schemas.common import SEOMetadata


class ProductImage(ApiModel):
    id: str
    url: str
    alt: str = ""
    is_primary: bool = False
    order: int = 0


class VariantOption(ApiModel):
    name: str
    value: str


class ProductVariant(ApiModel):
    id: str
    name: str
    price: float
    compare_at_price: float | None = None
    sku: str
    inventory: int
    options: list[VariantOption] = []
    is_active: bool = True


class Category(ApiModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    parent_id: str | None = None
    is_active: bool = True


class Inventory(ApiModel):
    track_inventory: bool
    quantity: int
    low_stock_threshold: int
    allow_backorders: bool

    @property
    def is_low_stock(self) -> bool:
        return self.track_inventory and self.quantity <= self.low_stock_threshold


class Product(ApiModel):
    """Catalog product as served by the products endpoints."""
    id: str
    name: str
    description: str
    price: float
    compare_at_price: float | None = None
    images: list[ProductImage] = []
    category: Category
    tags: list[str] = []
    variants: list[ProductVariant] = []
    inventory: Inventory
    seo: SEOMetadata = SEOMetadata()
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    @property
    def primary_image(self) -> ProductImage | None:
        return next((img for img in self.images if img.is_primary), None)

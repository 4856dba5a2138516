"""Common Schemas — SEO metadata, pagination, search filters, and the API error shape.

Invariants:
    - PaginationParams.page and .limit are >= 1
    - PaginatedResponse[T] is generic over the item schema
    - to_query_params() drops unset values and emits camelCase keys

Design Decisions:
    - ApiError is defined in core/errors.py and re-exported here next to the
      other common contracts (core must not import schemas)
"""

from typing import Generic, TypeVar

from pydantic import Field

from ecommerce_shared.core.domain_types import SortOrder
from ecommerce_shared.core.errors import ApiError
from ecommerce_shared.schemas.base import ApiModel

__all__ = [
    "ApiError",
    "FilterOptions",
    "PaginatedResponse",
    "Pagination",
    "PaginationParams",
    "PriceRange",
    "SEOMetadata",
    "SearchParams",
]

T = TypeVar("T")


class SEOMetadata(ApiModel):
    title: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    og_image: str | None = None


class PaginationParams(ApiModel):
    """Page/limit/sort query for list endpoints."""
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1)
    sort_by: str | None = None
    sort_order: SortOrder | None = None

    def to_query_params(self) -> dict[str, str]:
        """Flatten to query-string pairs, e.g. {"page": "2", "sortOrder": "desc"}."""
        raw = self.model_dump(
            mode="json", by_alias=True, exclude_none=True,
            include={"page", "limit", "sort_by", "sort_order"},
        )
        return {k: str(v) for k, v in raw.items()}


class Pagination(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PaginatedResponse(ApiModel, Generic[T]):
    """One page of items plus the pagination cursor."""
    data: list[T]
    pagination: Pagination


class PriceRange(ApiModel):
    min: float
    max: float


class FilterOptions(ApiModel):
    category: list[str] | None = None
    price_range: PriceRange | None = None
    tags: list[str] | None = None
    in_stock: bool | None = None


class SearchParams(PaginationParams):
    """Full-text query plus filters on top of pagination."""
    query: str | None = None
    filters: FilterOptions | None = None

    def to_query_params(self) -> dict[str, str]:
        params = super().to_query_params()
        if self.query is not None:
            params["query"] = self.query
        if self.filters is None:
            return params
        f = self.filters
        if f.category:
            params["category"] = ",".join(f.category)
        if f.tags:
            params["tags"] = ",".join(f.tags)
        if f.price_range is not None:
            params["minPrice"] = str(f.price_range.min)
            params["maxPrice"] = str(f.price_range.max)
        if f.in_stock is not None:
            params["inStock"] = "true" if f.in_stock else "false"
        return params

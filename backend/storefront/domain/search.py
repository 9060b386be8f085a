"""
Product Search Domain Models

SearchQuery is rebuilt from query-string text on every request and
SearchResult is discarded after the response. Neither is persisted.

Author: TM3
Date: 2025-10-17
"""
import logging
import math
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from storefront.domain.product import Product

logger = logging.getLogger(__name__)

DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("999999")
DEFAULT_PAGE = 1


def parse_price(raw: Optional[str], default: Decimal) -> Decimal:
    """
    Parse a price bound from query-string text.

    Missing, blank, malformed and non-finite values (NaN, Infinity) all
    fall back to `default`, as do values outside the float range. The result
    is rounded to the nearest float so the bound used for filtering is the
    same one echoed back in the JSON response.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        logger.debug(f"Malformed price {raw!r}, using {default}")
        return default
    if not value.is_finite():
        logger.debug(f"Non-finite price {raw!r}, using {default}")
        return default
    as_float = float(value)
    if not math.isfinite(as_float):
        logger.debug(f"Price {raw!r} out of float range, using {default}")
        return default
    return Decimal(repr(as_float))


def parse_page(raw: Optional[str], default: int = DEFAULT_PAGE) -> int:
    """Parse a page number; anything that is not an integer falls back to `default`."""
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug(f"Malformed page {raw!r}, using {default}")
        return default


class SearchQuery(BaseModel):
    """
    Product search parameters

    No relationship between min_price and max_price is enforced: inverted
    bounds simply match nothing.
    """

    text: str = Field("", description="Free-text query")
    category: str = Field("", description="Category filter (case-insensitive)")
    min_price: Decimal = Field(DEFAULT_MIN_PRICE, description="Inclusive lower price bound")
    max_price: Decimal = Field(DEFAULT_MAX_PRICE, description="Inclusive upper price bound")
    page: int = Field(DEFAULT_PAGE, description="1-based page number, not clamped")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_params(
        cls,
        q: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        page: Optional[str] = None
    ) -> "SearchQuery":
        """Build a query from raw query-string values, substituting defaults"""
        return cls(
            text=q or "",
            category=category or "",
            min_price=parse_price(min_price, DEFAULT_MIN_PRICE),
            max_price=parse_price(max_price, DEFAULT_MAX_PRICE),
            page=parse_page(page),
        )


class SearchResult(BaseModel):
    """One page of search results plus facet data"""

    query: SearchQuery
    products: List[Product] = Field(default_factory=list, description="Products on this page")
    total: int = Field(0, description="Number of products matching all filters", ge=0)
    total_pages: int = Field(0, description="ceil(total / page size)", ge=0)
    categories: List[str] = Field(default_factory=list, description="Sorted distinct catalog categories")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        return {
            'products': [product.to_dict() for product in self.products],
            'query': self.query.text,
            'category': self.query.category,
            'min_price': float(self.query.min_price),
            'max_price': float(self.query.max_price),
            'page': self.query.page,
            'total_pages': self.total_pages,
            'total': self.total,
            'categories': list(self.categories),
        }

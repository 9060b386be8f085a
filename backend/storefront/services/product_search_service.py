"""
Product Search Service

In-memory search, filtering and pagination over a full catalog snapshot.

The catalog is fetched whole and filtered in Python. This does not scale
with catalog size but keeps the catalog source contract trivial (fetch-all).

Filters (all ANDed, each a pure predicate on a single product):
- text: case-insensitive substring of title, summary or category
- category: case-insensitive exact match; products without category never match
- price: min_price <= price <= max_price, inclusive, always applied

Pagination is fixed at PAGE_SIZE per page with no clamping: pages past the
end (or below 1) are empty. The category facet list is built from the
unfiltered snapshot.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Iterable, List, Sequence

from storefront.domain.product import Product
from storefront.domain.search import SearchQuery, SearchResult

logger = logging.getLogger(__name__)

PAGE_SIZE = 12


def filter_products(catalog: Iterable[Product], query: SearchQuery) -> List[Product]:
    """Apply the text, category and price filters, preserving catalog order"""
    needle = query.text.lower()
    category = query.category

    matches = []
    for product in catalog:
        if needle and not product.matches_text(needle):
            continue
        if category and not product.in_category(category):
            continue
        if not (query.min_price <= product.price <= query.max_price):
            continue
        matches.append(product)

    return matches


def count_pages(total: int, page_size: int = PAGE_SIZE) -> int:
    """ceil(total / page_size); 0 when there is nothing to show"""
    return -(-total // page_size)


def paginate(items: Sequence[Product], page: int, page_size: int = PAGE_SIZE) -> List[Product]:
    """Return the 1-based `page` slice of `items`. Out-of-range pages are empty."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def collect_categories(catalog: Iterable[Product]) -> List[str]:
    """
    Distinct categories across the catalog, case preserved, sorted ascending.

    Products without a category (None or empty string) are left out since
    they cannot be selected as a filter.
    """
    return sorted({product.category for product in catalog if product.category})


def search_products(catalog: Sequence[Product], query: SearchQuery) -> SearchResult:
    """
    Run a search against a catalog snapshot

    Args:
        catalog: Full, unfiltered catalog in catalog order
        query: Parsed search parameters

    Returns:
        SearchResult with the requested page, totals and category facets
    """
    matches = filter_products(catalog, query)
    total = len(matches)

    result = SearchResult(
        query=query,
        products=paginate(matches, query.page),
        total=total,
        total_pages=count_pages(total),
        categories=collect_categories(catalog),
    )

    logger.debug(
        f"Search q={query.text!r} category={query.category!r} "
        f"price=[{query.min_price}, {query.max_price}] page={query.page}: "
        f"{total} matches of {len(catalog)}"
    )

    return result

"""
Dashboard Service

Builds the landing-page summary for a signed-in user from the catalog,
their orders and their wishlist count.

Author: TM3
Date: 2025-10-17
"""
import asyncio
import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from storefront.core.auth import CurrentUser
from storefront.domain.dashboard import DashboardSummary
from storefront.domain.order import Order
from storefront.domain.product import Product
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.wishlist_repository import WishlistRepository

logger = logging.getLogger(__name__)

FEATURED_PRODUCTS_LIMIT = 8
RECENT_ORDERS_LIMIT = 5


def calculate_total_spent(orders: Iterable[Order]) -> Decimal:
    """Sum of totals over delivered/completed orders"""
    return sum((order.total for order in orders if order.counts_as_spent), Decimal("0"))


def most_recent(orders: Iterable[Order], limit: int = RECENT_ORDERS_LIMIT) -> List[Order]:
    """Newest `limit` orders by created_at; ties keep their incoming order"""
    return sorted(orders, key=lambda order: order.created_at, reverse=True)[:limit]


def build_dashboard(
    user: CurrentUser,
    catalog: Sequence[Product],
    wishlist_count: int,
    orders: Sequence[Order]
) -> DashboardSummary:
    """
    Assemble the dashboard from already-loaded collections

    Args:
        user: Signed-in user
        catalog: Full catalog in catalog order
        wishlist_count: Number of wishlist rows owned by the user
        orders: All of the user's orders, items preloaded

    Returns:
        DashboardSummary
    """
    return DashboardSummary(
        user=user,
        products=list(catalog[:FEATURED_PRODUCTS_LIMIT]),
        wishlist_count=wishlist_count,
        orders_count=len(orders),
        total_spent=calculate_total_spent(orders),
        orders=most_recent(orders),
    )


class DashboardService:
    """
    Loads everything the dashboard needs for one user

    The three reads are independent; they run concurrently in worker
    threads and all must finish before the summary is built. Repository
    errors propagate to the caller.
    """

    def __init__(
        self,
        product_repo: Optional[ProductRepository] = None,
        order_repo: Optional[OrderRepository] = None,
        wishlist_repo: Optional[WishlistRepository] = None
    ):
        self.product_repo = product_repo or ProductRepository()
        self.order_repo = order_repo or OrderRepository()
        self.wishlist_repo = wishlist_repo or WishlistRepository()

    async def get_summary(self, user: CurrentUser) -> DashboardSummary:
        catalog, wishlist_count, orders = await asyncio.gather(
            asyncio.to_thread(self.product_repo.find_all),
            asyncio.to_thread(self.wishlist_repo.count_by_user, user.id),
            asyncio.to_thread(self.order_repo.find_by_user, user.id),
        )

        summary = build_dashboard(user, catalog, wishlist_count, orders)

        logger.info(
            f"Dashboard for user {user.id}: {summary.orders_count} orders, "
            f"{summary.wishlist_count} wishlist items"
        )
        return summary

"""
Dashboard Domain Model

The landing-page data bag for a signed-in user.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, ConfigDict

from storefront.core.auth import CurrentUser
from storefront.domain.order import Order
from storefront.domain.product import Product


class DashboardSummary(BaseModel):
    """
    Immutable dashboard view-model

    Fields:
        user: The signed-in user
        products: Featured catalog products (at most 8)
        wishlist_count: Wishlist entries owned by the user
        orders_count: All of the user's orders, any status
        total_spent: Sum of delivered/completed order totals
        orders: Most recent orders (at most 5), newest first
    """

    user: CurrentUser
    products: List[Product] = Field(default_factory=list)
    wishlist_count: int = Field(0, ge=0)
    orders_count: int = Field(0, ge=0)
    total_spent: Decimal = Field(Decimal("0"), ge=0)
    orders: List[Order] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        return {
            'user': self.user.model_dump(),
            'products': [product.to_dict() for product in self.products],
            'wishlist_count': self.wishlist_count,
            'orders_count': self.orders_count,
            'total_spent': float(self.total_spent),
            'orders': [order.to_dict() for order in self.orders],
        }

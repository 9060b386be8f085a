"""
Order Domain Models

Orders and their line items as read by the dashboard.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle states"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Orders in these states count towards what a user has spent
SPENT_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.COMPLETED})


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        id: Internal order item ID
        order_id: Parent order ID
        product_id: Reference to product catalog (None if product was removed)
        product_title: Product title at time of order
        quantity: Number of units ordered
        unit_price: Price per unit at time of order
    """

    id: int = Field(..., description="Order item ID")
    order_id: int = Field(..., description="Parent order ID")
    product_id: Optional[int] = Field(None, description="Product catalog ID")
    product_title: str = Field(..., description="Product title at order time")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(..., description="Price per unit", ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def subtotal(self) -> Decimal:
        """Line total"""
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['unit_price'] = float(self.unit_price)
        data['subtotal'] = float(self.subtotal)
        return data


class Order(BaseModel):
    """
    Order domain model - a user's order with its items preloaded

    Fields:
        id: Internal order ID (primary key)
        user_id: Owner of the order
        status: Order status (see OrderStatus)
        total: Final order total
        created_at: When the order was placed
        items: Line items, in insertion order
    """

    id: int = Field(..., description="Internal order ID")
    user_id: int = Field(..., description="Owning user ID")
    status: OrderStatus = Field(..., description="Order status")
    total: Decimal = Field(..., description="Total order amount", ge=0)
    created_at: datetime = Field(..., description="Creation timestamp")
    items: List[OrderItem] = Field(default_factory=list, description="Order items")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def item_count(self) -> int:
        """Total number of line items in order"""
        return len(self.items)

    @property
    def counts_as_spent(self) -> bool:
        """Whether this order's total counts towards the user's spend"""
        return self.status in SPENT_STATUSES

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump()

        data['status'] = self.status.value
        data['total'] = float(self.total)
        data['created_at'] = self.created_at.isoformat()
        data['item_count'] = self.item_count
        data['items'] = [item.to_dict() for item in self.items]

        return data

"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-10-17
"""
from storefront.domain.product import Product
from storefront.domain.order import Order, OrderItem, OrderStatus
from storefront.domain.search import SearchQuery, SearchResult
from storefront.domain.dashboard import DashboardSummary

__all__ = [
    'Product',
    'Order',
    'OrderItem',
    'OrderStatus',
    'SearchQuery',
    'SearchResult',
    'DashboardSummary',
]

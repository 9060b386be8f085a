"""
Pytest fixtures and configuration for Storefront Backend tests

This file provides shared fixtures that can be used across all test modules.
No test here needs a database: repositories are mocked.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal

from fastapi.testclient import TestClient

from storefront.core.auth import CurrentUser, get_current_user
from storefront.domain.order import Order, OrderItem, OrderStatus
from storefront.domain.product import Product
from storefront.main import app


def make_product(id, title, category=None, price="10.00", summary=None):
    """Build a Product with sensible defaults"""
    return Product(
        id=id,
        title=title,
        summary=summary,
        category=category,
        price=Decimal(str(price))
    )


def make_order(id, status, total, created_at, user_id=1, items=None):
    """Build an Order with sensible defaults"""
    return Order(
        id=id,
        user_id=user_id,
        status=status,
        total=Decimal(str(total)),
        created_at=created_at,
        items=items or []
    )


@pytest.fixture
def current_user():
    """The signed-in user used by API tests"""
    return CurrentUser(id=1, email="ada@example.com", name="Ada")


@pytest.fixture
def sample_catalog():
    """
    Provides a small catalog covering the documented scenarios
    """
    return [
        make_product(1, "Red Shirt", category="Apparel", price="20"),
        make_product(2, "Blue Mug", category="Home", price="10"),
    ]


@pytest.fixture
def large_catalog():
    """Fourteen products, all in the same category and price"""
    return [make_product(i, f"Poster {i}", category="Art", price="5") for i in range(1, 15)]


@pytest.fixture
def sample_orders():
    """
    Orders in mixed statuses, newest first (as the order store returns them)
    """
    now = datetime(2025, 10, 17, 12, 0, 0)
    item = OrderItem(
        id=10,
        order_id=1,
        product_id=1,
        product_title="Red Shirt",
        quantity=2,
        unit_price=Decimal("20.00")
    )
    return [
        make_order(1, OrderStatus.DELIVERED, "40.00", now, items=[item]),
        make_order(2, OrderStatus.PENDING, "15.00", now - timedelta(days=1)),
        make_order(3, OrderStatus.COMPLETED, "25.50", now - timedelta(days=2)),
        make_order(4, OrderStatus.CANCELLED, "99.00", now - timedelta(days=3)),
        make_order(5, OrderStatus.SHIPPED, "12.00", now - timedelta(days=4)),
        make_order(6, OrderStatus.DELIVERED, "10.00", now - timedelta(days=5)),
    ]


@pytest.fixture
def client(current_user):
    """
    TestClient with authentication overridden to `current_user`
    """
    app.dependency_overrides[get_current_user] = lambda: current_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    """TestClient without any auth override"""
    app.dependency_overrides.clear()
    return TestClient(app)


@pytest.fixture
def product_factory():
    """Factory fixture for Product instances"""
    return make_product


@pytest.fixture
def order_factory():
    """Factory fixture for Order instances"""
    return make_order

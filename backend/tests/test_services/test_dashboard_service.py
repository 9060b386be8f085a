"""
Unit tests for the dashboard service

Author: TM3
Date: 2025-10-17
"""
import asyncio
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import Mock

import pytest

from storefront.domain.order import OrderStatus
from storefront.services.dashboard_service import (
    DashboardService,
    build_dashboard,
    calculate_total_spent,
    most_recent,
)


class TestBuildDashboard:
    """Pure aggregation over loaded collections"""

    def test_totals_from_mixed_orders(self, current_user, sample_catalog, sample_orders):
        summary = build_dashboard(current_user, sample_catalog, 3, sample_orders)

        assert summary.user == current_user
        assert summary.wishlist_count == 3
        assert summary.orders_count == 6
        # 40.00 + 25.50 + 10.00 (delivered/completed only)
        assert summary.total_spent == Decimal("75.50")
        assert [o.id for o in summary.orders] == [1, 2, 3, 4, 5]

    def test_recent_orders_keep_items(self, current_user, sample_catalog, sample_orders):
        summary = build_dashboard(current_user, sample_catalog, 0, sample_orders)

        assert summary.orders[0].item_count == 1
        assert summary.orders[0].items[0].product_title == "Red Shirt"

    def test_user_without_orders(self, current_user, sample_catalog):
        summary = build_dashboard(current_user, sample_catalog, 0, [])

        assert summary.orders_count == 0
        assert summary.total_spent == Decimal("0")
        assert summary.orders == []

    def test_featured_products_capped_at_eight(self, current_user, product_factory):
        catalog = [product_factory(i, f"Item {i}") for i in range(1, 12)]

        summary = build_dashboard(current_user, catalog, 0, [])

        assert [p.id for p in summary.products] == list(range(1, 9))

    def test_empty_catalog(self, current_user):
        summary = build_dashboard(current_user, [], 0, [])

        assert summary.products == []

    def test_to_dict(self, current_user, sample_catalog, sample_orders):
        data = build_dashboard(current_user, sample_catalog, 2, sample_orders).to_dict()

        assert data['user']['email'] == "ada@example.com"
        assert data['total_spent'] == 75.5
        assert data['orders'][0]['status'] == "delivered"
        assert data['orders'][0]['items'][0]['subtotal'] == 40.0
        assert len(data['products']) == 2


class TestAggregationHelpers:

    def test_only_delivered_and_completed_count(self, order_factory):
        now = datetime(2025, 1, 1)
        orders = [
            order_factory(id, status, "10", now)
            for id, status in enumerate(OrderStatus, start=1)
        ]

        assert calculate_total_spent(orders) == Decimal("20")

    def test_most_recent_sorts_newest_first(self, order_factory):
        now = datetime(2025, 1, 1)
        orders = [
            order_factory(1, OrderStatus.PENDING, "1", now - timedelta(days=2)),
            order_factory(2, OrderStatus.PENDING, "1", now),
            order_factory(3, OrderStatus.PENDING, "1", now - timedelta(days=1)),
        ]

        assert [o.id for o in most_recent(orders, limit=2)] == [2, 3]


class TestDashboardService:
    """Loading through repositories"""

    def test_get_summary_reads_all_collaborators(self, current_user, sample_catalog, sample_orders):
        product_repo = Mock()
        product_repo.find_all.return_value = sample_catalog
        order_repo = Mock()
        order_repo.find_by_user.return_value = sample_orders
        wishlist_repo = Mock()
        wishlist_repo.count_by_user.return_value = 4

        service = DashboardService(product_repo, order_repo, wishlist_repo)
        summary = asyncio.run(service.get_summary(current_user))

        product_repo.find_all.assert_called_once_with()
        order_repo.find_by_user.assert_called_once_with(current_user.id)
        wishlist_repo.count_by_user.assert_called_once_with(current_user.id)
        assert summary.wishlist_count == 4
        assert summary.orders_count == 6

    def test_get_summary_propagates_repository_errors(self, current_user):
        product_repo = Mock()
        product_repo.find_all.side_effect = RuntimeError("DATABASE_URL not configured")
        order_repo = Mock()
        order_repo.find_by_user.return_value = []
        wishlist_repo = Mock()
        wishlist_repo.count_by_user.return_value = 0

        service = DashboardService(product_repo, order_repo, wishlist_repo)

        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            asyncio.run(service.get_summary(current_user))

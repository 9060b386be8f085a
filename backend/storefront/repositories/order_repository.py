"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models
with their line items preloaded.

Author: TM3
Date: 2025-10-17
"""
from typing import Dict, List
from storefront.domain.order import Order, OrderItem
from storefront.core.database import get_db_connection_dict_with_retry


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    """

    def find_by_user(self, user_id: int) -> List[Order]:
        """
        Find every order placed by a user, newest first, with items

        Args:
            user_id: Owning user ID

        Returns:
            List of orders ordered by created_at DESC (empty if none)
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, user_id, status, total, created_at
                FROM orders
                WHERE user_id = %s
                ORDER BY created_at DESC, id DESC
            """, (user_id,))

            order_rows = cursor.fetchall()

            if not order_rows:
                return []

            # Get ALL order items for these orders in ONE QUERY
            order_ids = [order['id'] for order in order_rows]

            cursor.execute("""
                SELECT
                    oi.id, oi.order_id, oi.product_id,
                    COALESCE(oi.product_title, p.title) as product_title,
                    oi.quantity, oi.unit_price
                FROM order_items oi
                LEFT JOIN products p ON oi.product_id = p.id
                WHERE oi.order_id = ANY(%s)
                ORDER BY oi.order_id, oi.id
            """, (order_ids,))

            # Group items by order_id
            items_by_order: Dict[int, List[OrderItem]] = {}
            for item in cursor.fetchall():
                items_by_order.setdefault(item['order_id'], []).append(OrderItem(**dict(item)))

            orders = []
            for row in order_rows:
                order_dict = dict(row)
                order_dict['items'] = items_by_order.get(row['id'], [])
                orders.append(Order(**order_dict))

            return orders

        finally:
            cursor.close()
            conn.close()

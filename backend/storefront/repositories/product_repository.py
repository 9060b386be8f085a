"""
Product Repository - Data Access Layer for Products

Catalog source for the storefront. Returns Product view-models.

Author: TM3
Date: 2025-10-17
"""
from typing import List
from storefront.domain.product import Product
from storefront.core.database import get_db_connection_dict_with_retry


class ProductRepository:
    """
    Repository for Product data access

    The catalog is read-only from the storefront's point of view and is
    always returned whole; filtering happens in the search service.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Helper method to map database row to Product view-model"""
        return Product(
            id=row['id'],
            title=row['title'],
            summary=row.get('summary'),
            category=row.get('category'),
            price=row['price'],
            image_url=row.get('image_url')
        )

    def find_all(self) -> List[Product]:
        """
        Fetch the full catalog snapshot

        Returns:
            All products, in catalog order (by id)
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, title, summary, category, price, image_url
                FROM products
                ORDER BY id
            """)

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

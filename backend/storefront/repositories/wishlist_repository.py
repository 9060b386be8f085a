"""
Wishlist Repository - Data Access Layer for Wishlists

Only the per-user count is consumed by the storefront dashboard.

Author: TM3
Date: 2025-10-17
"""
from storefront.core.database import get_db_connection_dict_with_retry


class WishlistRepository:
    """Repository for wishlist entries (user <-> product)"""

    def count_by_user(self, user_id: int) -> int:
        """
        Count wishlist entries owned by a user

        Args:
            user_id: Owning user ID

        Returns:
            Number of wishlist rows for that user (0 if none)
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT COUNT(*) as total
                FROM wishlists
                WHERE user_id = %s
            """, (user_id,))

            row = cursor.fetchone()
            return int(row['total']) if row else 0

        finally:
            cursor.close()
            conn.close()

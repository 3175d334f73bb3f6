"""
Category Repository - Data Access Layer for Categories

Author: EcoBazaar
Date: 2025-11-03
"""
from typing import List, Optional

from ecobazaar.domain.category import Category, CategoryWithCount
from ecobazaar.core.database import get_db_connection_dict_with_retry


class CategoryRepository:
    """Repository for Category data access"""

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """
        Find category by ID

        Returns:
            Category or None if not found
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, description, is_active, created_at
                FROM categories
                WHERE id = %s
            """, (category_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return Category(**dict(row))

        finally:
            cursor.close()
            conn.close()

    def find_all_with_counts(self) -> List[CategoryWithCount]:
        """
        All categories with their product counts, in one query

        Categories without products report a count of 0.
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    c.id, c.name, c.description, c.is_active, c.created_at,
                    COUNT(p.id) as product_count
                FROM categories c
                LEFT JOIN products p ON p.category_id = c.id
                GROUP BY c.id, c.name, c.description, c.is_active, c.created_at
                ORDER BY c.name
            """)

            return [CategoryWithCount(**dict(row)) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

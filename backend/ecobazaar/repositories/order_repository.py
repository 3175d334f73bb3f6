"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.

Order carbon totals are not stored: every read recomputes them from the
current carbon_score of each product, weighted by line quantity.

Author: EcoBazaar
Date: 2025-11-03
"""
from decimal import Decimal
from typing import Dict, List, Optional

from ecobazaar.domain.order import Order, OrderItem, OrderStatus
from ecobazaar.core.database import get_db_connection_dict_with_retry

ORDER_SELECT = """
    SELECT
        o.id, o.user_id, o.total_price, o.status, o.shipping_address,
        o.created_at, o.updated_at,
        COALESCE((
            SELECT SUM(p.carbon_score * oi.quantity)
            FROM order_items oi
            JOIN products p ON p.id = oi.product_id
            WHERE oi.order_id = o.id
        ), 0) as total_carbon_score,
        u.first_name as customer_first_name,
        u.last_name as customer_last_name,
        u.email as customer_email
    FROM orders o
    LEFT JOIN users u ON o.user_id = u.id
"""

ITEM_SELECT = """
    SELECT
        oi.id, oi.order_id, oi.product_id, oi.quantity, oi.price,
        p.name as product_name,
        COALESCE(p.carbon_score, 0) as carbon_score,
        c.name as category_name,
        s.first_name as seller_first_name,
        s.last_name as seller_last_name
    FROM order_items oi
    LEFT JOIN products p ON oi.product_id = p.id
    LEFT JOIN categories c ON p.category_id = c.id
    LEFT JOIN users s ON p.seller_id = s.id
"""


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    Returns Order domain models with related data (customer, items).
    """

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID with customer info and items

        Returns:
            Order with all related data or None if not found
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(ORDER_SELECT + " WHERE o.id = %s", (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            cursor.execute(ITEM_SELECT + " WHERE oi.order_id = %s ORDER BY oi.id", (order_id,))
            items = cursor.fetchall()

            order_dict = dict(row)
            order_dict['items'] = [OrderItem(**dict(item)) for item in items]

            return Order(**order_dict)

        finally:
            cursor.close()
            conn.close()

    def find_recent(self, limit: Optional[int] = None, include_items: bool = False) -> List[Order]:
        """
        Orders newest first

        Args:
            limit: Maximum results to return (None for all orders)
            include_items: Load line items as well (one extra query)

        Returns:
            Orders ordered by created_at descending
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            if limit is None:
                cursor.execute(ORDER_SELECT + " ORDER BY o.created_at DESC")
            else:
                cursor.execute(ORDER_SELECT + " ORDER BY o.created_at DESC LIMIT %s", (limit,))

            order_rows = cursor.fetchall()
            return self._build_orders(cursor, order_rows, include_items)

        finally:
            cursor.close()
            conn.close()

    def find_by_user_id(self, user_id: int) -> List[Order]:
        """
        All orders placed by a customer, with items

        Returns:
            Orders ordered by created_at descending
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(
                ORDER_SELECT + " WHERE o.user_id = %s ORDER BY o.created_at DESC",
                (user_id,)
            )

            order_rows = cursor.fetchall()
            return self._build_orders(cursor, order_rows, include_items=True)

        finally:
            cursor.close()
            conn.close()

    def count_by_filters(
        self,
        user_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> int:
        """
        Count orders matching filters

        Args:
            user_id: Filter by customer
            status: Filter by lifecycle status

        Returns:
            Count of matching orders
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            conditions = []
            params = []

            if user_id is not None:
                conditions.append("user_id = %s")
                params.append(user_id)

            if status is not None:
                conditions.append("status = %s")
                params.append(status.value)

            where_clause = " AND ".join(conditions) if conditions else "1=1"

            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM orders
                WHERE {where_clause}
            """, params)

            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def count_by_status(self) -> Dict[str, int]:
        """
        Order counts grouped by status

        Returns:
            Dict status -> count (statuses without orders are absent)
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT status, COUNT(*) as count
                FROM orders
                GROUP BY status
            """)

            return {row['status']: row['count'] for row in cursor.fetchall()}

        finally:
            cursor.close()
            conn.close()

    def sum_total_price(self, user_id: Optional[int] = None) -> Decimal:
        """
        Revenue over all orders, or amount spent by one customer

        Returns:
            Sum of total_price, Decimal('0') when there are no orders
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            if user_id is None:
                cursor.execute("SELECT COALESCE(SUM(total_price), 0) as total FROM orders")
            else:
                cursor.execute("""
                    SELECT COALESCE(SUM(total_price), 0) as total
                    FROM orders
                    WHERE user_id = %s
                """, (user_id,))

            return self._decimal_or_zero(cursor.fetchone())

        finally:
            cursor.close()
            conn.close()

    def count_by_seller(self, seller_id: int) -> int:
        """
        Number of distinct orders containing at least one of the seller's products
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT COUNT(DISTINCT oi.order_id) as total
                FROM order_items oi
                JOIN products p ON p.id = oi.product_id
                WHERE p.seller_id = %s
            """, (seller_id,))

            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def sum_revenue_by_seller(self, seller_id: int) -> Decimal:
        """
        Revenue from the seller's own line items (price x quantity)

        Other sellers' items in the same order are not counted.

        Returns:
            Revenue, Decimal('0') when the seller has no sales
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT COALESCE(SUM(oi.price * oi.quantity), 0) as total
                FROM order_items oi
                JOIN products p ON p.id = oi.product_id
                WHERE p.seller_id = %s
            """, (seller_id,))

            return self._decimal_or_zero(cursor.fetchone())

        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _decimal_or_zero(row: Optional[dict]) -> Decimal:
        if not row or row['total'] is None:
            return Decimal('0')
        return Decimal(row['total'])

    @staticmethod
    def _build_orders(cursor, order_rows: List[dict], include_items: bool) -> List[Order]:
        if not order_rows:
            return []

        if not include_items:
            return [Order(**{**dict(row), 'items': []}) for row in order_rows]

        # Get ALL order items for these orders in ONE QUERY
        order_ids = [row['id'] for row in order_rows]
        cursor.execute(
            ITEM_SELECT + " WHERE oi.order_id = ANY(%s) ORDER BY oi.order_id, oi.id",
            (order_ids,)
        )

        items_by_order: Dict[int, List[OrderItem]] = {}
        for item in cursor.fetchall():
            items_by_order.setdefault(item['order_id'], []).append(OrderItem(**dict(item)))

        orders = []
        for row in order_rows:
            order_dict = dict(row)
            order_dict['items'] = items_by_order.get(row['id'], [])
            orders.append(Order(**order_dict))

        return orders

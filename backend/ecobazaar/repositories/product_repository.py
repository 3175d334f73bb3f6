"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: EcoBazaar
Date: 2025-11-03
"""
import logging
from decimal import Decimal
from typing import List, Optional

from ecobazaar.domain.product import Product, ProductCreate
from ecobazaar.domain.scoring import CarbonScore
from ecobazaar.core.database import get_db_connection_dict_with_retry

logger = logging.getLogger(__name__)

# Columns selected for every product read (alias "p", joined with seller and category)
PRODUCT_COLUMNS = """
    p.id, p.name, p.description, p.price, p.stock_quantity, p.image_url,
    p.weight_kg, p.shipping_distance_km, p.is_eco_friendly,
    p.carbon_score, p.eco_points, p.carbon_reduction,
    p.seller_id, p.category_id, p.is_active, p.created_at, p.updated_at,
    u.first_name as seller_first_name,
    u.last_name as seller_last_name,
    c.name as category_name
"""

PRODUCT_JOINS = """
    LEFT JOIN users u ON p.seller_id = u.id
    LEFT JOIN categories c ON p.category_id = c.id
"""

PRODUCT_SELECT = f"SELECT {PRODUCT_COLUMNS} FROM products p {PRODUCT_JOINS}"

# Writes run inside a CTE so the returned row carries the same joined columns as reads
WRITTEN_SELECT = f"SELECT {PRODUCT_COLUMNS} FROM written p {PRODUCT_JOINS}"


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a database row (optionally with JOIN columns) to a Product"""
        return Product(
            id=row['id'],
            name=row['name'],
            description=row.get('description'),
            price=row.get('price') or Decimal('0'),
            stock_quantity=row.get('stock_quantity') or 0,
            image_url=row.get('image_url'),
            weight_kg=row.get('weight_kg') or Decimal('0'),
            shipping_distance_km=row.get('shipping_distance_km') or Decimal('0'),
            is_eco_friendly=bool(row.get('is_eco_friendly')),
            carbon_score=row.get('carbon_score') or Decimal('0'),
            eco_points=row.get('eco_points') or 0,
            carbon_reduction=row.get('carbon_reduction') or Decimal('0'),
            seller_id=row.get('seller_id'),
            category_id=row.get('category_id'),
            seller_first_name=row.get('seller_first_name'),
            seller_last_name=row.get('seller_last_name'),
            category_name=row.get('category_name'),
            is_active=bool(row['is_active']),
            created_at=row['created_at'],
            updated_at=row.get('updated_at'),
        )

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(PRODUCT_SELECT + " WHERE p.id = %s", (product_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def find_all(
        self,
        seller_id: Optional[int] = None,
        category_id: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> List[Product]:
        """
        Find products with filters, newest first

        Args:
            seller_id: Filter by owning seller
            category_id: Filter by category
            is_active: Filter by active status

        Returns:
            List of products
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            where_clause, params = self._build_filters(seller_id, category_id, is_active, alias="p.")

            cursor.execute(f"""
                {PRODUCT_SELECT}
                WHERE {where_clause}
                ORDER BY p.created_at DESC
            """, params)

            return [self._map_row_to_product(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_recent(self, limit: int) -> List[Product]:
        """
        Most recently listed products

        Args:
            limit: Maximum results to return

        Returns:
            Products ordered by created_at descending
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                {PRODUCT_SELECT}
                ORDER BY p.created_at DESC
                LIMIT %s
            """, (limit,))

            return [self._map_row_to_product(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def count_by_filters(
        self,
        seller_id: Optional[int] = None,
        category_id: Optional[int] = None,
        is_active: Optional[bool] = None,
    ) -> int:
        """
        Count products matching filters

        Returns:
            Count of matching products
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            where_clause, params = self._build_filters(seller_id, category_id, is_active)

            cursor.execute(f"""
                SELECT COUNT(*) as total
                FROM products
                WHERE {where_clause}
            """, params)

            return cursor.fetchone()['total']

        finally:
            cursor.close()
            conn.close()

    def sum_carbon_score(self, seller_id: Optional[int] = None) -> Decimal:
        """
        Total carbon score across products

        Returns:
            Sum of carbon_score, Decimal('0') when there are no products
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            where_clause, params = self._build_filters(seller_id, None, None)

            cursor.execute(f"""
                SELECT COALESCE(SUM(carbon_score), 0) as total
                FROM products
                WHERE {where_clause}
            """, params)

            row = cursor.fetchone()
            return Decimal(row['total']) if row and row['total'] is not None else Decimal('0')

        finally:
            cursor.close()
            conn.close()

    def create(self, seller_id: int, data: ProductCreate, score: CarbonScore) -> Product:
        """
        Insert a new product together with its carbon triple

        Returns:
            The stored product, with seller and category names joined in
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                WITH written AS (
                    INSERT INTO products (
                        name, description, price, stock_quantity, image_url,
                        weight_kg, shipping_distance_km, is_eco_friendly,
                        carbon_score, eco_points, carbon_reduction,
                        seller_id, category_id, is_active, created_at
                    ) VALUES (
                        %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, NOW()
                    )
                    RETURNING *
                )
                {WRITTEN_SELECT}
            """, (
                data.name, data.description, data.price, data.stock_quantity, data.image_url,
                data.weight_kg, data.shipping_distance_km, data.is_eco_friendly,
                score.carbon_score, score.eco_points, score.carbon_reduction,
                seller_id, data.category_id, data.is_active,
            ))

            row = cursor.fetchone()
            conn.commit()
            logger.info(f"Created product {row['id']} for seller {seller_id}")
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def save(self, product: Product) -> Product:
        """
        Upsert a product by ID, carbon triple included

        Returns:
            The stored product, with seller and category names joined in
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                WITH written AS (
                    INSERT INTO products (
                        id, name, description, price, stock_quantity, image_url,
                        weight_kg, shipping_distance_km, is_eco_friendly,
                        carbon_score, eco_points, carbon_reduction,
                        seller_id, category_id, is_active, created_at, updated_at
                    ) VALUES (
                        %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, NOW()
                    )
                    ON CONFLICT (id) DO UPDATE SET
                        name = EXCLUDED.name,
                        description = EXCLUDED.description,
                        price = EXCLUDED.price,
                        stock_quantity = EXCLUDED.stock_quantity,
                        image_url = EXCLUDED.image_url,
                        weight_kg = EXCLUDED.weight_kg,
                        shipping_distance_km = EXCLUDED.shipping_distance_km,
                        is_eco_friendly = EXCLUDED.is_eco_friendly,
                        carbon_score = EXCLUDED.carbon_score,
                        eco_points = EXCLUDED.eco_points,
                        carbon_reduction = EXCLUDED.carbon_reduction,
                        seller_id = EXCLUDED.seller_id,
                        category_id = EXCLUDED.category_id,
                        is_active = EXCLUDED.is_active,
                        updated_at = NOW()
                    RETURNING *
                )
                {WRITTEN_SELECT}
            """, (
                product.id, product.name, product.description, product.price,
                product.stock_quantity, product.image_url,
                product.weight_kg, product.shipping_distance_km, product.is_eco_friendly,
                product.carbon_score, product.eco_points, product.carbon_reduction,
                product.seller_id, product.category_id, product.is_active, product.created_at,
            ))

            row = cursor.fetchone()
            conn.commit()
            logger.debug(f"Saved product {product.id}")
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _build_filters(seller_id, category_id, is_active, alias=""):
        conditions = []
        params = []

        if seller_id is not None:
            conditions.append(f"{alias}seller_id = %s")
            params.append(seller_id)

        if category_id is not None:
            conditions.append(f"{alias}category_id = %s")
            params.append(category_id)

        if is_active is not None:
            conditions.append(f"{alias}is_active = %s")
            params.append(is_active)

        where_clause = " AND ".join(conditions) if conditions else "1=1"
        return where_clause, params

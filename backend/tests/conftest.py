"""
Pytest fixtures and configuration for EcoBazaar Backend tests

This file provides shared fixtures that can be used across all test modules.
No test talks to a real database: repositories are mocked at the connection
helper or replaced with MagicMock objects.

Author: EcoBazaar
Date: 2025-11-04
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

from ecobazaar.domain.order import Order, OrderItem, OrderStatus
from ecobazaar.domain.product import Product
from ecobazaar.domain.user import Role, User


BASE_TIME = datetime(2025, 11, 1, 12, 0, 0)


@pytest.fixture
def base_time():
    """Fixed reference timestamp for building ordered test data"""
    return BASE_TIME


@pytest.fixture
def make_user():
    """Factory for User domain models"""
    def _make_user(user_id=1, role=Role.CUSTOMER, is_active=True, minutes=0, **overrides):
        data = {
            'id': user_id,
            'username': f"user{user_id}",
            'email': f"user{user_id}@ecobazaar.com",
            'first_name': f"First{user_id}",
            'last_name': f"Last{user_id}",
            'role': role,
            'eco_points': 0,
            'is_active': is_active,
            'created_at': BASE_TIME + timedelta(minutes=minutes),
        }
        data.update(overrides)
        return User(**data)
    return _make_user


@pytest.fixture
def make_product():
    """Factory for Product domain models"""
    def _make_product(product_id=1, is_active=True, minutes=0, **overrides):
        data = {
            'id': product_id,
            'name': f"Product {product_id}",
            'price': Decimal('59.00'),
            'weight_kg': Decimal('0.5'),
            'shipping_distance_km': Decimal('30'),
            'is_eco_friendly': True,
            'seller_id': 10,
            'seller_first_name': "Test",
            'seller_last_name': "Seller",
            'category_id': 1,
            'is_active': is_active,
            'created_at': BASE_TIME + timedelta(minutes=minutes),
        }
        data.update(overrides)
        return Product(**data)
    return _make_product


@pytest.fixture
def make_order():
    """Factory for Order domain models"""
    def _make_order(order_id=1, status=OrderStatus.PENDING, minutes=0, items=None, **overrides):
        data = {
            'id': order_id,
            'user_id': 20,
            'total_price': Decimal('118.00'),
            'status': status,
            'customer_first_name': "Eco",
            'customer_last_name': "Shopper",
            'created_at': BASE_TIME + timedelta(minutes=minutes),
            'items': items or [],
        }
        data.update(overrides)
        return Order(**data)
    return _make_order


@pytest.fixture
def sample_order_item():
    return OrderItem(
        id=1,
        order_id=1,
        product_id=1,
        quantity=2,
        price=Decimal('59.00'),
        product_name="Jute Cloth Bag",
        carbon_score=Decimal('0.525'),
    )


@pytest.fixture
def mock_db():
    """
    Mocked psycopg2 connection and cursor

    Returns (connection, cursor). Patch the repository's connection helper
    to return the connection.
    """
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    return conn, cursor


@pytest.fixture
def product_row():
    """Database row for the seeded jute bag product"""
    return {
        'id': 1,
        'name': 'Jute Cloth Bag',
        'description': 'Suitable for daily use like groceries.',
        'price': Decimal('59'),
        'stock_quantity': 50,
        'image_url': None,
        'weight_kg': Decimal('0.5'),
        'shipping_distance_km': Decimal('30'),
        'is_eco_friendly': True,
        'carbon_score': Decimal('0.525'),
        'eco_points': 2,
        'carbon_reduction': Decimal('0.225'),
        'seller_id': 10,
        'category_id': 3,
        'is_active': True,
        'created_at': BASE_TIME,
        'updated_at': None,
        'seller_first_name': 'Test',
        'seller_last_name': 'Seller',
        'category_name': 'Home & Garden',
    }

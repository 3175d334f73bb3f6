"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: EcoBazaar
Date: 2025-11-03
"""
from ecobazaar.domain.scoring import CarbonScore
from ecobazaar.domain.product import Product, ProductCreate, ProductUpdate
from ecobazaar.domain.user import User, Role
from ecobazaar.domain.order import Order, OrderItem, OrderStatus
from ecobazaar.domain.category import Category, CategoryWithCount
from ecobazaar.domain.analytics import (
    AdminOverview,
    ActivityEvent,
    UserRegistrationEvent,
    ProductAddedEvent,
    OrderPlacedEvent,
    SellerStats,
    CustomerStats,
)

__all__ = [
    'CarbonScore',
    'Product', 'ProductCreate', 'ProductUpdate',
    'User', 'Role',
    'Order', 'OrderItem', 'OrderStatus',
    'Category', 'CategoryWithCount',
    'AdminOverview', 'ActivityEvent',
    'UserRegistrationEvent', 'ProductAddedEvent', 'OrderPlacedEvent',
    'SellerStats', 'CustomerStats',
]

"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: EcoBazaar
Date: 2025-11-03
"""
from ecobazaar.repositories.product_repository import ProductRepository
from ecobazaar.repositories.user_repository import UserRepository
from ecobazaar.repositories.order_repository import OrderRepository
from ecobazaar.repositories.category_repository import CategoryRepository

__all__ = [
    'ProductRepository',
    'UserRepository',
    'OrderRepository',
    'CategoryRepository'
]

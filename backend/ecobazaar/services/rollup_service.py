"""
Rollup Services

Read-only aggregate queries over users, products and orders.

Consistency: every counter or sum below is an independent read against the
store. There is no snapshot spanning two calls, so values read separately
can disagree while writes are in flight (a seller approved between a "total
sellers" and an "active sellers" read, for instance). Callers that derive
values from several counters must tolerate that skew.

Sums never return None: an empty table sums to Decimal('0').

Author: EcoBazaar
Date: 2025-11-03
"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from ecobazaar.core.exceptions import NotFoundError
from ecobazaar.domain.category import CategoryWithCount
from ecobazaar.domain.order import Order, OrderStatus
from ecobazaar.domain.user import Role, User
from ecobazaar.repositories.category_repository import CategoryRepository
from ecobazaar.repositories.order_repository import OrderRepository
from ecobazaar.repositories.product_repository import ProductRepository
from ecobazaar.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserRollup:
    """Counters over the users table"""

    def __init__(self, user_repository: Optional[UserRepository] = None):
        self.users = user_repository or UserRepository()

    def total_users(self) -> int:
        return self.users.count_by_filters()

    def count_by_role(self, role: Role) -> int:
        return self.users.count_by_filters(role=role)

    def count_active_by_role(self, role: Role) -> int:
        return self.users.count_by_filters(role=role, is_active=True)

    def list_by_role(self, role: Optional[Role] = None) -> List[User]:
        return self.users.find_by_role(role)

    def pending_by_role(self, role: Role) -> List[User]:
        """Inactive accounts of a role (e.g. admins awaiting approval)"""
        return self.users.find_by_role(role, is_active=False)

    def get_user(self, user_id: int, role: Optional[Role] = None) -> User:
        """
        Fetch a user, optionally requiring a role

        Raises:
            NotFoundError: no such user, or the user has a different role
        """
        user = self.users.find_by_id(user_id)
        if user is None or (role is not None and user.role != role):
            entity = role.value.capitalize() if role else "User"
            raise NotFoundError(entity, user_id)
        return user


class CatalogRollup:
    """Counters and sums over the products table, scoped by seller or category"""

    def __init__(
        self,
        product_repository: Optional[ProductRepository] = None,
        category_repository: Optional[CategoryRepository] = None,
    ):
        self.products = product_repository or ProductRepository()
        self.categories = category_repository or CategoryRepository()

    def total_products(self) -> int:
        return self.products.count_by_filters()

    def total_carbon_impact(self, seller_id: Optional[int] = None) -> Decimal:
        total = self.products.sum_carbon_score(seller_id=seller_id)
        return total if total is not None else Decimal('0')

    def seller_product_counts(self, seller_id: int) -> Tuple[int, int]:
        """
        Returns:
            (product_count, active_product_count) for the seller
        """
        product_count = self.products.count_by_filters(seller_id=seller_id)
        active_count = self.products.count_by_filters(seller_id=seller_id, is_active=True)
        return product_count, active_count

    def category_counts(self) -> List[CategoryWithCount]:
        return self.categories.find_all_with_counts()

    def category_product_count(self, category_id: int) -> int:
        """
        Raises:
            NotFoundError: category does not exist
        """
        if self.categories.find_by_id(category_id) is None:
            raise NotFoundError("Category", category_id)
        return self.products.count_by_filters(category_id=category_id)


class OrderRollup:
    """Counters and revenue sums over orders, scoped by customer or seller"""

    def __init__(self, order_repository: Optional[OrderRepository] = None):
        self.orders = order_repository or OrderRepository()

    def total_orders(self) -> int:
        return self.orders.count_by_filters()

    def total_revenue(self) -> Decimal:
        total = self.orders.sum_total_price()
        return total if total is not None else Decimal('0')

    def customer_totals(self, user_id: int) -> Tuple[int, Decimal]:
        """
        Returns:
            (order_count, total_spent) for the customer
        """
        order_count = self.orders.count_by_filters(user_id=user_id)
        total_spent = self.orders.sum_total_price(user_id=user_id)
        return order_count, total_spent if total_spent is not None else Decimal('0')

    def seller_totals(self, seller_id: int) -> Tuple[int, Decimal]:
        """
        Returns:
            (order_count, revenue) for the seller's products
        """
        order_count = self.orders.count_by_seller(seller_id)
        revenue = self.orders.sum_revenue_by_seller(seller_id)
        return order_count, revenue if revenue is not None else Decimal('0')

    def recent_orders(self, limit: Optional[int] = None) -> List[Order]:
        """
        Orders newest first, with line items

        Carbon totals reflect the products' current carbon scores.
        """
        return self.orders.find_recent(limit, include_items=True)

    def customer_orders(self, user_id: int) -> List[Order]:
        return self.orders.find_by_user_id(user_id)

    def count_by_status(self) -> Dict[str, int]:
        """Order counts for every lifecycle status, zero-filled"""
        counts = self.orders.count_by_status()
        return {status.value: counts.get(status.value, 0) for status in OrderStatus}

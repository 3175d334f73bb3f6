"""
Marketplace Stats Service

Per-seller and per-customer breakdowns for the admin seller and user
management tables, and per-customer order monitoring.

Author: EcoBazaar
Date: 2025-11-04
"""
from typing import List, Optional

from ecobazaar.domain.analytics import CustomerStats, SellerStats
from ecobazaar.domain.order import Order
from ecobazaar.domain.user import Role, User
from ecobazaar.services.rollup_service import CatalogRollup, OrderRollup, UserRollup


class MarketplaceStatsService:
    """
    Joins user identities with catalog and order rollups.

    Issues a handful of count/sum queries per user; the admin tables this
    feeds are small enough that this stays cheap.
    """

    def __init__(
        self,
        user_rollup: Optional[UserRollup] = None,
        catalog_rollup: Optional[CatalogRollup] = None,
        order_rollup: Optional[OrderRollup] = None,
    ):
        self.user_rollup = user_rollup or UserRollup()
        self.catalog_rollup = catalog_rollup or CatalogRollup()
        self.order_rollup = order_rollup or OrderRollup()

    def sellers_with_stats(self) -> List[SellerStats]:
        return [self._seller_stats(seller) for seller in self.user_rollup.list_by_role(Role.SELLER)]

    def seller_stats(self, seller_id: int) -> SellerStats:
        """
        Raises:
            NotFoundError: seller does not exist
        """
        return self._seller_stats(self.user_rollup.get_user(seller_id, role=Role.SELLER))

    def users_with_stats(self, role: Optional[Role] = None) -> List[CustomerStats]:
        return [self._customer_stats(user) for user in self.user_rollup.list_by_role(role)]

    def customer_stats(self, user_id: int) -> CustomerStats:
        """
        Raises:
            NotFoundError: user does not exist
        """
        return self._customer_stats(self.user_rollup.get_user(user_id))

    def customer_orders(self, user_id: int) -> List[Order]:
        """
        Orders placed by one user, newest first, with line items

        Raises:
            NotFoundError: user does not exist
        """
        user = self.user_rollup.get_user(user_id)
        return self.order_rollup.customer_orders(user.id)

    def _seller_stats(self, seller: User) -> SellerStats:
        product_count, active_count = self.catalog_rollup.seller_product_counts(seller.id)
        order_count, revenue = self.order_rollup.seller_totals(seller.id)
        carbon_impact = self.catalog_rollup.total_carbon_impact(seller_id=seller.id)

        return SellerStats(
            id=seller.id,
            username=seller.username,
            email=seller.email,
            first_name=seller.first_name,
            last_name=seller.last_name,
            is_active=seller.is_active,
            created_at=seller.created_at,
            product_count=product_count,
            active_product_count=active_count,
            revenue=revenue,
            order_count=order_count,
            total_carbon_impact=carbon_impact,
        )

    def _customer_stats(self, user: User) -> CustomerStats:
        order_count, total_spent = self.order_rollup.customer_totals(user.id)

        return CustomerStats(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            eco_points=user.eco_points,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            order_count=order_count,
            total_spent=total_spent,
        )

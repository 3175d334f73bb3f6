"""
Admin Overview Service

Assembles the admin dashboard summary from the user, catalog and order
rollups.

The nine counters are read independently (see rollup_service), so they can
be momentarily inconsistent. The only derived field,
pending_seller_applications, is clamped at zero: a negative count of pending
applications has no business meaning and only reflects a seller approval
landing between two reads. The next read corrects it.

Author: EcoBazaar
Date: 2025-11-04
"""
import logging
from typing import Any, Dict, Optional

from ecobazaar.domain.analytics import AdminOverview
from ecobazaar.domain.user import Role
from ecobazaar.services.activity_feed_service import ActivityFeedService
from ecobazaar.services.rollup_service import CatalogRollup, OrderRollup, UserRollup

logger = logging.getLogger(__name__)


def pending_applications(total_sellers: int, active_sellers: int) -> int:
    """Inactive sellers, never below zero"""
    pending = total_sellers - active_sellers
    if pending < 0:
        logger.warning(
            f"Aggregation inconsistency: active_sellers ({active_sellers}) exceeds "
            f"total_sellers ({total_sellers}); clamping pending applications to 0"
        )
        return 0
    return pending


class AdminOverviewService:
    """Admin dashboard summary. Idempotent and safe to retry in full."""

    def __init__(
        self,
        user_rollup: Optional[UserRollup] = None,
        catalog_rollup: Optional[CatalogRollup] = None,
        order_rollup: Optional[OrderRollup] = None,
        activity_feed: Optional[ActivityFeedService] = None,
    ):
        self.user_rollup = user_rollup or UserRollup()
        self.catalog_rollup = catalog_rollup or CatalogRollup()
        self.order_rollup = order_rollup or OrderRollup()
        self.activity_feed = activity_feed or ActivityFeedService()

    def overview(self) -> AdminOverview:
        total_users = self.user_rollup.total_users()
        total_sellers = self.user_rollup.count_by_role(Role.SELLER)
        total_customers = self.user_rollup.count_by_role(Role.CUSTOMER)
        active_sellers = self.user_rollup.count_active_by_role(Role.SELLER)

        total_products = self.catalog_rollup.total_products()
        total_carbon_impact = self.catalog_rollup.total_carbon_impact()

        total_orders = self.order_rollup.total_orders()
        total_revenue = self.order_rollup.total_revenue()

        return AdminOverview(
            total_users=total_users,
            total_sellers=total_sellers,
            total_customers=total_customers,
            active_sellers=active_sellers,
            total_products=total_products,
            total_carbon_impact=total_carbon_impact,
            pending_seller_applications=pending_applications(total_sellers, active_sellers),
            total_orders=total_orders,
            total_revenue=total_revenue,
        )

    def dashboard(self, activity_limit: Optional[int] = None) -> Dict[str, Any]:
        """Overview plus recent activity, ready for JSON"""
        overview = self.overview()
        activity = self.activity_feed.build(activity_limit)

        return {
            'overview': overview.to_dict(),
            'recent_activity': [event.to_dict() for event in activity],
            'orders_by_status': self.order_rollup.count_by_status(),
        }

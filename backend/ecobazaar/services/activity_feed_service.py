"""
Activity Feed Service

Builds the admin dashboard's "recent activity" list by merging the newest
seller registrations, product listings and orders into one feed, newest
first.

Author: EcoBazaar
Date: 2025-11-04
"""
import logging
from typing import List, Optional

from ecobazaar.core.config import settings
from ecobazaar.domain.analytics import (
    ActivityEvent,
    OrderPlacedEvent,
    ProductAddedEvent,
    UserRegistrationEvent,
)
from ecobazaar.domain.order import Order
from ecobazaar.domain.product import Product
from ecobazaar.domain.user import Role, User
from ecobazaar.repositories.order_repository import OrderRepository
from ecobazaar.repositories.product_repository import ProductRepository
from ecobazaar.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _approval_status(is_active: bool) -> str:
    return "APPROVED" if is_active else "PENDING"


def seller_event(seller: User) -> UserRegistrationEvent:
    return UserRegistrationEvent(
        description=f'New seller "{seller.full_name}" registered',
        status=_approval_status(seller.is_active),
        timestamp=seller.created_at,
        subject_id=str(seller.id),
    )


def product_event(product: Product) -> ProductAddedEvent:
    seller = product.seller_first_name or "unknown seller"
    return ProductAddedEvent(
        description=f'Product "{product.name}" added by {seller}',
        status=_approval_status(product.is_active),
        timestamp=product.created_at,
        subject_id=str(product.id),
    )


def order_event(order: Order) -> OrderPlacedEvent:
    return OrderPlacedEvent(
        description=f"Order placed by {order.customer_name}",
        status=order.status.value,
        timestamp=order.created_at,
        subject_id=str(order.id),
    )


def merge_events(*sources: List[ActivityEvent], limit: int) -> List[ActivityEvent]:
    """
    Concatenate event lists and keep the newest `limit` events.

    The sort is stable, so events with equal timestamps keep the order of
    the sources as passed in.
    """
    combined = [event for source in sources for event in source]
    combined.sort(key=lambda event: event.timestamp, reverse=True)
    return combined[:limit]


class ActivityFeedService:
    """
    Recent-activity feed for the admin dashboard.

    Each source is capped independently of the final limit (5 sellers,
    5 products, 3 orders by default), so a feed never holds more than 13
    events. The feed is rebuilt on every call.
    """

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        product_repository: Optional[ProductRepository] = None,
        order_repository: Optional[OrderRepository] = None,
        recent_sellers: Optional[int] = None,
        recent_products: Optional[int] = None,
        recent_orders: Optional[int] = None,
    ):
        self.users = user_repository or UserRepository()
        self.products = product_repository or ProductRepository()
        self.orders = order_repository or OrderRepository()
        self.recent_sellers = settings.ACTIVITY_RECENT_SELLERS if recent_sellers is None else recent_sellers
        self.recent_products = settings.ACTIVITY_RECENT_PRODUCTS if recent_products is None else recent_products
        self.recent_orders = settings.ACTIVITY_RECENT_ORDERS if recent_orders is None else recent_orders

    def build(self, limit: Optional[int] = None) -> List[ActivityEvent]:
        """
        Build the feed.

        Args:
            limit: Maximum number of events (default: ACTIVITY_FEED_LIMIT, 10)

        Returns:
            Events sorted by timestamp descending

        Raises:
            ValueError: limit is negative
        """
        if limit is None:
            limit = settings.ACTIVITY_FEED_LIMIT
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        sellers = self.users.find_recent_by_role(Role.SELLER, self.recent_sellers)[:self.recent_sellers]
        products = self.products.find_recent(self.recent_products)[:self.recent_products]
        orders = self.orders.find_recent(self.recent_orders)[:self.recent_orders]

        events = merge_events(
            [seller_event(seller) for seller in sellers],
            [product_event(product) for product in products],
            [order_event(order) for order in orders],
            limit=limit,
        )

        logger.debug(
            f"Activity feed: {len(sellers)} sellers, {len(products)} products, "
            f"{len(orders)} orders -> {len(events)} events"
        )
        return events

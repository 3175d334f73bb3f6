"""
Admin API - Dashboard Analytics Endpoints
Overview counters, recent activity and seller/user/category statistics

Author: EcoBazaar
Date: 2025-11-04
"""
from fastapi import APIRouter, Body, Query
from typing import Optional

from ecobazaar.api.errors import to_http_exception
from ecobazaar.domain.user import Role
from ecobazaar.services.activity_feed_service import ActivityFeedService
from ecobazaar.services.admin_overview_service import AdminOverviewService
from ecobazaar.services.marketplace_stats_service import MarketplaceStatsService
from ecobazaar.services.product_service import ProductService
from ecobazaar.services.rollup_service import CatalogRollup, OrderRollup, UserRollup

router = APIRouter()


@router.get("/overview")
async def get_overview():
    """
    Admin dashboard counters

    Returns:
    - User, seller and customer counts
    - Active sellers and pending seller applications
    - Product count and total carbon impact
    - Order count and total revenue
    """
    try:
        overview = AdminOverviewService().overview()

        return {
            "status": "success",
            "data": overview.to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "fetching admin overview")


@router.get("/dashboard")
async def get_dashboard(
    activity_limit: int = Query(10, ge=0, le=50, description="Maximum activity events")
):
    """Overview, recent activity and order status breakdown in one call"""
    try:
        return {
            "status": "success",
            "data": AdminOverviewService().dashboard(activity_limit)
        }

    except Exception as e:
        raise to_http_exception(e, "fetching admin dashboard")


@router.get("/recent-activity")
async def get_recent_activity(
    limit: int = Query(10, ge=0, le=50, description="Maximum activity events")
):
    """
    Recent marketplace activity, newest first

    Merges the latest seller registrations, product listings and orders.
    """
    try:
        events = ActivityFeedService().build(limit)

        return {
            "status": "success",
            "count": len(events),
            "data": [event.to_dict() for event in events]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching recent activity")


@router.get("/sellers")
async def get_sellers_with_stats():
    """All sellers with product counts, order count and revenue"""
    try:
        sellers = MarketplaceStatsService().sellers_with_stats()

        return {
            "status": "success",
            "count": len(sellers),
            "data": [seller.to_dict() for seller in sellers]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching sellers")


@router.get("/sellers/{seller_id}/stats")
async def get_seller_stats(seller_id: int):
    """Statistics for one seller"""
    try:
        return {
            "status": "success",
            "data": MarketplaceStatsService().seller_stats(seller_id).to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "fetching seller stats")


@router.get("/users")
async def get_users_with_stats(
    role: Optional[Role] = Query(None, description="Filter by role (CUSTOMER, SELLER, ADMIN)")
):
    """Users with order count and total spent"""
    try:
        users = MarketplaceStatsService().users_with_stats(role)

        return {
            "status": "success",
            "count": len(users),
            "data": [user.to_dict() for user in users]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching users")


@router.get("/users/{user_id}/stats")
async def get_customer_stats(user_id: int):
    """Order statistics for one user"""
    try:
        return {
            "status": "success",
            "data": MarketplaceStatsService().customer_stats(user_id).to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "fetching user stats")


@router.get("/orders")
async def get_customer_orders(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum orders (all when omitted)")
):
    """
    Customer orders for monitoring, newest first

    Each order carries its items and a carbon total computed from the
    products' current carbon scores.
    """
    try:
        orders = OrderRollup().recent_orders(limit)

        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching customer orders")


@router.get("/users/{user_id}/orders")
async def get_orders_by_user(user_id: int):
    """Orders placed by one user, with items"""
    try:
        orders = MarketplaceStatsService().customer_orders(user_id)

        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching user orders")


@router.get("/pending-admins")
async def get_pending_admins():
    """Admin accounts awaiting approval"""
    try:
        admins = UserRollup().pending_by_role(Role.ADMIN)

        return {
            "status": "success",
            "count": len(admins),
            "data": [admin.model_dump(mode="json") for admin in admins]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching pending admins")


@router.get("/categories")
async def get_categories_with_count():
    """Categories with the number of products in each"""
    try:
        categories = CatalogRollup().category_counts()

        return {
            "status": "success",
            "count": len(categories),
            "data": [category.model_dump(mode="json") for category in categories]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching categories")


@router.get("/categories/{category_id}/product-count")
async def get_category_product_count(category_id: int):
    try:
        return {
            "status": "success",
            "data": {
                "category_id": category_id,
                "product_count": CatalogRollup().category_product_count(category_id)
            }
        }

    except Exception as e:
        raise to_http_exception(e, "counting category products")


@router.put("/products/{product_id}/eco-data")
async def update_product_eco_data(
    product_id: int,
    is_eco_friendly: bool = Body(..., embed=True)
):
    """
    Override a product's eco-friendly flag

    The carbon score, eco points and carbon reduction are recomputed.
    """
    try:
        product = ProductService().update_eco_data(product_id, is_eco_friendly)

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "updating eco data")

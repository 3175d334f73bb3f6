"""
Unit tests for AdminOverviewService

Author: EcoBazaar
Date: 2025-11-04
"""
import logging
import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from ecobazaar.domain.user import Role
from ecobazaar.services.admin_overview_service import AdminOverviewService, pending_applications


def build_rollups(total_users=10, sellers=4, customers=5, active_sellers=3,
                  products=6, carbon=Decimal('3.15'), orders=2, revenue=Decimal('1308')):
    user_rollup = MagicMock()
    user_rollup.total_users.return_value = total_users
    user_rollup.count_by_role.side_effect = lambda role: {Role.SELLER: sellers, Role.CUSTOMER: customers}[role]
    user_rollup.count_active_by_role.return_value = active_sellers

    catalog_rollup = MagicMock()
    catalog_rollup.total_products.return_value = products
    catalog_rollup.total_carbon_impact.return_value = carbon

    order_rollup = MagicMock()
    order_rollup.total_orders.return_value = orders
    order_rollup.total_revenue.return_value = revenue
    order_rollup.count_by_status.return_value = {'PENDING': 2}

    return user_rollup, catalog_rollup, order_rollup


class TestOverview:
    """Test AdminOverviewService.overview"""

    def test_overview_assembles_all_counters(self):
        # Arrange
        user_rollup, catalog_rollup, order_rollup = build_rollups()
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, MagicMock())

        # Act
        overview = service.overview()

        # Assert
        assert overview.total_users == 10
        assert overview.total_sellers == 4
        assert overview.total_customers == 5
        assert overview.active_sellers == 3
        assert overview.total_products == 6
        assert overview.total_carbon_impact == Decimal('3.15')
        assert overview.pending_seller_applications == 1
        assert overview.total_orders == 2
        assert overview.total_revenue == Decimal('1308')
        user_rollup.count_active_by_role.assert_called_once_with(Role.SELLER)

    def test_pending_clamped_when_active_exceeds_total(self, caplog):
        # A seller approved between the two reads
        user_rollup, catalog_rollup, order_rollup = build_rollups(sellers=3, active_sellers=4)
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, MagicMock())

        with caplog.at_level(logging.WARNING):
            overview = service.overview()

        assert overview.pending_seller_applications == 0
        assert "Aggregation inconsistency" in caplog.text

    def test_empty_marketplace_defaults_to_zero(self):
        user_rollup, catalog_rollup, order_rollup = build_rollups(
            total_users=0, sellers=0, customers=0, active_sellers=0,
            products=0, carbon=Decimal('0'), orders=0, revenue=Decimal('0')
        )
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, MagicMock())

        overview = service.overview()

        assert overview.total_carbon_impact == Decimal('0')
        assert overview.total_revenue == Decimal('0')
        assert overview.pending_seller_applications == 0

    def test_overview_to_dict_converts_decimals(self):
        user_rollup, catalog_rollup, order_rollup = build_rollups()
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, MagicMock())

        data = service.overview().to_dict()

        assert data['total_carbon_impact'] == 3.15
        assert data['total_revenue'] == 1308.0
        assert data['pending_seller_applications'] == 1

    def test_storage_errors_propagate(self):
        user_rollup, catalog_rollup, order_rollup = build_rollups()
        order_rollup.total_revenue.side_effect = RuntimeError("connection lost")
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, MagicMock())

        with pytest.raises(RuntimeError):
            service.overview()

    def test_dashboard_combines_overview_and_activity(self):
        user_rollup, catalog_rollup, order_rollup = build_rollups()
        activity_feed = MagicMock()
        activity_feed.build.return_value = []
        service = AdminOverviewService(user_rollup, catalog_rollup, order_rollup, activity_feed)

        data = service.dashboard(5)

        activity_feed.build.assert_called_once_with(5)
        assert data['overview']['total_users'] == 10
        assert data['recent_activity'] == []
        assert data['orders_by_status'] == {'PENDING': 2}


class TestPendingApplications:
    @pytest.mark.parametrize("total,active,expected", [
        (5, 3, 2),
        (5, 5, 0),
        (0, 0, 0),
        (3, 7, 0),
    ])
    def test_never_negative(self, total, active, expected):
        assert pending_applications(total, active) == expected

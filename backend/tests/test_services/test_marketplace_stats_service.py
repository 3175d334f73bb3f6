"""
Unit tests for MarketplaceStatsService

Author: EcoBazaar
Date: 2025-11-04
"""
import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from ecobazaar.core.exceptions import NotFoundError
from ecobazaar.domain.user import Role
from ecobazaar.services.marketplace_stats_service import MarketplaceStatsService
from ecobazaar.services.rollup_service import UserRollup


@pytest.fixture
def catalog_rollup():
    rollup = MagicMock()
    rollup.seller_product_counts.return_value = (6, 4)
    rollup.total_carbon_impact.return_value = Decimal('2.1')
    return rollup


@pytest.fixture
def order_rollup():
    rollup = MagicMock()
    rollup.seller_totals.return_value = (3, Decimal('1308.00'))
    rollup.customer_totals.return_value = (2, Decimal('118.00'))
    return rollup


class TestSellerStats:

    def test_sellers_with_stats(self, make_user, catalog_rollup, order_rollup):
        # Arrange
        user_rollup = MagicMock()
        user_rollup.list_by_role.return_value = [make_user(user_id=10, role=Role.SELLER)]
        service = MarketplaceStatsService(user_rollup, catalog_rollup, order_rollup)

        # Act
        stats = service.sellers_with_stats()

        # Assert
        user_rollup.list_by_role.assert_called_once_with(Role.SELLER)
        assert len(stats) == 1
        assert stats[0].id == 10
        assert stats[0].product_count == 6
        assert stats[0].active_product_count == 4
        assert stats[0].order_count == 3
        assert stats[0].revenue == Decimal('1308.00')
        assert stats[0].total_carbon_impact == Decimal('2.1')
        catalog_rollup.total_carbon_impact.assert_called_once_with(seller_id=10)

    def test_seller_stats_unknown_seller(self, catalog_rollup, order_rollup):
        users_repo = MagicMock()
        users_repo.find_by_id.return_value = None
        service = MarketplaceStatsService(UserRollup(users_repo), catalog_rollup, order_rollup)

        with pytest.raises(NotFoundError):
            service.seller_stats(404)

        catalog_rollup.seller_product_counts.assert_not_called()

    def test_seller_stats_to_dict(self, make_user, catalog_rollup, order_rollup):
        users_repo = MagicMock()
        users_repo.find_by_id.return_value = make_user(user_id=10, role=Role.SELLER)
        service = MarketplaceStatsService(UserRollup(users_repo), catalog_rollup, order_rollup)

        data = service.seller_stats(10).to_dict()

        assert data['revenue'] == 1308.0
        assert data['total_carbon_impact'] == 2.1
        assert data['created_at'] == '2025-11-01T12:00:00'


class TestCustomerStats:

    def test_users_with_stats_by_role(self, make_user, catalog_rollup, order_rollup):
        user_rollup = MagicMock()
        user_rollup.list_by_role.return_value = [
            make_user(user_id=20, role=Role.CUSTOMER),
            make_user(user_id=21, role=Role.CUSTOMER),
        ]
        service = MarketplaceStatsService(user_rollup, catalog_rollup, order_rollup)

        stats = service.users_with_stats(Role.CUSTOMER)

        user_rollup.list_by_role.assert_called_once_with(Role.CUSTOMER)
        assert [s.id for s in stats] == [20, 21]
        assert all(s.order_count == 2 for s in stats)
        assert all(s.total_spent == Decimal('118.00') for s in stats)

    def test_customer_stats(self, make_user, catalog_rollup, order_rollup):
        users_repo = MagicMock()
        users_repo.find_by_id.return_value = make_user(user_id=20)
        service = MarketplaceStatsService(UserRollup(users_repo), catalog_rollup, order_rollup)

        stats = service.customer_stats(20)

        order_rollup.customer_totals.assert_called_once_with(20)
        assert stats.role == Role.CUSTOMER
        assert stats.to_dict()['role'] == 'CUSTOMER'


class TestCustomerOrders:

    def test_customer_orders(self, make_user, make_order, sample_order_item, catalog_rollup, order_rollup):
        users_repo = MagicMock()
        users_repo.find_by_id.return_value = make_user(user_id=20)
        order_rollup.customer_orders.return_value = [make_order(order_id=1, items=[sample_order_item])]
        service = MarketplaceStatsService(UserRollup(users_repo), catalog_rollup, order_rollup)

        orders = service.customer_orders(20)

        order_rollup.customer_orders.assert_called_once_with(20)
        assert orders[0].item_count == 1
        assert orders[0].total_quantity == 2

    def test_customer_orders_unknown_user(self, catalog_rollup, order_rollup):
        users_repo = MagicMock()
        users_repo.find_by_id.return_value = None
        service = MarketplaceStatsService(UserRollup(users_repo), catalog_rollup, order_rollup)

        with pytest.raises(NotFoundError):
            service.customer_orders(404)

        order_rollup.customer_orders.assert_not_called()

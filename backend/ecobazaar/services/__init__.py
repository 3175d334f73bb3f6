"""
Service Layer - Scoring and Analytics

Author: EcoBazaar
Date: 2025-11-04
"""
from ecobazaar.services.carbon_scoring_service import CarbonScoringService, ScoringConfig
from ecobazaar.services.rollup_service import UserRollup, CatalogRollup, OrderRollup
from ecobazaar.services.marketplace_stats_service import MarketplaceStatsService
from ecobazaar.services.activity_feed_service import ActivityFeedService
from ecobazaar.services.admin_overview_service import AdminOverviewService
from ecobazaar.services.product_service import ProductService

__all__ = [
    'CarbonScoringService',
    'ScoringConfig',
    'UserRollup',
    'CatalogRollup',
    'OrderRollup',
    'MarketplaceStatsService',
    'ActivityFeedService',
    'AdminOverviewService',
    'ProductService',
]

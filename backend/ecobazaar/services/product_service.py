"""
Product Service

Product creation and updates. Every write re-scores the product so that
carbon_score, eco_points and carbon_reduction always match its current
weight, shipping distance and eco flag.

Author: EcoBazaar
Date: 2025-11-04
"""
import logging
from typing import Optional

from ecobazaar.core.exceptions import NotFoundError
from ecobazaar.domain.product import Product, ProductCreate, ProductUpdate
from ecobazaar.domain.scoring import CarbonScore
from ecobazaar.domain.user import Role
from ecobazaar.repositories.product_repository import ProductRepository
from ecobazaar.repositories.user_repository import UserRepository
from ecobazaar.services.carbon_scoring_service import CarbonScoringService

logger = logging.getLogger(__name__)

# Optional columns a partial update may reset to NULL; None means "unchanged" for the rest
CLEARABLE_FIELDS = {"description", "image_url", "category_id"}


class ProductService:
    """Scores products and persists the result through ProductRepository"""

    def __init__(
        self,
        product_repository: Optional[ProductRepository] = None,
        user_repository: Optional[UserRepository] = None,
        scoring_service: Optional[CarbonScoringService] = None,
    ):
        self.products = product_repository or ProductRepository()
        self.users = user_repository or UserRepository()
        self.scoring = scoring_service or CarbonScoringService()

    def preview_score(self, weight_kg, shipping_distance_km, is_eco_friendly: bool) -> CarbonScore:
        """Score without persisting anything"""
        return self.scoring.score(weight_kg, shipping_distance_km, is_eco_friendly)

    def get_product(self, product_id: int) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def create_product(self, seller_id: int, data: ProductCreate) -> Product:
        """
        Score and insert a new product

        Raises:
            InvalidAttributeError: negative weight or distance (nothing is written)
            NotFoundError: seller does not exist
        """
        score = self.scoring.score(data.weight_kg, data.shipping_distance_km, data.is_eco_friendly)

        seller = self.users.find_by_id(seller_id)
        if seller is None or seller.role != Role.SELLER:
            raise NotFoundError("Seller", seller_id)

        product = self.products.create(seller_id, data, score)
        logger.info(
            f"Product {product.id} scored: carbon_score={score.carbon_score} "
            f"eco_points={score.eco_points}"
        )
        return product

    def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        """
        Apply a partial update, re-score and save

        Only fields present in the request are applied. An explicit null
        clears description, image_url or category_id and is ignored elsewhere.

        Raises:
            InvalidAttributeError: resulting weight or distance is negative
            NotFoundError: product does not exist
        """
        product = self.get_product(product_id)
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field in CLEARABLE_FIELDS
        }
        updated = product.model_copy(update=changes)

        score = self.scoring.score(updated.weight_kg, updated.shipping_distance_km, updated.is_eco_friendly)
        return self.products.save(updated.with_score(score))

    def update_eco_data(self, product_id: int, is_eco_friendly: bool) -> Product:
        """
        Admin override of a product's eco-friendly flag

        The carbon triple is recomputed from the new flag rather than set
        directly.
        """
        product = self.get_product(product_id)
        score = self.scoring.score(product.weight_kg, product.shipping_distance_km, is_eco_friendly)
        updated = product.model_copy(update={'is_eco_friendly': is_eco_friendly}).with_score(score)

        logger.info(f"Eco data for product {product_id} updated: is_eco_friendly={is_eco_friendly}")
        return self.products.save(updated)

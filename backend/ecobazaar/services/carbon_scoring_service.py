"""
Carbon Scoring Service

Estimates the shipping emissions of a product and the eco reward it earns.

    baseline         = weight_kg x shipping_distance_km x emission_factor
    carbon_score     = baseline x eco_discount   (eco-friendly products)
                     = baseline                  (everything else)
    carbon_reduction = baseline - carbon_score
    eco_points       = round(carbon_reduction x points_per_kg_reduction), clamped to [0, max]

The coefficients are calibration values read from settings. All arithmetic is
exact Decimal arithmetic so that an eco-friendly product with non-zero weight
and distance always scores strictly below its non eco-friendly twin.

Author: EcoBazaar
Date: 2025-11-03
"""
import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from ecobazaar.core.config import settings
from ecobazaar.core.exceptions import InvalidAttributeError
from ecobazaar.domain.scoring import CarbonScore

logger = logging.getLogger(__name__)


# =============================================================================
# Service Configuration
# =============================================================================

@dataclass(frozen=True)
class ScoringConfig:
    """Calibration coefficients for carbon scoring"""
    emission_factor: Decimal = Decimal("0.05")  # kg CO2e per kg·km
    eco_discount: Decimal = Decimal("0.7")  # multiplier applied to eco-friendly products
    points_per_kg_reduction: Decimal = Decimal("10")
    max_eco_points: int = 100

    @classmethod
    def from_settings(cls) -> "ScoringConfig":
        return cls(
            emission_factor=settings.CARBON_EMISSION_FACTOR,
            eco_discount=settings.CARBON_ECO_DISCOUNT,
            points_per_kg_reduction=settings.ECO_POINTS_PER_KG_REDUCTION,
            max_eco_points=settings.ECO_POINTS_MAX,
        )

    def validate(self) -> None:
        if self.emission_factor <= 0:
            raise ValueError(f"emission_factor must be positive, got {self.emission_factor}")
        if not (Decimal("0") < self.eco_discount < Decimal("1")):
            raise ValueError(f"eco_discount must be in (0, 1), got {self.eco_discount}")
        if self.points_per_kg_reduction < 0:
            raise ValueError(f"points_per_kg_reduction must be >= 0, got {self.points_per_kg_reduction}")
        if not (0 <= self.max_eco_points <= 100):
            raise ValueError(f"max_eco_points must be in [0, 100], got {self.max_eco_points}")


# =============================================================================
# Carbon Scoring Service
# =============================================================================

class CarbonScoringService:
    """
    Pure scoring function over a product's physical attributes.

    Holds no mutable state: one instance can be shared freely between
    requests and threads.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig.from_settings()
        self.config.validate()

    def score(self, weight_kg: Any, shipping_distance_km: Any, is_eco_friendly: bool) -> CarbonScore:
        """
        Score a product.

        Args:
            weight_kg: Product weight in kg (>= 0)
            shipping_distance_km: Shipping distance in km (>= 0)
            is_eco_friendly: Whether the eco discount applies

        Returns:
            CarbonScore with carbon_score, eco_points and carbon_reduction

        Raises:
            InvalidAttributeError: weight or distance missing, not numeric or negative
        """
        weight = self._to_non_negative_decimal("weight_kg", weight_kg)
        distance = self._to_non_negative_decimal("shipping_distance_km", shipping_distance_km)

        baseline = weight * distance * self.config.emission_factor
        carbon_score = baseline * self.config.eco_discount if is_eco_friendly else baseline
        carbon_reduction = baseline - carbon_score

        raw_points = (carbon_reduction * self.config.points_per_kg_reduction).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        eco_points = max(0, min(int(raw_points), self.config.max_eco_points))

        return CarbonScore(
            carbon_score=carbon_score,
            eco_points=eco_points,
            carbon_reduction=carbon_reduction,
        )

    @staticmethod
    def _to_non_negative_decimal(field: str, value: Any) -> Decimal:
        if value is None or isinstance(value, bool):
            raise InvalidAttributeError(field, value)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidAttributeError(field, value)
            value = str(value)

        try:
            number = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidAttributeError(field, value)

        if not number.is_finite() or number < 0:
            raise InvalidAttributeError(field, value)

        return number

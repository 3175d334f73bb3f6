"""
Carbon Score Value Object

Author: EcoBazaar
Date: 2025-11-03
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CarbonScore(BaseModel):
    """
    Result of scoring a product's environmental impact

    The three values are produced together by CarbonScoringService.score()
    and persisted together on the product.
    """

    carbon_score: Decimal = Field(..., description="Estimated kg CO2e", ge=0)
    eco_points: int = Field(..., description="Reward points", ge=0, le=100)
    carbon_reduction: Decimal = Field(..., description="kg CO2e avoided", ge=0)

    model_config = ConfigDict(frozen=True)

"""
Centralized application configuration
"""
import json
from decimal import Decimal
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "EcoBazaar API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront backend with carbon-impact scoring and admin analytics"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True

    # Database
    DATABASE_URL: str = ""
    CONNECTION_TIMEOUT: int = 10

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:5173,https://yourdomain.com" or '["http://localhost:5173"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:5173,http://localhost:3000"

    # Carbon scoring calibration
    CARBON_EMISSION_FACTOR: Decimal = Decimal("0.05")  # kg CO2e per kg·km
    CARBON_ECO_DISCOUNT: Decimal = Decimal("0.7")
    ECO_POINTS_PER_KG_REDUCTION: Decimal = Decimal("10")
    ECO_POINTS_MAX: int = 100

    # Admin activity feed
    ACTIVITY_FEED_LIMIT: int = 10
    ACTIVITY_RECENT_SELLERS: int = 5
    ACTIVITY_RECENT_PRODUCTS: int = 5
    ACTIVITY_RECENT_ORDERS: int = 3

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()

"""
Category Domain Models

Author: EcoBazaar
Date: 2025-11-03
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Category(BaseModel):
    """Catalog category"""

    id: int = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")
    description: Optional[str] = Field(None, description="Category description")
    is_active: bool = Field(True, description="Whether category is active")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class CategoryWithCount(Category):
    """Category plus the number of products filed under it (derived, not stored)"""

    product_count: int = Field(0, description="Products in category", ge=0)

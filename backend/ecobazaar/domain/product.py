"""
Product Domain Model

Represents a product listed on the EcoBazaar storefront.
This is the single source of truth for product data structure.

Author: EcoBazaar
Date: 2025-11-03
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

from ecobazaar.domain.scoring import CarbonScore


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    The three carbon fields (carbon_score, eco_points, carbon_reduction) are
    derived from weight_kg, shipping_distance_km and is_eco_friendly. They are
    only ever replaced together through with_score().

    Fields:
        id: Internal product ID (primary key)
        name: Product name
        description: Product description (optional)
        price: Selling price
        stock_quantity: Units in stock
        image_url: Product image (optional)

        # Scoring inputs
        weight_kg: Shipping weight in kilograms
        shipping_distance_km: Distance shipped in kilometres
        is_eco_friendly: Whether the product is certified eco-friendly

        # Derived carbon fields
        carbon_score: Estimated kg CO2e attributable to the product
        eco_points: Reward points (0-100) earned by buying the product
        carbon_reduction: kg CO2e avoided versus a non eco-friendly equivalent

        # References
        seller_id: Owning seller (users.id)
        category_id: Catalog category

        # Metadata
        is_active: Whether the product is approved and visible
        created_at: When product was created
        updated_at: When product was last updated
    """

    # Primary identification
    id: int = Field(..., description="Internal product ID")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(Decimal('0'), description="Selling price", ge=0)
    stock_quantity: int = Field(0, description="Units in stock", ge=0)
    image_url: Optional[str] = Field(None, description="Product image URL")

    # Scoring inputs
    weight_kg: Decimal = Field(Decimal('0'), description="Weight in kg", ge=0)
    shipping_distance_km: Decimal = Field(Decimal('0'), description="Shipping distance in km", ge=0)
    is_eco_friendly: bool = Field(False, description="Certified eco-friendly")

    # Derived carbon fields
    carbon_score: Decimal = Field(Decimal('0'), description="kg CO2e", ge=0)
    eco_points: int = Field(0, description="Eco reward points", ge=0, le=100)
    carbon_reduction: Decimal = Field(Decimal('0'), description="kg CO2e avoided", ge=0)

    # References
    seller_id: Optional[int] = Field(None, description="Seller (user) ID")
    category_id: Optional[int] = Field(None, description="Category ID")

    # Related data (from JOINs - optional)
    seller_first_name: Optional[str] = Field(None, description="Seller first name (from JOIN)")
    seller_last_name: Optional[str] = Field(None, description="Seller last name (from JOIN)")
    category_name: Optional[str] = Field(None, description="Category name (from JOIN)")

    # Metadata
    is_active: bool = Field(True, description="Whether product is active")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def score(self) -> CarbonScore:
        """Current carbon triple of this product"""
        return CarbonScore(
            carbon_score=self.carbon_score,
            eco_points=self.eco_points,
            carbon_reduction=self.carbon_reduction,
        )

    @property
    def seller_name(self) -> str:
        """Seller display name, empty when the seller was not joined"""
        first = self.seller_first_name or ""
        last = self.seller_last_name or ""
        return f"{first} {last}".strip()

    def with_score(self, score: CarbonScore) -> "Product":
        """Return a copy carrying the given carbon triple"""
        return self.model_copy(update={
            'carbon_score': score.carbon_score,
            'eco_points': score.eco_points,
            'carbon_reduction': score.carbon_reduction,
        })

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Decimal values are converted to float for JSON compatibility.
        """
        data = self.model_dump()
        data['seller_name'] = self.seller_name

        for field in ['price', 'weight_kg', 'shipping_distance_km', 'carbon_score', 'carbon_reduction']:
            if data.get(field) is not None:
                data[field] = float(data[field])

        if data.get('created_at'):
            data['created_at'] = data['created_at'].isoformat()
        if data.get('updated_at'):
            data['updated_at'] = data['updated_at'].isoformat()

        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product (carbon fields are always computed)"""
    name: str
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    category_id: Optional[int] = None
    weight_kg: Decimal
    shipping_distance_km: Decimal
    is_eco_friendly: bool = False
    stock_quantity: int = Field(0, ge=0)
    image_url: Optional[str] = None
    is_active: bool = False


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    category_id: Optional[int] = None
    weight_kg: Optional[Decimal] = None
    shipping_distance_km: Optional[Decimal] = None
    is_eco_friendly: Optional[bool] = None
    stock_quantity: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = None
    is_active: Optional[bool] = None

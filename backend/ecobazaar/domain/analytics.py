"""
Admin Analytics Models

Read-only projections built for the admin dashboard. None of these are
persisted; they are rebuilt from the users, products and orders tables on
every read.

Author: EcoBazaar
Date: 2025-11-03
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated, Literal, Optional, Union
from datetime import datetime
from decimal import Decimal

from ecobazaar.domain.user import Role


def _decimal_to_float(data: dict, fields) -> dict:
    for field in fields:
        if data.get(field) is not None:
            data[field] = float(data[field])
    return data


class AdminOverview(BaseModel):
    """
    Admin dashboard summary

    Each counter comes from an independent read, so the values are only
    approximately consistent with each other under concurrent writes.
    pending_seller_applications is clamped at zero.
    """

    total_users: int = Field(0, ge=0)
    total_sellers: int = Field(0, ge=0)
    total_customers: int = Field(0, ge=0)
    active_sellers: int = Field(0, ge=0)
    total_products: int = Field(0, ge=0)
    total_carbon_impact: Decimal = Field(Decimal('0'))
    pending_seller_applications: int = Field(0, ge=0)
    total_orders: int = Field(0, ge=0)
    total_revenue: Decimal = Field(Decimal('0'))

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        return _decimal_to_float(self.model_dump(), ['total_carbon_impact', 'total_revenue'])


# ============================================================================
# Activity feed events
# ============================================================================

class _ActivityEventBase(BaseModel):
    description: str
    status: str
    timestamp: datetime
    subject_id: str

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        data = self.model_dump()
        data['timestamp'] = self.timestamp.isoformat()
        return data


class UserRegistrationEvent(_ActivityEventBase):
    """A seller account was registered"""
    kind: Literal["USER_REGISTRATION"] = "USER_REGISTRATION"
    subject_type: Literal["USER"] = "USER"


class ProductAddedEvent(_ActivityEventBase):
    """A product was listed"""
    kind: Literal["PRODUCT_ADDED"] = "PRODUCT_ADDED"
    subject_type: Literal["PRODUCT"] = "PRODUCT"


class OrderPlacedEvent(_ActivityEventBase):
    """A customer placed an order"""
    kind: Literal["ORDER_PLACED"] = "ORDER_PLACED"
    subject_type: Literal["ORDER"] = "ORDER"


ActivityEvent = Annotated[
    Union[UserRegistrationEvent, ProductAddedEvent, OrderPlacedEvent],
    Field(discriminator="kind"),
]


# ============================================================================
# Per-entity statistics
# ============================================================================

class SellerStats(BaseModel):
    """Seller identity with catalog and sales rollups"""

    id: int
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: bool
    created_at: datetime
    product_count: int = Field(0, ge=0)
    active_product_count: int = Field(0, ge=0)
    revenue: Decimal = Field(Decimal('0'))
    order_count: int = Field(0, ge=0)
    total_carbon_impact: Decimal = Field(Decimal('0'), description="Sum of carbon_score over the seller's products")

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        data = _decimal_to_float(self.model_dump(), ['revenue', 'total_carbon_impact'])
        data['created_at'] = self.created_at.isoformat()
        return data


class CustomerStats(BaseModel):
    """User identity with order rollups (admin user management table)"""

    id: int
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Role
    eco_points: int = 0
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    order_count: int = Field(0, ge=0)
    total_spent: Decimal = Field(Decimal('0'))

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        data = _decimal_to_float(self.model_dump(), ['total_spent'])
        data['role'] = self.role.value
        data['created_at'] = self.created_at.isoformat()
        if self.updated_at:
            data['updated_at'] = self.updated_at.isoformat()
        return data

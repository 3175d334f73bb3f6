"""
User Domain Model

Sellers, customers and admins share one users table and are told apart by
their role. This core only reads roles; changing them belongs to the account
management endpoints.

Author: EcoBazaar
Date: 2025-11-03
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Role(str, Enum):
    CUSTOMER = "CUSTOMER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"


class User(BaseModel):
    """
    User domain model

    Fields:
        id: Internal user ID
        username: Login name
        email: Contact email
        first_name / last_name: Display name parts
        role: CUSTOMER, SELLER or ADMIN
        eco_points: Accumulated eco reward points
        is_active: Approval/ban flag (inactive sellers are pending applications)
        created_at: Registration timestamp
        updated_at: Last update timestamp
    """

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: Optional[str] = Field(None, description="Email")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    role: Role = Field(..., description="Account role")
    eco_points: int = Field(0, description="Eco points balance", ge=0)
    is_active: bool = Field(True, description="Approved / not banned")
    created_at: datetime = Field(..., description="Registration timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def full_name(self) -> str:
        """First and last name joined, tolerating missing parts"""
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

"""
Order Domain Models

Represents customer orders and their line items.

Author: EcoBazaar
Date: 2025-11-03
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderItem(BaseModel):
    """
    Order Item domain model - a product line inside an order

    Fields:
        id: Internal order item ID
        order_id: Parent order ID
        product_id: Reference to product catalog
        quantity: Number of units ordered
        price: Unit price at time of order

        # From product catalog (optional, from JOIN)
        product_name: Current product name
        category_name: Product category name
        seller_first_name / seller_last_name: Product seller
        carbon_score: Current carbon score of the product (per unit)
    """

    id: int = Field(..., description="Order item ID")
    order_id: int = Field(..., description="Parent order ID")
    product_id: Optional[int] = Field(None, description="Product catalog ID")
    quantity: int = Field(0, description="Quantity ordered", ge=0)
    price: Decimal = Field(Decimal('0'), description="Price per unit", ge=0)

    # From product catalog (optional, from JOIN)
    product_name: Optional[str] = Field(None, description="Product name from catalog")
    category_name: Optional[str] = Field(None, description="Category name")
    seller_first_name: Optional[str] = Field(None, description="Seller first name")
    seller_last_name: Optional[str] = Field(None, description="Seller last name")
    carbon_score: Decimal = Field(Decimal('0'), description="Per-unit carbon score", ge=0)

    model_config = ConfigDict(from_attributes=True)

    @property
    def total_price(self) -> Decimal:
        """Line total (price x quantity)"""
        return self.price * self.quantity

    @property
    def total_carbon_score(self) -> Decimal:
        """Line carbon (carbon_score x quantity)"""
        return self.carbon_score * self.quantity

    @property
    def seller_name(self) -> str:
        return f"{self.seller_first_name or ''} {self.seller_last_name or ''}".strip()

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['total_price'] = float(self.total_price)
        data['seller_name'] = self.seller_name

        for field in ['price', 'carbon_score']:
            if data.get(field) is not None:
                data[field] = float(data[field])

        return data


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    total_carbon_score is not frozen at checkout: repositories compute it from
    the current carbon score of each product, weighted by quantity.

    Fields:
        id: Internal order ID (primary key)
        user_id: Customer who placed the order
        total_price: Order total
        total_carbon_score: Sum of line carbon scores
        status: Lifecycle tag (PENDING, CONFIRMED, SHIPPED, DELIVERED, CANCELLED)
        shipping_address: Delivery address
        created_at: When the order was placed

        # Related data (optional, from JOINs)
        customer_first_name / customer_last_name / customer_email

        # Order items (one-to-many relationship)
        items: List of order items
    """

    id: int = Field(..., description="Internal order ID")
    user_id: int = Field(..., description="Customer (user) ID")
    total_price: Decimal = Field(Decimal('0'), description="Order total", ge=0)
    total_carbon_score: Decimal = Field(Decimal('0'), description="Order carbon total", ge=0)
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    shipping_address: Optional[str] = Field(None, description="Shipping address")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    # Related data (from JOINs - optional)
    customer_first_name: Optional[str] = Field(None, description="Customer first name (from JOIN)")
    customer_last_name: Optional[str] = Field(None, description="Customer last name (from JOIN)")
    customer_email: Optional[str] = Field(None, description="Customer email (from JOIN)")

    # Order items (one-to-many)
    items: List[OrderItem] = Field(default_factory=list, description="Order items")

    model_config = ConfigDict(from_attributes=True)

    @property
    def customer_name(self) -> str:
        return f"{self.customer_first_name or ''} {self.customer_last_name or ''}".strip()

    @property
    def item_count(self) -> int:
        """Total number of line items in order"""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        """Total quantity of all items"""
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump()

        data['customer_name'] = self.customer_name
        data['item_count'] = self.item_count
        data['total_quantity'] = self.total_quantity
        data['status'] = self.status.value

        for field in ['total_price', 'total_carbon_score']:
            if data.get(field) is not None:
                data[field] = float(data[field])

        if data.get('created_at'):
            data['created_at'] = data['created_at'].isoformat()
        if data.get('updated_at'):
            data['updated_at'] = data['updated_at'].isoformat()

        data['items'] = [item.to_dict() for item in self.items]

        return data

"""
Products API Endpoints
Product reads and writes with carbon scoring

Author: EcoBazaar
Date: 2025-11-04
"""
from decimal import Decimal
from fastapi import APIRouter, Query
from typing import Optional
from pydantic import BaseModel

from ecobazaar.api.errors import to_http_exception
from ecobazaar.domain.product import ProductCreate, ProductUpdate
from ecobazaar.repositories.product_repository import ProductRepository
from ecobazaar.services.product_service import ProductService

router = APIRouter()


# Request models
class ScoreRequest(BaseModel):
    weight_kg: Decimal
    shipping_distance_km: Decimal
    is_eco_friendly: bool = False


@router.get("/")
async def get_products(
    seller_id: Optional[int] = Query(None, description="Filter by seller"),
    category_id: Optional[int] = Query(None, description="Filter by category"),
    is_active: Optional[bool] = Query(None, description="Filter by active status"),
):
    """Products with their carbon fields, newest first"""
    try:
        products = ProductRepository().find_all(
            seller_id=seller_id,
            category_id=category_id,
            is_active=is_active
        )

        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except Exception as e:
        raise to_http_exception(e, "fetching products")


@router.post("/score")
async def preview_score(request: ScoreRequest):
    """Compute carbon score, eco points and carbon reduction without saving"""
    try:
        score = ProductService().preview_score(
            request.weight_kg,
            request.shipping_distance_km,
            request.is_eco_friendly
        )

        return {
            "status": "success",
            "data": {
                "carbon_score": float(score.carbon_score),
                "eco_points": score.eco_points,
                "carbon_reduction": float(score.carbon_reduction)
            }
        }

    except Exception as e:
        raise to_http_exception(e, "scoring product")


@router.get("/{product_id}")
async def get_product(product_id: int):
    try:
        return {
            "status": "success",
            "data": ProductService().get_product(product_id).to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "fetching product")


@router.post("/")
async def create_product(
    data: ProductCreate,
    seller_id: int = Query(..., description="Owning seller")
):
    """Create a product; carbon fields are computed from weight, distance and eco flag"""
    try:
        product = ProductService().create_product(seller_id, data)

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "creating product")


@router.put("/{product_id}")
async def update_product(product_id: int, data: ProductUpdate):
    """Update a product and re-score it"""
    try:
        product = ProductService().update_product(product_id, data)

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except Exception as e:
        raise to_http_exception(e, "updating product")

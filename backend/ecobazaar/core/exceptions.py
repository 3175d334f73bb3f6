"""
Domain errors raised by the scoring and analytics services

Storage failures (psycopg2.Error) are not wrapped: they propagate to the
caller unchanged.

Author: EcoBazaar
Date: 2025-11-03
"""
from typing import Any


class EcoBazaarError(Exception):
    """Base class for all EcoBazaar domain errors"""


class InvalidAttributeError(EcoBazaarError):
    """A product attribute is outside its valid domain (e.g. negative weight)"""

    def __init__(self, field: str, value: Any, reason: str = "must be a non-negative number"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class NotFoundError(EcoBazaarError):
    """A referenced seller/product/customer/category does not exist"""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found with id: {entity_id}")

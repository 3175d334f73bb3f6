"""
Maps domain and storage errors to HTTP responses
"""
import logging

import psycopg2
from fastapi import HTTPException

from ecobazaar.core.exceptions import InvalidAttributeError, NotFoundError

logger = logging.getLogger(__name__)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """
    Translate an exception raised while performing `action` into an HTTPException

    InvalidAttributeError -> 422, NotFoundError -> 404,
    psycopg2.OperationalError -> 503, anything else -> 500.
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, InvalidAttributeError):
        return HTTPException(status_code=422, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, psycopg2.OperationalError):
        return HTTPException(status_code=503, detail=f"Database connection error: {str(error)}")

    logger.error(f"Error {action}: {error}")
    return HTTPException(status_code=500, detail=f"Error {action}: {str(error)}")

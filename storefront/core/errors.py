"""
Error helpers shared by the routers.

Every error body leaving the API is ``{"error": "<message>"}``; internal
failure detail is logged, never returned.
"""

import logging
from fastapi import HTTPException, status

from storefront.schemas.common import ErrorResponse


INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"

# OpenAPI docs for routes that look up one row by path id
DETAIL_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid id"},
    404: {"model": ErrorResponse, "description": "Not found"},
}


def upstream_failure(logger: logging.Logger, context: str) -> HTTPException:
    """Log the active exception and build the generic 500 response."""
    logger.error(f"Erro ao buscar {context}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
    )


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def parse_path_id(raw: str, message: str) -> int:
    """Parse a numeric path id, 400 when it is not an integer."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

"""
Shared response schemas.
"""

import math
from typing import List, Optional
from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Pagination block returned with product listings"""
    page: int = Field(..., ge=1, description="1-indexed page number")
    limit: int = Field(..., ge=1, description="Page size")
    total: int = Field(..., ge=0, description="Rows matching every filter")
    totalPages: int = Field(..., ge=0)
    hasNext: bool
    hasPrev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            totalPages=total_pages,
            hasNext=page < total_pages,
            hasPrev=page > 1,
        )


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint"""
    error: str
    errors: Optional[List[str]] = None

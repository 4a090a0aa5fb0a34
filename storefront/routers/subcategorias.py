"""
Subcategory endpoints.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import upstream_failure, not_found, parse_path_id, DETAIL_ERROR_RESPONSES
from storefront.schemas.catalog import SubcategoryOut, SubcategoryListResponse, SubcategoryDetailResponse
from storefront.services.catalog_repository import SubcategoryRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subcategorias", tags=["Subcategorias"])


@router.get("", response_model=SubcategoryListResponse)
def list_subcategories(
    db: Session = Depends(get_db),
    categoria: Optional[int] = Query(None, description="Only subcategories of this category"),
):
    """List active subcategories with their parent category inlined"""
    try:
        subcategories = SubcategoryRepository.get_all(db, categoria_id=categoria)
    except SQLAlchemyError:
        raise upstream_failure(logger, "subcategorias")

    return SubcategoryListResponse(
        subcategorias=[SubcategoryOut.model_validate(s) for s in subcategories],
        total=len(subcategories),
    )


@router.get("/{subcategoria_id}", response_model=SubcategoryDetailResponse, responses=DETAIL_ERROR_RESPONSES)
def get_subcategory(subcategoria_id: str, db: Session = Depends(get_db)):
    """Get an active subcategory by ID"""
    subcategory_id = parse_path_id(subcategoria_id, "ID da subcategoria inválido")

    try:
        subcategory = SubcategoryRepository.get_by_id(db, subcategory_id)
    except SQLAlchemyError:
        raise upstream_failure(logger, "subcategoria")

    if not subcategory:
        raise not_found("Subcategoria não encontrada")

    return SubcategoryDetailResponse(subcategoria=SubcategoryOut.model_validate(subcategory))

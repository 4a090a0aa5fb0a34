"""
Category endpoints.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import upstream_failure, not_found, parse_path_id, DETAIL_ERROR_RESPONSES
from storefront.schemas.catalog import (
    CategoryOut,
    CategoryWithSubcategoriesOut,
    SubcategoryItem,
    CategoryListResponse,
    CategoryDetailResponse,
)
from storefront.services.catalog_repository import CategoryRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categorias", tags=["Categorias"])


@router.get("", response_model=CategoryListResponse, response_model_exclude_unset=True)
def list_categories(
    db: Session = Depends(get_db),
    include_subcategorias: bool = Query(False, description="Inline each category's active subcategories"),
):
    """List active categories, optionally with their active subcategories"""
    try:
        if include_subcategorias:
            rows = CategoryRepository.get_all_with_subcategories(db)
            categorias = [
                CategoryWithSubcategoriesOut(
                    **CategoryOut.model_validate(category).model_dump(),
                    subcategorias=[SubcategoryItem.model_validate(s) for s in subcategories],
                )
                for category, subcategories in rows
            ]
        else:
            categorias = [
                CategoryWithSubcategoriesOut(**CategoryOut.model_validate(c).model_dump())
                for c in CategoryRepository.get_all(db)
            ]
    except SQLAlchemyError:
        raise upstream_failure(logger, "categorias")

    return CategoryListResponse(categorias=categorias)


@router.get("/{categoria_id}", response_model=CategoryDetailResponse, responses=DETAIL_ERROR_RESPONSES)
def get_category(categoria_id: str, db: Session = Depends(get_db)):
    """Get an active category by ID"""
    category_id = parse_path_id(categoria_id, "ID da categoria inválido")

    try:
        category = CategoryRepository.get_by_id(db, category_id)
    except SQLAlchemyError:
        raise upstream_failure(logger, "categoria")

    if not category:
        raise not_found("Categoria não encontrada")

    return CategoryDetailResponse(categoria=CategoryOut.model_validate(category))

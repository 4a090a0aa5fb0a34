"""
Product endpoints.

Read-only listing with filters and pagination, plus product detail with the
subcategory and category inlined.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import upstream_failure, not_found, parse_path_id, DETAIL_ERROR_RESPONSES
from storefront.models.catalog import PRODUCT_ACTIVE_STATUS
from storefront.schemas.catalog import ProductOut, ProductListResponse, ProductDetailResponse
from storefront.schemas.common import Pagination
from storefront.services.catalog_repository import ProductRepository, parse_id_list, DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/produtos", tags=["Produtos"])


@router.get("", response_model=ProductListResponse)
def list_products(
    db: Session = Depends(get_db),
    categoria: Optional[int] = Query(None, description="Category ID, resolved through its subcategories"),
    subcategoria: Optional[int] = Query(None, description="Subcategory ID"),
    subcategorias: Optional[str] = Query(None, description="Comma-separated subcategory IDs"),
    promocao: bool = Query(False, description="Only products on sale this month"),
    novidade: bool = Query(False, description="Only new products"),
    tipo_tinta: bool = Query(False, description="Only paints"),
    tipo_eletrico: bool = Query(False, description="Only electrical products"),
    status_filter: str = Query(PRODUCT_ACTIVE_STATUS, alias="status"),
    busca: Optional[str] = Query(None, description="Search in name or description"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
):
    """
    List products.

    Sorted by display order, then newest first. The pagination block counts
    every row matching the filters.
    """
    try:
        products, total = ProductRepository.get_all(
            db,
            page=page,
            limit=limit,
            categoria_id=categoria,
            subcategoria_id=subcategoria,
            subcategoria_ids=parse_id_list(subcategorias),
            promocao=promocao,
            novidade=novidade,
            tipo_tinta=tipo_tinta,
            tipo_eletrico=tipo_eletrico,
            status=status_filter,
            busca=busca.strip() if busca else None,
        )
    except SQLAlchemyError:
        raise upstream_failure(logger, "produtos")

    return ProductListResponse(
        produtos=[ProductOut.model_validate(p) for p in products],
        pagination=Pagination.build(page=page, limit=limit, total=total),
    )


@router.get("/{produto_id}", response_model=ProductDetailResponse, responses=DETAIL_ERROR_RESPONSES)
def get_product(produto_id: str, db: Session = Depends(get_db)):
    """Get an active product by ID"""
    product_id = parse_path_id(produto_id, "ID do produto inválido")

    try:
        product = ProductRepository.get_by_id(db, product_id)
    except SQLAlchemyError:
        raise upstream_failure(logger, "produto")

    if not product:
        raise not_found("Produto não encontrado")

    return ProductDetailResponse(produto=ProductOut.model_validate(product))

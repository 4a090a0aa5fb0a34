"""
Store (loja) and salesperson (vendedor) endpoints.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import upstream_failure
from storefront.schemas.store import StoreOut, SalespersonOut, StoreListResponse, SalespersonListResponse
from storefront.services.store_repository import StoreRepository, SalespersonRepository
from storefront.services.placeholders import placeholder_salespeople

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Lojas"])


@router.get("/lojas", response_model=StoreListResponse)
def list_stores(db: Session = Depends(get_db)):
    """List active stores"""
    try:
        stores = StoreRepository.get_active(db)
    except SQLAlchemyError:
        raise upstream_failure(logger, "lojas")

    return StoreListResponse(lojas=[StoreOut.model_validate(s) for s in stores])


@router.get("/vendedores", response_model=SalespersonListResponse, response_model_exclude_none=True)
def list_salespeople(
    db: Session = Depends(get_db),
    loja_id: Optional[int] = Query(None, description="Only salespeople of this store"),
):
    """
    List active salespeople.

    Never fails: when the query cannot run, a fixed placeholder team is
    returned with ``fallback: true`` so the contact flow stays usable.
    """
    try:
        people = SalespersonRepository.get_active(db, loja_id=loja_id)
    except SQLAlchemyError:
        logger.error("Erro ao buscar vendedores, usando equipe de exemplo", exc_info=True)
        return SalespersonListResponse(
            vendedores=[SalespersonOut.model_validate(p) for p in placeholder_salespeople(loja_id)],
            fallback=True,
        )

    return SalespersonListResponse(vendedores=[SalespersonOut.model_validate(p) for p in people])

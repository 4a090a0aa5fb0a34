"""
API routers for the application.
"""

from fastapi import APIRouter
from storefront.routers import produtos, categorias, subcategorias, lojas, site
from storefront.schemas.common import ErrorResponse

api_router = APIRouter(responses={500: {"model": ErrorResponse}})

# Include routers
api_router.include_router(produtos.router)  # Product listing & detail
api_router.include_router(categorias.router)
api_router.include_router(subcategorias.router)
api_router.include_router(lojas.router)  # Stores & salespeople
api_router.include_router(site.router)  # Banners, social links, logos

__all__ = ["api_router", "produtos", "categorias", "subcategorias", "lojas", "site"]

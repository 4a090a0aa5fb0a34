"""
Async client for the catalog endpoints.

Every call is independent and recovers from its own failure: network errors,
non-2xx statuses and malformed payloads are logged and turned into an empty
collection or ``None``, so a view can always render something.
"""

import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from storefront.core.config import settings
from storefront.schemas.catalog import (
    CategoryOut,
    CategoryWithSubcategoriesOut,
    ProductOut,
    SubcategoryOut,
    ProductListResponse,
    ProductDetailResponse,
    CategoryListResponse,
    CategoryDetailResponse,
    SubcategoryListResponse,
    SubcategoryDetailResponse,
)
from storefront.schemas.site import (
    BannerOut,
    LogoOut,
    SocialLinkOut,
    BannerListResponse,
    LogoListResponse,
    SocialLinkListResponse,
)
from storefront.schemas.store import SalespersonOut, StoreOut, SalespersonListResponse, StoreListResponse
from storefront.services.placeholders import placeholder_salespeople

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache"}


def _query_params(params: Dict[str, Any]) -> Dict[str, str]:
    """Drop unset values, send true flags as "true" and lists as CSV."""
    clean = {}
    for key, value in params.items():
        if value is None or value is False:
            continue
        if value is True:
            clean[key] = "true"
        elif isinstance(value, (list, tuple)):
            if value:
                clean[key] = ",".join(str(v) for v in value)
        else:
            clean[key] = str(value)
    return clean


async def gather_settled(*awaitables: Awaitable) -> List[Any]:
    """
    Run fetches concurrently and wait for all of them.

    A fetch that raises yields ``None`` in its slot; the other results are
    kept.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    settled = []
    for result in results:
        if isinstance(result, BaseException):
            logger.error(f"Concurrent fetch failed: {result!r}")
            settled.append(None)
        else:
            settled.append(result)
    return settled


class CatalogClient:
    """Read-only client for the storefront catalog API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.catalog_api_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT,
            headers=NO_CACHE_HEADERS,
            transport=transport,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        try:
            response = await self._client.get(path, params=_query_params(params or {}))
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"GET {path} returned {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"GET {path} failed: {e!r}")
        except ValueError:
            logger.error(f"GET {path} returned a body that is not JSON")
        return None

    async def _get_model(self, path: str, schema: Type[M], params: Optional[Dict[str, Any]] = None) -> Optional[M]:
        data = await self._get_json(path, params)
        if data is None:
            return None
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f"GET {path} returned an unexpected payload: {e.error_count()} errors")
            return None

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(
        self,
        categoria: Optional[int] = None,
        subcategoria: Optional[int] = None,
        subcategorias: Optional[List[int]] = None,
        promocao: bool = False,
        novidade: bool = False,
        tipo_tinta: bool = False,
        tipo_eletrico: bool = False,
        status: Optional[str] = None,
        busca: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Optional[ProductListResponse]:
        """One page of products, or None when the fetch failed"""
        params = {
            "categoria": categoria,
            "subcategoria": subcategoria,
            "subcategorias": subcategorias,
            "promocao": promocao,
            "novidade": novidade,
            "tipo_tinta": tipo_tinta,
            "tipo_eletrico": tipo_eletrico,
            "status": status,
            "busca": busca,
            "page": page,
            "limit": limit,
        }
        return await self._get_model("/produtos", ProductListResponse, params)

    async def get_product(self, produto_id: int) -> Optional[ProductOut]:
        result = await self._get_model(f"/produtos/{produto_id}", ProductDetailResponse)
        return result.produto if result else None

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def list_categories(self, include_subcategorias: bool = False) -> List[CategoryWithSubcategoriesOut]:
        result = await self._get_model(
            "/categorias", CategoryListResponse, {"include_subcategorias": include_subcategorias}
        )
        return result.categorias if result else []

    async def get_category(self, categoria_id: int) -> Optional[CategoryOut]:
        result = await self._get_model(f"/categorias/{categoria_id}", CategoryDetailResponse)
        return result.categoria if result else None

    async def list_subcategories(self, categoria: Optional[int] = None) -> List[SubcategoryOut]:
        result = await self._get_model("/subcategorias", SubcategoryListResponse, {"categoria": categoria})
        return result.subcategorias if result else []

    async def get_subcategory(self, subcategoria_id: int) -> Optional[SubcategoryOut]:
        result = await self._get_model(f"/subcategorias/{subcategoria_id}", SubcategoryDetailResponse)
        return result.subcategoria if result else None

    # ------------------------------------------------------------------
    # Stores & salespeople
    # ------------------------------------------------------------------

    async def list_stores(self) -> List[StoreOut]:
        result = await self._get_model("/lojas", StoreListResponse)
        return result.lojas if result else []

    async def list_salespeople(self, loja_id: Optional[int] = None) -> Tuple[List[SalespersonOut], bool]:
        """
        Salespeople of a store and whether they are placeholders.

        Any failure substitutes the placeholder team so the contact flow can
        continue.
        """
        result = await self._get_model("/vendedores", SalespersonListResponse, {"loja_id": loja_id})
        if result is None:
            logger.warning(f"Using placeholder salespeople for store {loja_id}")
            people = [SalespersonOut.model_validate(p) for p in placeholder_salespeople(loja_id)]
            return people, True
        return result.vendedores, bool(result.fallback)

    # ------------------------------------------------------------------
    # Site content
    # ------------------------------------------------------------------

    async def list_banners(self, ativo: bool = True) -> List[BannerOut]:
        params = {} if ativo else {"ativo": "false"}
        result = await self._get_model("/banners", BannerListResponse, params)
        return result.banners if result else []

    async def list_social_links(self) -> List[SocialLinkOut]:
        result = await self._get_model("/redes-sociais", SocialLinkListResponse)
        return result.redesSociais if result else []

    async def list_logos(self, tipo: Optional[str] = None, posicao: Optional[str] = None) -> List[LogoOut]:
        result = await self._get_model("/logos", LogoListResponse, {"tipo": tipo, "posicao": posicao})
        return result.logos if result else []

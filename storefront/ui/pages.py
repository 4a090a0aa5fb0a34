"""
Page loaders.

Each loader issues its fetches concurrently and builds the page from whatever
came back; a failed fetch leaves its section empty instead of failing the
page.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from storefront.client.catalog_client import CatalogClient, gather_settled
from storefront.schemas.catalog import (
    CategoryOut,
    CategoryWithSubcategoriesOut,
    ProductListResponse,
    ProductOut,
    SubcategoryOut,
)
from storefront.schemas.site import BannerOut, LogoOut, SocialLinkOut
from storefront.schemas.store import StoreOut
from storefront.ui.cards import ProductCard
from storefront.ui.carousel import (
    CarouselConfig,
    CarouselEngine,
    BANNER_CAROUSEL,
    ELECTRICAL_CAROUSEL,
    OFFERS_CAROUSEL,
    PAINTS_CAROUSEL,
)
from storefront.utils.icons import social_icon_path
from storefront.utils.images import product_gallery

logger = logging.getLogger(__name__)

CAROUSEL_FETCH_LIMIT = 20
RELATED_PRODUCTS_LIMIT = 8
CATEGORY_PAGE_LIMIT = 100
PRODUCTS_PAGE_LIMIT = 50
ACTIVE_STATUS = "ativo"
PAINT_NAME_SEARCH_LIMIT = 50
PAINT_GENERAL_FALLBACK_LIMIT = 10
PAINT_NAME_KEYWORDS = ("tinta", "verniz", "esmalte", "primer", "pintura")

DEALS_TITLE = "Produtos em Promoção"
ALL_PRODUCTS_TITLE = "Todos os Produtos"

HEADER_LOGO = {"tipo": "azul", "posicao": "cabecalho"}
FOOTER_LOGO = {"tipo": "branca"}


def _products(page: Optional[ProductListResponse]) -> List[ProductOut]:
    return list(page.produtos) if page else []


def _card_carousel(products: List[ProductOut], config: CarouselConfig) -> CarouselEngine:
    return CarouselEngine([ProductCard.from_product(p) for p in products], config)


@dataclass
class HomePage:
    banners: CarouselEngine[BannerOut]
    offers: CarouselEngine[ProductCard]
    paints: CarouselEngine[ProductCard]
    electrical: CarouselEngine[ProductCard]
    categories: List[CategoryWithSubcategoriesOut] = field(default_factory=list)
    stores: List[StoreOut] = field(default_factory=list)
    social_links: List[SocialLinkOut] = field(default_factory=list)
    header_logo: Optional[LogoOut] = None
    footer_logo: Optional[LogoOut] = None

    def social_icons(self) -> List[Tuple[SocialLinkOut, str]]:
        """Footer links paired with the SVG path of their icon"""
        return [(link, social_icon_path(link.icone)) for link in self.social_links]


async def load_paint_products(client: CatalogClient) -> List[ProductOut]:
    """
    Products for the paints row.

    Falls back to name matching when nothing is flagged as paint, and to the
    first general products when the flagged fetch fails.
    """
    flagged = await client.list_products(tipo_tinta=True, limit=CAROUSEL_FETCH_LIMIT)
    if flagged is None:
        logger.warning("Paint products unavailable, showing general products")
        general = await client.list_products(limit=CAROUSEL_FETCH_LIMIT)
        return _products(general)[:PAINT_GENERAL_FALLBACK_LIMIT]
    if flagged.produtos:
        return list(flagged.produtos)

    logger.info("No product flagged as paint, matching by name")
    candidates = await client.list_products(limit=PAINT_NAME_SEARCH_LIMIT)
    matches = [
        p for p in _products(candidates)
        if any(keyword in p.nome.lower() for keyword in PAINT_NAME_KEYWORDS)
    ]
    return matches[:CAROUSEL_FETCH_LIMIT]


async def load_home_page(client: CatalogClient) -> HomePage:
    (banners, categories, stores, social_links, header_logos, footer_logos,
     offers, paints, electrical) = await gather_settled(
        client.list_banners(),
        client.list_categories(include_subcategorias=True),
        client.list_stores(),
        client.list_social_links(),
        client.list_logos(**HEADER_LOGO),
        client.list_logos(**FOOTER_LOGO),
        client.list_products(promocao=True, limit=CAROUSEL_FETCH_LIMIT),
        load_paint_products(client),
        client.list_products(tipo_eletrico=True, limit=CAROUSEL_FETCH_LIMIT),
    )

    footer_logo = footer_logos[0] if footer_logos else None
    if footer_logo is None:
        logger.debug("No footer logo variant, using the first active logo")
        any_logo = await client.list_logos()
        footer_logo = any_logo[0] if any_logo else None

    return HomePage(
        banners=CarouselEngine(banners or [], BANNER_CAROUSEL),
        offers=_card_carousel(_products(offers), OFFERS_CAROUSEL),
        paints=_card_carousel(paints or [], PAINTS_CAROUSEL),
        electrical=_card_carousel(_products(electrical), ELECTRICAL_CAROUSEL),
        categories=categories or [],
        stores=stores or [],
        social_links=social_links or [],
        header_logo=header_logos[0] if header_logos else None,
        footer_logo=footer_logo,
    )


@dataclass
class ProductPage:
    product: ProductOut
    card: ProductCard
    gallery: List[str] = field(default_factory=list)
    related: List[ProductCard] = field(default_factory=list)


async def load_product_page(client: CatalogClient, produto_id: int) -> Optional[ProductPage]:
    """Product detail plus other products of the same subcategory; None when not found."""
    product = await client.get_product(produto_id)
    if product is None:
        return None

    related: List[ProductCard] = []
    if product.subcategoria_id is not None:
        page = await client.list_products(
            subcategoria=product.subcategoria_id, limit=RELATED_PRODUCTS_LIMIT + 1
        )
        related = [
            ProductCard.from_product(p) for p in _products(page) if p.id != product.id
        ][:RELATED_PRODUCTS_LIMIT]

    return ProductPage(
        product=product,
        card=ProductCard.from_product(product),
        gallery=product_gallery(product),
        related=related,
    )


@dataclass
class CategoryPage:
    category: CategoryOut
    subcategories: List[SubcategoryOut] = field(default_factory=list)
    products: List[ProductCard] = field(default_factory=list)
    total: int = 0


async def load_category_page(client: CatalogClient, categoria_id: int) -> Optional[CategoryPage]:
    category, subcategories, page = await gather_settled(
        client.get_category(categoria_id),
        client.list_subcategories(categoria=categoria_id),
        client.list_products(categoria=categoria_id, limit=CATEGORY_PAGE_LIMIT),
    )
    if category is None:
        return None

    products = _products(page)
    return CategoryPage(
        category=category,
        subcategories=subcategories or [],
        products=[ProductCard.from_product(p) for p in products],
        total=page.pagination.total if page else 0,
    )


@dataclass
class SubcategoryPage:
    subcategory: SubcategoryOut
    products: List[ProductCard] = field(default_factory=list)
    total: int = 0


async def load_subcategory_page(client: CatalogClient, subcategoria_id: int) -> Optional[SubcategoryPage]:
    subcategory, page = await gather_settled(
        client.get_subcategory(subcategoria_id),
        client.list_products(subcategoria=subcategoria_id, status=ACTIVE_STATUS, limit=CATEGORY_PAGE_LIMIT),
    )
    if subcategory is None:
        return None

    return SubcategoryPage(
        subcategory=subcategory,
        products=[ProductCard.from_product(p) for p in _products(page)],
        total=page.pagination.total if page else 0,
    )


async def _nothing() -> None:
    return None


@dataclass
class ProductsPage:
    title: str
    category: Optional[CategoryOut] = None
    products: List[ProductCard] = field(default_factory=list)
    total: int = 0


async def load_products_page(
    client: CatalogClient,
    categoria: Optional[int] = None,
    subcategoria: Optional[int] = None,
    promocao: bool = False,
) -> ProductsPage:
    """
    Product listing driven by the page's query string.

    The title names the deals when ``promocao`` is set, otherwise the
    category when one is given and found.
    """
    filters = {"limit": PRODUCTS_PAGE_LIMIT}
    if categoria is not None:
        filters["categoria"] = categoria
    if subcategoria is not None:
        filters["subcategoria"] = subcategoria
    if promocao:
        filters["promocao"] = True

    category_lookup = client.get_category(categoria) if categoria is not None else _nothing()
    page, category = await gather_settled(client.list_products(**filters), category_lookup)

    if promocao:
        title = DEALS_TITLE
    elif category is not None:
        title = category.nome
    else:
        title = ALL_PRODUCTS_TITLE

    return ProductsPage(
        title=title,
        category=category,
        products=[ProductCard.from_product(p) for p in _products(page)],
        total=page.pagination.total if page else 0,
    )


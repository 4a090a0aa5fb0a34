"""
Schemas for the application.

This module exports all Pydantic models used to serialize API responses and to
parse them again on the client side.
"""

from storefront.schemas.common import Pagination, ErrorResponse

from storefront.schemas.catalog import (
    # Nested references
    CategoryRef,
    SubcategoryRef,
    # Category / Subcategory
    SubcategoryItem,
    CategoryOut,
    CategoryWithSubcategoriesOut,
    SubcategoryOut,
    # Product
    ProductOut,
    # Envelopes
    ProductListResponse,
    ProductDetailResponse,
    CategoryListResponse,
    CategoryDetailResponse,
    SubcategoryListResponse,
    SubcategoryDetailResponse,
)

from storefront.schemas.store import (
    StoreOut,
    SalespersonOut,
    StoreListResponse,
    SalespersonListResponse,
)

from storefront.schemas.site import (
    BannerOut,
    SocialLinkOut,
    LogoOut,
    BannerListResponse,
    SocialLinkListResponse,
    LogoListResponse,
)

__all__ = [
    "Pagination",
    "ErrorResponse",

    "CategoryRef",
    "SubcategoryRef",
    "SubcategoryItem",
    "CategoryOut",
    "CategoryWithSubcategoriesOut",
    "SubcategoryOut",
    "ProductOut",
    "ProductListResponse",
    "ProductDetailResponse",
    "CategoryListResponse",
    "CategoryDetailResponse",
    "SubcategoryListResponse",
    "SubcategoryDetailResponse",

    "StoreOut",
    "SalespersonOut",
    "StoreListResponse",
    "SalespersonListResponse",

    "BannerOut",
    "SocialLinkOut",
    "LogoOut",
    "BannerListResponse",
    "SocialLinkListResponse",
    "LogoListResponse",
]

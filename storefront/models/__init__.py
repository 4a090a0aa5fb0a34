"""
Database models for the application.
"""

from storefront.core.database import Base
from storefront.models.catalog import Category, Subcategory, Product, PRODUCT_ACTIVE_STATUS
from storefront.models.store import Store, Salesperson, STORE_ACTIVE_STATUS
from storefront.models.site import Banner, SocialLink, Logo

__all__ = [
    "Base",
    "Category",
    "Subcategory",
    "Product",
    "Store",
    "Salesperson",
    "Banner",
    "SocialLink",
    "Logo",
    "PRODUCT_ACTIVE_STATUS",
    "STORE_ACTIVE_STATUS",
]

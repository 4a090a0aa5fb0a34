"""
Client side of the catalog contract.
"""

from storefront.client.catalog_client import CatalogClient, gather_settled
from storefront.client.search import SearchSuggester

__all__ = ["CatalogClient", "gather_settled", "SearchSuggester"]

"""
Debounced product search suggestions.

Only the most recent query may update the suggestions: each request carries a
sequence number and any response whose number is no longer the latest is
dropped.
"""

import asyncio
import logging
from typing import List, Optional

from storefront.schemas.catalog import ProductOut

logger = logging.getLogger(__name__)

SEARCH_DEBOUNCE_SECONDS = 0.3
MIN_QUERY_LENGTH = 2


class SearchSuggester:
    """Suggestions for the header search box"""

    def __init__(self, client, debounce: float = SEARCH_DEBOUNCE_SECONDS, limit: int = 6,
                 min_length: int = MIN_QUERY_LENGTH):
        self.client = client
        self.debounce = debounce
        self.limit = limit
        self.min_length = min_length
        self.query = ""
        self.results: List[ProductOut] = []
        self._sequence = 0

    async def update(self, text: str) -> Optional[List[ProductOut]]:
        """
        Handle a keystroke.

        Returns the new suggestions, or None when this query was superseded
        before its results could be shown.
        """
        self._sequence += 1
        sequence = self._sequence
        text = (text or "").strip()
        self.query = text

        if len(text) < self.min_length:
            self.results = []
            return self.results

        await asyncio.sleep(self.debounce)
        if sequence != self._sequence:
            return None

        page = await self.client.list_products(busca=text, limit=self.limit)
        if sequence != self._sequence:
            logger.debug(f"Discarding stale suggestions for '{text}'")
            return None

        self.results = list(page.produtos) if page else []
        return self.results

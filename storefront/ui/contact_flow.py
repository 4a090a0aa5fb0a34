"""
"Talk to a salesperson" popup.

Two screens: pick a store, then pick one of its salespeople; picking a
salesperson opens a chat link with a prefilled message and closes the popup.
Nothing survives a close: reopening loads the stores again.
"""

import enum
import logging
import webbrowser
from typing import Callable, List, Optional
from urllib.parse import quote

from storefront.core.config import settings
from storefront.schemas.store import SalespersonOut, StoreOut

logger = logging.getLogger(__name__)

# same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ContactFlowState(str, enum.Enum):
    CLOSED = "closed"
    SELECTING_STORE = "selecting_store"
    SELECTING_SALESPERSON = "selecting_salesperson"


class InvalidTransition(Exception):
    """Operation not allowed in the current popup state"""


def build_contact_message(product_name: Optional[str] = None, brand: Optional[str] = None) -> str:
    if product_name:
        return f"Olá! Gostaria de mais informações sobre o produto: {product_name}"
    return f"Olá! Gostaria de mais informações sobre os produtos da {brand or settings.BRAND_NAME}."


def build_whatsapp_link(handle: str, message: str, country_code: Optional[str] = None) -> str:
    """Chat deep link; the handle is used exactly as stored."""
    code = settings.WHATSAPP_COUNTRY_CODE if country_code is None else country_code
    return f"https://wa.me/{code}{handle}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


class ContactFlow:
    """State machine behind the store/salesperson popup"""

    def __init__(self, client, product_name: Optional[str] = None,
                 opener: Callable[[str], object] = webbrowser.open_new_tab):
        self.client = client
        self.product_name = product_name
        self.opener = opener
        self.state = ContactFlowState.CLOSED
        self.loading = False
        # bumped by every screen change; a fetch that finishes under another
        # generation is discarded
        self._generation = 0
        self._reset()

    def _reset(self) -> None:
        self.stores: List[StoreOut] = []
        self.selected_store: Optional[StoreOut] = None
        self.salespeople: List[SalespersonOut] = []
        self.using_fallback = False

    def _require(self, state: ContactFlowState, action: str) -> None:
        if self.state is not state:
            raise InvalidTransition(f"Cannot {action} while {self.state.value}")

    def _advance(self) -> int:
        self._generation += 1
        return self._generation

    async def open(self) -> List[StoreOut]:
        self._require(ContactFlowState.CLOSED, "open")
        self._reset()
        self.state = ContactFlowState.SELECTING_STORE
        generation = self._advance()
        self.loading = True
        try:
            stores = await self.client.list_stores()
        finally:
            if generation == self._generation:
                self.loading = False
        if generation != self._generation:
            logger.debug("Popup closed while loading stores, dropping the result")
            return []
        self.stores = stores
        return self.stores

    async def select_store(self, store: StoreOut) -> List[SalespersonOut]:
        self._require(ContactFlowState.SELECTING_STORE, "select a store")
        self.selected_store = store
        self.state = ContactFlowState.SELECTING_SALESPERSON
        generation = self._advance()
        self.loading = True
        try:
            salespeople, using_fallback = await self.client.list_salespeople(loja_id=store.id)
        finally:
            if generation == self._generation:
                self.loading = False
        if generation != self._generation:
            logger.debug(f"Left store {store.id} while loading salespeople, dropping the result")
            return []
        self.salespeople, self.using_fallback = salespeople, using_fallback
        return self.salespeople

    def back(self) -> None:
        self._require(ContactFlowState.SELECTING_SALESPERSON, "go back")
        self._advance()
        self.loading = False
        self.selected_store = None
        self.salespeople = []
        self.using_fallback = False
        self.state = ContactFlowState.SELECTING_STORE

    def select_salesperson(self, person: SalespersonOut) -> str:
        """Open the chat link for ``person`` and close the popup; returns the link."""
        self._require(ContactFlowState.SELECTING_SALESPERSON, "select a salesperson")
        link = build_whatsapp_link(person.whatsapp, build_contact_message(self.product_name))
        logger.info(f"Opening chat with salesperson {person.id}")
        self.opener(link)
        self.close()
        return link

    def close(self) -> None:
        self._advance()
        self._reset()
        self.loading = False
        self.state = ContactFlowState.CLOSED

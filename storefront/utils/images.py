"""
Image URL resolution for product, store and banner imagery.

Every card and gallery goes through ``resolve_image_url`` so all views build
the same URL for the same stored path.
"""

import base64
import logging
from typing import List, Optional

from storefront.core.config import settings

logger = logging.getLogger(__name__)

_PLACEHOLDER_SVG = """<svg width="200" height="200" xmlns="http://www.w3.org/2000/svg">
  <rect width="200" height="200" fill="#f8f9fa"/>
  <defs>
    <linearGradient id="brandGradient" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:#3b82f6;stop-opacity:1" />
      <stop offset="100%" style="stop-color:#1e40af;stop-opacity:1" />
    </linearGradient>
  </defs>
  <circle cx="100" cy="80" r="35" fill="url(#brandGradient)" opacity="0.1"/>
  <circle cx="60" cy="130" r="20" fill="url(#brandGradient)" opacity="0.08"/>
  <circle cx="140" cy="130" r="25" fill="url(#brandGradient)" opacity="0.08"/>
  <text x="100" y="105" font-family="Arial, sans-serif" font-size="16" font-weight="bold" fill="url(#brandGradient)" text-anchor="middle">TURATTI</text>
  <text x="100" y="125" font-family="Arial, sans-serif" font-size="12" fill="#6b7280" text-anchor="middle">Material de Construção</text>
</svg>"""

PLACEHOLDER_IMAGE = "data:image/svg+xml;base64," + base64.b64encode(_PLACEHOLDER_SVG.encode("utf-8")).decode("ascii")

_UNSET = object()


def placeholder_image() -> str:
    """Inline brand-mark graphic; renders without any network request."""
    return PLACEHOLDER_IMAGE


def resolve_image_url(path: Optional[str], base_url=_UNSET, bucket: Optional[str] = None) -> str:
    """
    Build the display URL for a stored image path.

    Args:
        path: Stored path, an absolute URL, or nothing
        base_url: Storage base URL; defaults to the configured one
        bucket: Public storage bucket; defaults to the configured one

    Returns:
        The absolute URL unchanged, the public object URL for a relative
        path, or the placeholder when there is no path or no storage base URL
    """
    if not path or not path.strip():
        return placeholder_image()

    path = path.strip()
    if path.startswith("http://") or path.startswith("https://"):
        return path

    if path.startswith("/"):
        path = path[1:]

    if base_url is _UNSET:
        base_url = settings.storage_base_url
    if not base_url:
        logger.warning("Storage base URL not configured, using placeholder image")
        return placeholder_image()

    return f"{base_url.rstrip('/')}/storage/v1/object/public/{bucket or settings.STORAGE_BUCKET}/{path}"


def product_image_paths(product) -> List[str]:
    """
    Stored image paths of a product, main image first.

    ``imagem_principal_index`` (1-based) picks which of the four slots is the
    main image; empty slots are skipped.
    """
    slots = [
        getattr(product, "imagem_principal", None),
        getattr(product, "imagem_2", None),
        getattr(product, "imagem_3", None),
        getattr(product, "imagem_4", None),
    ]
    main_index = getattr(product, "imagem_principal_index", None)
    if main_index and 1 <= main_index <= len(slots) and slots[main_index - 1]:
        main = slots.pop(main_index - 1)
        slots.insert(0, main)

    return [s for s in slots if s]


def product_gallery(product, base_url=_UNSET) -> List[str]:
    """Resolved gallery URLs; a single placeholder when the product has no images."""
    paths = product_image_paths(product)
    if not paths:
        return [placeholder_image()]
    return [resolve_image_url(p, base_url=base_url) for p in paths]

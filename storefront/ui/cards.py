"""
Product card view model: the values a card displays, computed once per product.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from storefront.schemas.catalog import ProductOut
from storefront.ui.countdown import Countdown
from storefront.utils.formatters import format_currency, discount_percent, is_deal, abbreviate_name
from storefront.utils.images import resolve_image_url, product_image_paths


@dataclass
class ProductCard:
    id: int
    title: str
    full_name: str
    price_text: str
    image_url: str
    sale_price_text: Optional[str] = None
    discount: Optional[int] = None
    countdown: Optional[Countdown] = None
    badges: List[str] = field(default_factory=list)
    product: Optional[ProductOut] = None

    @property
    def on_sale(self) -> bool:
        return self.sale_price_text is not None

    @classmethod
    def from_product(cls, product: ProductOut, max_words: int = 4, **image_kwargs) -> "ProductCard":
        """
        Build a card.

        The sale price and discount badge only appear for a real deal (sale
        flag, sale price, positive discount); the countdown only when the
        deal has an end date.
        """
        discount = None
        sale_price_text = None
        countdown = None
        if product.on_sale and is_deal(product.preco, product.preco_promocao):
            discount = discount_percent(product.preco, product.preco_promocao)
            sale_price_text = format_currency(product.preco_promocao)
            if product.promocao_data_fim is not None:
                countdown = Countdown(product.promocao_data_fim)

        paths = product_image_paths(product)
        image_url = resolve_image_url(paths[0] if paths else None, **image_kwargs)

        badges = []
        if product.novidade:
            badges.append("Novidade")
        if product.tipo_eletrico and product.voltagem:
            badges.append(product.voltagem)

        return cls(
            id=product.id,
            title=abbreviate_name(product.nome, max_words),
            full_name=product.nome,
            price_text=format_currency(product.preco),
            image_url=image_url,
            sale_price_text=sale_price_text,
            discount=discount,
            countdown=countdown,
            badges=badges,
            product=product,
        )

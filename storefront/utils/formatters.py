"""
Display formatters for prices, discounts and product names.

All functions are total: missing or non-finite numbers are treated as zero
instead of leaking "NaN" into the page.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]

CURRENCY_SYMBOL = "R$"
NBSP = "\u00a0"


def _finite(value: Optional[Number]) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        dec = Decimal(str(value))
    except (ArithmeticError, ValueError):
        return None
    if not dec.is_finite():
        return None
    return dec


def format_currency(amount: Optional[Number]) -> str:
    """
    Format an amount as Brazilian Real: ``R$ 1.234,50``.

    Two fraction digits, ``.`` between thousands, ``,`` before the cents and
    a non-breaking space after the symbol. Negative amounts read ``-R$ 1,00``.
    """
    dec = _finite(amount)
    if dec is None:
        dec = Decimal(0)

    dec = dec.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if dec < 0 else ""
    whole, cents = f"{abs(dec):.2f}".split(".")
    grouped = f"{int(whole):,}".replace(",", ".")

    return f"{sign}{CURRENCY_SYMBOL}{NBSP}{grouped},{cents}"


def discount_percent(list_price: Optional[Number], sale_price: Optional[Number]) -> int:
    """
    Whole-number discount of a sale price against the list price.

    Half-up rounding of ``(list - sale) / list * 100``. Returns 0 when the list
    price is not positive or either price is missing. A sale price at or above
    the list price gives a non-positive value; see ``is_deal``.
    """
    list_dec = _finite(list_price)
    sale_dec = _finite(sale_price)
    if list_dec is None or sale_dec is None or list_dec <= 0:
        return 0

    percent = (list_dec - sale_dec) / list_dec * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_deal(list_price: Optional[Number], sale_price: Optional[Number]) -> bool:
    """True only when the sale price gives a positive discount."""
    return discount_percent(list_price, sale_price) > 0


def abbreviate_name(name: Optional[str], max_words: int = 4) -> str:
    """Keep the first ``max_words`` words of a product name for card titles."""
    if not name:
        return ""
    words = name.split()
    if len(words) <= max_words:
        return name
    return " ".join(words[:max_words])


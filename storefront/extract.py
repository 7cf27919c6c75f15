"""Turn snapshots of a product card or the product modal into cart lines."""
import re
import time

from .models import CardFields, CartLineItem, ModalFields

DEFAULT_SIZE = "M"

_NOT_NUMERIC = re.compile(r"[^\d.]")
_LEADING_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LEADING_INT = re.compile(r"[+-]?\d+")


class ExtractionError(ValueError):
    pass


def parse_price(text: str) -> float:
    """Read a displayed price such as "$1,299.90" as 1299.9.

    Everything but digits and dots is dropped first, then the leading
    decimal number is read, so "1.2.3" gives 1.2.
    """
    match = _LEADING_DECIMAL.match(_NOT_NUMERIC.sub("", text or ""))
    if not match:
        raise ExtractionError(f"No price in {text!r}")
    return float(match.group())


def parse_quantity(text) -> int:
    match = _LEADING_INT.match(str(text or "").strip())
    if not match:
        return 1
    return max(int(match.group()), 1)


def synthetic_id() -> str:
    return str(int(time.time() * 1000))


def product_from_card(fields: CardFields) -> CartLineItem:
    return CartLineItem(
        id=fields.product_id or synthetic_id(),
        name=fields.name,
        price=parse_price(fields.price),
        image=fields.image,
        size=DEFAULT_SIZE,
        quantity=1,
    )


def product_from_modal(fields: ModalFields) -> CartLineItem:
    return CartLineItem(
        id=fields.product_id or synthetic_id(),
        name=fields.name,
        price=parse_price(fields.price),
        image=fields.image or "",
        size=fields.size or DEFAULT_SIZE,
        quantity=parse_quantity(fields.quantity),
    )

"""
Cart quantity rules shared by every storage backend.

A cart maps item names to positive integer quantities. Absence of a key means
quantity 0, so a non-positive quantity removes the item instead of storing it.
"""

from __future__ import annotations

from typing import Any

from foodcart.core.errors import ValidationError
from foodcart.core.utils import is_text


def parse_quantity(value: Any) -> int:
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Quantity must be an integer")
    return value


def apply_quantity(cart: dict[str, int], item: str, quantity: int) -> dict[str, int]:
    if quantity <= 0:
        cart.pop(item, None)
    else:
        cart[item] = quantity
    return cart


def normalize_cart(raw: Any) -> dict[str, int]:
    """Validate a whole-cart payload and drop non-positive entries."""
    if not isinstance(raw, dict):
        raise ValidationError("Cart must map item names to integer quantities")
    cart: dict[str, int] = {}
    for item, value in raw.items():
        if not is_text(item, blank_ok=True):
            raise ValidationError("Cart must map item names to integer quantities")
        try:
            quantity = parse_quantity(value)
        except ValidationError:
            raise ValidationError("Cart must map item names to integer quantities") from None
        apply_quantity(cart, item, quantity)
    return cart

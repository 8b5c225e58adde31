"""Per-user cart use cases: read, single-item update, whole-cart replace, purchase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging

from foodcart.core.errors import ValidationError
from foodcart.core.utils import is_text
from foodcart.domain.cart import normalize_cart, parse_quantity

logger = logging.getLogger(__name__)


@dataclass
class CartService:
    repository: Any

    def _username(self, username: Any) -> str:
        if not is_text(username):
            raise ValidationError("Username is required")
        return username

    def get_cart(self, username: Any) -> dict[str, int]:
        return self.repository.get_cart(self._username(username))

    def update_item(self, username: Any, item: Any, quantity: Any) -> dict[str, int]:
        if not (is_text(username) and is_text(item)) or quantity is None:
            raise ValidationError("Username, item, and quantity are required")
        cart = self.repository.set_cart_item(username, item, parse_quantity(quantity))
        logger.info("Updated cart for %s: %s", username, cart)
        return cart

    def replace_cart(self, username: Any, cart: Any) -> dict[str, int]:
        username = self._username(username)
        stored = self.repository.replace_cart(username, normalize_cart(cart))
        logger.info("Replaced cart for %s: %s", username, stored)
        return stored

    def purchase(self, username: Any) -> None:
        username = self._username(username)
        self.repository.replace_cart(username, {})
        logger.info("Purchase completed for %s", username)

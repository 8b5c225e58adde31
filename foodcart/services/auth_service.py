"""
Registration and login against the user store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging

from foodcart.core.errors import AuthError, ConflictError, ValidationError
from foodcart.core.security import hash_password, is_hashed, verify_password
from foodcart.core.utils import is_text

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Handles registration, login and the user listing."""

    repository: Any

    def _credentials(self, username: Any, password: Any) -> tuple[str, str]:
        if not (is_text(username) and is_text(password, blank_ok=True)):
            raise ValidationError("Username and password are required")
        return username, password

    def register(self, username: Any, password: Any) -> None:
        username, password = self._credentials(username, password)
        if not self.repository.add_user(username, hash_password(password)):
            raise ConflictError("Username already exists")
        # separate document: a failure here leaves the user without a cart entry
        self.repository.replace_cart(username, {})
        logger.info("Registered user %s", username)

    def login(self, username: Any, password: Any) -> None:
        username, password = self._credentials(username, password)
        user = self.repository.get_user(username)
        if not user or not verify_password(password, user.get("password")):
            raise AuthError("Invalid credentials")
        if not is_hashed(user.get("password")):
            self.repository.update_user_password(username, hash_password(password))
            logger.info("Upgraded legacy password for %s", username)

    def list_users(self) -> list[dict]:
        return [{"username": name} for name in self.repository.list_usernames()]

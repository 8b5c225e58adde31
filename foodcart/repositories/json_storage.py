"""
JSON document persistence.

users.json holds an array of {username, password} records and cart.json maps
each username to its {item: quantity} cart. Every change rewrites the whole
document: the new content goes to a temporary sibling file which then replaces
the target, so a failed write leaves the previous document in place.

Read-modify-write cycles run under a lock per file, shared by every store that
points at the same path, so overlapping requests in this process cannot lose
each other's updates. Separate processes sharing a data directory are not
coordinated.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional
import copy
import json
import logging
import os
import threading

from foodcart.core.errors import StartupError, StorageError
from foodcart.domain.cart import apply_quantity

logger = logging.getLogger(__name__)

_LOCKS: dict[Path, threading.Lock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(path, threading.Lock())


class JsonDocumentStore:
    """One JSON file read and written as a whole."""

    def __init__(self, path: Path, default: Any) -> None:
        self.path = Path(path).resolve()
        self.default = default
        self._lock = _lock_for(self.path)

    def initialize(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self._replace(json.dumps(self.default, indent=2).encode("utf-8"))
                logger.info("Created %s", self.path)
        except OSError as exc:
            raise StartupError(f"Cannot initialize {self.path}: {exc}") from exc

    def read(self) -> Any:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path.name}: {exc}") from exc
        except ValueError as exc:
            raise StorageError(f"Invalid JSON in {self.path.name}: {exc}") from exc

    def write(self, document: Any) -> None:
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialize {self.path.name}: {exc}") from exc
        try:
            self._replace(payload)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path.name}: {exc}") from exc

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        """Yield the parsed document under the file lock; persist it if the block changed it."""
        with self._lock:
            document = self.read()
            before = copy.deepcopy(document)
            yield document
            if document != before:
                self.write(document)

    def _replace(self, payload: bytes) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with tmp.open("wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise


def _checked(document: Any, kind: type, name: str) -> Any:
    if not isinstance(document, kind):
        raise StorageError(f"Unexpected content in {name}: expected {kind.__name__}")
    return document


class JsonRepository:
    """Users and carts kept in two independent JSON documents."""

    def __init__(self, data_dir: Path) -> None:
        data_dir = Path(data_dir)
        self.stores = {
            "users": JsonDocumentStore(data_dir / "users.json", []),
            "carts": JsonDocumentStore(data_dir / "cart.json", {}),
        }

    def _store(self, name: str) -> JsonDocumentStore:
        try:
            return self.stores[name]
        except KeyError:
            raise ValueError(f"Unknown store: {name}") from None

    # -------------------------- primitives --------------------------
    def initialize(self) -> None:
        for store in self.stores.values():
            store.initialize()

    def read(self, name: str) -> Any:
        return self._store(name).read()

    def write(self, name: str, document: Any) -> None:
        self._store(name).write(document)

    # -------------------------- users --------------------------
    def get_user(self, username: str) -> Optional[dict]:
        users = _checked(self.read("users"), list, "users.json")
        for record in users:
            if isinstance(record, dict) and record.get("username") == username:
                return dict(record)
        return None

    def add_user(self, username: str, password: str) -> bool:
        with self.stores["users"].transaction() as users:
            _checked(users, list, "users.json")
            if any(isinstance(r, dict) and r.get("username") == username for r in users):
                return False
            users.append({"username": username, "password": password})
        return True

    def update_user_password(self, username: str, password: str) -> None:
        with self.stores["users"].transaction() as users:
            for record in _checked(users, list, "users.json"):
                if isinstance(record, dict) and record.get("username") == username:
                    record["password"] = password

    def list_usernames(self) -> list[str]:
        users = _checked(self.read("users"), list, "users.json")
        return [r["username"] for r in users if isinstance(r, dict) and "username" in r]

    # -------------------------- carts --------------------------
    def get_cart(self, username: str) -> dict[str, int]:
        carts = _checked(self.read("carts"), dict, "cart.json")
        cart = carts.get(username)
        return dict(cart) if isinstance(cart, dict) else {}

    def set_cart_item(self, username: str, item: str, quantity: int) -> dict[str, int]:
        with self.stores["carts"].transaction() as carts:
            _checked(carts, dict, "cart.json")
            cart = carts.get(username)
            if not isinstance(cart, dict):
                cart = carts[username] = {}
            apply_quantity(cart, item, quantity)
            return dict(cart)

    def replace_cart(self, username: str, cart: dict[str, int]) -> dict[str, int]:
        with self.stores["carts"].transaction() as carts:
            _checked(carts, dict, "cart.json")
            carts[username] = dict(cart)
            return dict(cart)

"""
Persistence adapters.

JsonRepository (users.json + cart.json) is the default; SQLRepository stores
the same data through SQLAlchemy. Services depend only on the methods both
share, never on the files or tables directly.
"""

from __future__ import annotations

from foodcart.core.config import Settings
from foodcart.core.errors import StartupError


def build_repository(settings: Settings):
    backend = settings.storage_backend
    if backend == "json":
        from foodcart.repositories.json_storage import JsonRepository

        return JsonRepository(settings.data_dir)
    if backend == "sql":
        from foodcart.repositories.sql_repository import SQLRepository

        return SQLRepository(settings.database_url)
    raise StartupError(f"Unknown STORAGE_BACKEND: {backend}")

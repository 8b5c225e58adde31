"""One-off migration script: users.json + cart.json -> SQL (DATABASE_URL)."""
from __future__ import annotations

from pathlib import Path
import logging
import sys

# Garantir que o pacote foodcart seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodcart.core.config import get_settings  # noqa: E402
from foodcart.core.logs import configure_logging  # noqa: E402
from foodcart.core.utils import is_text  # noqa: E402
from foodcart.domain.cart import apply_quantity  # noqa: E402
from foodcart.repositories.json_storage import JsonRepository  # noqa: E402
from foodcart.repositories.sql_repository import SQLRepository  # noqa: E402

logger = logging.getLogger("migrate_json_to_sql")


def _quantity(value) -> int | None:
    # o servidor antigo gravava o que recebia: "2" vira 2, o resto é descartado
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _clean_cart(username: str, raw) -> dict[str, int]:
    if not isinstance(raw, dict):
        logger.warning("Carrinho de %s ignorado: %r", username, raw)
        return {}
    cart: dict[str, int] = {}
    for item, value in raw.items():
        quantity = _quantity(value)
        if not is_text(item, blank_ok=True) or quantity is None:
            logger.warning("Item ignorado no carrinho de %s: %r=%r", username, item, value)
            continue
        apply_quantity(cart, item, quantity)
    return cart


def migrate(data_dir: Path | None = None, database_url: str | None = None) -> tuple[int, int]:
    settings = get_settings()
    source = JsonRepository(data_dir or settings.data_dir)
    target = SQLRepository(database_url or settings.database_url)
    target.initialize()

    users = 0
    for record in source.read("users"):
        username = record.get("username") if isinstance(record, dict) else None
        if not is_text(username):
            logger.warning("Usuario ignorado: %r", record)
            continue
        password = record.get("password")
        if not isinstance(password, str):
            # senhas não textuais nunca casam no login; o registro entra sem senha
            logger.warning("Senha invalida para %s; migrado sem senha", username)
            password = ""
        # senhas copiadas como estão (hash ou texto puro legado)
        if target.add_user(username, password):
            users += 1

    carts = 0
    for username, cart in (source.read("carts") or {}).items():
        target.replace_cart(username, _clean_cart(username, cart))
        carts += 1
    target.dispose()
    return users, carts


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    migrated_users, migrated_carts = migrate()
    print(f"JSON data migrated to SQL successfully ({migrated_users} users, {migrated_carts} carts).")

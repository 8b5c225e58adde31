#!/usr/bin/env python3
"""
Esvaziar o carrinho de um usuario.

Uso:
  python scripts/reset_cart.py --username alice
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodcart.core.config import get_settings  # noqa: E402
from foodcart.core.logs import configure_logging  # noqa: E402
from foodcart.repositories import build_repository  # noqa: E402
from foodcart.services.cart_service import CartService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Esvaziar carrinho")
    ap.add_argument("--username", required=True, help="Usuario dono do carrinho")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = build_repository(settings)
    repo.initialize()
    service = CartService(repo)
    previous = service.get_cart(args.username)
    service.purchase(args.username)

    print("OK: carrinho esvaziado")
    print(f"  Usuario: {args.username}")
    for item, quantity in previous.items():
        print(f"  Removido: {item} x{quantity}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)

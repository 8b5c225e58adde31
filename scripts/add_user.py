#!/usr/bin/env python3
"""
Cadastrar um usuario diretamente no armazenamento configurado (JSON ou SQL).

Uso:
  python scripts/add_user.py --username alice [--password segredo]
"""
from __future__ import annotations

import argparse
import secrets
import sys
from pathlib import Path

# Garantir que o pacote foodcart seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodcart.core.config import get_settings  # noqa: E402
from foodcart.core.logs import configure_logging  # noqa: E402
from foodcart.core.errors import AppError  # noqa: E402
from foodcart.repositories import build_repository  # noqa: E402
from foodcart.services.auth_service import AuthService  # noqa: E402


def gen_password(length: int = 12) -> str:
    return secrets.token_urlsafe(length)[:length]


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario")
    ap.add_argument("--username", required=True, help="Nome de usuario (ex.: alice)")
    ap.add_argument("--password", help="Senha (default: aleatoria)")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = build_repository(settings)
    repo.initialize()
    password = (args.password or "").strip() or gen_password()
    try:
        AuthService(repo).register(args.username, password)
    except AppError as exc:
        raise SystemExit(exc.message)

    print("OK: usuario cadastrado")
    print(f"  Usuario: {args.username}")
    if not args.password:
        print(f"  Senha: {password}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote foodcart seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodcart.app import create_app  # noqa: E402
from foodcart.core import config as core_config  # noqa: E402
from foodcart.repositories.json_storage import JsonRepository  # noqa: E402


@pytest.fixture()
def data_env(tmp_path, monkeypatch):
    """Aponta DATA_DIR para um diretório temporário e reseta o cache de settings."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path / "public"))
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    core_config.get_settings.cache_clear()
    yield data_dir
    core_config.get_settings.cache_clear()


@pytest.fixture()
def repo(tmp_path):
    repository = JsonRepository(tmp_path / "data")
    repository.initialize()
    return repository


@pytest.fixture()
def client(data_env):
    with TestClient(create_app()) as test_client:
        yield test_client

import os

# Avant l'import de l'app: pas de Redis pendant les tests
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from photostore import config
from photostore.asgi import app as fastapi_app

SQUARE_TEST_CONFIG = {
    "SQUARE_ACCESS_TOKEN": "EAAAtest-token",
    "SQUARE_APPLICATION_ID": "sandbox-sq0idb-test-app",
    "SQUARE_LOCATION_ID": "LTEST123",
    "SQUARE_ENVIRONMENT": "sandbox",
}


# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def app():
    return fastapi_app


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


# Par défaut Square n'est pas configuré: aucun test ne peut atteindre le vrai réseau
@pytest.fixture(autouse=True)
def _no_square_by_default(monkeypatch):
    monkeypatch.setattr(config, "SQUARE_ACCESS_TOKEN", "")
    monkeypatch.setattr(config, "SQUARE_APPLICATION_ID", "")
    monkeypatch.setattr(config, "SQUARE_LOCATION_ID", "")
    monkeypatch.setattr(config, "SQUARE_ENVIRONMENT", "sandbox")
    monkeypatch.delenv("LOCAL_RATE_LIMIT_FALLBACK", raising=False)


@pytest.fixture
def square_config(monkeypatch):
    """Identifiants Square factices (sandbox)."""
    for name, value in SQUARE_TEST_CONFIG.items():
        monkeypatch.setattr(config, name, value)
    return dict(SQUARE_TEST_CONFIG)

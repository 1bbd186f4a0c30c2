from fastapi.testclient import TestClient

from photostore import config


def test_config_unconfigured(client: TestClient):
    r = client.get("/api/config")
    assert r.status_code == 200
    assert r.json() == {
        "squareApplicationId": "",
        "squareLocationId": "",
        "squareConfigured": False,
        "squareEnvironment": "sandbox",
    }


def test_config_configured(client: TestClient, square_config):
    body = client.get("/api/config").json()
    assert body["squareConfigured"] is True
    assert body["squareApplicationId"] == square_config["SQUARE_APPLICATION_ID"]
    assert body["squareLocationId"] == square_config["SQUARE_LOCATION_ID"]


def test_config_needs_application_id(client: TestClient, square_config, monkeypatch):
    monkeypatch.setattr(config, "SQUARE_APPLICATION_ID", "")
    assert client.get("/api/config").json()["squareConfigured"] is False


def test_health_unconfigured(client: TestClient):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["squareConfigured"] is False
    # DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1 dans conftest
    assert body["rateLimit"]["enabled"] is False


def test_health_needs_only_token_and_location(client: TestClient, square_config, monkeypatch):
    monkeypatch.setattr(config, "SQUARE_APPLICATION_ID", "")
    assert client.get("/api/health").json()["squareConfigured"] is True

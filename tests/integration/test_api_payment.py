import pytest
from fastapi.testclient import TestClient

from photostore.errors import GatewayError
from photostore.payments import square_client


@pytest.fixture
def square_calls(monkeypatch):
    """Remplace l'appel HTTP Square; enregistre les corps envoyés."""
    calls = []

    def _fake_create_payment(body, *, client=None):
        calls.append(body)
        return {
            "id": "pay_123",
            "status": "COMPLETED",
            "amount_money": body["amount_money"],
            "receipt_url": "https://squareupsandbox.com/receipt/preview/pay_123",
        }

    monkeypatch.setattr(square_client, "create_payment", _fake_create_payment)
    return calls


def test_payment_success(client: TestClient, square_config, square_calls):
    r = client.post("/api/payment", json={"sourceId": "cnon:card-nonce-ok", "amount": 10497, "orderId": "ord-1"})
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "payment": {
            "id": "pay_123",
            "status": "COMPLETED",
            "amount": 10497,
            "currency": "USD",
            "receiptUrl": "https://squareupsandbox.com/receipt/preview/pay_123",
        },
    }
    assert square_calls[0]["note"] == "Photo Store Order: ord-1"


@pytest.mark.parametrize(
    "payload,message",
    [
        ({"amount": 100}, "Missing required payment information"),
        ({"sourceId": "cnon:x"}, "Missing required payment information"),
        ({"sourceId": "cnon:x", "amount": 0}, "Invalid amount: must be a positive integer in cents"),
        ({"sourceId": "cnon:x", "amount": -100}, "Invalid amount: must be a positive integer in cents"),
        ({"sourceId": "cnon:x", "amount": 10.5}, "Invalid amount: must be a positive integer in cents"),
        ({"sourceId": "cnon:x", "amount": 100, "currency": "US"}, "Invalid currency: must be a 3-letter code (e.g., USD)"),
        ({"sourceId": "cnon:x", "amount": 100, "currency": "usdx"}, "Invalid currency: must be a 3-letter code (e.g., USD)"),
    ],
)
def test_invalid_payment_is_400_without_square_call(client: TestClient, square_config, square_calls, payload, message):
    r = client.post("/api/payment", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": message}
    assert square_calls == []


def test_whole_float_amount_is_charged_as_integer(client: TestClient, square_config, square_calls):
    r = client.post("/api/payment", json={"sourceId": "cnon:card-nonce-ok", "amount": 10497.0})
    assert r.status_code == 200
    assert square_calls[0]["amount_money"] == {"amount": 10497, "currency": "USD"}
    assert r.json()["payment"]["amount"] == 10497


def test_unconfigured_gateway_is_500(client: TestClient, square_calls):
    r = client.post("/api/payment", json={"sourceId": "cnon:x", "amount": 100})
    assert r.status_code == 500
    assert r.json() == {"error": "Square payment system is not configured"}
    assert square_calls == []


def test_gateway_error_keeps_payment_result_shape(client: TestClient, square_config, monkeypatch):
    def _declined(body, *, client=None):
        raise GatewayError("Card declined.")

    monkeypatch.setattr(square_client, "create_payment", _declined)
    r = client.post("/api/payment", json={"sourceId": "cnon:x", "amount": 100})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Card declined."}

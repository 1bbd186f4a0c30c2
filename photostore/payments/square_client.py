"""
Adaptateur Square: centralise les appels et la configuration de l'API Payments.
- Appels REST directs via httpx (POST /v2/payments), timeout explicite.
- Toute erreur Square (HTTP >= 400, réponse illisible, erreur réseau) devient GatewayError.
"""
from typing import Any, Dict, Optional
import logging

import httpx

from photostore import config
from photostore.errors import ConfigurationError, GatewayError

logger = logging.getLogger(__name__)

PAYMENTS_PATH = "/v2/payments"
NOTE_MAX_LENGTH = 500

# module photostore.payments.square_client
def require_square() -> None:
    """
    Vérifie que le serveur peut débiter une carte.
    - SQUARE_LOCATION_ID et SQUARE_ACCESS_TOKEN doivent être présents.
    - Soulève ConfigurationError sans tenter d'appel réseau sinon.
    """
    if not config.SQUARE_LOCATION_ID or not config.SQUARE_ACCESS_TOKEN:
        raise ConfigurationError("Square payment system is not configured")


def build_payment_body(
    *,
    source_id: str,
    amount: int,
    currency: str,
    idempotency_key: str,
    order_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Construit le corps CreatePayment attendu par Square.
    - note: référence libre vers la commande (seul lien entre paiement et commande).
    """
    note = f"{config.STORE_NAME} Order: {order_id or 'N/A'}"
    return {
        "source_id": source_id,
        "idempotency_key": idempotency_key,
        "amount_money": {"amount": amount, "currency": currency},
        "location_id": config.SQUARE_LOCATION_ID,
        "note": note[:NOTE_MAX_LENGTH],
    }


def _headers() -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {config.SQUARE_ACCESS_TOKEN}",
        "Square-Version": config.SQUARE_API_VERSION,
        "Content-Type": "application/json",
    }


def _error_message(resp: httpx.Response) -> str:
    """Extrait le premier message d'erreur Square ({"errors": [{"detail", "code"}]})."""
    try:
        errors = (resp.json() or {}).get("errors") or []
    except ValueError:
        errors = []
    if errors and isinstance(errors[0], dict):
        first = errors[0]
        return first.get("detail") or first.get("code") or "Payment processing failed"
    return f"Payment processing failed (HTTP {resp.status_code})"


def create_payment(body: Dict[str, Any], *, client: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    Envoie CreatePayment à Square et retourne l'objet "payment" brut.
    - client: httpx.Client injectable (tests: MockTransport); sinon un client éphémère
      est ouvert sur SQUARE_*_URL avec SQUARE_TIMEOUT_SECONDS.
    - GatewayError si la réponse est une erreur, illisible ou sans "payment".
    """
    require_square()
    url = f"{config.square_base_url()}{PAYMENTS_PATH}"
    try:
        if client is not None:
            resp = client.post(url, json=body, headers=_headers())
        else:
            with httpx.Client(timeout=config.SQUARE_TIMEOUT_SECONDS) as http:
                resp = http.post(url, json=body, headers=_headers())
    except httpx.HTTPError as e:
        logger.exception("square_client.create_payment transport error")
        raise GatewayError(str(e) or "Payment processing failed") from e

    if resp.status_code >= 400:
        message = _error_message(resp)
        logger.error("square_client.create_payment rejected status=%s detail=%s", resp.status_code, message)
        raise GatewayError(message)

    try:
        data = resp.json()
    except ValueError as e:
        raise GatewayError("Invalid payment response from Square") from e
    payment = data.get("payment") if isinstance(data, dict) else None
    if not isinstance(payment, dict):
        raise GatewayError("Invalid payment response from Square")
    return payment

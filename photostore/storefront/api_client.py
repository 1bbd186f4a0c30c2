"""
Client asynchrone de l'API de la boutique (ce que le navigateur fait avec fetch).
- Réutilise les schémas serveur (Product, Order, PaymentResult, PublicConfig).
- Toute réponse non-2xx, réponse illisible ou erreur réseau devient ApiError
  portant le message {"error": ...} renvoyé par le serveur.
"""
from typing import Any, Dict, List, Optional
import logging

import httpx

from photostore.catalog.models import Product
from photostore.errors import ApiError, GatewayError
from photostore.orders.models import Order
from photostore.payments.models import PaymentResult, PublicConfig

logger = logging.getLogger(__name__)


class StoreApiClient:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            return await self.http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("api %s %s failed: %s", method, path, e)
            raise ApiError(f"Network error: {e}") from e

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError("Invalid response from server", status_code=resp.status_code) from e

    def _raise_for_error(self, resp: httpx.Response, data: Any) -> None:
        if resp.status_code >= 400:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or f"Request failed (HTTP {resp.status_code})", status_code=resp.status_code)

    async def get_config(self) -> PublicConfig:
        resp = await self._request("GET", "/api/config")
        data = self._json(resp)
        self._raise_for_error(resp, data)
        return PublicConfig.model_validate(data)

    async def list_products(self) -> List[Product]:
        resp = await self._request("GET", "/api/products")
        data = self._json(resp)
        self._raise_for_error(resp, data)
        return [Product.model_validate(p) for p in data]

    async def create_order(self, items: List[Dict[str, Any]], customer_email: Optional[str] = None) -> Order:
        body: Dict[str, Any] = {"items": items}
        if customer_email:
            body["customerEmail"] = customer_email
        resp = await self._request("POST", "/api/orders", json=body)
        data = self._json(resp)
        self._raise_for_error(resp, data)
        return Order.model_validate(data)

    async def submit_payment(
        self,
        source_id: str,
        amount: int,
        order_id: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> PaymentResult:
        """
        Soumet le jeton carte; GatewayError si la passerelle répond success=false.
        """
        body: Dict[str, Any] = {"sourceId": source_id, "amount": amount}
        if order_id:
            body["orderId"] = order_id
        if currency:
            body["currency"] = currency
        resp = await self._request("POST", "/api/payment", json=body)
        data = self._json(resp)
        if isinstance(data, dict) and data.get("success") is False:
            raise GatewayError(data.get("error") or "Payment failed")
        self._raise_for_error(resp, data)
        result = PaymentResult.model_validate(data)
        if not result.success or result.payment is None:
            raise GatewayError(result.error or "Payment failed")
        return result

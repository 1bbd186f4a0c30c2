"""Cas d'usage 'payments': orchestre la validation, l'adaptateur Square et la normalisation.
- Une clé d'idempotence neuve par appel (les re-soumissions d'un même appel sont dédupliquées
  par Square; une nouvelle tentative de checkout ne l'est pas).
- Aucun journal d'audit local, aucune persistance.
"""
from typing import Any, Dict, Optional
from uuid import uuid4
import logging

import httpx

from photostore import config
from . import square_client
from .models import PaymentDetails, PaymentRequest, PaymentResult, PublicConfig

logger = logging.getLogger(__name__)


def _normalize(payment: Dict[str, Any], req: PaymentRequest) -> PaymentDetails:
    money = payment.get("amount_money") or {}
    if not money:
        logger.warning("Payment response missing amount_money field, using request values")
    return PaymentDetails(
        id=str(payment.get("id") or ""),
        status=str(payment.get("status") or ""),
        amount=int(money.get("amount") or req.amount),
        currency=money.get("currency") or req.currency,
        receipt_url=payment.get("receipt_url"),
    )


def process_payment(req: PaymentRequest, *, client: Optional[httpx.Client] = None) -> PaymentResult:
    """
    Débite le jeton carte pour le montant (centimes) et la devise demandés.
    - ConfigurationError si Square n'est pas configuré (aucun appel réseau).
    - GatewayError si Square refuse ou répond de façon inexploitable.
    Retour: PaymentResult(success=True, payment=...).
    """
    square_client.require_square()
    body = square_client.build_payment_body(
        source_id=req.source_id,
        amount=req.amount,
        currency=req.currency,
        idempotency_key=str(uuid4()),
        order_id=req.order_id,
    )
    payment = square_client.create_payment(body, client=client)
    details = _normalize(payment, req)
    logger.info(
        "payments.process_payment id=%s status=%s amount=%s order_id=%s",
        details.id, details.status, details.amount, req.order_id,
    )
    return PaymentResult(success=True, payment=details)


def public_config() -> PublicConfig:
    return PublicConfig(
        square_application_id=config.SQUARE_APPLICATION_ID,
        square_location_id=config.SQUARE_LOCATION_ID,
        square_configured=config.square_configured(),
        square_environment=config.SQUARE_ENVIRONMENT,
    )

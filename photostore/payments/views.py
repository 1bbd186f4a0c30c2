import logging

from fastapi import APIRouter, Depends

from photostore.payments import service as payments_service
from photostore.payments.models import PaymentRequest, PaymentResult, PublicConfig
from photostore.utils.rate_limit import optional_rate_limit

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Payments API"])

# module photostore.payments.views
@router.get("/config", response_model=PublicConfig)
def get_public_config():
    """
    Identifiants publics pour le widget carte côté navigateur.
    - squareConfigured=false (ou ids vides) => le front ne doit pas initialiser le widget.
    """
    return payments_service.public_config()


@router.post(
    "/payment",
    response_model=PaymentResult,
    response_model_exclude_none=True,
    dependencies=[Depends(optional_rate_limit(times=10, seconds=60))],
)
def create_payment(req: PaymentRequest):
    """
    Débite un jeton carte obtenu par le widget côté client.
    - Entrée JSON: {sourceId, amount (centimes), currency?="USD", orderId?}
    - 200 {success: true, payment: {id, status, amount, currency, receiptUrl}}
    - 400 {error} si l'entrée est invalide (avant tout appel Square)
    - 500 {error} si Square n'est pas configuré, {success: false, error} si Square échoue
    """
    return payments_service.process_payment(req)

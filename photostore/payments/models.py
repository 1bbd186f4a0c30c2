# module photostore.payments.models
"""Schémas de la feature paiements.
- PaymentRequest: corps de POST /api/payment; toutes les préconditions sont vérifiées
  ici, avant tout appel réseau (montant entier > 0, devise ISO sur 3 lettres).
- PaymentResult: forme uniforme {success, payment} ou {success: false, error}.
"""
from typing import Any, Optional

from pydantic import field_validator, model_validator

from photostore.config import DEFAULT_CURRENCY
from photostore.utils.schemas import CamelModel
from photostore.utils.validators import validate_amount, validate_currency


class PaymentRequest(CamelModel):
    source_id: str
    amount: int
    currency: str = DEFAULT_CURRENCY
    order_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def require_source_and_amount(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("Missing required payment information")
        source_id = data.get("sourceId", data.get("source_id"))
        if not source_id or data.get("amount") is None:
            raise ValueError("Missing required payment information")
        # currency: null équivaut à absente (défaut USD)
        if "currency" in data and data["currency"] is None:
            data = {k: v for k, v in data.items() if k != "currency"}
        return data

    @field_validator("amount", mode="before")
    @classmethod
    def positive_amount(cls, v: Any) -> int:
        return validate_amount(v)

    @field_validator("currency", mode="before")
    @classmethod
    def iso_currency(cls, v: Any) -> str:
        return validate_currency(v)


class PaymentDetails(CamelModel):
    id: str
    status: str
    amount: int
    currency: str
    receipt_url: Optional[str] = None


class PaymentResult(CamelModel):
    success: bool
    payment: Optional[PaymentDetails] = None
    error: Optional[str] = None


class PublicConfig(CamelModel):
    """Valeurs publiques exposées au front pour initialiser le widget carte."""

    square_application_id: str = ""
    square_location_id: str = ""
    square_configured: bool = False
    square_environment: str = "sandbox"

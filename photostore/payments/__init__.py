"""
Module 'payments' (feature-first): point d'entrée public.
Réunit schémas, adaptateur Square (API REST Payments) et cas d'usage.
"""

from .models import PaymentRequest, PaymentDetails, PaymentResult, PublicConfig
from .square_client import require_square, create_payment, build_payment_body
from .service import process_payment, public_config

__all__ = [
    # schémas
    "PaymentRequest",
    "PaymentDetails",
    "PaymentResult",
    "PublicConfig",
    # square
    "require_square",
    "create_payment",
    "build_payment_body",
    # services
    "process_payment",
    "public_config",
]

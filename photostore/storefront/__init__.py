"""Logique client de la boutique: panier, widget carte, rendu et orchestration du checkout."""
from .api_client import StoreApiClient
from .cart import CartLine, CartState
from .checkout import CheckoutController, CheckoutState
from .widget import CardWidgetInitializer, TokenizeResult, WidgetStatus

__all__ = [
    "StoreApiClient",
    "CartLine",
    "CartState",
    "CheckoutController",
    "CheckoutState",
    "CardWidgetInitializer",
    "TokenizeResult",
    "WidgetStatus",
]

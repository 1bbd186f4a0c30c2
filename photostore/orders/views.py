# module photostore.orders.views

"""Endpoint de création de commande.
- POST /api/orders: {items: [{id, quantity}], customerEmail?} -> Order
- Erreurs: 400 {"error": ...} (panier vide, quantité invalide, produit inconnu, e-mail invalide)
- Rate limit optionnel (10 req / 60s par IP).
"""
from fastapi import APIRouter, Depends

from photostore.orders import service as orders_service
from photostore.orders.models import Order, OrderRequest
from photostore.utils.rate_limit import optional_rate_limit

router = APIRouter(prefix="/api/orders", tags=["Orders API"])


@router.post("", response_model=Order, dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_order(req: OrderRequest):
    return orders_service.create_order(req)

"""Cas d'usage 'orders': valide les lignes contre le catalogue et calcule le total.
Règles:
- Seuls les prix du catalogue font foi (les prix éventuellement envoyés sont ignorés).
- Chaque appel produit un nouvel orderId (UUID4), même pour une requête identique.
- Rien n'est stocké: la commande est un jeton à usage unique pour l'appel de paiement.
"""
from datetime import datetime, timezone
from typing import Dict, Iterable
from uuid import uuid4
import logging

from photostore.catalog import repository as catalog
from photostore.catalog.models import Product
from photostore.errors import NotFoundError, ValidationError
from .models import Order, OrderItem, OrderRequest

logger = logging.getLogger(__name__)


def resolve_products(items: Iterable[OrderItem]) -> Dict[str, Product]:
    """Résout chaque id dans le catalogue; un id inconnu devient une erreur 400 nommant l'id."""
    resolved: Dict[str, Product] = {}
    for item in items:
        if item.id in resolved:
            continue
        try:
            resolved[item.id] = catalog.get_product(item.id)
        except NotFoundError as e:
            raise ValidationError(f"Product not found: {item.id}") from e
    return resolved


def compute_total(items: Iterable[OrderItem], products: Dict[str, Product]) -> int:
    return sum(products[item.id].price * item.quantity for item in items)


def create_order(request: OrderRequest) -> Order:
    """
    Crée une commande éphémère à partir d'une requête déjà validée structurellement.
    - Vérifie l'existence des produits (ValidationError sinon).
    - Calcule le total en centimes depuis le catalogue.
    """
    products = resolve_products(request.items)
    total = compute_total(request.items, products)
    order = Order(
        order_id=str(uuid4()),
        items=list(request.items),
        total=total,
        customer_email=request.customer_email,
        created_at=datetime.now(timezone.utc),
    )
    logger.info("orders.create_order order_id=%s lines=%s total=%s", order.order_id, len(order.items), total)
    return order

"""
Module 'orders' (feature-first): validation du panier et création de commandes éphémères.
Aucune persistance: la commande n'existe que le temps de la réponse.
"""

from .models import OrderItem, OrderRequest, Order
from .service import create_order, compute_total

__all__ = [
    "OrderItem",
    "OrderRequest",
    "Order",
    "create_order",
    "compute_total",
]

"""
Module 'catalog' (feature-first): catalogue statique des photos.
Lecture seule: aucune mutation à l'exécution.
"""

from .models import Product
from .repository import PRODUCTS, list_products, get_product

__all__ = [
    "Product",
    "PRODUCTS",
    "list_products",
    "get_product",
]

"""
Accès aux données pour la feature 'catalog'.
Le catalogue est construit une seule fois à l'import, depuis une configuration statique.
"""
from typing import Dict, List, Tuple
import logging

from photostore.errors import NotFoundError
from .models import Product

logger = logging.getLogger(__name__)

# module photostore.catalog.repository
PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="photo-1",
        name="Mountain Sunset",
        description="Beautiful sunset over mountain peaks",
        price=2999,
        image="/tiny/tiny1.webp",
    ),
    Product(
        id="photo-2",
        name="Ocean Waves",
        description="Serene ocean waves at dawn",
        price=3499,
        image="/tiny/tiny2.webp",
    ),
    Product(
        id="photo-3",
        name="Forest Path",
        description="Mystical forest path in autumn",
        price=2499,
        image="/tiny/tiny3.webp",
    ),
    Product(
        id="photo-4",
        name="City Lights",
        description="Urban cityscape at night",
        price=3999,
        image="/tiny/tiny4.webp",
    ),
    Product(
        id="photo-5",
        name="Desert Dunes",
        description="Golden sand dunes at sunset",
        price=2799,
        image="/tiny/tiny5.webp",
    ),
    Product(
        id="photo-6",
        name="Northern Lights",
        description="Aurora borealis over snowy landscape",
        price=4999,
        image="/tiny/tiny6.webp",
    ),
)

_BY_ID: Dict[str, Product] = {p.id: p for p in PRODUCTS}


def list_products() -> List[Product]:
    return list(PRODUCTS)


def get_product(product_id: str) -> Product:
    """
    Retourne le produit correspondant.
    - Soulève NotFoundError si l'identifiant est inconnu (404 ou 400 selon l'appelant).
    """
    product = _BY_ID.get(product_id)
    if product is None:
        logger.info("catalog.get_product unknown id=%s", product_id)
        raise NotFoundError("Product not found")
    return product

"""
Panier côté client (session de navigation uniquement, jamais persisté ni partagé).
- Chaque ligne porte un instantané du produit et une quantité >= 1.
- Toute mutation notifie l'écouteur on_change (re-rendu de la vue panier).
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import logging

from photostore.catalog.models import Product

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    product: Product
    quantity: int = 1

    @property
    def subtotal(self) -> int:
        return self.product.price * self.quantity


class CartState:
    def __init__(self, products: Iterable[Product], on_change: Optional[Callable[["CartState"], None]] = None):
        self._products: Dict[str, Product] = {p.id: p for p in products}
        self._lines: List[CartLine] = []
        self.on_change = on_change

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def _find(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product.id == product_id), None)

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def add(self, product_id: str) -> Optional[Product]:
        """Ajoute une unité; id inconnu = no-op silencieux (retourne None)."""
        product = self._products.get(product_id)
        if product is None:
            logger.debug("cart.add ignored unknown id=%s", product_id)
            return None
        line = self._find(product_id)
        if line:
            line.quantity += 1
        else:
            self._lines.append(CartLine(product=product, quantity=1))
        self._changed()
        return product

    def remove(self, product_id: str) -> None:
        self._lines = [line for line in self._lines if line.product.id != product_id]
        self._changed()

    def update_quantity(self, product_id: str, change: int) -> None:
        """Ajoute change (positif ou négatif) à la quantité; <= 0 équivaut à remove."""
        line = self._find(product_id)
        if line is None:
            return
        if line.quantity + change <= 0:
            self.remove(product_id)
            return
        line.quantity += change
        self._changed()

    def total(self) -> int:
        return sum(line.subtotal for line in self._lines)

    def count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def clear(self) -> None:
        self._lines = []
        self._changed()

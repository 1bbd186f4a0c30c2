"""Instructions de rendu: fonctions pures état -> vues figées.

Rien ici ne touche au DOM ni au réseau; la couche d'affichage (callback on_render
du contrôleur) applique ces vues. Les montants sont formatés depuis les centimes,
ex: 2999 -> "29.99".
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union
from urllib.parse import urlsplit
import logging

from photostore.catalog.models import Product

logger = logging.getLogger(__name__)

TRUSTED_RECEIPT_HOSTS = ("squareup.com", "squareupsandbox.com")
EMPTY_CART_MESSAGE = "Your cart is empty"


def format_price(minor_units: int) -> str:
    sign = "-" if minor_units < 0 else ""
    units, cents = divmod(abs(minor_units), 100)
    return f"{sign}{units}.{cents:02d}"


def is_trusted_receipt_url(url: Optional[str]) -> bool:
    """http/https et hôte exactement squareup.com / squareupsandbox.com ou un sous-domaine.

    Un navigateur lit "\\" comme "/" dans une URL http(s) et ignore espaces et
    caractères de contrôle: urlsplit n'en verrait pas le même hôte, on refuse.
    """
    if not url:
        return False
    if any(ch == "\\" or ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        logger.warning("Receipt URL rejected (ambiguous characters): %r", url)
        return False
    try:
        parts = urlsplit(url)
        hostname = (parts.hostname or "").lower()
    except ValueError:
        logger.error("Invalid receipt URL: %s", url)
        return False
    if parts.scheme not in ("http", "https"):
        return False
    trusted = any(hostname == host or hostname.endswith("." + host) for host in TRUSTED_RECEIPT_HOSTS)
    if not trusted:
        logger.warning("Receipt URL from unexpected domain: %s", hostname)
    return trusted


@dataclass(frozen=True)
class ProductCardView:
    id: str
    name: str
    description: str
    price: str
    image: str


@dataclass(frozen=True)
class ProductGridView:
    products: Tuple[ProductCardView, ...]
    cart_count: int


@dataclass(frozen=True)
class CartLineView:
    product_id: str
    name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartView:
    lines: Tuple[CartLineView, ...]
    total: str
    cart_count: int
    checkout_enabled: bool
    empty_message: Optional[str] = None


@dataclass(frozen=True)
class CheckoutLineView:
    label: str
    line_total: str


@dataclass(frozen=True)
class CheckoutView:
    lines: Tuple[CheckoutLineView, ...]
    total: str
    pay_label: str
    payment_available: bool
    submit_enabled: bool
    notice: Optional[str] = None


@dataclass(frozen=True)
class SuccessView:
    order_id: str
    charged: str
    receipt_url: Optional[str] = None


View = Union[ProductGridView, CartView, CheckoutView, SuccessView]


@dataclass(frozen=True)
class CheckoutSnapshot:
    """Lignes et total figés à l'entrée dans le checkout (non resynchronisés ensuite)."""

    lines: Tuple[Tuple[Product, int], ...]
    total: int

    @classmethod
    def of(cls, cart_lines: Iterable) -> "CheckoutSnapshot":
        lines = tuple((line.product, line.quantity) for line in cart_lines)
        return cls(lines=lines, total=sum(p.price * q for p, q in lines))

    def order_items(self):
        return [{"id": p.id, "quantity": q} for p, q in self.lines]


def render_products(products: Iterable[Product], cart_count: int = 0) -> ProductGridView:
    cards = tuple(
        ProductCardView(id=p.id, name=p.name, description=p.description, price=format_price(p.price), image=p.image)
        for p in products
    )
    return ProductGridView(products=cards, cart_count=cart_count)


def render_cart(cart) -> CartView:
    lines = tuple(
        CartLineView(
            product_id=line.product.id,
            name=line.product.name,
            unit_price=format_price(line.product.price),
            quantity=line.quantity,
            line_total=format_price(line.subtotal),
        )
        for line in cart.lines
    )
    return CartView(
        lines=lines,
        total=format_price(cart.total()),
        cart_count=cart.count(),
        checkout_enabled=bool(lines),
        empty_message=None if lines else EMPTY_CART_MESSAGE,
    )


def render_checkout(
    snapshot: CheckoutSnapshot,
    *,
    payment_available: bool,
    submit_enabled: bool = True,
    notice: Optional[str] = None,
) -> CheckoutView:
    lines = tuple(
        CheckoutLineView(label=f"{product.name} × {quantity}", line_total=format_price(product.price * quantity))
        for product, quantity in snapshot.lines
    )
    total = format_price(snapshot.total)
    pay_label = f"Pay ${total}" if submit_enabled else "Processing..."
    return CheckoutView(
        lines=lines,
        total=total,
        pay_label=pay_label,
        payment_available=payment_available,
        submit_enabled=submit_enabled and payment_available,
        notice=notice,
    )


def render_success(order_id: str, receipt_url: Optional[str], charged: int) -> SuccessView:
    link = receipt_url if is_trusted_receipt_url(receipt_url) else None
    return SuccessView(order_id=order_id, charged=format_price(charged), receipt_url=link)

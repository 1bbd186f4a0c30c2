"""Contrôleur de checkout côté client (un seul propriétaire de l'état de session).

États: BROWSING -> CART_REVIEW -> CHECKOUT -> PAYING -> SUCCESS.
Un échec pendant PAYING ramène à CHECKOUT avec un message en ligne et le bouton
de paiement réactivé; SUCCESS est terminal jusqu'à new_session().

Séquence de paiement stricte (jamais concurrente pour une même tentative):
    1) POST /api/orders    -> total autoritaire calculé par le serveur
    2) card.tokenize()     -> statut "OK" requis
    3) POST /api/payment   -> montant = total de la commande, pas celui du panier local
"""
import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from photostore.catalog.models import Product
from photostore.errors import StoreError, GatewayError, WidgetUnavailableError
from photostore.orders.models import Order
from photostore.payments.models import PaymentDetails, PublicConfig
from photostore.utils.validators import looks_like_email
from .api_client import StoreApiClient
from .cart import CartState
from .render import (
    CheckoutSnapshot,
    View,
    render_cart,
    render_checkout,
    render_products,
    render_success,
)
from .widget import MAX_CARD_INIT_ATTEMPTS, CardWidgetInitializer, PaymentsFactory

logger = logging.getLogger(__name__)

PAYMENTS_NOT_CONFIGURED = "Payment processing is not configured. Checkout is currently unavailable."
PAYMENTS_MISCONFIGURED = "Payment system is not properly configured. Please contact support."
PAYMENTS_UNAVAILABLE = "Payment system is currently unavailable. Please try again later."


class CheckoutState(str, Enum):
    BROWSING = "browsing"
    CART_REVIEW = "cart_review"
    CHECKOUT = "checkout"
    PAYING = "paying"
    SUCCESS = "success"


RenderSink = Callable[[View, Optional[str]], None]


class CheckoutController:
    def __init__(
        self,
        api: StoreApiClient,
        payments_factory: Optional[PaymentsFactory] = None,
        *,
        on_render: Optional[RenderSink] = None,
        max_widget_attempts: int = MAX_CARD_INIT_ATTEMPTS,
        widget_retry_delay: float = 0.5,
    ):
        self.api = api
        self.payments_factory = payments_factory
        self.on_render = on_render
        self.max_widget_attempts = max_widget_attempts
        self.widget_retry_delay = widget_retry_delay

        self.state = CheckoutState.BROWSING
        self.config = PublicConfig()
        self.products: List[Product] = []
        self.cart = CartState([], on_change=self._cart_changed)
        self.widget: Optional[CardWidgetInitializer] = None
        self.snapshot: Optional[CheckoutSnapshot] = None

        self.view: Optional[View] = None
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.notifications: List[str] = []
        self.alerts: List[str] = []

        self.submitting = False
        self.order: Optional[Order] = None
        self.payment: Optional[PaymentDetails] = None
        # (total affiché à l'entrée du checkout, total autoritaire du serveur)
        self.total_discrepancy: Optional[Tuple[int, int]] = None

    # --- Affichage ---

    def _emit(self) -> None:
        if self.on_render is not None and self.view is not None:
            self.on_render(self.view, self.error)

    def _show(self, view: View) -> None:
        self.view = view
        self.error = None
        self._emit()

    def show_error(self, message: str) -> None:
        """Message en ligne dans la vue active; sans vue active, alerte bloquante (file alerts)."""
        logger.info("storefront error: %s", message)
        if self.view is None:
            self.alerts.append(message)
            return
        self.error = message
        self._emit()

    @property
    def payment_available(self) -> bool:
        return self.widget is not None and self.widget.ready

    def _render_checkout(self) -> View:
        return render_checkout(
            self.snapshot,
            payment_available=self.payment_available,
            submit_enabled=not self.submitting,
            notice=self.notice,
        )

    def _cart_changed(self, cart: CartState) -> None:
        if self.state is CheckoutState.CART_REVIEW:
            self._show(render_cart(cart))
        elif self.state is CheckoutState.BROWSING and self.view is not None:
            self._show(render_products(self.products, cart.count()))

    # --- Démarrage ---

    async def start(self) -> None:
        """
        Charge la configuration publique et le catalogue, puis prépare le widget carte.
        - Config illisible: traitée comme non configurée (aucune initialisation du widget).
        - Catalogue illisible: message en ligne, boutique vide.
        """
        try:
            self.config = await self.api.get_config()
        except StoreError as e:
            logger.error("Error loading configuration: %s", e)
            self.config = PublicConfig(square_configured=False)

        products_error: Optional[str] = None
        try:
            self.products = await self.api.list_products()
        except StoreError as e:
            logger.error("Error loading products: %s", e)
            self.products = []
            products_error = "Failed to load products. Please refresh the page."

        self.cart = CartState(self.products, on_change=self._cart_changed)
        self.state = CheckoutState.BROWSING
        self._show(render_products(self.products, self.cart.count()))
        if products_error:
            self.show_error(products_error)

        await self._setup_payments()

    async def _setup_payments(self) -> None:
        if not self.config.square_configured:
            self.notice = PAYMENTS_NOT_CONFIGURED
            return
        app_id, location_id = self.config.square_application_id, self.config.square_location_id
        if not app_id or not location_id:
            self.notice = PAYMENTS_MISCONFIGURED
            self.show_error(PAYMENTS_MISCONFIGURED)
            return
        if self.payments_factory is None:
            self.notice = PAYMENTS_UNAVAILABLE
            self.show_error(PAYMENTS_UNAVAILABLE)
            return
        try:
            sdk = self.payments_factory(app_id, location_id)
        except Exception:
            logger.exception("Error initializing Square payments")
            self.notice = PAYMENTS_UNAVAILABLE
            self.show_error(PAYMENTS_UNAVAILABLE)
            return
        self.widget = CardWidgetInitializer(
            sdk,
            max_attempts=self.max_widget_attempts,
            retry_delay=self.widget_retry_delay,
        )
        await self._prepare_widget()

    async def _prepare_widget(self) -> bool:
        if self.widget is None:
            return False
        try:
            await self.widget.ensure_ready()
            return True
        except WidgetUnavailableError as e:
            self.notice = e.message
            self.show_error(e.message)
            return False

    # --- Panier ---

    def add_to_cart(self, product_id: str) -> bool:
        product = self.cart.add(product_id)
        if product is None:
            return False
        self.notifications.append(f"{product.name} added to cart!")
        return True

    def remove_from_cart(self, product_id: str) -> None:
        self.cart.remove(product_id)

    def update_quantity(self, product_id: str, change: int) -> None:
        self.cart.update_quantity(product_id, change)

    # --- Navigation ---

    def _busy(self) -> bool:
        if self.state is CheckoutState.PAYING:
            logger.warning("navigation ignored: payment in progress")
            return True
        return False

    def show_products(self) -> None:
        if self._busy():
            return
        self.state = CheckoutState.BROWSING
        self._show(render_products(self.products, self.cart.count()))

    def open_cart(self) -> None:
        if self._busy():
            return
        self.state = CheckoutState.CART_REVIEW
        self._show(render_cart(self.cart))

    async def begin_checkout(self) -> bool:
        """
        CART_REVIEW -> CHECKOUT, uniquement si le panier n'est pas vide.
        - Fige lignes et total (snapshot) pour l'affichage.
        - Ré-attache (ou réinitialise dans la limite des tentatives) le widget carte.
        """
        if self.state is not CheckoutState.CART_REVIEW:
            logger.warning("begin_checkout ignored from state=%s", self.state.value)
            return False
        if self.cart.is_empty():
            self.show_error("Your cart is empty")
            return False
        self.snapshot = CheckoutSnapshot.of(self.cart.lines)
        self.total_discrepancy = None
        self.state = CheckoutState.CHECKOUT
        self._show(self._render_checkout())
        if self.widget is not None and await self._prepare_widget():
            self.view = self._render_checkout()
            self._emit()
        return True

    # --- Paiement ---

    def _check_total(self, authoritative: int) -> None:
        shown = self.snapshot.total if self.snapshot else authoritative
        if shown != authoritative:
            # Écart prix catalogue entre chargement et commande: on débite le total serveur
            logger.warning("checkout total changed: displayed=%s authoritative=%s", shown, authoritative)
            self.total_discrepancy = (shown, authoritative)

    def _payment_failed(self, message: str) -> None:
        self.submitting = False
        self.state = CheckoutState.CHECKOUT
        self._show(self._render_checkout())
        self.show_error(f"Payment failed: {message}")

    async def submit_payment(self, customer_email: str) -> bool:
        """
        Soumission du formulaire de paiement.
        - Contrôles locaux (e-mail présent et bien formé) avant tout appel réseau.
        - Puis commande -> tokenisation -> paiement, dans cet ordre strict.
        Retourne True si le paiement est accepté (état SUCCESS).
        """
        if self.state is not CheckoutState.CHECKOUT:
            logger.warning("submit_payment ignored from state=%s", self.state.value)
            return False

        email = (customer_email or "").strip()
        if not email:
            self.show_error("Please enter your email address")
            return False
        if not looks_like_email(email):
            self.show_error("Please enter a valid email address")
            return False
        if not self.payment_available:
            self.show_error(self.notice or PAYMENTS_UNAVAILABLE)
            return False

        self.state = CheckoutState.PAYING
        self.submitting = True
        self._show(self._render_checkout())

        try:
            order = await self.api.create_order(self.snapshot.order_items(), email)
            self.order = order
            self._check_total(order.total)

            result = await self.widget.card.tokenize()
            if not result.ok:
                raise GatewayError("Card tokenization failed")

            payment = await self.api.submit_payment(result.token, order.total, order.order_id)
        except StoreError as e:
            logger.error("Payment error: %s", e)
            self._payment_failed(e.message or "Payment failed")
            return False
        except Exception as e:
            logger.exception("Unexpected payment error")
            self._payment_failed(str(e) or "Payment failed")
            return False

        self.payment = payment.payment
        self.submitting = False
        self.state = CheckoutState.SUCCESS
        self.cart.clear()
        self._show(render_success(order.order_id, self.payment.receipt_url, order.total))
        return True

    def new_session(self) -> None:
        """SUCCESS -> BROWSING: démarre une nouvelle session de navigation."""
        if self.state is not CheckoutState.SUCCESS:
            return
        self.snapshot = None
        self.order = None
        self.payment = None
        self.total_discrepancy = None
        self.state = CheckoutState.BROWSING
        self._show(render_products(self.products, self.cart.count()))

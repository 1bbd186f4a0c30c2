"""
Widget carte (SDK Web Payments de Square) vu par le contrôleur de checkout.

Le SDK n'est pas réimplémenté: on en consomme trois capacités, décrites par des Protocol
(construction avec identifiants, attachement à une cible DOM, tokenisation asynchrone).

L'initialisation est une petite machine à états:
    UNINITIALIZED -> ATTEMPTING(n) -> READY | FAILED
- un échec isolé est retenté automatiquement;
- après max_attempts échecs cumulés, l'état FAILED est terminal (plus aucun essai).
"""
import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol

from photostore.errors import TransientWidgetError, WidgetUnavailableError

logger = logging.getLogger(__name__)

MAX_CARD_INIT_ATTEMPTS = 3
CARD_CONTAINER = "#card-container"
WIDGET_FAILED_MESSAGE = "Unable to initialize payment form. Please refresh the page and try again."


@dataclass
class TokenizeResult:
    status: str
    token: Optional[str] = None
    errors: List[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "OK" and bool(self.token)


class CardWidget(Protocol):
    async def attach(self, target: str) -> None: ...

    async def tokenize(self) -> TokenizeResult: ...


class PaymentsSdk(Protocol):
    async def card(self) -> CardWidget: ...


# (application_id, location_id) -> SDK prêt à créer des widgets carte
PaymentsFactory = Callable[[str, str], PaymentsSdk]


class WidgetStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    ATTEMPTING = "attempting"
    READY = "ready"
    FAILED = "failed"


class CardWidgetInitializer:
    def __init__(
        self,
        sdk: PaymentsSdk,
        *,
        target: str = CARD_CONTAINER,
        max_attempts: int = MAX_CARD_INIT_ATTEMPTS,
        retry_delay: float = 0.5,
    ):
        self.sdk = sdk
        self.target = target
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.status = WidgetStatus.UNINITIALIZED
        self.attempts = 0
        self.card: Optional[CardWidget] = None
        self.last_error: Optional[TransientWidgetError] = None

    @property
    def ready(self) -> bool:
        return self.status is WidgetStatus.READY and self.card is not None

    @property
    def failed(self) -> bool:
        return self.status is WidgetStatus.FAILED

    async def _attempt(self) -> CardWidget:
        self.attempts += 1
        self.status = WidgetStatus.ATTEMPTING
        try:
            card = await self.sdk.card()
            await card.attach(self.target)
        except Exception as e:
            raise TransientWidgetError(f"Card widget initialization failed: {e}") from e
        return card

    async def ensure_ready(self) -> CardWidget:
        """
        Retourne un widget attaché, en (ré)initialisant si besoin.
        - READY: ré-attache le widget existant; si cela échoue, il est abandonné et
          l'initialisation reprend sur le même budget de tentatives.
        - FAILED: soulève immédiatement WidgetUnavailableError, sans nouvel essai.
        """
        if self.failed:
            raise WidgetUnavailableError(WIDGET_FAILED_MESSAGE, attempts=self.attempts)

        if self.ready:
            try:
                await self.card.attach(self.target)
                return self.card
            except Exception as e:
                logger.error("Error reattaching card: %s", e)
                self.card = None
                self.status = WidgetStatus.UNINITIALIZED

        while self.attempts < self.max_attempts:
            try:
                self.card = await self._attempt()
            except TransientWidgetError as e:
                self.last_error = e
                logger.warning("card widget attempt %s/%s failed: %s", self.attempts, self.max_attempts, e)
                if self.attempts < self.max_attempts and self.retry_delay:
                    await asyncio.sleep(self.retry_delay)
                continue
            self.status = WidgetStatus.READY
            self.last_error = None
            return self.card

        self.status = WidgetStatus.FAILED
        self.card = None
        logger.error("card widget unavailable after %s attempts", self.attempts)
        raise WidgetUnavailableError(WIDGET_FAILED_MESSAGE, attempts=self.attempts)

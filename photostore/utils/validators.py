import re
from typing import Any, Optional

# Grammaire e-mail conservatrice (serveur) et contrôle léger (navigateur/client)
EMAIL_RE = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
CLIENT_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
CURRENCY_RE = re.compile(r"[A-Z]{3}")
MAX_EMAIL_LENGTH = 254


def is_positive_int(v: Any) -> bool:
    """Entier > 0; un flottant entier venu du JSON (2.0) compte comme entier."""
    # bool est un int en Python: on l'exclut explicitement
    if isinstance(v, bool):
        return False
    if isinstance(v, float):
        return v.is_integer() and v > 0
    return isinstance(v, int) and v > 0


def validate_quantity(v: Any) -> int:
    if not is_positive_int(v):
        raise ValueError("Invalid quantity: must be a positive integer")
    return int(v)


def validate_amount(v: Any) -> int:
    if not is_positive_int(v):
        raise ValueError("Invalid amount: must be a positive integer in cents")
    return int(v)


def validate_currency(v: Any) -> str:
    if not isinstance(v, str) or not CURRENCY_RE.fullmatch(v):
        raise ValueError("Invalid currency: must be a 3-letter code (e.g., USD)")
    return v


def validate_email(v: Optional[str]) -> Optional[str]:
    """Chaîne vide ou None = pas d'e-mail; sinon grammaire stricte et 254 caractères max."""
    if v is None or v == "":
        return None
    if not isinstance(v, str) or len(v) > MAX_EMAIL_LENGTH or not EMAIL_RE.fullmatch(v):
        raise ValueError("Invalid email address format")
    return v


def looks_like_email(v: Optional[str]) -> bool:
    return bool(v) and CLIENT_EMAIL_RE.fullmatch(v) is not None

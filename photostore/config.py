# photostore.config
from pathlib import Path
import os
from typing import List
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

PUBLIC_DIR = BASE_DIR / "public"

"""
Configuration centrale de la boutique.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose les chemins utiles (PUBLIC_DIR)
- Normalise et expose les identifiants Square, le timeout et les origines CORS
- La présence des identifiants conditionne la disponibilité du paiement
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

# Square: identifiants serveur (token) et publics (application/location)
SQUARE_ACCESS_TOKEN = _clean_env(os.getenv("SQUARE_ACCESS_TOKEN") or "")
SQUARE_APPLICATION_ID = _clean_env(os.getenv("SQUARE_APPLICATION_ID") or "")
SQUARE_LOCATION_ID = _clean_env(os.getenv("SQUARE_LOCATION_ID") or "")

# "production" ou "sandbox" (défaut)
SQUARE_ENVIRONMENT = _clean_env(os.getenv("SQUARE_ENVIRONMENT") or "sandbox").lower()
SQUARE_API_VERSION = _clean_env(os.getenv("SQUARE_API_VERSION") or "2025-01-23")
SQUARE_TIMEOUT_SECONDS = float(os.getenv("SQUARE_TIMEOUT_SECONDS", "10"))

SQUARE_PRODUCTION_URL = "https://connect.squareup.com"
SQUARE_SANDBOX_URL = "https://connect.squareupsandbox.com"

DEFAULT_CURRENCY = "USD"
STORE_NAME = os.getenv("STORE_NAME", "Photo Store")

# CORS (dev: tout autoriser par défaut)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")

REQUIRED_SQUARE_CONFIG = ("SQUARE_ACCESS_TOKEN", "SQUARE_APPLICATION_ID", "SQUARE_LOCATION_ID")


def missing_square_config() -> List[str]:
    """Noms des variables Square requises mais absentes (lus à l'appel, donc patchables en tests)."""
    values = {
        "SQUARE_ACCESS_TOKEN": SQUARE_ACCESS_TOKEN,
        "SQUARE_APPLICATION_ID": SQUARE_APPLICATION_ID,
        "SQUARE_LOCATION_ID": SQUARE_LOCATION_ID,
    }
    return [name for name in REQUIRED_SQUARE_CONFIG if not values[name]]


def square_configured() -> bool:
    """Configuration complète côté front (token + application + location)."""
    return not missing_square_config()


def square_payments_ready() -> bool:
    """Capacité serveur à débiter: token et location suffisent."""
    return bool(SQUARE_ACCESS_TOKEN and SQUARE_LOCATION_ID)


def square_base_url() -> str:
    return SQUARE_PRODUCTION_URL if SQUARE_ENVIRONMENT == "production" else SQUARE_SANDBOX_URL

"""
Taxonomie des erreurs de la boutique.

Côté serveur, les gestionnaires d'exceptions (app_setup.exceptions) traduisent
ces classes en réponses JSON {"error": ...} avec le bon code HTTP.
Côté client (storefront), le contrôleur de checkout les attrape pour afficher
un message dans la vue active.
"""


class StoreError(Exception):
    """Classe de base de toutes les erreurs métier."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConfigurationError(StoreError):
    """Identifiants Square manquants ou invalides (jamais retenté automatiquement)."""

    status_code = 500


class ValidationError(StoreError):
    """Corps ou champ de requête invalide (400, renvoyé tel quel)."""

    status_code = 400


class NotFoundError(StoreError):
    """Ressource inconnue (ex: identifiant produit)."""

    status_code = 404


class GatewayError(StoreError):
    """Square a refusé ou échoué le paiement, ou sa réponse est inexploitable."""

    status_code = 500


class ApiError(StoreError):
    """Réponse non-2xx ou échec réseau vu par le client de l'API."""

    def __init__(self, message: str = "", status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class TransientWidgetError(StoreError):
    """Un échec d'initialisation/attachement du widget carte (retentable)."""


class WidgetUnavailableError(ConfigurationError):
    """Widget carte définitivement indisponible après épuisement des tentatives."""

    def __init__(self, message: str = "", attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts

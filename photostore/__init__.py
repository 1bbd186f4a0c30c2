"""Photo Store: catalogue statique, panier côté client et paiements Square."""

__version__ = "1.0.0"

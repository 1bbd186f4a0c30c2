"""
Registre central des routers de l'API.
- Catalogue: /api/products
- Commandes: /api/orders
- Paiements: /api/config, /api/payment
- Health: /api/health
"""
from fastapi import FastAPI
from photostore.catalog import views as catalog_views
from photostore.orders import views as orders_views
from photostore.payments import views as payments_views
from photostore.health.router import router as health_router


def register_routers(app: FastAPI) -> None:
    app.include_router(catalog_views.router)
    app.include_router(orders_views.router)
    app.include_router(payments_views.router)
    app.include_router(health_router)

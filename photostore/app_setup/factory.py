"""
Factory d'application pour les entrypoints (photostore.asgi, python -m photostore, tests).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_security_middleware, register_no_cache_middleware
from .static import mount_static_files
from .exceptions import register_exception_handlers
from .routes import register_routes
from .routers import register_routers


def create_app() -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - middlewares de base (CORS), sécurité, no-cache
      - fichiers statiques (/static, /tiny)
      - gestionnaires d'exceptions et routes simples
      - tous les routers de l'API
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="Photo Store API", lifespan=lifespan)
    register_basic_middlewares(app)
    mount_static_files(app)
    register_security_middleware(app)
    register_no_cache_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app

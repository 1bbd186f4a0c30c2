"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS (ouvert par défaut).
- register_security_middleware: en-têtes de sécurité et CSP compatible avec le SDK Web Payments de Square.
- register_no_cache_middleware: empêche la mise en cache des réponses /api/*.
"""
from fastapi import Request, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from photostore.config import CORS_ORIGINS, COOKIE_SECURE

# Origines du SDK Web Payments (script, iframe carte, appels PCI)
SQUARE_SCRIPT_SOURCES = ["https://web.squarecdn.com", "https://sandbox.web.squarecdn.com"]
SQUARE_CONNECT_SOURCES = [
    "https://pci-connect.squareup.com",
    "https://pci-connect.squareupsandbox.com",
    "https://connect.squareup.com",
    "https://connect.squareupsandbox.com",
    "https://o160250.ingest.sentry.io",
]


def register_basic_middlewares(app: FastAPI) -> None:
    # allow_credentials interdit avec l'origine "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)

        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        if COOKIE_SECURE:
            response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")

        # CSP: Square charge son formulaire carte dans une iframe
        docs_cdns = ["https://cdn.jsdelivr.net"]
        csp = (
            "default-src 'self'; "
            "base-uri 'self'; object-src 'none'; frame-ancestors 'none'; "
            f"img-src 'self' data: https://fastapi.tiangolo.com; "
            f"style-src 'self' 'unsafe-inline' {' '.join(docs_cdns + SQUARE_SCRIPT_SOURCES)}; "
            f"script-src 'self' 'unsafe-inline' {' '.join(docs_cdns + SQUARE_SCRIPT_SOURCES)}; "
            f"frame-src {' '.join(SQUARE_SCRIPT_SOURCES)}; "
            f"connect-src 'self' {' '.join(SQUARE_CONNECT_SOURCES)}"
        )
        response.headers["Content-Security-Policy"] = csp
        return response


def register_no_cache_middleware(app: FastAPI) -> None:
    """
    Empêche la mise en cache des réponses d'API (commandes, paiements, configuration).
    """
    @app.middleware("http")
    async def no_cache_for_api(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith("/api/"):
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response

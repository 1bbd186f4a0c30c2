"""
Gestionnaires d'exceptions.
- Traduit les erreurs métier (photostore.errors) en JSON {"error": ...} avec leur code HTTP.
- GatewayError garde la forme PaymentResult: {"success": false, "error": ...}.
- Les erreurs de validation pydantic deviennent des 400 avec le premier message lisible.
- HTTPException (404 de route, 429 du rate limit...) garde son code avec {"error": detail}.
- Toute autre exception: 500 {"error": "Internal server error"}, journalisée avec la trace.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from photostore.errors import GatewayError, StoreError

logger = logging.getLogger(__name__)


def first_validation_message(exc: RequestValidationError) -> str:
    """Premier message lisible: le texte du ValueError levé par nos validateurs, sinon champ + message pydantic."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err: Dict[str, Any] = errors[0]
    ctx_error = (err.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    msg = err.get("msg") or "Invalid request"
    return f"{field}: {msg}" if field else msg


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        content: Dict[str, Any] = {"error": exc.message or exc.__class__.__name__}
        if isinstance(exc, GatewayError):
            content = {"success": False, **content}
        if exc.status_code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.__class__.__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": first_validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

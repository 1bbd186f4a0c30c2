from typing import Dict, Any
from fastapi import Request, Response, HTTPException
import os
import time


def _client_key(req: Request) -> str:
    # Pas de session dans la boutique: clé = IP + chemin
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{req.url.path}"


def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        # Forcer le fallback mémoire en DEV si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _client_key(request)
            store = getattr(request.app.state, "_rl_store", {})
            hits = [t for t in store.get(key, []) if now - t < seconds]
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        # Respecter le flag global (non initialisé = désactivé)
        if not getattr(request.app.state, "rate_limit_enabled", False):
            return

        from fastapi_limiter.depends import RateLimiter

        async def _identifier(req: Request) -> str:
            return _client_key(req)
        return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
    return _dep


def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    local = os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1"

    from fastapi_limiter import FastAPILimiter
    limiter_ready = getattr(FastAPILimiter, "redis", None) is not None

    backend = "redis" if limiter_ready else ("memory" if local else None)
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready or local,
        "backend": backend,
    }

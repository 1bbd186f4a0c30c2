from fastapi import APIRouter, Request

from photostore import config
from photostore.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("")
def health_root(request: Request):
    return {
        "status": "ok",
        "squareConfigured": config.square_payments_ready(),
        "rateLimit": rate_limit_health_info(request),
    }

"""Health check endpoint.

Returns service status including store connectivity.  The store is the one
the application was built with (``app.state.store``).
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> Any:
    """Return 200 when the store answers a ping, 503 otherwise."""
    store_status = "disconnected"

    try:
        if request.app.state.store.ping():
            store_status = "connected"
    except Exception:
        logger.warning("Health check: store ping failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if store_status == "connected" else "degraded",
        "store": store_status,
        "backend": settings.STORE_BACKEND,
    }

    if store_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload

"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events and router
registration.  ``create_app`` takes the candidat store explicitly so tests
and alternative deployments can supply their own.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.constants import API_PREFIX
from app.core.errors import register_exception_handlers
from app.core.headers import alert_header_names
from app.core.logging import setup_logging
from app.db.store import CandidatStore, get_store
from app.routers import health
from app.routers.candidats import CandidatEndpoint, build_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    setup_logging()
    logger.info(
        "Application starting up",
        extra={"store_backend": type(application.state.store).__name__},
    )
    yield
    logger.info("Application shutting down")


def _allowed_origins() -> list[str]:
    raw = settings.ALLOWED_ORIGINS.strip()
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(store: CandidatStore | None = None) -> FastAPI:
    """Build the application around *store* (default: ``get_store()``)."""
    application = FastAPI(
        title="Candidat API",
        description="CRUD REST resource for candidats",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.state.store = store if store is not None else get_store()

    # -----------------------------------------------------------------------
    # CORS Configuration
    # -----------------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", *alert_header_names()],
    )

    register_exception_handlers(application)

    # -----------------------------------------------------------------------
    # Router Registration
    # -----------------------------------------------------------------------
    endpoint = CandidatEndpoint(application.state.store)
    application.include_router(health.router, tags=["Health"])
    application.include_router(build_router(endpoint), prefix=API_PREFIX, tags=["Candidats"])

    return application


app = create_app()

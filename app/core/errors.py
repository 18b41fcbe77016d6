"""Application exceptions and their HTTP mapping.

``InvalidRequestError`` is the only error the REST layer raises on purpose;
``register_exception_handlers`` turns it into a 400 carrying failure alert
headers and no body.  ``StoreError`` wraps backend failures and is left to
propagate as a 500.
"""

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from app.core.headers import create_failure_alert

logger = logging.getLogger(__name__)


class InvalidRequestError(Exception):
    """A request that is well-formed but not acceptable for the operation."""

    def __init__(self, entity_name: str, error_key: str, message: str) -> None:
        super().__init__(message)
        self.entity_name = entity_name
        self.error_key = error_key
        self.message = message


class StoreError(Exception):
    """Raised by a store adapter when the backend call fails."""


async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> Response:
    logger.warning(
        "invalid_request",
        extra={
            "path": request.url.path,
            "entity_name": exc.entity_name,
            "error_key": exc.error_key,
        },
    )
    return Response(
        status_code=400,
        headers=create_failure_alert(exc.entity_name, exc.error_key, exc.message),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Install the application's exception handlers on *application*."""
    application.add_exception_handler(InvalidRequestError, invalid_request_handler)  # type: ignore[arg-type]

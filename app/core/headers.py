"""Alert header helpers.

Builds the ``X-<app>-alert`` / ``X-<app>-params`` / ``X-<app>-error`` headers
that clients read to display success and failure notifications after a
REST call.  The ``<app>`` prefix comes from ``settings.APP_NAME``.
"""

from app.core.config import settings


def _header(suffix: str) -> str:
    return f"X-{settings.APP_NAME}-{suffix}"


def alert_header_names() -> list[str]:
    """Return every header name the helpers below can emit (for CORS)."""
    return [_header(s) for s in ("alert", "params", "error", "error-message")]


def create_alert(message: str, param: str) -> dict[str, str]:
    """Return a generic success alert carrying *message* and *param*."""
    return {
        _header("alert"): message,
        _header("params"): param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A new {entity_name} is created with identifier {param}", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def create_failure_alert(entity_name: str, error_key: str, message: str) -> dict[str, str]:
    """Return a failure alert.

    ``error`` holds the message key (``error.<error_key>``) so clients can
    translate it; ``error-message`` carries the default English text.
    """
    return {
        _header("error"): f"error.{error_key}",
        _header("error-message"): message,
        _header("params"): entity_name,
    }

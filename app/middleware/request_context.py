"""Request ID and correlation ID middleware.

Generates or forwards the ids, echoes them on the response, and binds them
to the request context so log lines carry them. Client-provided values are
sanitized (length + character set) to prevent log injection.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import re
import uuid
from typing import Callable

from app.middleware._asgi import get_header, with_response_header
from app.shared.context import set_correlation_id, set_request_id

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
ID_MAX_LENGTH = 64
ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def sanitize_id(raw: str | None) -> str | None:
    """Return raw (stripped) if it is a safe id, else None."""
    if not raw or not ID_ALLOWED_PATTERN.match(raw.strip()):
        return None
    return raw.strip()


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_id(get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        set_request_id(request_id)
        await app(scope, receive, with_response_header(send, header_name, request_id))

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Forward the correlation id; fall back to the request id, then a new UUID. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (
            sanitize_id(get_header(scope, header_name))
            or scope.get("state", {}).get("request_id")
            or str(uuid.uuid4())
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        set_correlation_id(correlation_id)
        await app(
            scope, receive, with_response_header(send, header_name, correlation_id)
        )

    return asgi_app

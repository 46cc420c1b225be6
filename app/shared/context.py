"""Request context management using contextvars.

Holds the request and correlation ids for the current request so log
records emitted anywhere during the request (including the concurrent
searcher tasks, which copy the context) can be tagged with them.

Usage:
    set_request_id("abc")
    set_correlation_id("xyz")
    ctx = get_request_context()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request ids."""

    request_id: str | None
    correlation_id: str | None


def set_request_id(request_id: str | None) -> None:
    """Set the request id for the current task (middleware only)."""
    _request_id.set(request_id)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation id for the current task (middleware only)."""
    _correlation_id.set(correlation_id)


def get_request_context() -> RequestContext:
    """Return the ids for the current request (None outside a request)."""
    return RequestContext(
        request_id=_request_id.get(),
        correlation_id=_correlation_id.get(),
    )

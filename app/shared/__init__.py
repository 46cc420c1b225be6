"""Shared utilities: telemetry, request context, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import RequestContext, get_request_context
from app.shared.utils import ensure_utc, start_of_day_utc, to_naive_utc, utc_now

__all__ = [
    "RequestContext",
    "ensure_utc",
    "get_request_context",
    "start_of_day_utc",
    "to_naive_utc",
    "utc_now",
]

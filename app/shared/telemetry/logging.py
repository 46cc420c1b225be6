"""Logging configuration for the search service."""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import get_request_context

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
)


class RequestContextFilter(logging.Filter):
    """Attach request_id and correlation_id from the request context to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_request_context()
        record.request_id = ctx.request_id or "-"
        record.correlation_id = ctx.correlation_id or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging once at startup.

    Level comes from settings.log_level, forced to DEBUG when settings.debug
    is True. Output goes to stdout. SQLAlchemy engine logging stays at WARNING
    unless database_echo is set.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


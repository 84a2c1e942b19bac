"""Logging configuration for the application."""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import get_organization_id, get_request_id

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[req=%(request_id)s org=%(organization_id)s] %(message)s"
)


class RequestContextFilter(logging.Filter):
    """Stamp request_id and organization_id ("-" when unset) on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        record.organization_id = get_organization_id() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO; per-search
    timing lines are logged at DEBUG. Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=[handler])
    if settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

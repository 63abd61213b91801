"""
Logging setup.

Every record is stamped with the id of the request being served (or "-" outside
a request), so a line in the log can be matched with the X-Request-ID header the
client received.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Optional

from app.core.config import get_settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s: %(message)s"


def get_request_id() -> str:
    """Get current request ID from context"""
    return request_id_var.get() or ""


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once. Safe to call repeatedly."""
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    for handler in root.handlers:
        if getattr(handler, "_portfolio_handler", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    handler._portfolio_handler = True
    root.addHandler(handler)

    # uvicorn's access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

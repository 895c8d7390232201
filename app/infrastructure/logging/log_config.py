"""Process-wide logging setup for the FurniTrack server and client.

Levels come from ``Settings``: one root level plus a level per noisy
category (SQL statements, outgoing HTTP calls, uvicorn lines). Output is
either plain text or one JSON object per line (``LOG_FORMAT=json``).

Call ``setup_logging()`` once from the FastAPI lifespan; calling it
again replaces the handler it installed earlier instead of adding one.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from app.config import get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers whose level it controls
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}

_HANDLER_NAME = "furnitrack"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def level_from_name(name: str) -> int:
    """``"warning"`` -> ``logging.WARNING``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    """Install the handler and apply every configured level."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if settings.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level_from_name(settings.log_level))

    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = level_from_name(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging ready (format=%s, root=%s, sql=%s, http=%s, uvicorn=%s)",
        settings.log_format,
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
    )

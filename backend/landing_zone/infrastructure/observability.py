"""Log formatting for the landing zone API.

JSONFormatter emits one object per record (timestamp, level, logger, message)
plus whichever EXTRA_FIELDS the caller passed via `extra=`: zone verdicts
carry zone/is_valid/elapsed_ms, handled errors carry error_code/path.
setup_logging() runs once from the app lifespan; LOG_FORMAT=text switches to
a plain formatter for local runs.
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("zone", "is_valid", "elapsed_ms", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

"""Logging setup for applications embedding contentstream.

The library itself only emits records through module loggers; nothing is
configured on import.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contentstream.config.models import ContentStreamConfig

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Attributes present on every LogRecord; anything else came in via ``extra``
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` attributes."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RESERVED or k in base:
                continue
            base[k] = v
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def configure_logging_from_config(config: ContentStreamConfig) -> logging.Logger:
    """Apply ``config.log_level`` and ``config.log_format``."""
    return configure_logging(config.log_level, config.log_format)


def configure_logging(level: str = "info", fmt: str = "text") -> logging.Logger:
    """Attach a single stream handler to the ``contentstream`` logger.

    Calling it again replaces the handler installed by the previous call.
    """
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}. Supported: {', '.join(_LEVELS)}")
    if fmt not in ("text", "json"):
        raise ValueError(f"Unknown log format: {fmt!r}. Supported: text, json")

    logger = logging.getLogger("contentstream")
    for handler in list(logger.handlers):
        if getattr(handler, "_contentstream", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._contentstream = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[level])
    return logger

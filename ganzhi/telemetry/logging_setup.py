"""Centralized logging configuration.

The library modules only create loggers under the ``ganzhi`` namespace and
never attach handlers themselves; applications (or :mod:`ganzhi.main`) call
:func:`configure_logging` once.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict

_RESERVED_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message"}


class JsonFormatter(logging.Formatter):
    """Serialize LogRecord fields as JSON for ingestion-friendly logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS:
                continue
            if key in payload:
                continue
            try:
                json.dumps({key: value})
            except TypeError:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "INFO",
    log_dir: Path | str | None = None,
    logger_name: str = "ganzhi",
) -> Logger:
    """Configure the package logger with JSON output.

    Records always go to stderr; when ``log_dir`` is given they are also
    written to ``<log_dir>/ganzhi.jsonl``, rotated at midnight.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "ganzhi.jsonl"
        handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_file": str(log_file) if log_file else None})
    return logger


__all__ = ["configure_logging", "JsonFormatter"]

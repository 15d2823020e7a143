from __future__ import annotations

import json
import logging
from pathlib import Path

from ganzhi.telemetry import JsonFormatter, configure_logging


def test_json_formatter_should_include_extra_fields() -> None:
    record = logging.LogRecord("ganzhi.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.stem = "JIA"
    record.unserializable = object()
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["name"] == "ganzhi.test"
    assert payload["stem"] == "JIA"
    assert "unserializable" not in payload
    assert "args" not in payload
    assert payload["timestamp"].endswith("+00:00")


def test_configure_logging_should_write_json_lines(tmp_path: Path) -> None:
    logger = configure_logging(level="debug", log_dir=tmp_path / "logs")
    assert logger.name == "ganzhi"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    logging.getLogger("ganzhi.combinations").warning("pair rejected", extra={"branch": "CHOU"})
    for handler in logger.handlers:
        handler.flush()
    lines = (tmp_path / "logs" / "ganzhi.jsonl").read_text(encoding="utf-8").splitlines()
    last = json.loads(lines[-1])
    assert last["message"] == "pair rejected"
    assert last["name"] == "ganzhi.combinations"
    assert last["branch"] == "CHOU"


def test_configure_logging_should_replace_previous_handlers() -> None:
    configure_logging(level="INFO")
    logger = configure_logging(level="WARNING")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING

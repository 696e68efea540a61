from __future__ import annotations

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from stableheap.queue.priority_queue import PriorityQueue
from stableheap.telemetry import JsonFormatter, configure_logging


def test_json_formatter_should_include_extra_fields() -> None:
    record = logging.LogRecord("stableheap.queue", logging.DEBUG, __file__, 1, "Queue cleared", None, None)
    record.dropped = 3
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "Queue cleared"
    assert payload["level"] == "DEBUG"
    assert payload["dropped"] == 3
    assert "msg" not in payload
    assert "levelno" not in payload


def test_configure_logging_should_write_queue_events(tmp_path: Path) -> None:
    logger = configure_logging(log_dir=tmp_path, level="DEBUG", logger_name="stableheap")
    queue: PriorityQueue[int] = PriorityQueue(initial=[2, 1])
    queue.clear()
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "stableheap_current.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line) for line in lines]
    cleared = [event for event in events if event["message"] == "Queue cleared"]
    assert cleared and cleared[0]["dropped"] == 2
    assert cleared[0]["name"] == "stableheap.queue"
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_configure_logging_without_dir_uses_stream_only() -> None:
    logger = configure_logging(level="info", logger_name="stableheap.test_stream")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert logger.propagate is False
    logger.handlers.clear()


def test_configure_logging_should_close_replaced_handlers(tmp_path: Path) -> None:
    logger = configure_logging(log_dir=tmp_path, level="INFO", logger_name="stableheap.test_reconfigure")
    file_handler = next(h for h in logger.handlers if isinstance(h, TimedRotatingFileHandler))
    assert file_handler.stream is not None

    configure_logging(level="INFO", logger_name="stableheap.test_reconfigure")

    assert file_handler not in logger.handlers
    assert file_handler.stream is None
    logger.handlers.clear()

from __future__ import annotations

import logging
import os

import orjson
import pytest
import structlog

from datadog_logs import LogFormatter
from datadog_logs.logging import (
    bind_trace_context,
    clear_trace_context,
    configure_logging,
    get_logger,
    shutdown_logging,
)


@pytest.fixture
def configured(capsys):
    formatter = configure_logging(level="DEBUG", sinks="stdio", formatter=LogFormatter(service="api", host="h"))
    yield formatter
    shutdown_logging()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    logging.getLogger().handlers = []


def _lines(capsys) -> list[dict]:
    out = capsys.readouterr().out
    return [orjson.loads(line) for line in out.splitlines() if line]


def test_structlog_event_is_rendered(configured, capsys) -> None:
    get_logger("orders").info("order placed", order_id=42)

    (doc,) = _lines(capsys)
    assert doc["message"] == "order placed"
    assert doc["level"] == "Information"
    assert doc["service"] == "api"
    assert doc["host"] == "h"
    assert doc["Properties"] == {"order_id": 42, "logger": "orders"}
    assert doc["dd"] == {}


def test_trace_context_is_merged(configured, capsys) -> None:
    bind_trace_context("111", "222")
    get_logger().warning("slow query")
    clear_trace_context()
    get_logger().warning("after")

    first, second = _lines(capsys)
    assert first["dd"] == {"span_id": "222", "trace_id": "111"}
    assert first["level"] == "Warning"
    assert second["dd"] == {}


def test_stdlib_records_are_redirected(configured, capsys) -> None:
    logging.getLogger("third.party").error("failed %s", "job")

    (doc,) = _lines(capsys)
    assert doc["message"] == "failed job"
    assert doc["level"] == "Error"
    assert doc["Properties"]["logger"] == "third.party"


def test_exception_is_rendered(configured, capsys) -> None:
    try:
        raise ValueError("bad")
    except ValueError:
        get_logger().exception("crashed")

    (doc,) = _lines(capsys)
    assert doc["level"] == "Error"
    assert "ValueError: bad" in doc["Exception"]


def test_level_filtering(capsys) -> None:
    configure_logging(level="WARNING", sinks="stdio", formatter=LogFormatter())
    try:
        get_logger().info("hidden")
        get_logger().error("shown")
        docs = _lines(capsys)
    finally:
        shutdown_logging()
        structlog.reset_defaults()
        logging.getLogger().handlers = []

    assert [d["message"] for d in docs] == ["shown"]



def test_file_sink_receives_lines(tmp_path) -> None:
    path = tmp_path / "dd.log"
    configure_logging(level="INFO", sinks="file", file_path=str(path), formatter=LogFormatter(tags=["a", "b"]))
    try:
        get_logger("jobs").info("done")
    finally:
        shutdown_logging()
        structlog.reset_defaults()
        logging.getLogger().handlers = []

    (line,) = path.read_text(encoding="utf-8").splitlines()
    doc = orjson.loads(line)
    assert doc["message"] == "done"
    assert doc["ddtags"] == "a,b"


def test_unencodable_values_do_not_reach_the_caller(configured, capsys) -> None:
    get_logger("fs").info("opened", path=os.fsdecode(b"/tmp/\xff"), inode=2**70)

    (doc,) = _lines(capsys)
    assert doc["message"] == "opened"
    assert doc["Properties"]["path"] == "/tmp/\\udcff"
    assert doc["Properties"]["inode"] == str(2**70)

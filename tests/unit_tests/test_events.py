from __future__ import annotations

import pytest

from datadog_logs.events import LogEvent, LogEventLevel


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("debug", LogEventLevel.DEBUG),
        ("INFO", LogEventLevel.INFORMATION),
        ("warn", LogEventLevel.WARNING),
        ("warning", LogEventLevel.WARNING),
        ("exception", LogEventLevel.ERROR),
        ("critical", LogEventLevel.FATAL),
        ("notset", LogEventLevel.VERBOSE),
        ("Information", LogEventLevel.INFORMATION),
        ("unknown", LogEventLevel.INFORMATION),
        (None, LogEventLevel.INFORMATION),
    ],
)
def test_level_from_name(name, expected) -> None:
    assert LogEventLevel.from_name(name) is expected


def test_template_defaults_to_rendered_message() -> None:
    assert LogEvent(rendered_message="hi").template == "hi"
    assert LogEvent(rendered_message="hi bob", message_template="hi {name}").template == "hi {name}"


def test_timestamp_is_timezone_aware() -> None:
    assert LogEvent(rendered_message="hi").timestamp.tzinfo is not None

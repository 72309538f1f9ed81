from __future__ import annotations

from datadog_logs.config import DatadogSettings, LoggingSettings, LogLevel, Settings


def test_datadog_settings_defaults(monkeypatch) -> None:
    for var in ("DD_SOURCE", "DD_SERVICE", "DD_HOST", "DD_HOSTNAME", "DD_TAGS"):
        monkeypatch.delenv(var, raising=False)
    s = DatadogSettings()
    assert s.source is None
    assert s.service is None
    assert s.host is None
    assert s.tag_list is None


def test_datadog_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DD_SOURCE", "python")
    monkeypatch.setenv("DD_HOST", "db-1")
    monkeypatch.setenv("DD_TAGS", "a:1,,b:2 ")
    s = DatadogSettings()
    assert s.source == "python"
    assert s.host == "db-1"
    assert s.tag_list == ["a:1", "b:2"]


def test_logging_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DD_LOG_SINKS", "stdio,file")
    s = LoggingSettings()
    assert s.level is LogLevel.DEBUG
    assert s.sinks == "stdio,file"
    assert s.file_path == "logs/datadog.log"


def test_composite_settings_expose_sub_settings_only(monkeypatch) -> None:
    monkeypatch.setenv("DD_SERVICE", "composite")
    s = Settings()
    assert s.datadog.service == "composite"
    assert s.logging.sinks == "stdio"
    assert not hasattr(s, "log_level")

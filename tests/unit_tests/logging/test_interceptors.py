from __future__ import annotations

import logging

import pytest

from datadog_logs.logging.interceptors import intercept_loggers


@pytest.fixture
def loggers():
    names = ["svc", "svc.http", "svc.http.access", "svcx", "other"]
    created = {name: logging.getLogger(name) for name in names}
    for lg in created.values():
        lg.addHandler(logging.NullHandler())
        lg.propagate = False
    yield created
    for lg in created.values():
        lg.handlers = []
        lg.propagate = True


def test_intercepts_root_and_children_only(loggers) -> None:
    intercept_loggers(["svc"])

    for name in ("svc", "svc.http", "svc.http.access"):
        assert loggers[name].handlers == []
        assert loggers[name].propagate is True

    for name in ("svcx", "other"):
        assert len(loggers[name].handlers) == 1
        assert loggers[name].propagate is False

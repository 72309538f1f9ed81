import pytest

from datadog_logs.context import EnrichmentContext, default_context


@pytest.fixture(autouse=True)
def clean_dd_environment(monkeypatch):
    """Each test starts without DD_ENV / DD_VERSION and with no shared overrides."""
    monkeypatch.delenv("DD_ENV", raising=False)
    monkeypatch.delenv("DD_VERSION", raising=False)
    default_context.reset()
    yield
    default_context.reset()


@pytest.fixture
def context() -> EnrichmentContext:
    return EnrichmentContext()

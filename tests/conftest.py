import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_MAX_DIGITS", "11")
    monkeypatch.delenv("DEFAULT_MAX_DECIMAL_PLACES", raising=False)

    from decimal_matcher.shared.config import get_settings

    get_settings.cache_clear()

import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("DATE_FORMAT", "%m/%d/%Y")

    from rental.shared.config import get_settings

    get_settings.cache_clear()

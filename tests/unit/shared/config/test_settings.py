import pytest

from rental.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.delenv("CURRENCY_SYMBOL", raising=False)
    monkeypatch.delenv("DATE_FORMAT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert s.JSON_LOGS is False
    assert s.CURRENCY_SYMBOL == "$"
    assert s.DATE_FORMAT == "%m/%d/%Y"


def test_settings_is_cached(monkeypatch):
    _reset_settings_cache()

    assert get_settings() is get_settings()


def test_settings_rejects_unknown_log_level(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_date_format_without_year(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DATE_FORMAT", "%m/%d")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_long_currency_symbol(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("CURRENCY_SYMBOL", "DOLLARS")

    # When & Then
    with pytest.raises(Exception):
        get_settings()

import pytest

from text_ai.config import get_settings


def test_defaults():
    settings = get_settings()
    assert settings.google_api_key == "test-key"
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.gemini_timeout_seconds == 30.0
    assert settings.max_text_length == 5000
    assert settings.rate_limit_max_requests == 15
    assert settings.rate_limit_window_seconds == 60


def test_missing_api_key_fails_fast(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    with pytest.raises(RuntimeError, match="GOOGLE_API_KEY"):
        get_settings()


def test_overrides_from_env(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "5")
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "2.5")
    settings = get_settings()
    assert settings.gemini_model == "gemini-2.5-pro"
    assert settings.rate_limit_max_requests == 5
    assert settings.gemini_timeout_seconds == 2.5


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_invalid_numbers_raise(monkeypatch, value):
    monkeypatch.setenv("CLASSIFIER_MAX_TEXT_LENGTH", value)
    with pytest.raises(RuntimeError, match="CLASSIFIER_MAX_TEXT_LENGTH"):
        get_settings()

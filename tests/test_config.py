import pytest
from pydantic import ValidationError

from config.settings import SignupConfig


def test_defaults(monkeypatch):
    for var in ("SIGNUP_API_URL", "SIGNUP_LOCALE", "SIGNUP_TIMEOUT", "SIGNUP_MAX_IMAGE_MB"):
        monkeypatch.delenv(var, raising=False)

    config = SignupConfig.from_env()

    assert config.locale == "ko"
    assert config.next_route == "/onboarding"
    assert config.max_image_bytes == 5 * 1024 * 1024


def test_from_env(monkeypatch):
    monkeypatch.setenv("SIGNUP_API_URL", "https://api.trip.example")
    monkeypatch.setenv("SIGNUP_TIMEOUT", "2.5")
    monkeypatch.setenv("SIGNUP_LOCALE", "en")
    monkeypatch.setenv("SIGNUP_MAX_IMAGE_MB", "2")

    config = SignupConfig.from_env()

    assert config.api_base_url == "https://api.trip.example"
    assert config.timeout == 2.5
    assert config.locale == "en"
    assert config.max_image_bytes == 2 * 1024 * 1024


def test_unknown_locale(monkeypatch):
    monkeypatch.setenv("SIGNUP_LOCALE", "fr")

    with pytest.raises(ValidationError):
        SignupConfig.from_env()

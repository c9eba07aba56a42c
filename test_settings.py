"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from apixu.api.constants import BASE_URL, DEFAULT_LANGUAGE, MAX_QUERY_LENGTH
from config.settings import Settings, get_settings, reload_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("APIXU_API_KEY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.apixu_api_key == ""
    assert settings.apixu_base_url == BASE_URL
    assert settings.request_timeout == 30
    assert settings.max_query_length == MAX_QUERY_LENGTH
    assert settings.default_language == DEFAULT_LANGUAGE
    assert settings.log_level == "INFO"
    assert not settings.has_api_key


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APIXU_API_KEY", "env-key")
    monkeypatch.setenv("REQUEST_TIMEOUT", "15")
    monkeypatch.setenv("DEFAULT_LANGUAGE", " FR ")

    settings = Settings(_env_file=None)

    assert settings.apixu_api_key == "env-key"
    assert settings.has_api_key
    assert settings.request_timeout == 15
    assert settings.default_language == "fr"


def test_placeholder_key_is_not_a_key():
    assert not Settings(_env_file=None, apixu_api_key="your_api_key_here").has_api_key


def test_base_url_gets_trailing_slash():
    settings = Settings(_env_file=None, apixu_base_url="https://api.example.test/v1")

    assert settings.apixu_base_url == "https://api.example.test/v1/"


@pytest.mark.parametrize("overrides", [
    {"apixu_base_url": "ftp://api.apixu.com/v1/"},
    {"request_timeout": 0},
    {"request_timeout": 500},
    {"max_query_length": 0},
    {"log_level": "VERBOSE"},
    {"default_language": "klingon"},
    {"default_language": ""},
])
def test_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_log_level_is_uppercased():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("APIXU_API_KEY", "first")
    first = reload_settings()

    monkeypatch.setenv("APIXU_API_KEY", "second")
    assert get_settings() is first

    assert reload_settings().apixu_api_key == "second"
    get_settings.cache_clear()

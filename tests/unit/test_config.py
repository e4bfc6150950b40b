"""
Unit tests for web_validate.config module.

Settings are built with _env_file=None so a local .env never leaks in.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from web_validate.config import Settings, get_settings
from web_validate.constants import IANA_TLD_LIST_URL


@pytest.fixture
def clean_env(monkeypatch):
    for name in [
        "WEB_VALIDATE_TLD_SOURCE_URL",
        "WEB_VALIDATE_REQUEST_TIMEOUT",
        "WEB_VALIDATE_CACHE_DIR",
        "WEB_VALIDATE_CACHE_TTL_DAYS",
        "WEB_VALIDATE_USE_CACHE",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.tld_source_url == IANA_TLD_LIST_URL
    assert settings.request_timeout == 30.0
    assert settings.cache_dir == Path("data/cache")
    assert settings.cache_ttl_days == 7
    assert settings.use_cache is True


def test_env_prefix(clean_env):
    clean_env.setenv("WEB_VALIDATE_TLD_SOURCE_URL", "  https://mirror.example.test/tlds.txt ")
    clean_env.setenv("WEB_VALIDATE_USE_CACHE", "false")
    clean_env.setenv("WEB_VALIDATE_REQUEST_TIMEOUT", "5")

    settings = Settings(_env_file=None)
    assert settings.tld_source_url == "https://mirror.example.test/tlds.txt"
    assert settings.use_cache is False
    assert settings.request_timeout == 5.0


def test_empty_ttl_means_no_expiry(clean_env):
    clean_env.setenv("WEB_VALIDATE_CACHE_TTL_DAYS", "")
    assert Settings(_env_file=None).cache_ttl_days is None


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("WEB_VALIDATE_CACHE_DIR=/tmp/tld-cache\n", encoding="utf-8")
    assert Settings(_env_file=env_file).cache_dir == Path("/tmp/tld-cache")


def test_invalid_timeout_rejected(clean_env):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, request_timeout=0)


def test_negative_ttl_rejected(clean_env):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cache_ttl_days=-1)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

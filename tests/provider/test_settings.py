"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from vscode_search.provider.settings import ProviderSettings, _get_settings_cached, get_settings


def test_defaults() -> None:
    settings = ProviderSettings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.config_dir is None


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEARCHPROVIDER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SEARCHPROVIDER_CONFIG_DIR", "/tmp/config")

    settings = ProviderSettings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.config_dir == "/tmp/config"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("SEARCHPROVIDER_LOG_LEVEL", "DEBUG")
    assert get_settings() is first

    _get_settings_cached.cache_clear()
    assert get_settings().log_level == "DEBUG"

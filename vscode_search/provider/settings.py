"""Service configuration loaded from SEARCHPROVIDER_* environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Search provider service settings.

    All fields are read from environment variables with the ``SEARCHPROVIDER_``
    prefix.  For example, ``SEARCHPROVIDER_LOG_LEVEL=DEBUG`` maps to ``log_level``.

    The list of supported editors is **not** configurable here; it is fixed in
    ``vscode_search.provider.definitions`` and must match the provider files
    installed for gnome-shell.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCHPROVIDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Editor storage --------------------------------------------------------
    config_dir: str | None = None
    """Override for the user configuration directory (``$XDG_CONFIG_HOME``).

    Each editor keeps its ``storage.json`` in ``{config_dir}/{dirname}/``.
    When unset, the directory is resolved through GLib at startup.
    """


def get_settings() -> ProviderSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``_get_settings_cached.cache_clear()`` in tests to
    force a re-read after overriding env vars.
    """
    return _get_settings_cached()


def _get_settings_cached() -> ProviderSettings:
    """Inner function wrapped by lru_cache (allows type-safe cache_clear)."""
    return ProviderSettings()


from functools import lru_cache  # noqa: E402

_get_settings_cached = lru_cache(maxsize=1)(_get_settings_cached)

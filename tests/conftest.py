"""Shared test fixtures.

Everything runs against temporary storage files and fake launchers; no
session bus or installed editor is required.  Tests for the bus and GObject
glue skip themselves when those bindings are not installed.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from vscode_search.provider.settings import _get_settings_cached


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from SEARCHPROVIDER_* variables of the calling shell."""
    for key in ("SEARCHPROVIDER_LOG_LEVEL", "SEARCHPROVIDER_CONFIG_DIR"):
        monkeypatch.delenv(key, raising=False)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()

"""Unit tests for service startup helpers.

Uses a mocked bus connection and mocked application lookup; requires the
dbus-python and PyGObject bindings.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

dbus = pytest.importorskip("dbus")
pytest.importorskip("gi")

from vscode_search.provider.app import (  # noqa: E402
    BUS_NAME,
    ServiceNameUnavailableError,
    acquire_bus_name,
    register_search_providers,
    resolve_config_dir,
)
from vscode_search.provider.definitions import PROVIDERS  # noqa: E402
from vscode_search.provider.settings import ProviderSettings  # noqa: E402
from vscode_search.provider.store.local import StorageFile  # noqa: E402

pytestmark = pytest.mark.dbus


def _find_only(*installed: str):
    def _find(desktop_id: str) -> MagicMock | None:
        if desktop_id not in installed:
            return None
        app = MagicMock()
        app.get_id.return_value = desktop_id
        return app

    return _find


def test_register_only_installed_providers(tmp_path: Path) -> None:
    bus = MagicMock()
    registered = register_search_providers(bus, tmp_path, PROVIDERS, find=_find_only("code-oss.desktop"))

    assert [p.definition.desktop_id for p in registered] == ["code-oss.desktop"]
    provider = registered[0]
    assert provider.service.app_id == "code-oss.desktop"
    assert provider.bus_object.service is provider.service

    source = provider.service.index.source
    assert isinstance(source, StorageFile)
    assert source.path == tmp_path / "Code - OSS" / "storage.json"


def test_register_nothing_installed(tmp_path: Path) -> None:
    assert register_search_providers(MagicMock(), tmp_path, PROVIDERS, find=_find_only()) == []


def test_registered_providers_have_independent_indexes(tmp_path: Path) -> None:
    registered = register_search_providers(
        MagicMock(), tmp_path, PROVIDERS, find=_find_only("code-oss.desktop", "visual-studio-code.desktop")
    )
    assert len(registered) == 2
    assert registered[0].service.index is not registered[1].service.index


def test_acquire_bus_name() -> None:
    bus = MagicMock()
    bus.request_name.return_value = dbus.bus.REQUEST_NAME_REPLY_PRIMARY_OWNER

    acquire_bus_name(bus)

    bus.request_name.assert_called_once_with(BUS_NAME, dbus.bus.NAME_FLAG_DO_NOT_QUEUE)


def test_acquire_bus_name_taken() -> None:
    bus = MagicMock()
    bus.request_name.return_value = dbus.bus.REQUEST_NAME_REPLY_EXISTS

    with pytest.raises(ServiceNameUnavailableError, match=BUS_NAME):
        acquire_bus_name(bus)


def test_acquire_bus_name_request_fails() -> None:
    bus = MagicMock()
    bus.request_name.side_effect = dbus.DBusException("access denied")

    with pytest.raises(ServiceNameUnavailableError, match="access denied"):
        acquire_bus_name(bus)


def test_resolve_config_dir_override(tmp_path: Path) -> None:
    settings = ProviderSettings(_env_file=None, config_dir=str(tmp_path))
    assert resolve_config_dir(settings) == tmp_path


def test_resolve_config_dir_default() -> None:
    settings = ProviderSettings(_env_file=None)
    assert resolve_config_dir(settings).is_absolute()

"""Search provider service startup.

Connects to the session bus, exports one search provider object for every
known VSCode variant that is installed, acquires ``BUS_NAME`` and then runs
the GLib main loop until ``SIGTERM`` or ``SIGINT``.

All bus messages are dispatched one at a time from the main loop, across all
providers.  Signals are delivered as main loop sources too, so the loop only
stops between two calls and never interrupts a call in flight.
"""

from __future__ import annotations

import signal
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import dbus
import dbus.bus
from dbus.mainloop.glib import DBusGMainLoop
from gi.repository import Gio, GLib  # type: ignore[missing-module-attribute]
from loguru import logger

from vscode_search.provider.definitions import PROVIDERS, ProviderDefinition
from vscode_search.provider.index import WorkspaceIndex
from vscode_search.provider.interface import SearchProviderObject
from vscode_search.provider.launcher import GioAppLauncher, find_app
from vscode_search.provider.service import SearchProviderService
from vscode_search.provider.settings import ProviderSettings
from vscode_search.provider.store.local import StorageFile

BUS_NAME = "de.swsnr.searchprovider.VSCode"
"""Well-known name shared by all providers of this service."""

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StartupError(RuntimeError):
    """The service cannot start; the process exits with a failure status."""


class ConfigDirUnavailableError(StartupError):
    def __init__(self) -> None:
        super().__init__("No configuration directory for current user!")


class ConnectionFailedError(StartupError):
    """Connecting to the session bus failed."""


class ServiceNameUnavailableError(StartupError):
    """``BUS_NAME`` could not be acquired, e.g. another instance owns it."""


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


@dataclass
class RegisteredProvider:
    definition: ProviderDefinition
    service: SearchProviderService
    bus_object: SearchProviderObject


def resolve_config_dir(settings: ProviderSettings) -> Path:
    """Return the user configuration directory that holds the editors' storage."""
    config_dir = settings.config_dir or GLib.get_user_config_dir()
    if not config_dir:
        raise ConfigDirUnavailableError
    return Path(config_dir)


def create_service(app: Gio.AppInfo, config_dir: Path) -> SearchProviderService:
    """Build the search provider service for an installed editor."""
    launcher = GioAppLauncher(app)
    index = WorkspaceIndex(launcher.app_id, StorageFile(config_dir))
    return SearchProviderService(launcher, index)


def register_search_providers(
    bus: dbus.bus.BusConnection,
    config_dir: Path,
    definitions: tuple[ProviderDefinition, ...] = PROVIDERS,
    *,
    find: Callable[[str], Gio.AppInfo | None] = find_app,
) -> list[RegisteredProvider]:
    """Export a search provider object for every installed editor.

    Editors which are not installed are skipped.
    """
    registered = []
    for definition in definitions:
        app = find(definition.desktop_id)
        if app is None:
            logger.debug("Skipping provider {}: {} not installed", definition.label, definition.desktop_id)
            continue

        logger.info("Registering provider for {} at {}", definition.desktop_id, definition.object_path)
        service = create_service(app, config_dir / definition.config_dirname)
        bus_object = SearchProviderObject(service, bus, definition.object_path)
        registered.append(RegisteredProvider(definition=definition, service=service, bus_object=bus_object))
    return registered


def acquire_bus_name(bus: dbus.bus.BusConnection, name: str = BUS_NAME) -> None:
    """Request ``name`` without queueing.  Raises ``ServiceNameUnavailableError``."""
    try:
        reply = bus.request_name(name, dbus.bus.NAME_FLAG_DO_NOT_QUEUE)
    except dbus.DBusException as exc:
        msg = f"Request to acquire name {name} failed: {exc}"
        raise ServiceNameUnavailableError(msg) from exc
    if reply != dbus.bus.REQUEST_NAME_REPLY_PRIMARY_OWNER:
        msg = f"Failed to acquire bus name {name} (reply from server: {reply})"
        raise ServiceNameUnavailableError(msg)


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def _install_signal_handlers(loop: GLib.MainLoop) -> None:
    def _quit(name: str) -> bool:
        logger.debug("{}, quitting mainloop", name)
        loop.quit()
        return GLib.SOURCE_REMOVE

    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM, _quit, "Terminated")
    GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT, _quit, "Interrupted")


def start_service(settings: ProviderSettings) -> None:
    """Run the search provider service until terminated.

    Raises a ``StartupError`` subclass if the service cannot start.
    """
    config_dir = resolve_config_dir(settings)

    DBusGMainLoop(set_as_default=True)
    try:
        bus = dbus.SessionBus()
    except dbus.DBusException as exc:
        msg = f"Failed to connect to session bus: {exc}"
        raise ConnectionFailedError(msg) from exc

    providers = register_search_providers(bus, config_dir)
    logger.info("{} provider(s) registered, acquiring {}", len(providers), BUS_NAME)
    acquire_bus_name(bus)
    logger.info("Acquired name {}, handling DBus events", BUS_NAME)

    loop = GLib.MainLoop()
    _install_signal_handlers(loop)
    loop.run()
    logger.info("Main loop stopped")

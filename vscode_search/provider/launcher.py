"""Editor launcher backed by the desktop application registry.

Looks up installed applications by desktop id through ``Gio.DesktopAppInfo``
and launches them with the default launch context, exactly as gnome-shell
would when the user clicks the application.
"""

from __future__ import annotations

from gi.repository import Gio, GLib  # type: ignore[missing-module-attribute]
from loguru import logger

from vscode_search.provider.service import LaunchFailedError

FALLBACK_ICON = "application-x-executable"


def find_app(desktop_id: str) -> Gio.DesktopAppInfo | None:
    """Return the installed application for ``desktop_id``, or ``None``."""
    return Gio.DesktopAppInfo.new(desktop_id)


class GioAppLauncher:
    """``AppLauncher`` for an installed desktop application."""

    def __init__(self, app: Gio.AppInfo) -> None:
        self.app = app

    @property
    def app_id(self) -> str:
        return self.app.get_id()

    def icon(self) -> str:
        icon = self.app.get_icon()
        if icon is None:
            logger.warning("App {} has no icon, using {}", self.app_id, FALLBACK_ICON)
            return FALLBACK_ICON
        return icon.to_string()

    def launch_uris(self, uris: list[str]) -> None:
        try:
            launched = self.app.launch_uris(uris, None)
        except GLib.Error as exc:
            msg = f"Failed to launch app {self.app_id} for {', '.join(uris)}: {exc.message}"
            raise LaunchFailedError(msg) from exc
        if not launched:
            msg = f"Failed to launch app {self.app_id} for {', '.join(uris)}"
            raise LaunchFailedError(msg)

    def launch(self) -> None:
        try:
            launched = self.app.launch([], None)
        except GLib.Error as exc:
            msg = f"Failed to launch app {self.app_id}: {exc.message}"
            raise LaunchFailedError(msg) from exc
        if not launched:
            msg = f"Failed to launch app {self.app_id}"
            raise LaunchFailedError(msg)

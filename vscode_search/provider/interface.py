"""D-Bus interface of the search provider.

Exposes a ``SearchProviderService`` as ``org.gnome.Shell.SearchProvider2``
and translates domain exceptions into D-Bus error replies.
"""

from __future__ import annotations

import dbus
import dbus.service

from vscode_search.provider.service import (
    LaunchFailedError,
    RefreshFailedError,
    ResultNotFoundError,
    SearchProviderService,
)

SEARCH_PROVIDER_IFACE = "org.gnome.Shell.SearchProvider2"


class FailedError(dbus.DBusException):
    _dbus_error_name = "org.freedesktop.DBus.Error.Failed"


class SpawnFailedError(dbus.DBusException):
    _dbus_error_name = "org.freedesktop.DBus.Error.SpawnFailed"


class SearchProviderObject(dbus.service.Object):
    """Bus object for one search provider.

    With ``conn=None`` the object is not exported, which is only useful in
    tests.
    """

    def __init__(self, service: SearchProviderService, conn=None, object_path: str | None = None) -> None:
        super().__init__(conn, object_path)
        self.service = service

    @dbus.service.method(SEARCH_PROVIDER_IFACE, in_signature="as", out_signature="as")
    def GetInitialResultSet(self, terms):  # noqa: N802
        try:
            return self.service.get_initial_result_set([str(term) for term in terms])
        except RefreshFailedError as exc:
            raise FailedError(str(exc)) from exc

    @dbus.service.method(SEARCH_PROVIDER_IFACE, in_signature="asas", out_signature="as")
    def GetSubsearchResultSet(self, previous_results, terms):  # noqa: N802
        return self.service.get_subsearch_result_set(
            [str(id_) for id_ in previous_results], [str(term) for term in terms]
        )

    @dbus.service.method(SEARCH_PROVIDER_IFACE, in_signature="as", out_signature="aa{sv}")
    def GetResultMetas(self, results):  # noqa: N802
        metas = self.service.get_result_metas([str(id_) for id_ in results])
        return [dbus.Dictionary(meta, signature="sv") for meta in metas]

    @dbus.service.method(SEARCH_PROVIDER_IFACE, in_signature="sasu", out_signature="")
    def ActivateResult(self, result_id, terms, timestamp):  # noqa: N802
        try:
            self.service.activate_result(str(result_id), [str(term) for term in terms], int(timestamp))
        except ResultNotFoundError as exc:
            raise FailedError(str(exc)) from exc
        except LaunchFailedError as exc:
            raise SpawnFailedError(str(exc)) from exc

    @dbus.service.method(SEARCH_PROVIDER_IFACE, in_signature="asu", out_signature="")
    def LaunchSearch(self, terms, timestamp):  # noqa: N802
        try:
            self.service.launch_search([str(term) for term in terms], int(timestamp))
        except LaunchFailedError as exc:
            raise SpawnFailedError(str(exc)) from exc

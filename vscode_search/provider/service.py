"""Search provider protocol logic.

Implements the five calls of gnome-shell's search provider protocol
(see https://developer.gnome.org/SearchProvider/) independent of the bus:

- ``get_initial_result_set``: refresh the index and rank all workspaces.
- ``get_subsearch_result_set``: narrow previous results, without refreshing.
- ``get_result_metas``: describe results for display.
- ``activate_result``: open a workspace in the editor.
- ``launch_search``: bring up the editor itself.

The service raises domain exceptions; translating them into bus errors is the
D-Bus interface's responsibility.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from loguru import logger

from vscode_search.provider.index import WorkspaceIndex
from vscode_search.provider.matching import find_matching_workspaces
from vscode_search.provider.store.base import StorageParseError, StorageReadError

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RefreshFailedError(RuntimeError):
    """Recent workspaces could not be read from storage."""

    def __init__(self, app_id: str, cause: Exception) -> None:
        super().__init__(f"Failed to update recent workspaces for {app_id}: {cause}")
        self.app_id = app_id


class ResultNotFoundError(LookupError):
    """A result id is not (or no longer) in the index."""

    def __init__(self, result_id: str) -> None:
        super().__init__(f"Result {result_id} not found")
        self.result_id = result_id


class LaunchFailedError(RuntimeError):
    """The editor could not be launched."""


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


class AppLauncher(Protocol):
    """The installed editor application behind a search provider."""

    @property
    def app_id(self) -> str:
        """Desktop id of the application, e.g. ``code-oss.desktop``."""
        ...

    def icon(self) -> str:
        """Textual representation of the application icon (``g_icon_to_string``)."""
        ...

    def launch_uris(self, uris: list[str]) -> None:
        """Launch the application with ``uris``.  Raises ``LaunchFailedError``."""
        ...

    def launch(self) -> None:
        """Launch the application without arguments.  Raises ``LaunchFailedError``."""
        ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class SearchProviderService:
    """Search provider for the recent workspaces of one VSCode variant."""

    def __init__(self, launcher: AppLauncher, index: WorkspaceIndex) -> None:
        self.launcher = launcher
        self.index = index

    @property
    def app_id(self) -> str:
        return self.launcher.app_id

    def get_initial_result_set(self, terms: Sequence[str]) -> list[str]:
        """Start a new search: re-read recent workspaces and rank all of them.

        Raises ``RefreshFailedError`` if storage cannot be read; the index is
        left empty in that case.
        """
        logger.debug("Searching for {} of {}", list(terms), self.app_id)
        try:
            self.index.refresh()
        except (StorageReadError, StorageParseError) as exc:
            logger.error("Failed to update recent workspaces for {} from {}: {}", self.app_id, self.index.source, exc)
            raise RefreshFailedError(self.app_id, exc) from exc

        ids = find_matching_workspaces(self.index.items(), terms)
        logger.debug("Found ids {} for {}", ids, self.app_id)
        return ids

    def get_subsearch_result_set(self, previous_results: Sequence[str], terms: Sequence[str]) -> list[str]:
        """Refine a search as the user types more characters.

        Only previous results still in the index are considered; the index is
        not refreshed.
        """
        logger.debug("Searching for {} in {} of {}", list(terms), list(previous_results), self.app_id)
        candidates = [(id_, workspace) for id_ in previous_results if (workspace := self.index.get(id_)) is not None]
        ids = find_matching_workspaces(candidates, terms)
        logger.debug("Found ids {} for {}", ids, self.app_id)
        return ids

    def get_result_metas(self, results: Sequence[str]) -> list[dict[str, str]]:
        """Return display metadata for ``results``; unknown ids are skipped.

        Each entry has ``id``, ``name``, ``gicon`` (a textual GIcon) and
        ``description`` (the workspace URL).
        """
        logger.debug("Getting meta info for {}", list(results))
        metas = []
        for id_ in results:
            workspace = self.index.get(id_)
            if workspace is None:
                continue
            icon = self.launcher.icon()
            logger.debug("Using icon {} for id {}", icon, id_)
            metas.append(
                {
                    "id": id_,
                    "name": workspace.name,
                    "gicon": icon,
                    "description": workspace.url,
                }
            )
        return metas

    def activate_result(self, result_id: str, terms: Sequence[str], timestamp: int) -> None:
        """Open the workspace ``result_id`` in the editor.

        Raises ``ResultNotFoundError`` for unknown ids and ``LaunchFailedError``
        if the editor fails to start.
        """
        logger.debug("Activating result {} for {} at {}", result_id, list(terms), timestamp)
        workspace = self.index.get(result_id)
        if workspace is None:
            logger.error("Workspace with ID {} not found", result_id)
            raise ResultNotFoundError(result_id)

        logger.info("Launching recent workspace {}", workspace.url)
        try:
            self.launcher.launch_uris([workspace.url])
        except LaunchFailedError as exc:
            logger.error("Failed to launch app {} for URL {}: {}", self.app_id, workspace.url, exc)
            raise

    def launch_search(self, terms: Sequence[str], timestamp: int) -> None:
        """Launch the editor itself.

        The editor has no way to show its recent workspaces from the command
        line, so it is simply started without arguments.
        """
        logger.debug("Launching search for {} at {}", list(terms), timestamp)
        logger.info("Launching app {} directly", self.app_id)
        try:
            self.launcher.launch()
        except LaunchFailedError as exc:
            logger.error("Failed to launch app {}: {}", self.app_id, exc)
            raise

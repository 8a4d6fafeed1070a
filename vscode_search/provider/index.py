"""In-process index of recent workspaces.

Maps result ids to workspaces for one provider.  Ephemeral -- rebuilt from
the editor's storage on every initial search and empty on process restart.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from vscode_search.provider.models.workspace import RecentWorkspace, WorkspaceNameError
from vscode_search.provider.store.base import WorkspaceSource


def workspace_id(app_id: str, url: str) -> str:
    """Result id of the workspace at ``url`` for the app ``app_id``."""
    return f"vscode-search-provider-{app_id}-{url}"


class WorkspaceIndex:
    """Ordered mapping of result id to recent workspace.

    Insertion order follows the order of the storage document and breaks ties
    when ranking matches.  Re-adding an existing id replaces the workspace but
    keeps its position.

    Only the owning search provider mutates the index, and all calls are
    dispatched from a single main loop, so no locking is needed.
    """

    def __init__(self, app_id: str, source: WorkspaceSource) -> None:
        self.app_id = app_id
        self.source = source
        self._workspaces: dict[str, RecentWorkspace] = {}

    # -- Mutation --------------------------------------------------------------

    def add(self, url: str) -> str:
        """Add the workspace at ``url`` and return its id.

        Raises ``WorkspaceNameError`` if no name can be derived from ``url``.
        """
        workspace = RecentWorkspace.from_url(url)
        id_ = workspace_id(self.app_id, url)
        self._workspaces[id_] = workspace
        return id_

    def clear(self) -> None:
        self._workspaces.clear()

    def refresh(self) -> None:
        """Rebuild the index from the workspace source.

        Clears the index first, so if reading the source fails the error
        propagates and the index stays empty.  URLs without a usable name are
        skipped with a warning.
        """
        logger.info("Updating recent workspaces for {}", self.app_id)
        self.clear()
        urls = self.source.read_workspace_urls()
        for url in urls:
            try:
                self.add(url)
            except WorkspaceNameError as exc:
                logger.warning("Skipping workspace: {}", exc)

        logger.info("Found {} workspace(s) for {}", len(self._workspaces), self.app_id)

    # -- Query -----------------------------------------------------------------

    def get(self, id_: str) -> RecentWorkspace | None:
        return self._workspaces.get(id_)

    def items(self) -> list[tuple[str, RecentWorkspace]]:
        """Return a snapshot of all ``(id, workspace)`` pairs in insertion order."""
        return list(self._workspaces.items())

    def __contains__(self, id_: object) -> bool:
        return id_ in self._workspaces

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._workspaces))

    def __len__(self) -> int:
        return len(self._workspaces)

"""Schema of the VSCode ``storage.json`` document.

Only the part listing recently opened paths is modelled; everything else in
the document is ignored.  The list comes in two generations which may both
be present in one file:

- ``openedPathsList.workspaces3``: plain URI strings (up to Code 1.54)
- ``openedPathsList.entries``: objects with ``folderUri`` / ``fileUri`` (from Code 1.55)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OpenedPathsEntry(BaseModel):
    """A single recently opened folder or file."""

    model_config = ConfigDict(populate_by_name=True)

    folder_uri: str | None = Field(default=None, alias="folderUri")
    file_uri: str | None = Field(default=None, alias="fileUri")


class OpenedPathsList(BaseModel):
    workspaces3: list[str] | None = None
    entries: list[OpenedPathsEntry] | None = None

    def folder_uris(self) -> list[str]:
        """Folder URIs of all entries, in order.  Recent files are skipped."""
        return [entry.folder_uri for entry in self.entries or [] if entry.folder_uri is not None]


class Storage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    opened_paths_list: OpenedPathsList | None = Field(default=None, alias="openedPathsList")

    def workspace_urls(self) -> list[str]:
        """All workspace URLs, modern entries first, then the legacy list.

        Duplicates are kept; the workspace index collapses them.
        """
        if self.opened_paths_list is None:
            return []
        return self.opened_paths_list.folder_uris() + list(self.opened_paths_list.workspaces3 or [])

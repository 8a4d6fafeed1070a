"""Data models for the search provider."""

from vscode_search.provider.models.storage import OpenedPathsEntry, OpenedPathsList, Storage
from vscode_search.provider.models.workspace import RecentWorkspace, WorkspaceNameError

__all__ = [
    "OpenedPathsEntry",
    "OpenedPathsList",
    "RecentWorkspace",
    "Storage",
    "WorkspaceNameError",
]

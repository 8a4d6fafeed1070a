"""Workspace sources for the search provider."""

from vscode_search.provider.store.base import StorageParseError, StorageReadError, WorkspaceSource
from vscode_search.provider.store.local import StorageFile, read_storage

__all__ = ["StorageFile", "StorageParseError", "StorageReadError", "WorkspaceSource", "read_storage"]

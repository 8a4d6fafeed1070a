"""Workspace source interface.

A workspace source yields the flat, ordered list of recently opened workspace
URLs for one editor.  It is read once per refresh of the workspace index and
never cached: every initial search sees the current state of the editor.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class StorageReadError(OSError):
    """The storage document could not be opened or read."""


class StorageParseError(ValueError):
    """The storage document is not valid JSON or does not match the expected shape."""


@runtime_checkable
class WorkspaceSource(Protocol):
    """Protocol for reading recent workspace URLs."""

    def read_workspace_urls(self) -> list[str]:
        """Return workspace URLs in storage order, duplicates included.

        Raises ``StorageReadError`` or ``StorageParseError``.
        """
        ...

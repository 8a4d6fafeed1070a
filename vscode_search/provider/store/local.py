"""Local ``storage.json`` reader.

VSCode variants keep their global UI state in a JSON document::

    {config_dir}/{dirname}/storage.json

where ``config_dir`` is the user configuration directory (usually
``~/.config``) and ``dirname`` depends on the variant, e.g. ``Code`` or
``Code - OSS``.

The file is small and local, so it is read synchronously on the dispatch
thread.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from vscode_search.provider.models.storage import Storage
from vscode_search.provider.store.base import StorageParseError, StorageReadError

STORAGE_FILENAME = "storage.json"


def read_storage(raw: str | bytes, *, source: str = "<memory>") -> Storage:
    """Parse a storage document.

    Raises ``StorageParseError`` if ``raw`` is not JSON or has the wrong shape.
    Missing sections are not an error; they simply contribute no URLs.
    """
    try:
        return Storage.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Failed to parse storage from {source}: {exc}"
        raise StorageParseError(msg) from exc


class StorageFile:
    """``WorkspaceSource`` backed by the ``storage.json`` of one editor."""

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    @property
    def path(self) -> Path:
        return self.config_dir / STORAGE_FILENAME

    def read(self) -> Storage:
        """Read and parse the storage file.

        Raises ``StorageReadError`` if the file cannot be read and
        ``StorageParseError`` if its content is malformed.
        """
        path = self.path
        try:
            raw = path.read_bytes()
        except OSError as exc:
            msg = f"Failed to open {path} for reading: {exc}"
            raise StorageReadError(msg) from exc
        return read_storage(raw, source=str(path))

    def read_workspace_urls(self) -> list[str]:
        return self.read().workspace_urls()

    def __repr__(self) -> str:
        return f"StorageFile({str(self.path)!r})"

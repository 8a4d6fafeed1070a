"""Fixtures for search provider unit tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from vscode_search.provider.index import WorkspaceIndex
from vscode_search.provider.service import LaunchFailedError, SearchProviderService
from vscode_search.provider.store.local import StorageFile

APP_ID = "code-oss.desktop"


class FakeLauncher:
    """In-memory ``AppLauncher`` recording every launch."""

    def __init__(self, app_id: str = APP_ID, *, fail: bool = False) -> None:
        self._app_id = app_id
        self.fail = fail
        self.launches: list[list[str]] = []

    @property
    def app_id(self) -> str:
        return self._app_id

    def icon(self) -> str:
        return ". GThemedIcon com.visualstudio.code.oss code-oss"

    def launch_uris(self, uris: list[str]) -> None:
        if self.fail:
            msg = f"Failed to launch app {self.app_id} for {', '.join(uris)}"
            raise LaunchFailedError(msg)
        self.launches.append(list(uris))

    def launch(self) -> None:
        self.launch_uris([])


def storage_document(urls: list[str]) -> dict:
    """A storage document listing ``urls`` as modern folder entries."""
    return {"openedPathsList": {"entries": [{"folderUri": url} for url in urls]}}


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / "Code - OSS"
    path.mkdir()
    return path


@pytest.fixture
def write_storage(config_dir: Path) -> Callable[[dict | list[str]], Path]:
    """Write a ``storage.json`` (a document, or a list of folder URLs)."""

    def _write(document: dict | list[str]) -> Path:
        if isinstance(document, list):
            document = storage_document(document)
        path = config_dir / "storage.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def index(config_dir: Path) -> WorkspaceIndex:
    return WorkspaceIndex(APP_ID, StorageFile(config_dir))


@pytest.fixture
def service(launcher: FakeLauncher, index: WorkspaceIndex) -> SearchProviderService:
    return SearchProviderService(launcher, index)

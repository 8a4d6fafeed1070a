"""Recent workspace value record."""

from __future__ import annotations

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceNameError(ValueError):
    """Raised when no display name can be derived from a workspace URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Failed to extract workspace name from URL {url!r}")
        self.url = url


class RecentWorkspace(BaseModel):
    """A recently opened workspace of a VSCode variant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human readable name, the last segment of the URL")
    url: str = Field(min_length=1, description="Workspace location, usually a file:// URI")

    @classmethod
    def from_url(cls, url: str) -> RecentWorkspace:
        """Derive a workspace from its URL.

        The name is the last non-empty segment of the URL path, so a trailing
        slash does not produce an empty name and the scheme or host never
        count as a name.  Raises ``WorkspaceNameError`` if the URL path has
        no such segment.
        """
        segments = [segment for segment in urlsplit(url).path.split("/") if segment]
        if not segments:
            raise WorkspaceNameError(url)
        return cls(name=segments[-1], url=url)

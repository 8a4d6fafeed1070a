"""Known VSCode variants exposed as search providers.

For each definition gnome-shell needs a matching search provider file
(``[Shell Search Provider]``) referring to the same desktop id, the same
object path and ``BUS_NAME``.  The object path must be unique for each
desktop id so that the service always launches the app the user expects.
"""

from __future__ import annotations

from dataclasses import dataclass

OBJECT_PATH_PREFIX = "/de/swsnr/searchprovider/vscode"


@dataclass(frozen=True)
class ProviderDefinition:
    """A search provider to expose from this service."""

    label: str
    """Human readable label, listed by ``--providers``."""

    desktop_id: str
    """Desktop file name of the editor, e.g. ``code-oss.desktop``."""

    relative_obj_path: str
    """Object path of the provider, relative to ``OBJECT_PATH_PREFIX``."""

    config_dirname: str
    """Directory of the editor below the user configuration directory."""

    @property
    def object_path(self) -> str:
        return f"{OBJECT_PATH_PREFIX}/{self.relative_obj_path}"


PROVIDERS: tuple[ProviderDefinition, ...] = (
    ProviderDefinition(
        label="Code OSS (Arch Linux)",
        desktop_id="code-oss.desktop",
        relative_obj_path="arch/codeoss",
        config_dirname="Code - OSS",
    ),
    # Binary AUR package: https://aur.archlinux.org/packages/visual-studio-code-bin/
    ProviderDefinition(
        label="Visual Studio Code",
        desktop_id="visual-studio-code.desktop",
        relative_obj_path="aur/visualstudiocode",
        config_dirname="Code",
    ),
    ProviderDefinition(
        label="VSCodium",
        desktop_id="codium.desktop",
        relative_obj_path="aur/vscodium",
        config_dirname="VSCodium",
    ),
)


def provider_labels(definitions: tuple[ProviderDefinition, ...] = PROVIDERS) -> list[str]:
    """Labels of all providers, sorted."""
    return sorted(definition.label for definition in definitions)

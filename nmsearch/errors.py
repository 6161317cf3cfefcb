"""Error taxonomy for workspace discovery and browsing.

User-facing failures (no workspace, missing or unreadable folders) are
reported through the host error notifier and end the command quietly.
``ManifestParseError`` is never caught by the command layer.
"""

from __future__ import annotations

from pathlib import Path


class NmSearchError(Exception):
    """Base class for errors raised by nmsearch."""


class NoWorkspaceError(NmSearchError):
    """No workspace folder is available to search."""

    def __init__(self) -> None:
        super().__init__("You must have a workspace opened.")


class NoDependencyFolderError(NmSearchError):
    """The dependency folder itself could not be listed."""

    def __init__(self, dependency_folder: str) -> None:
        self.dependency_folder = dependency_folder
        super().__init__(f"No {dependency_folder} folder in this workspace.")


class FolderUnreadableError(NmSearchError):
    """A folder other than the dependency folder could not be listed."""

    def __init__(self, folder: str) -> None:
        self.folder = folder
        super().__init__(f"Unable to open folder {folder}")


class ManifestParseError(NmSearchError, ValueError):
    """The monorepo manifest exists but does not hold a usable configuration."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid monorepo manifest {path}: {reason}")


__all__ = [
    "NmSearchError",
    "NoWorkspaceError",
    "NoDependencyFolderError",
    "FolderUnreadableError",
    "ManifestParseError",
]

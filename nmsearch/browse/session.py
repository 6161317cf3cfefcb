"""Interactive drill-down browse session over one workspace root.

A session moves through explicit states:

- ``Listing(folder)``: read ``folder``, clear last-visited memory, build entries
- ``Selecting(folder, entries)``: ask the picker, resolve the picked entry
- ``Resolved(path)``: a file was opened; terminal
- ``Cancelled(error)``: picker cancelled or folder unreadable; terminal

Every step waits for its collaborator before the next one starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import FolderUnreadableError, NmSearchError, NoDependencyFolderError
from ..host import HostDeps
from ..paths import folder_label, full_path, join_relative
from .entries import (
    DEPENDENCY_ROOT,
    ListingEntry,
    ShortcutEntry,
    build_listing,
    entry_labels,
    match_selection,
)
from .memory import LastVisited, LastVisitedStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Listing:
    folder: str


@dataclass(frozen=True)
class Selecting:
    folder: str
    entries: tuple[ListingEntry, ...]


@dataclass(frozen=True)
class Resolved:
    path: Path
    relative_path: str


@dataclass(frozen=True)
class Cancelled:
    """Session ended without opening a file; ``error`` is set for user-visible failures."""

    error: NmSearchError | None = None


BrowseStep = Listing | Selecting | Resolved | Cancelled


class BrowseSession:
    """Folder-by-folder browser rooted at ``workspace_root``."""

    def __init__(
        self,
        workspace_name: str,
        workspace_root: Path,
        *,
        dependency_folder: str,
        deps: HostDeps,
        store: LastVisitedStore,
    ) -> None:
        self.workspace_name = workspace_name
        self.workspace_root = Path(workspace_root)
        self.dependency_folder = dependency_folder
        self.deps = deps
        self.store = store

    @property
    def dependency_shortcut_label(self) -> str:
        """Label of the synthetic row that jumps back to the dependency folder."""
        return folder_label(self.workspace_name, self.dependency_folder)

    def header(self, folder: str) -> str:
        return folder_label(self.workspace_name, folder)

    def list_folder(self, folder: str) -> Selecting | Cancelled:
        """Read ``folder`` and build the entries offered for selection."""
        self.store.clear()
        target = full_path(self.workspace_root, folder)
        try:
            names = self.deps.list_directory(target)
        except OSError as exc:
            logger.debug("listing %s failed: %s", target, exc)
            if folder == self.dependency_folder:
                return Cancelled(error=NoDependencyFolderError(self.dependency_folder))
            return Cancelled(error=FolderUnreadableError(folder))

        entries = build_listing(
            names,
            at_dependency_root=folder == self.dependency_folder,
            dependency_shortcut_label=self.dependency_shortcut_label,
        )
        return Selecting(folder=folder, entries=entries)

    def select(self, state: Selecting) -> Listing | Resolved | Cancelled:
        """Present ``state`` to the picker and resolve the chosen entry.

        A stat failure on the chosen path propagates as ``OSError``.
        """
        selected = self.deps.pick(entry_labels(state.entries), self.header(state.folder))
        if selected is None:
            logger.debug("selection cancelled in %r", state.folder)
            return Cancelled()

        entry = match_selection(state.entries, selected)
        if isinstance(entry, ShortcutEntry) and entry.kind == DEPENDENCY_ROOT:
            return Listing(self.dependency_folder)

        relative_path = join_relative(state.folder, selected)
        target = full_path(self.workspace_root, relative_path)
        if self.deps.is_directory(target):
            return Listing(relative_path)

        self.store.set(
            LastVisited(
                workspace_name=self.workspace_name,
                workspace_root=self.workspace_root,
                folder=state.folder,
            )
        )
        logger.debug("opening %s", target)
        self.deps.open_document(target, relative_path)
        return Resolved(path=target, relative_path=relative_path)

    def step(self, state: BrowseStep) -> BrowseStep:
        """Advance one transition; terminal states are returned unchanged."""
        if isinstance(state, Listing):
            return self.list_folder(state.folder)
        if isinstance(state, Selecting):
            return self.select(state)
        return state

    def run(self, initial_folder: str | None = None) -> Resolved | Cancelled:
        """Drive the session until a file opens or the user cancels."""
        state: BrowseStep = Listing(self.dependency_folder if initial_folder is None else initial_folder)
        while not isinstance(state, (Resolved, Cancelled)):
            state = self.step(state)
        return state


__all__ = [
    "Listing",
    "Selecting",
    "Resolved",
    "Cancelled",
    "BrowseStep",
    "BrowseSession",
]

"""The search command: pick a workspace and package, then browse to a file.

``SearchCommand.run`` takes no arguments and can be invoked repeatedly; each
call either opens one document, reports one error, or ends silently when the
user cancels a picker.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from .browse import BrowseSession, Cancelled, LastVisitedStore, Resolved, process_last_visited_store
from .config import SearchPreferences
from .discovery import discover_module_dirs
from .errors import NoWorkspaceError
from .host import HostDeps
from .packages import WorkspaceRoot, select_package, select_workspace

logger = logging.getLogger(__name__)

SearchResult = Resolved | Cancelled
Discover = Callable[[Path, str, str], list[str]]


class SearchCommand:
    """Entry point wiring preferences, discovery, selection, and browsing."""

    def __init__(
        self,
        workspaces: Sequence[WorkspaceRoot],
        preferences: SearchPreferences,
        deps: HostDeps,
        *,
        store: LastVisitedStore | None = None,
        discover: Discover = discover_module_dirs,
    ) -> None:
        self.workspaces = list(workspaces)
        self.preferences = preferences
        self.deps = deps
        self.store = store if store is not None else process_last_visited_store()
        self.discover = discover

    def _session(self, name: str, root: Path) -> BrowseSession:
        return BrowseSession(
            name,
            root,
            dependency_folder=self.preferences.path,
            deps=self.deps,
            store=self.store,
        )

    def _finish(self, result: SearchResult) -> SearchResult:
        if isinstance(result, Cancelled) and result.error is not None:
            self.deps.notify_error(str(result.error))
        return result

    def run(self) -> SearchResult:
        """Run one search; manifest parse errors propagate to the caller."""
        remembered = self.store.get()
        if self.preferences.use_last_folder and remembered is not None:
            logger.debug("reopening last folder %r in %s", remembered.folder, remembered.workspace_root)
            session = self._session(remembered.workspace_name, remembered.workspace_root)
            return self._finish(session.run(remembered.folder))

        try:
            workspace = select_workspace(self.workspaces, self.deps.pick)
        except NoWorkspaceError as exc:
            return self._finish(Cancelled(error=exc))
        if workspace is None:
            return Cancelled()

        candidates = self.discover(workspace.path, self.preferences.path, self.preferences.discovery)
        target = select_package(workspace, candidates, self.deps.pick, self.preferences.path)
        if target is None:
            return Cancelled()

        logger.debug("browsing %s at %s", target.name, target.path)
        return self._finish(self._session(target.name, target.path).run())


__all__ = [
    "SearchResult",
    "SearchCommand",
]

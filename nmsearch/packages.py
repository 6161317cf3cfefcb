"""Workspace and package selection ahead of a browse session."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import NoWorkspaceError
from .paths import folder_label, full_path, last_segment

WORKSPACE_PLACEHOLDER = "Select workspace folder"
PACKAGE_PLACEHOLDER = "Select package"

Pick = Callable[[Sequence[str], str], str | None]


@dataclass(frozen=True)
class WorkspaceRoot:
    """One top-level project folder to search."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: Path | str) -> WorkspaceRoot:
        resolved = Path(path).resolve()
        return cls(name=resolved.name or str(resolved), path=resolved)


@dataclass(frozen=True)
class PackageTarget:
    """Browse root chosen for a session: display name plus absolute folder."""

    name: str
    path: Path


def select_workspace(workspaces: Sequence[WorkspaceRoot], pick: Pick) -> WorkspaceRoot | None:
    """Return the only workspace, or ask the picker when there are several.

    Raises ``NoWorkspaceError`` when ``workspaces`` is empty.
    """
    if not workspaces:
        raise NoWorkspaceError()
    if len(workspaces) == 1:
        return workspaces[0]

    choices = workspace_choices(workspaces)
    selected = pick([label for label, _workspace in choices], WORKSPACE_PLACEHOLDER)
    if selected is None:
        return None
    return next((workspace for label, workspace in choices if label == selected), None)


def workspace_choices(workspaces: Sequence[WorkspaceRoot]) -> list[tuple[str, WorkspaceRoot]]:
    """Return ``(label, workspace)`` pairs; workspaces sharing a name are labelled by full path."""
    name_counts = Counter(workspace.name for workspace in workspaces)
    return [
        (workspace.name if name_counts[workspace.name] == 1 else str(workspace.path), workspace)
        for workspace in workspaces
    ]


def package_choices(workspace: WorkspaceRoot, candidates: Sequence[str]) -> list[tuple[str, str]]:
    """Return ``(label, candidate)`` pairs, root first.

    Packages are labelled ``workspace/<folder name>``; when two packages share
    a folder name their full relative paths are used instead.
    """
    packages = [candidate for candidate in candidates if candidate]
    name_counts = Counter(last_segment(candidate) for candidate in packages)
    choices = [(workspace.name, "")]
    for candidate in packages:
        name = last_segment(candidate)
        suffix = name if name_counts[name] == 1 else candidate
        choices.append((folder_label(workspace.name, suffix), candidate))
    return choices


def select_package(
    workspace: WorkspaceRoot,
    candidates: Sequence[str],
    pick: Pick,
    dependency_folder: str,
) -> PackageTarget | None:
    """Resolve discovery ``candidates`` to the folder a session should browse.

    Returns ``None`` when the user cancels the package picker.
    """
    if not any(candidates):
        return PackageTarget(name=workspace.name, path=workspace.path)

    choices = package_choices(workspace, candidates)
    selected = pick([label for label, _candidate in choices], PACKAGE_PLACEHOLDER)
    if selected is None:
        return None

    candidate = next((candidate for label, candidate in choices if label == selected), "")
    if candidate:
        return PackageTarget(name=last_segment(candidate), path=full_path(workspace.path, candidate))
    return PackageTarget(
        name=folder_label(workspace.name, dependency_folder),
        path=workspace.path,
    )


__all__ = [
    "WORKSPACE_PLACEHOLDER",
    "PACKAGE_PLACEHOLDER",
    "WorkspaceRoot",
    "PackageTarget",
    "select_workspace",
    "workspace_choices",
    "package_choices",
    "select_package",
]

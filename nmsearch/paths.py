"""Relative-path helpers shared by discovery and browsing.

Folders are tracked as strings relative to a workspace root, always with
forward slashes. The empty string names the workspace root itself.
"""

from __future__ import annotations

import os
from pathlib import Path

PARENT_SEGMENT = ".."


def _normalize(joined: str) -> str:
    normalized = os.path.normpath(joined)
    if normalized == os.curdir:
        return ""
    return normalized.replace(os.sep, "/")


def join_relative(folder: str, name: str) -> str:
    """Join ``name`` under ``folder`` and collapse ``.``/``..`` segments.

    ``join_relative("a/b", "..")`` is ``"a"`` and ``join_relative("a", "")``
    is ``"a"``, matching how a plain path join resolves the browse shortcuts.
    """
    return _normalize(os.path.join(folder, name))


def parent_folder(folder: str) -> str:
    """Return ``folder`` moved up exactly one segment."""
    return join_relative(folder, PARENT_SEGMENT)


def full_path(root: Path | str, folder: str) -> Path:
    """Resolve a workspace-relative ``folder`` to a filesystem path under ``root``."""
    return Path(os.path.normpath(os.path.join(os.fspath(root), folder)))


def relative_to_root(root: Path | str, path: Path | str) -> str:
    """Return ``path`` relative to ``root`` (``""`` for the root itself)."""
    return _normalize(os.path.relpath(os.fspath(path), os.fspath(root)))


def folder_label(workspace_name: str, folder: str) -> str:
    """Build the ``workspace/folder`` label used for headers and shortcuts."""
    if not folder:
        return workspace_name
    return f"{workspace_name.rstrip('/')}/{folder}" if workspace_name else folder


def last_segment(folder: str) -> str:
    """Return the final path segment of a relative folder."""
    return folder.rstrip("/").rsplit("/", 1)[-1]


__all__ = [
    "PARENT_SEGMENT",
    "join_relative",
    "parent_folder",
    "full_path",
    "relative_to_root",
    "folder_label",
    "last_segment",
]

"""Recursive filesystem scan for manifest + dependency-folder pairs.

The walk runs level by level on a bounded thread pool. Dependency folders are
never descended into, and symlinked directories are not followed.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..paths import full_path, join_relative
from .manifest import MANIFEST_FILE

logger = logging.getLogger(__name__)

DEFAULT_SCAN_WORKERS = 8


@dataclass(frozen=True)
class DirectoryScan:
    """What one directory listing contributed to the scan."""

    relative_path: str
    is_candidate: bool
    subdirectories: tuple[str, ...] = ()


def scan_directory(root: Path, relative_path: str, dependency_folder: str) -> DirectoryScan:
    """List one directory and report whether it is a module directory.

    Unreadable directories are reported as non-candidates with no children.
    """
    directory = full_path(root, relative_path)
    has_manifest = False
    has_dependency_folder = False
    subdirectories: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                try:
                    if name == dependency_folder:
                        has_dependency_folder = child.is_dir()
                        continue
                    if child.is_dir(follow_symlinks=False):
                        subdirectories.append(name)
                    elif name == MANIFEST_FILE and child.is_file():
                        has_manifest = True
                except OSError:
                    continue
    except OSError as exc:
        logger.debug("skipping unreadable directory %s: %s", directory, exc)
        return DirectoryScan(relative_path=relative_path, is_candidate=False)

    subdirectories.sort(key=str.lower)
    return DirectoryScan(
        relative_path=relative_path,
        is_candidate=has_manifest and has_dependency_folder,
        subdirectories=tuple(join_relative(relative_path, name) for name in subdirectories),
    )


def scan_module_dirs(
    root: Path | str,
    dependency_folder: str,
    *,
    max_workers: int = DEFAULT_SCAN_WORKERS,
) -> list[str]:
    """Return every directory under ``root`` holding a manifest and ``dependency_folder``.

    The root itself is included (as ``""``) only when it qualifies.
    """
    root = Path(root)
    scan = partial(scan_directory, root, dependency_folder=dependency_folder)
    found: list[str] = []
    frontier = [""]
    with ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix="nmsearch-scan") as pool:
        while frontier:
            next_frontier: list[str] = []
            for result in pool.map(scan, frontier):
                if result.is_candidate:
                    found.append(result.relative_path)
                next_frontier.extend(result.subdirectories)
            frontier = next_frontier
    logger.debug("scan of %s found %d module directories", root, len(found))
    return found


__all__ = [
    "DEFAULT_SCAN_WORKERS",
    "DirectoryScan",
    "scan_directory",
    "scan_module_dirs",
]

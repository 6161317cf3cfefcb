"""Discovery of ``packages/<name>`` folders that carry their own dependencies."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .scan import DEFAULT_SCAN_WORKERS

PACKAGES_DIR = "packages"


def list_package_dirs(
    root: Path | str,
    dependency_folder: str,
    *,
    max_workers: int = DEFAULT_SCAN_WORKERS,
) -> list[str]:
    """Return ``packages/<name>`` entries whose dependency folder exists."""
    packages_path = Path(root) / PACKAGES_DIR
    try:
        names = sorted(os.listdir(packages_path), key=str.lower)
    except OSError:
        return []
    if not names:
        return []

    def has_dependency_folder(name: str) -> bool:
        return (packages_path / name / dependency_folder).exists()

    with ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix="nmsearch-packages") as pool:
        flags = list(pool.map(has_dependency_folder, names))
    return [f"{PACKAGES_DIR}/{name}" for name, present in zip(names, flags) if present]


__all__ = [
    "PACKAGES_DIR",
    "list_package_dirs",
]

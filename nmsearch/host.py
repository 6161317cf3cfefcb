"""Host collaborators consumed by selection and browsing.

The core never touches the terminal directly; it receives a ``HostDeps``
bundle of callables for filesystem queries, picking, opening documents, and
reporting errors.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path


def list_directory(path: Path) -> list[str]:
    """Return entry names in ``path``; raises ``OSError`` when unreadable."""
    return sorted(os.listdir(path), key=lambda name: (name.lower(), name))


def is_directory(path: Path) -> bool:
    """Stat ``path`` (following symlinks); raises ``OSError`` when it is gone."""
    return stat.S_ISDIR(os.stat(path).st_mode)


@dataclass(frozen=True)
class HostDeps:
    """Runtime collaborators required by :class:`SearchCommand` and sessions."""

    pick: Callable[[Sequence[str], str], str | None]
    open_document: Callable[[Path, str], None]
    notify_error: Callable[[str], None]
    list_directory: Callable[[Path], list[str]] = list_directory
    is_directory: Callable[[Path], bool] = is_directory


__all__ = [
    "HostDeps",
    "list_directory",
    "is_directory",
]

"""Last-visited folder memory shared across search invocations."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LastVisited:
    """Folder holding the most recently opened file."""

    workspace_name: str
    workspace_root: Path
    folder: str


class LastVisitedStore:
    """In-memory last-writer-wins holder for one ``LastVisited`` value."""

    def __init__(self, initial: LastVisited | None = None) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def get(self) -> LastVisited | None:
        with self._lock:
            return self._value

    def set(self, value: LastVisited) -> None:
        with self._lock:
            self._value = value

    def clear(self) -> None:
        with self._lock:
            self._value = None


_PROCESS_STORE = LastVisitedStore()


def process_last_visited_store() -> LastVisitedStore:
    """Return the store that lives for the lifetime of this process."""
    return _PROCESS_STORE


__all__ = [
    "LastVisited",
    "LastVisitedStore",
    "process_last_visited_store",
]

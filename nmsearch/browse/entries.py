"""Listing entries shown by a browse session.

Real directory entries and synthetic navigation rows are kept apart as
tagged variants; they become plain labels only when handed to the picker.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..paths import PARENT_SEGMENT

DEPENDENCY_ROOT = "dependency_root"
PARENT = "parent"


@dataclass(frozen=True)
class RealEntry:
    """A file or folder found in the listed directory."""

    name: str

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class SeparatorEntry:
    """Blank row between real entries and the shortcuts."""

    @property
    def label(self) -> str:
        return ""


@dataclass(frozen=True)
class ShortcutEntry:
    """Synthetic navigation row (dependency-folder root or one level up)."""

    kind: str
    label: str


ListingEntry = RealEntry | SeparatorEntry | ShortcutEntry


def build_listing(
    names: Sequence[str],
    *,
    at_dependency_root: bool,
    dependency_shortcut_label: str,
) -> tuple[ListingEntry, ...]:
    """Wrap directory ``names`` and append shortcuts unless already at the dependency root."""
    entries: list[ListingEntry] = [RealEntry(name) for name in names]
    if not at_dependency_root:
        entries.append(SeparatorEntry())
        entries.append(ShortcutEntry(kind=DEPENDENCY_ROOT, label=dependency_shortcut_label))
        entries.append(ShortcutEntry(kind=PARENT, label=PARENT_SEGMENT))
    return tuple(entries)


def entry_labels(entries: Sequence[ListingEntry]) -> list[str]:
    return [entry.label for entry in entries]


def match_selection(entries: Sequence[ListingEntry], label: str) -> ListingEntry | None:
    """Map a picked label back to its entry.

    The dependency-root shortcut wins over any other entry with the same label.
    """
    for entry in entries:
        if isinstance(entry, ShortcutEntry) and entry.kind == DEPENDENCY_ROOT and entry.label == label:
            return entry
    for entry in entries:
        if entry.label == label:
            return entry
    return None


__all__ = [
    "DEPENDENCY_ROOT",
    "PARENT",
    "RealEntry",
    "SeparatorEntry",
    "ShortcutEntry",
    "ListingEntry",
    "build_listing",
    "entry_labels",
    "match_selection",
]

"""Browse-session state machine, listing entries, and last-visited memory."""

from __future__ import annotations

from .entries import (
    DEPENDENCY_ROOT,
    PARENT,
    ListingEntry,
    RealEntry,
    SeparatorEntry,
    ShortcutEntry,
    build_listing,
    entry_labels,
    match_selection,
)
from .memory import LastVisited, LastVisitedStore, process_last_visited_store
from .session import BrowseSession, BrowseStep, Cancelled, Listing, Resolved, Selecting

__all__ = [
    "DEPENDENCY_ROOT",
    "PARENT",
    "ListingEntry",
    "RealEntry",
    "SeparatorEntry",
    "ShortcutEntry",
    "build_listing",
    "entry_labels",
    "match_selection",
    "LastVisited",
    "LastVisitedStore",
    "process_last_visited_store",
    "BrowseSession",
    "BrowseStep",
    "Listing",
    "Selecting",
    "Resolved",
    "Cancelled",
]

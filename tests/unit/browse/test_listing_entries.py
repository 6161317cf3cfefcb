"""Tests for tagged listing entries and selection matching."""

from __future__ import annotations

import unittest

from nmsearch.browse import (
    DEPENDENCY_ROOT,
    PARENT,
    RealEntry,
    SeparatorEntry,
    ShortcutEntry,
    build_listing,
    entry_labels,
    match_selection,
)


class BuildListingTests(unittest.TestCase):
    def test_shortcuts_follow_real_entries_outside_dependency_root(self) -> None:
        entries = build_listing(
            ["dep", "index.js"],
            at_dependency_root=False,
            dependency_shortcut_label="app/node_modules",
        )

        self.assertEqual(
            entries,
            (
                RealEntry("dep"),
                RealEntry("index.js"),
                SeparatorEntry(),
                ShortcutEntry(kind=DEPENDENCY_ROOT, label="app/node_modules"),
                ShortcutEntry(kind=PARENT, label=".."),
            ),
        )
        self.assertEqual(entry_labels(entries), ["dep", "index.js", "", "app/node_modules", ".."])

    def test_no_shortcuts_at_dependency_root(self) -> None:
        entries = build_listing(["dep"], at_dependency_root=True, dependency_shortcut_label="app/node_modules")

        self.assertEqual(entry_labels(entries), ["dep"])


class MatchSelectionTests(unittest.TestCase):
    def test_dependency_shortcut_wins_label_collisions(self) -> None:
        entries = build_listing(
            ["node_modules", "src"],
            at_dependency_root=False,
            dependency_shortcut_label="node_modules",
        )

        matched = match_selection(entries, "node_modules")

        self.assertEqual(matched, ShortcutEntry(kind=DEPENDENCY_ROOT, label="node_modules"))

    def test_real_and_parent_entries_match_by_label(self) -> None:
        entries = build_listing(["src"], at_dependency_root=False, dependency_shortcut_label="app/node_modules")

        self.assertEqual(match_selection(entries, "src"), RealEntry("src"))
        self.assertEqual(match_selection(entries, ".."), ShortcutEntry(kind=PARENT, label=".."))
        self.assertEqual(match_selection(entries, ""), SeparatorEntry())
        self.assertIsNone(match_selection(entries, "missing"))


if __name__ == "__main__":
    unittest.main()

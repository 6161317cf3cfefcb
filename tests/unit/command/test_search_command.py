"""Tests for the search command entry point.

Exercises workspace/package resolution, error notification, and the
last-folder shortcut across repeated invocations.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from nmsearch.browse import Cancelled, LastVisited, LastVisitedStore, Resolved
from nmsearch.command import SearchCommand
from nmsearch.config import SearchPreferences
from nmsearch.discovery import discover_module_dirs
from nmsearch.errors import ManifestParseError
from nmsearch.host import HostDeps
from nmsearch.packages import WorkspaceRoot


class ScriptedPicker:
    def __init__(self, answers: list[str | None]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[list[str], str]] = []

    def __call__(self, labels, placeholder: str) -> str | None:
        self.calls.append((list(labels), placeholder))
        return self.answers.pop(0)


class CountingDiscover:
    def __init__(self) -> None:
        self.calls: list[tuple[Path, str, str]] = []

    def __call__(self, root: Path, dependency_folder: str, strategy: str) -> list[str]:
        self.calls.append((root, dependency_folder, strategy))
        return discover_module_dirs(root, dependency_folder, strategy)


class SearchCommandTests(unittest.TestCase):
    def _command(
        self,
        workspaces: list[WorkspaceRoot],
        answers: list[str | None],
        preferences: SearchPreferences | None = None,
        store: LastVisitedStore | None = None,
        discover: CountingDiscover | None = None,
    ) -> tuple[SearchCommand, ScriptedPicker, list[Path], list[str]]:
        picker = ScriptedPicker(answers)
        opened: list[Path] = []
        errors: list[str] = []
        deps = HostDeps(
            pick=picker,
            open_document=lambda path, _title: opened.append(path),
            notify_error=errors.append,
        )
        command = SearchCommand(
            workspaces,
            preferences or SearchPreferences(),
            deps,
            store=store if store is not None else LastVisitedStore(),
            discover=discover or CountingDiscover(),
        )
        return command, picker, opened, errors

    def test_no_workspace_reports_error(self) -> None:
        command, picker, _opened, errors = self._command([], [])

        result = command.run()

        self.assertIsInstance(result, Cancelled)
        self.assertEqual(errors, ["You must have a workspace opened."])
        self.assertEqual(picker.calls, [])

    def test_workspace_without_dependency_folder_reports_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            workspace = WorkspaceRoot.from_path(tmp)
            command, picker, opened, errors = self._command([workspace], [])

            result = command.run()

            self.assertIsInstance(result, Cancelled)
            self.assertEqual(errors, ["No node_modules folder in this workspace."])
            self.assertEqual(picker.calls, [])
            self.assertEqual(opened, [])

    def test_monorepo_package_is_browsed_from_its_own_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "lerna.json").write_text(json.dumps({"packages": ["packages/*"]}), encoding="utf-8")
            package = root / "packages" / "foo"
            (package / "node_modules" / "left-pad").mkdir(parents=True)
            (package / "package.json").write_text("{}\n", encoding="utf-8")
            (package / "node_modules" / "left-pad" / "index.js").write_text("\n", encoding="utf-8")
            workspace = WorkspaceRoot.from_path(root)
            command, picker, opened, errors = self._command(
                [workspace],
                [f"{workspace.name}/foo", "left-pad", "index.js"],
            )

            result = command.run()

            self.assertIsInstance(result, Resolved)
            self.assertEqual(opened, [package.resolve() / "node_modules" / "left-pad" / "index.js"])
            self.assertEqual(errors, [])
            self.assertEqual(picker.calls[0][0], [workspace.name, f"{workspace.name}/foo"])
            self.assertEqual(picker.calls[1], (["left-pad"], "foo/node_modules"))

    def test_default_preferences_scan_for_packages_without_lerna_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            package = root / "a"
            (package / "node_modules" / "x").mkdir(parents=True)
            (package / "package.json").write_text("{}\n", encoding="utf-8")
            (package / "node_modules" / "x" / "index.js").write_text("\n", encoding="utf-8")
            workspace = WorkspaceRoot.from_path(root)
            command, picker, opened, errors = self._command(
                [workspace],
                [f"{workspace.name}/a", "x", "index.js"],
            )

            result = command.run()

            self.assertIsInstance(result, Resolved)
            self.assertEqual(picker.calls[0][0], [workspace.name, f"{workspace.name}/a"])
            self.assertEqual(opened, [package.resolve() / "node_modules" / "x" / "index.js"])
            self.assertEqual(errors, [])

    def test_cancelled_package_picker_aborts_silently(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "lerna.json").write_text(json.dumps({"packages": ["packages/*"]}), encoding="utf-8")
            (root / "packages" / "foo").mkdir(parents=True)
            (root / "packages" / "foo" / "package.json").write_text("{}\n", encoding="utf-8")
            command, picker, opened, errors = self._command([WorkspaceRoot.from_path(root)], [None])

            self.assertEqual(command.run(), Cancelled())
            self.assertEqual((opened, errors), ([], []))
            self.assertEqual(len(picker.calls), 1)

    def test_malformed_manifest_propagates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "lerna.json").write_text("{", encoding="utf-8")
            command, _picker, _opened, errors = self._command([WorkspaceRoot.from_path(root)], [])

            with self.assertRaises(ManifestParseError):
                command.run()
            self.assertEqual(errors, [])

    def test_last_folder_is_reopened_directly_when_enabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            deep = root / "node_modules" / "dep" / "dist"
            deep.mkdir(parents=True)
            (deep / "bundle.js").write_text("\n", encoding="utf-8")
            workspace = WorkspaceRoot.from_path(root)
            store = LastVisitedStore()
            discover = CountingDiscover()
            command, picker, opened, _errors = self._command(
                [workspace],
                ["dep", "dist", "bundle.js", "bundle.js"],
                preferences=SearchPreferences(use_last_folder=True),
                store=store,
                discover=discover,
            )

            command.run()
            self.assertEqual(store.get(), LastVisited(workspace.name, root, "node_modules/dep/dist"))
            self.assertEqual(len(discover.calls), 1)

            second = command.run()

            self.assertIsInstance(second, Resolved)
            self.assertEqual(len(discover.calls), 1)
            self.assertEqual(picker.calls[-1][1], f"{workspace.name}/node_modules/dep/dist")
            self.assertEqual(opened, [deep / "bundle.js", deep / "bundle.js"])

    def test_last_folder_is_ignored_when_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "node_modules").mkdir()
            workspace = WorkspaceRoot.from_path(root)
            store = LastVisitedStore(LastVisited(workspace.name, root, "node_modules/dep"))
            command, picker, _opened, _errors = self._command([workspace], [None], store=store)

            command.run()

            self.assertEqual(picker.calls[0][1], f"{workspace.name}/node_modules")


if __name__ == "__main__":
    unittest.main()

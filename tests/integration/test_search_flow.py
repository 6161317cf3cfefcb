"""End-to-end search flows over real monorepo fixtures.

Uses the line-prompt picker, the stdout document opener, and the stderr
notifier so the whole command runs exactly as it does without a tty.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path

from nmsearch.browse import LastVisitedStore, Resolved
from nmsearch.command import SearchCommand
from nmsearch.config import SearchPreferences
from nmsearch.host import HostDeps
from nmsearch.packages import WorkspaceRoot
from nmsearch.picker import PromptPicker
from nmsearch.ui_theme import PLAIN_THEME
from nmsearch.viewer import TerminalDocumentOpener, TerminalErrorNotifier


def _write(path: Path, text: str = "{}\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _build_monorepo(root: Path) -> None:
    _write(root / "package.json")
    (root / "node_modules" / "lerna").mkdir(parents=True)
    _write(root / "packages" / "web" / "package.json")
    _write(root / "packages" / "web" / "node_modules" / "react" / "index.js", "export default React;\n")
    _write(root / "packages" / "api" / "package.json")
    _write(root / "packages" / "api" / "node_modules" / "express" / "lib" / "router.js", "module.exports = router;\n")


class SearchFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name).resolve() / "mono"
        _build_monorepo(self.root)
        self.prompts = io.StringIO()
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self.store = LastVisitedStore()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def _command(self, answers: str, preferences: SearchPreferences) -> SearchCommand:
        notify_error = TerminalErrorNotifier(PLAIN_THEME, self.stderr)
        opener = TerminalDocumentOpener(notify_error=notify_error, nopager=True, stdout=self.stdout)
        picker = PromptPicker(stdin=io.StringIO(answers), stdout=self.prompts)
        deps = HostDeps(pick=picker.pick, open_document=opener.open, notify_error=notify_error)
        return SearchCommand([WorkspaceRoot.from_path(self.root)], preferences, deps, store=self.store)

    def test_scan_discovery_then_drill_down_and_reopen_last_folder(self) -> None:
        answers = "mono/web\n1\nindex.js\n..\n\n"
        command = self._command(answers, SearchPreferences(use_last_folder=True, discovery="scan"))

        first = command.run()
        second = command.run()

        self.assertIsInstance(first, Resolved)
        self.assertEqual(first.relative_path, "node_modules/react/index.js")
        self.assertEqual(self.stdout.getvalue(), "export default React;\n")
        prompts = self.prompts.getvalue()
        self.assertIn("Select package\n   1  mono\n   2  mono/api\n   3  mono/web\n", prompts)
        self.assertIn("web/node_modules/react\n", prompts)
        self.assertIn("   3  web/node_modules\n   4  ..\n", prompts)
        self.assertEqual(self.stderr.getvalue(), "")
        self.assertIsNone(second.error)
        self.assertIsNone(self.store.get())

    def test_manifest_discovery_reads_lerna_packages(self) -> None:
        _write(self.root / "lerna.json", json.dumps({"packages": ["packages/api"]}))
        command = self._command("mono/api\nexpress\nlib\nrouter.js\n", SearchPreferences(discovery="auto"))

        result = command.run()

        self.assertIsInstance(result, Resolved)
        self.assertEqual(result.path, self.root / "packages" / "api" / "node_modules" / "express" / "lib" / "router.js")
        self.assertIn("   2  mono/api\n", self.prompts.getvalue())
        self.assertNotIn("mono/web", self.prompts.getvalue())

    def test_root_package_without_dependency_folder_reports_error(self) -> None:
        (self.root / "node_modules" / "lerna").rmdir()
        (self.root / "node_modules").rmdir()
        command = self._command("mono\n", SearchPreferences(discovery="packages"))

        command.run()

        self.assertEqual(self.stderr.getvalue(), "Search node_modules: No node_modules folder in this workspace.\n")
        self.assertEqual(self.stdout.getvalue(), "")


if __name__ == "__main__":
    unittest.main()

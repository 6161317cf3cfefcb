"""Command-line front door for nmsearch.

Parses CLI options, merges them over the persisted preferences, and wires
the terminal picker, document opener, and error notifier into the search
command. The command is re-run after every opened file until a picker is
cancelled (or once, with ``--once``).
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from .browse import Resolved
from .command import SearchCommand
from .config import load_preferences, load_style, load_theme_name, save_preferences
from .discovery import DISCOVERY_STRATEGIES
from .errors import ManifestParseError
from .host import HostDeps
from .packages import WorkspaceRoot
from .picker import default_picker
from .ui_theme import available_theme_names, resolve_theme
from .viewer import TerminalDocumentOpener, TerminalErrorNotifier

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmsearch",
        description="Browse and open files inside node_modules folders of a workspace or monorepo.",
    )
    parser.add_argument(
        "workspaces",
        nargs="*",
        type=Path,
        help="Workspace folders to search. Defaults to the current directory.",
    )
    parser.add_argument("--path", default=None, help="Name of the dependency folder (default: node_modules).")
    parser.add_argument(
        "--use-last-folder",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reopen the folder of the last opened file on the next search.",
    )
    parser.add_argument(
        "--discovery",
        choices=DISCOVERY_STRATEGIES,
        default=None,
        help="How package folders are found (default: auto, lerna.json when present, otherwise a full scan).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for opened files.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--editor", action="store_true", help="Open files with $EDITOR instead of a pager.")
    parser.add_argument("--nopager", action="store_true", help="Print opened files directly to stdout.")
    parser.add_argument("--once", action="store_true", help="Exit after the first opened file.")
    parser.add_argument("--save", action="store_true", help="Persist --path/--use-last-folder/--discovery as defaults.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log discovery and browsing steps to stderr.")
    return parser


def resolve_workspaces(paths: Sequence[Path], default_path: Path) -> list[WorkspaceRoot]:
    """Turn CLI paths into workspace roots; missing or non-directory paths exit."""
    workspaces: list[WorkspaceRoot] = []
    for raw in paths or [default_path]:
        if not raw.exists():
            raise SystemExit(f"Path not found: {raw}")
        if not raw.is_dir():
            raise SystemExit(f"Not a directory: {raw}")
        workspaces.append(WorkspaceRoot.from_path(raw))
    return workspaces


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the search command.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is the only workspace.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    preferences = load_preferences().with_overrides(
        use_last_folder=args.use_last_folder,
        path=args.path,
        discovery=args.discovery,
    )
    if args.save:
        save_preferences(preferences)

    workspaces = resolve_workspaces(args.workspaces, default_path if default_path is not None else Path.cwd())
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    notify_error = TerminalErrorNotifier(theme)
    opener = TerminalDocumentOpener(
        notify_error=notify_error,
        style=args.style or load_style(),
        no_color=args.no_color,
        use_editor=args.editor,
        nopager=args.nopager,
    )
    picker = default_picker(theme)
    deps = HostDeps(pick=picker.pick, open_document=opener.open, notify_error=notify_error)
    command = SearchCommand(workspaces, preferences, deps)

    logger.debug("searching %s with %s", [str(w.path) for w in workspaces], preferences)
    try:
        while True:
            result = command.run()
            if args.once or not isinstance(result, Resolved):
                break
    except ManifestParseError as exc:
        raise SystemExit(str(exc)) from exc
    except KeyboardInterrupt:
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()

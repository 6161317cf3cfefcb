"""Document display and error reporting for the terminal host.

Opened files are syntax highlighted with Pygments and paged through
``$PAGER``, or handed to ``$EDITOR`` when editor mode is enabled.
Launch failures come back as messages for the error notifier.
"""

from __future__ import annotations

import os
import re
import shlex
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE
from .ui_theme import DEFAULT_THEME, UITheme

ERROR_PREFIX = "Search node_modules"
DEFAULT_PAGER = "less -R"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1, which accepts any byte
    sequence.
    """
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_text(encoding="latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes so minified bundles cannot move the cursor or ring the bell."""
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` for a terminal, picking the lexer from the file name."""
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, TerminalFormatter(style=normalize_style(style)))


def launch_command(cmd_env: str, default: str, target_args: list[str], *, input_text: str | None = None) -> str | None:
    """Run a user-configured command; returns an error message instead of raising."""
    cmd = shlex.split(cmd_env) if cmd_env.strip() else shlex.split(default)
    if not cmd:
        return "Cannot launch: command is empty."
    try:
        subprocess.run([*cmd, *target_args], input=input_text, text=input_text is not None, check=False)
    except OSError as exc:
        return f"Failed to launch {cmd[0]}: {exc}"
    return None


class TerminalDocumentOpener:
    """Show opened files in a pager, on stdout, or in ``$EDITOR``."""

    def __init__(
        self,
        *,
        notify_error: Callable[[str], None],
        style: str = DEFAULT_STYLE,
        no_color: bool = False,
        use_editor: bool = False,
        nopager: bool = False,
        stdout: TextIO | None = None,
    ) -> None:
        self.notify_error = notify_error
        self.style = style
        self.no_color = no_color
        self.use_editor = use_editor
        self.nopager = nopager
        self.stdout = stdout if stdout is not None else sys.stdout

    def _is_tty(self) -> bool:
        try:
            return os.isatty(self.stdout.fileno())
        except (AttributeError, OSError, ValueError):
            return False

    def render(self, path: Path) -> str:
        source = sanitize_terminal_text(read_text(path))
        if self.no_color or not self._is_tty():
            return source
        return colorize_source(source, path, self.style)

    def open(self, path: Path, title: str) -> None:
        """Display ``path``; ``title`` is its workspace-relative name."""
        if self.use_editor:
            editor = os.environ.get("EDITOR", "")
            if not editor.strip():
                self.notify_error("Cannot edit: $EDITOR is not set.")
                return
            error = launch_command(editor, "", [str(path)])
            if error:
                self.notify_error(error)
            return

        rendered = self.render(path)
        if self.nopager or not self._is_tty():
            self.stdout.write(rendered)
            self.stdout.flush()
            return

        error = launch_command(
            os.environ.get("PAGER", ""),
            DEFAULT_PAGER,
            [],
            input_text=f"==> {title} <==\n{rendered}",
        )
        if error:
            self.notify_error(error)
            self.stdout.write(rendered)


class TerminalErrorNotifier:
    """Write ``Search node_modules: <message>`` lines to stderr."""

    def __init__(self, theme: UITheme = DEFAULT_THEME, stream: TextIO | None = None) -> None:
        self.theme = theme
        self.stream = stream if stream is not None else sys.stderr

    def __call__(self, message: str) -> None:
        self.stream.write(f"{self.theme.error}{ERROR_PREFIX}: {message}{self.theme.reset}\n")
        self.stream.flush()


__all__ = [
    "ERROR_PREFIX",
    "DEFAULT_PAGER",
    "read_text",
    "sanitize_terminal_text",
    "normalize_style",
    "colorize_source",
    "launch_command",
    "TerminalDocumentOpener",
    "TerminalErrorNotifier",
]

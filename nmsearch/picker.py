"""Interactive label pickers used as the host selection collaborator.

``TerminalPicker`` draws a filterable list in raw mode: typing narrows the
list, arrows move, Enter picks, Esc or Ctrl-C cancels. ``PromptPicker`` is
the line-oriented fallback for non-tty input.
"""

from __future__ import annotations

import os
import shutil
import sys
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .fuzzy import fuzzy_match_labels
from .input import read_key
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

SEPARATOR_GLYPH = "─"
PICKER_CHROME_ROWS = 2


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def display_width(text: str) -> int:
    """Return terminal column width of ``text`` (wide chars count twice)."""
    return sum(_char_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = _char_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


@dataclass
class PickerState:
    """Query, filtered matches, and cursor for one pending selection."""

    labels: list[str]
    placeholder: str
    query: str = ""
    selected: int = 0
    list_start: int = 0
    match_indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.refresh_matches()

    def refresh_matches(self) -> None:
        """Recompute matches for the current query and reset the cursor."""
        self.match_indices = [idx for idx, _label, _score in fuzzy_match_labels(self.query, self.labels)]
        self.selected = 0
        self.list_start = 0

    def move_selection(self, delta: int) -> None:
        if not self.match_indices:
            return
        self.selected = max(0, min(len(self.match_indices) - 1, self.selected + delta))

    def ensure_visible(self, rows: int) -> None:
        """Scroll so the selected match sits inside a ``rows``-tall window."""
        rows = max(1, rows)
        if self.selected < self.list_start:
            self.list_start = self.selected
        elif self.selected >= self.list_start + rows:
            self.list_start = self.selected - rows + 1

    def current_label(self) -> str | None:
        if not self.match_indices:
            return None
        return self.labels[self.match_indices[self.selected]]


def handle_picker_key(state: PickerState, key: str, page_rows: int) -> tuple[bool, str | None]:
    """Apply one key to ``state``; returns ``(done, picked_label)``.

    ``done`` with a ``None`` label means the user cancelled.
    """
    if key in {"ESC", "CTRL_C", "\x03"}:
        return True, None
    if key == "ENTER":
        label = state.current_label()
        if label is None:
            return False, None
        return True, label
    if key in {"UP", "CTRL_P"}:
        state.move_selection(-1)
    elif key in {"DOWN", "CTRL_N", "TAB"}:
        state.move_selection(1)
    elif key == "PAGE_UP":
        state.move_selection(-max(1, page_rows))
    elif key == "PAGE_DOWN":
        state.move_selection(max(1, page_rows))
    elif key == "HOME":
        state.move_selection(-len(state.labels))
    elif key == "END":
        state.move_selection(len(state.labels))
    elif key == "BACKSPACE":
        if state.query:
            state.query = state.query[:-1]
            state.refresh_matches()
    elif key == "CTRL_U":
        if state.query:
            state.query = ""
            state.refresh_matches()
    elif len(key) == 1 and key.isprintable():
        state.query += key
        state.refresh_matches()
    return False, None


def render_picker_rows(state: PickerState, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Render header, query line, and the visible slice of matches."""
    width = max(1, width)
    list_rows = max(1, height - PICKER_CHROME_ROWS)
    state.ensure_visible(list_rows)

    count = f" {len(state.match_indices)}/{len(state.labels)}"
    header_text = clip_text(state.placeholder, max(0, width - display_width(count)))
    rows = [f"{theme.header}{header_text}{theme.reset}{theme.count}{count}{theme.reset}"]
    prompt = clip_text(f"> {state.query}", width)
    if state.query:
        rows.append(f"{theme.query}{prompt}{theme.reset}")
    else:
        rows.append(f"{prompt}{theme.hint}{clip_text(' type to filter', width - display_width(prompt))}{theme.reset}")

    visible = state.match_indices[state.list_start : state.list_start + list_rows]
    for offset, label_idx in enumerate(visible):
        label = state.labels[label_idx]
        is_selected = state.list_start + offset == state.selected
        if label:
            text = clip_text(f"  {label}", width)
        else:
            text = clip_text(f"  {SEPARATOR_GLYPH * 8}", width)
        if is_selected:
            padded = text + " " * max(0, width - display_width(text))
            rows.append(f"{theme.reverse}{padded}\033[0m")
        elif not label:
            rows.append(f"{theme.separator}{text}{theme.reset}")
        else:
            rows.append(text)
    return rows


class TerminalPicker:
    """Raw-mode list picker bound to a tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int, theme: UITheme = DEFAULT_THEME) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.theme = theme

    def pick(self, labels: Sequence[str], placeholder: str) -> str | None:
        state = PickerState(labels=list(labels), placeholder=placeholder)
        terminal = TerminalController(self.stdin_fd, self.stdout_fd)
        with terminal.raw_mode():
            while True:
                term = shutil.get_terminal_size((80, 24))
                terminal.write_screen(render_picker_rows(state, term.columns, term.lines, self.theme))
                key = read_key(self.stdin_fd)
                if not key:
                    return None
                done, label = handle_picker_key(state, key, max(1, term.lines - PICKER_CHROME_ROWS))
                if done:
                    return label


class PromptPicker:
    """Numbered-list picker reading one answer line per selection.

    An answer may be a row number, an exact label, or a unique substring.
    Blank input or end of input cancels.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stderr

    def _resolve_answer(self, labels: list[str], answer: str) -> str | None:
        if answer in labels:
            return answer
        if answer.isdigit():
            idx = int(answer) - 1
            return labels[idx] if 0 <= idx < len(labels) else None
        matches = [idx for idx, _label, _score in fuzzy_match_labels(answer, labels)]
        if len(matches) == 1:
            return labels[matches[0]]
        return None

    def pick(self, labels: Sequence[str], placeholder: str) -> str | None:
        options = list(labels)
        while True:
            self.stdout.write(f"{placeholder}\n")
            for idx, label in enumerate(options, start=1):
                self.stdout.write(f"{idx:>4}  {label or SEPARATOR_GLYPH * 8}\n")
            self.stdout.write("> ")
            self.stdout.flush()
            line = self.stdin.readline()
            answer = line.strip()
            if not answer:
                return None
            resolved = self._resolve_answer(options, answer)
            if resolved is not None:
                return resolved
            self.stdout.write(f"No unique match for {answer!r}.\n")


def default_picker(theme: UITheme = DEFAULT_THEME) -> TerminalPicker | PromptPicker:
    """Return a raw-mode picker when attached to a tty, otherwise a prompt picker."""
    if os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno()):
        return TerminalPicker(sys.stdin.fileno(), sys.stdout.fileno(), theme)
    return PromptPicker()


__all__ = [
    "SEPARATOR_GLYPH",
    "display_width",
    "clip_text",
    "PickerState",
    "handle_picker_key",
    "render_picker_rows",
    "TerminalPicker",
    "PromptPicker",
    "default_picker",
]

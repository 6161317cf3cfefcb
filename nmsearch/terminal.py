"""Terminal control helpers for the picker.

Owns raw-mode lifecycle and alternate-screen switching. The picker enters
raw mode only while a single selection is pending, so pagers and editors
launched afterwards see a normal terminal.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions for one tty."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_picker_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_picker_mode(self) -> None:
        """Show the cursor and restore the main screen buffer and tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write_screen(self, rows: list[str]) -> None:
        """Clear the screen and draw ``rows`` from the top-left corner."""
        payload = "\x1b[H\x1b[2J" + "\r\n".join(rows)
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with picker enter/exit calls."""
        try:
            self.enable_picker_mode()
            yield
        finally:
            self.disable_picker_mode()


__all__ = ["TerminalController"]

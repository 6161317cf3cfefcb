"""Raw-key decoding tests for the picker input loop.

Covers ESC timing, arrow and paging sequences, control-key tokens, and
multi-byte characters arriving split across reads.
"""

import os
import time
import unittest

from nmsearch import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_navigation_sequences(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[B\x1bOH\x1b[F\x1b[5~\x1b[6~", 6)

        self.assertEqual(keys, ["UP", "DOWN", "HOME", "END", "PAGE_UP", "PAGE_DOWN"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_control_keys(self) -> None:
        keys = self._read_all(b"\x03\x0e\x10\x15\t\x7f\r", 7)

        self.assertEqual(keys, ["CTRL_C", "CTRL_N", "CTRL_P", "CTRL_U", "TAB", "BACKSPACE", "ENTER"])

    def test_multibyte_character_is_read_whole(self) -> None:
        self.assertEqual(self._read_all("é@".encode("utf-8"), 2), ["é", "@"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])


if __name__ == "__main__":
    unittest.main()

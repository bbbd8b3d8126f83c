"""Regression tests for raw-key decoding and the echoed line editor.

Covers ESC timing, arrow/delete sequences, control-key token mapping,
UTF-8 input, and line editing in raw terminal mode.
"""

import os
import time
import unittest

from termsurvey import keys
from termsurvey.errors import InputError, InterruptError


class PipeKeySourceCase(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        self.echoed: list[str] = []
        self.source = keys.TerminalKeySource(self.read_fd, echo=self.echoed.append)

    def tearDown(self) -> None:
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def feed(self, data: bytes) -> None:
        os.write(self.write_fd, data)

    def close_writer(self) -> None:
        os.close(self.write_fd)
        self.write_fd = None


class ReadKeyTests(PipeKeySourceCase):
    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        self.feed(b"\x1b")
        started = time.monotonic()
        key = self.source.read_key()
        elapsed = time.monotonic() - started

        self.assertEqual(key, keys.ESC)
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.feed(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[3~")

        decoded = [self.source.read_key() for _ in range(5)]

        self.assertEqual(decoded, [keys.UP, keys.DOWN, keys.RIGHT, keys.LEFT, keys.DELETE])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.feed(b"\x1ba")

        self.assertEqual(self.source.read_key(), keys.ESC)
        self.assertEqual(self.source.read_key(), "a")

    def test_control_keys(self) -> None:
        self.feed(b"\x03\x04\x7f\x08\t\r\n\x15\x17\x18 ")

        decoded = [self.source.read_key() for _ in range(11)]

        self.assertEqual(
            decoded,
            [
                keys.INTERRUPT,
                keys.EOT,
                keys.BACKSPACE,
                keys.BACKSPACE,
                keys.TAB,
                keys.ENTER,
                keys.ENTER,
                keys.DELETE_LINE,
                keys.DELETE_WORD,
                keys.DELETE_LINE,
                keys.SPACE,
            ],
        )

    def test_multibyte_character_is_one_key(self) -> None:
        self.feed("é€".encode("utf-8"))

        self.assertEqual(self.source.read_key(), "é")
        self.assertEqual(self.source.read_key(), "€")

    def test_closed_stream_is_input_error(self) -> None:
        self.close_writer()

        with self.assertRaises(InputError):
            self.source.read_key()


class ReadLineTests(PipeKeySourceCase):
    def test_line_is_echoed_without_newline(self) -> None:
        self.feed(b"yes\r")

        self.assertEqual(self.source.read_line(), "yes")
        self.assertEqual(self.echoed, ["y", "e", "s"])

    def test_backspace_and_kill_line_edit_buffer(self) -> None:
        self.feed(b"ab\x7fc\x15xy\x7f\x7f\x7fz\r")

        self.assertEqual(self.source.read_line(), "z")
        self.assertIn("\b \b\b \b", self.echoed)

    def test_navigation_keys_are_ignored(self) -> None:
        self.feed(b"a\x1b[Ab\r")

        self.assertEqual(self.source.read_line(), "ab")

    def test_interrupt_raises(self) -> None:
        self.feed(b"ab\x03")

        with self.assertRaises(InterruptError):
            self.source.read_line()

    def test_eot_is_end_of_input(self) -> None:
        self.feed(b"\x04")

        with self.assertRaises(InputError):
            self.source.read_line()


if __name__ == "__main__":
    unittest.main()

"""Terminal control helpers for prompt sessions.

Owns raw-mode lifecycle, cursor visibility, and the line-erase sequences the
renderer uses to redraw a prompt in place. This is the only module that
emits escape sequences.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8"))

    def enable_raw_mode(self) -> None:
        """Switch stdin to raw mode so keys arrive one at a time."""
        tty.setraw(self.stdin_fd, termios.TCSADRAIN)

    def restore_mode(self) -> None:
        """Restore the tty attributes captured at construction."""
        termios.tcsetattr(self.stdin_fd, termios.TCSADRAIN, self._saved_tty_state)

    def hide_cursor(self) -> None:
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self.write("\x1b[?25h")

    @staticmethod
    def erase_lines_sequence(count: int) -> str:
        """Return sequence clearing the current line and ``count`` lines above it."""
        # Clear current line, then move up and clear each previous line.
        return "\r\x1b[2K" + "\x1b[1A\x1b[2K" * max(0, count)

    @contextlib.contextmanager
    def raw_mode(self, hide_cursor: bool = True):
        try:
            self.enable_raw_mode()
            if hide_cursor:
                self.hide_cursor()
            yield
        finally:
            if hide_cursor:
                self.show_cursor()
            self.restore_mode()


__all__ = ["TerminalController"]

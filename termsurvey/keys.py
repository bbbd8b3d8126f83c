"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Also provides the echoed line editor used by Confirm and Input prompts.
"""

from __future__ import annotations

import codecs
import os
import select
from collections.abc import Callable
from typing import Protocol

from .errors import InputError, InterruptError

ESC_SEQUENCE_TIMEOUT_MS = 25

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
ENTER = "ENTER"
ESC = "ESC"
TAB = "TAB"
SPACE = " "
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"
DELETE_WORD = "DELETE_WORD"
DELETE_LINE = "DELETE_LINE"
INTERRUPT = "INTERRUPT"
EOT = "EOT"

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": INTERRUPT,
    b"\x04": EOT,
    b"\x08": BACKSPACE,
    b"\x7f": BACKSPACE,
    b"\t": TAB,
    b"\r": ENTER,
    b"\n": ENTER,
    b"\x15": DELETE_LINE,
    b"\x17": DELETE_WORD,
    b"\x18": DELETE_LINE,
}


class KeySource(Protocol):
    """Blocking producer of decoded keys and edited lines."""

    def read_key(self) -> str: ...

    def read_line(self) -> str: ...


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


class TerminalKeySource:
    """Decode keys from a raw-mode file descriptor.

    Bytes read ahead while disambiguating an ESC sequence are kept per
    instance and replayed by the next ``read_key`` call.
    """

    def __init__(self, fd: int, echo: Callable[[str], None] | None = None) -> None:
        self.fd = fd
        self.echo = echo if echo is not None else (lambda _text: None)
        self._pending: list[bytes] = []

    def _next_byte(self) -> bytes:
        if self._pending:
            return self._pending.pop(0)
        try:
            ch = os.read(self.fd, 1)
        except OSError as exc:
            raise InputError(f"failed to read from terminal: {exc}") from exc
        if not ch:
            raise InputError("end of input")
        return ch

    def _decode_utf8(self, first: bytes) -> str:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        text = decoder.decode(first)
        while not text:
            text = decoder.decode(self._next_byte())
        return text

    def read_key(self) -> str:
        ch = self._next_byte()

        control = _CONTROL_KEYS.get(ch)
        if control is not None:
            return control
        if ch != b"\x1b":
            return self._decode_utf8(ch)

        # Escape / arrow key sequences.
        seq = _read_ready_byte(self.fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return ESC
        if seq != b"[":
            self._pending.append(seq)
            return ESC
        seq = _read_ready_byte(self.fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return ESC
        if seq == b"A":
            return UP
        if seq == b"B":
            return DOWN
        if seq == b"C":
            return RIGHT
        if seq == b"D":
            return LEFT
        if seq == b"3":
            tail = _read_ready_byte(self.fd, ESC_SEQUENCE_TIMEOUT_MS)
            if tail == b"~":
                return DELETE
        return ESC

    def read_line(self) -> str:
        """Read an echoed line until Enter.

        The terminating newline is not echoed; the renderer redraws the prompt
        line in place afterwards.
        """
        chars: list[str] = []
        while True:
            key = self.read_key()
            if key == ENTER:
                return "".join(chars)
            if key == INTERRUPT:
                raise InterruptError()
            if key == EOT:
                raise InputError("end of input")
            if key in {BACKSPACE, DELETE}:
                if chars:
                    chars.pop()
                    self.echo("\b \b")
                continue
            if key == DELETE_LINE:
                if chars:
                    self.echo("\b \b" * len(chars))
                    chars.clear()
                continue
            if len(key) == 1 and key.isprintable():
                chars.append(key)
                self.echo(key)


__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeySource",
    "TerminalKeySource",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "ENTER",
    "ESC",
    "TAB",
    "SPACE",
    "BACKSPACE",
    "DELETE",
    "DELETE_WORD",
    "DELETE_LINE",
    "INTERRUPT",
    "EOT",
]

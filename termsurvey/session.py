"""Prompt session: terminal ownership plus the read-transition-render loop.

A session bundles the terminal controller, key source, and renderer used by
one batch of prompts. The terminal is acquired per prompt through
``acquire()``, which restores raw mode and cursor visibility on every exit
path before any error propagates.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import termios
from collections.abc import Callable, Iterator
from typing import Any, Protocol

from .errors import InputError, InterruptError
from .keys import KeySource, TerminalKeySource
from .render import Renderer
from .selection import Outcome, SelectionMachine
from .terminal import TerminalController
from .theme import RenderConfig

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    def raw_mode(self, hide_cursor: bool = True) -> contextlib.AbstractContextManager[None]: ...


class PromptSession:
    """Synchronous owner of the terminal for the prompts it runs."""

    def __init__(self, terminal: Terminal, keys: KeySource, renderer: Renderer) -> None:
        self.terminal = terminal
        self.keys = keys
        self.renderer = renderer

    @classmethod
    def open(cls, config: RenderConfig | None = None, stdin=None, stdout=None) -> PromptSession:
        """Build a session bound to the process stdio (or the given streams)."""
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        try:
            terminal = TerminalController(stdin.fileno(), stdout.fileno())
        except (OSError, termios.error) as exc:
            raise InputError(f"cannot use terminal: {exc}") from exc
        return cls(
            terminal,
            TerminalKeySource(terminal.stdin_fd, echo=terminal.write),
            Renderer(terminal.write, config),
        )

    @property
    def config(self) -> RenderConfig:
        return self.renderer.config

    @contextlib.contextmanager
    def acquire(self, hide_cursor: bool = True) -> Iterator[PromptSession]:
        """Hold raw mode (and optionally a hidden cursor) for the block."""
        logger.debug("acquiring terminal (hide_cursor=%s)", hide_cursor)
        try:
            with self.terminal.raw_mode(hide_cursor=hide_cursor):
                yield self
        finally:
            logger.debug("terminal released")

    def read_key(self) -> str:
        try:
            return self.keys.read_key()
        except OSError as exc:
            raise InputError(f"failed to read key: {exc}") from exc

    def read_line(self) -> str:
        try:
            return self.keys.read_line()
        except OSError as exc:
            raise InputError(f"failed to read line: {exc}") from exc

    def run_selection(self, machine: SelectionMachine, draw: Callable[[], None]) -> Any:
        """Drive ``machine`` until Enter/EOT accepts or the interrupt key cancels.

        ``draw`` renders the machine's current state; it runs once before the
        first key and once after every non-terminal transition.
        """
        machine.start()
        with self.acquire():
            draw()
            while True:
                key = self.read_key()
                outcome = machine.handle_key(key)
                if outcome is Outcome.ACCEPT:
                    return machine.accept()
                if outcome is Outcome.CANCEL:
                    logger.debug("selection cancelled by interrupt key")
                    raise InterruptError()
                draw()


__all__ = ["PromptSession", "Terminal"]

"""Scripted terminal, key source, and session builders shared by prompt tests."""

from __future__ import annotations

import contextlib
import re
from collections import deque

from termsurvey.errors import InputError
from termsurvey.render import Renderer
from termsurvey.session import PromptSession
from termsurvey.theme import RenderConfig


class FakeTerminal:
    """Records raw-mode enter/exit pairs instead of touching a tty."""

    def __init__(self) -> None:
        self.events: list[tuple[str, bool]] = []

    @contextlib.contextmanager
    def raw_mode(self, hide_cursor: bool = True):
        self.events.append(("enter", hide_cursor))
        try:
            yield
        finally:
            self.events.append(("exit", hide_cursor))

    @property
    def restore_count(self) -> int:
        return sum(1 for event, _ in self.events if event == "exit")

    @property
    def acquire_count(self) -> int:
        return sum(1 for event, _ in self.events if event == "enter")


class ScriptedKeys:
    """Replays keys and lines; exception instances in the script are raised."""

    def __init__(self, keys=(), lines=()) -> None:
        self.keys = deque(keys)
        self.lines = deque(lines)

    def _next(self, queue: deque):
        if not queue:
            raise InputError("end of input")
        item = queue.popleft()
        if isinstance(item, BaseException):
            raise item
        return item

    def read_key(self) -> str:
        return self._next(self.keys)

    def read_line(self) -> str:
        return self._next(self.lines)


ERASE_RE = re.compile(r"<erase \d+>")


def erase_marker(count: int) -> str:
    """Stand-in erase sequence that records how many lines were cleared."""
    return f"<erase {count}>"


def make_session(keys=(), lines=(), config: RenderConfig | None = None):
    """Return ``(session, terminal, output_chunks)`` backed by fakes."""
    output: list[str] = []
    terminal = FakeTerminal()
    renderer = Renderer(
        output.append,
        config if config is not None else RenderConfig.build(no_color=True),
        erase_lines=erase_marker,
    )
    session = PromptSession(terminal, ScriptedKeys(keys, lines), renderer)
    return session, terminal, output


def plain_output(output: list[str]) -> str:
    """Visible text with erase markers dropped and CRLF folded to LF."""
    return ERASE_RE.sub("", "".join(output)).replace("\r\n", "\n")

"""Render channel that redraws prompt frames in place.

The renderer remembers how many lines the previous frame and the previous
error occupied, erases them, and writes the newly rendered template text.
Newlines are written as CRLF because raw mode disables output translation.
"""

from __future__ import annotations

from collections.abc import Callable

from .templates import ErrorFrame, Template, error_template
from .terminal import TerminalController
from .theme import RenderConfig


class Renderer:
    def __init__(
        self,
        write: Callable[[str], None],
        config: RenderConfig | None = None,
        erase_lines: Callable[[int], str] = TerminalController.erase_lines_sequence,
    ) -> None:
        self._write = write
        self.config = config if config is not None else RenderConfig()
        self._erase_lines = erase_lines
        self.line_count = 0
        self.error_line_count = 0

    def reset(self) -> None:
        """Forget drawn frames so the next question keeps earlier summaries."""
        self.line_count = 0
        self.error_line_count = 0

    def _emit(self, text: str) -> None:
        self._write(text.replace("\r\n", "\n").replace("\n", "\r\n"))

    def _reset(self, lines: int) -> None:
        self._write(self._erase_lines(lines))

    def render(self, template: Template, frame: object) -> str:
        """Replace the previous frame with ``template(frame)`` and return the text."""
        text = template(frame, self.config)
        self._reset(self.line_count)
        self._emit(text)
        self.line_count = text.count("\n")
        return text

    def error(self, exc: BaseException | str) -> str:
        """Show a validation error above the next frame.

        Errors are drawn on top, so the current frame and any earlier error
        are erased first.
        """
        text = error_template(ErrorFrame(str(exc)), self.config)
        self._reset(self.line_count + self.error_line_count)
        self.line_count = 0
        self._emit(text)
        self.error_line_count = text.count("\n")
        return text


__all__ = ["Renderer"]

"""Free-text prompt answered with a typed line."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..templates import InputFrame, Template, input_template
from .base import QuestionPrompt

if TYPE_CHECKING:
    from ..session import PromptSession


class Input(QuestionPrompt):
    """Echoed text input accepted with Enter. Response type is ``str``.

    An empty line answers with the default, which may be any value.
    """

    default_template = input_template

    def __init__(
        self,
        message: str = "",
        help: str = "",
        default: Any = None,
        template: Template | None = None,
    ) -> None:
        super().__init__(message, help, template)
        self.default = default

    def set_default(self, value: Any) -> Input:
        self.default = value
        return self

    def display_default(self) -> str:
        if self.default is None:
            return ""
        return str(self.default)

    def _frame(self, show_help: bool = False) -> InputFrame:
        return InputFrame(
            message=self.display_message(),
            help=self.display_help(),
            show_help=show_help,
            default_hint=self.display_default(),
        )

    def prompt(self, session: PromptSession) -> Any:
        renderer = session.renderer
        help_rune = session.config.help_rune
        with session.acquire(hide_cursor=False):
            renderer.render(self.template(), self._frame())
            while True:
                line = session.read_line()
                if line == help_rune and self.display_help():
                    renderer.render(self.template(), self._frame(show_help=True))
                    continue
                break
        if not line:
            return self.default
        return line

    def cleanup(self, session: PromptSession, answer: Any) -> None:
        frame = InputFrame(
            message=self.display_message(),
            help=self.display_help(),
            answer="" if answer is None else str(answer),
            show_answer=True,
        )
        session.renderer.render(self.template(), frame)


__all__ = ["Input"]

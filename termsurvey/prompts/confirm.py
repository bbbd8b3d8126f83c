"""Yes/no prompt answered with a typed line."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..errors import ValidationError
from ..templates import ConfirmFrame, Template, confirm_template
from .base import QuestionPrompt

if TYPE_CHECKING:
    from ..session import PromptSession

YES_RE = re.compile(r"y(?:es)?", re.IGNORECASE)
NO_RE = re.compile(r"n(?:o)?", re.IGNORECASE)


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class Confirm(QuestionPrompt):
    """Regular text input that accepts yes/no answers. Response type is ``bool``.

    An empty line answers with the default; anything unparsable is reported
    as invalid and asked again.
    """

    default_template = confirm_template

    def __init__(
        self,
        message: str = "",
        help: str = "",
        default: bool = False,
        template: Template | None = None,
    ) -> None:
        super().__init__(message, help, template)
        self.default = bool(default)

    def set_default(self, value: object) -> Confirm:
        self.default = bool(value)
        return self

    def display_default(self) -> str:
        return "(Y/n)" if self.default else "(y/N)"

    def _frame(self, show_help: bool = False, answer: str = "") -> ConfirmFrame:
        return ConfirmFrame(
            message=self.display_message(),
            help=self.display_help(),
            show_help=show_help,
            default_hint=self.display_default(),
            answer=answer,
        )

    def prompt(self, session: PromptSession) -> bool:
        renderer = session.renderer
        help_rune = session.config.help_rune
        show_help = False
        with session.acquire(hide_cursor=False):
            renderer.render(self.template(), self._frame())
            while True:
                line = session.read_line()
                if YES_RE.fullmatch(line):
                    return True
                if NO_RE.fullmatch(line):
                    return False
                if line == "":
                    return self.default
                if line == help_rune and self.display_help():
                    show_help = True
                    renderer.render(self.template(), self._frame(show_help=True))
                    continue
                self.error(session, ValidationError(f'"{line}" is not a valid answer, please try again.'))
                renderer.render(self.template(), self._frame(show_help=show_help))

    def cleanup(self, session: PromptSession, answer: object) -> None:
        session.renderer.render(self.template(), self._frame(answer=yes_no(bool(answer))))


__all__ = ["Confirm", "yes_no", "YES_RE", "NO_RE"]

"""Prompt capability protocols and the shared question text value.

Every prompt embeds a ``QuestionText`` (message, help, template override)
and satisfies ``Prompt``. Confirm/Input add the ``Defaulter`` capability;
Select/MultiSelect add ``Selection``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from ..options import Option
from ..pagination import Page
from ..templates import Template

if TYPE_CHECKING:
    from ..session import PromptSession


@dataclass
class QuestionText:
    message: str = ""
    help: str = ""
    template: Template | None = None


class Prompt(Protocol):
    def prompt(self, session: PromptSession) -> Any: ...

    def cleanup(self, session: PromptSession, answer: Any) -> None: ...

    def error(self, session: PromptSession, exc: BaseException) -> None: ...

    def display_message(self) -> str: ...

    def display_help(self) -> str: ...


class Defaulter(Prompt, Protocol):
    def set_default(self, value: Any) -> Defaulter: ...

    def display_default(self) -> str: ...


class Selection(Prompt, Protocol):
    def add_option(self, display: str, value: Any = None, default: bool = False) -> Selection: ...

    def add_string_option(self, display: str, default: bool = False) -> Selection: ...

    def set_filter_message(self, message: str) -> Selection: ...

    def display_filter_message(self) -> str: ...

    def set_vim_mode(self, vim_mode: bool) -> Selection: ...

    def set_page_size(self, page_size: int) -> Selection: ...

    def paginate(self, choices: Sequence[Option], selected_index: int = 0) -> Page[Option]: ...


class QuestionPrompt:
    """Holds the embedded question text and the setters every prompt shares."""

    default_template: Template

    def __init__(self, message: str = "", help: str = "", template: Template | None = None) -> None:
        self.question = QuestionText(message, help, template)

    def set_message(self, message: str):
        self.question.message = message
        return self

    def set_help(self, help: str):
        self.question.help = help
        return self

    def set_template(self, template: Template):
        self.question.template = template
        return self

    def display_message(self) -> str:
        return self.question.message

    def display_help(self) -> str:
        return self.question.help

    def template(self) -> Template:
        if self.question.template is not None:
            return self.question.template
        return type(self).default_template

    def error(self, session: PromptSession, exc: BaseException) -> None:
        session.renderer.error(exc)


__all__ = ["QuestionText", "Prompt", "Defaulter", "Selection", "QuestionPrompt"]

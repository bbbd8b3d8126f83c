"""Single-choice list prompt and the configuration shared with MultiSelect."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..options import DEFAULT_PAGE_SIZE, Option, OptionSet
from ..pagination import Page, paginate
from ..selection import SelectionMachine, SingleSelectMachine
from ..templates import SelectFrame, Template, select_template
from .base import QuestionPrompt

if TYPE_CHECKING:
    from ..session import PromptSession


class SelectionPrompt(QuestionPrompt, ABC):
    """Option list, page size, vim toggle, and filter message of a list prompt."""

    machine_class: type[SelectionMachine]

    def __init__(
        self,
        message: str = "",
        help: str = "",
        template: Template | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = False,
        filter_message: str = "",
    ) -> None:
        super().__init__(message, help, template)
        self.options = OptionSet()
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.filter_message = filter_message

    def add_option(self, display: str, value: Any = None, default: bool = False):
        self.options.add(display, value, default)
        return self

    def add_string_option(self, display: str, default: bool = False):
        self.options.add(display, display, default)
        return self

    def set_filter_message(self, message: str):
        self.filter_message = message
        return self

    def display_filter_message(self) -> str:
        return self.filter_message

    def set_vim_mode(self, vim_mode: bool):
        self.vim_mode = vim_mode
        return self

    def set_page_size(self, page_size: int):
        self.page_size = page_size
        return self

    def paginate(self, choices: Sequence[Option], selected_index: int = 0) -> Page[Option]:
        return paginate(choices, self.page_size, selected_index)

    def new_machine(self, session: PromptSession) -> SelectionMachine:
        return self.machine_class(
            self.options,
            help=self.display_help(),
            page_size=self.page_size,
            vim_mode=self.vim_mode,
            help_rune=session.config.help_rune,
            filter_message=self.filter_message,
        )

    def prompt(self, session: PromptSession) -> Any:
        machine = self.new_machine(session)
        return session.run_selection(
            machine,
            lambda: session.renderer.render(self.template(), self.frame(machine)),
        )

    @abstractmethod
    def frame(self, machine: SelectionMachine):
        """Build the render frame for the machine's current state."""


class Select(SelectionPrompt):
    """Presents options to pick one with the arrow keys and Enter.

    Response type is the chosen ``Option`` (unwrapped to its value by ``ask``)::

        prompt = Select(message="Choose a color:")
        prompt.add_string_option("red").add_string_option("blue", default=True)
        color = ask_one(prompt)
    """

    default_template = select_template
    machine_class = SingleSelectMachine

    def frame(self, machine: SelectionMachine) -> SelectFrame:
        page = machine.page()
        return SelectFrame(
            message=self.display_message(),
            help=self.display_help(),
            show_help=machine.state.help_visible,
            filter_message=machine.filter_message,
            entries=page.entries,
            selected_index=page.cursor,
        )

    def cleanup(self, session: PromptSession, answer: Any) -> None:
        frame = SelectFrame(
            message=self.display_message(),
            help=self.display_help(),
            answer=answer if isinstance(answer, Option) else None,
            show_answer=True,
        )
        session.renderer.render(self.template(), frame)


__all__ = ["SelectionPrompt", "Select"]

"""Multi-choice list prompt toggled with the space bar."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..options import Option
from ..selection import MultiSelectMachine, SelectionMachine
from ..templates import MultiSelectFrame, multiselect_template
from .select import SelectionPrompt

if TYPE_CHECKING:
    from ..session import PromptSession


class MultiSelect(SelectionPrompt):
    """Presents options to check with space and confirm with Enter.

    Response type is the list of checked ``Option`` objects in list order.
    Every option added with ``default=True`` starts checked.
    """

    default_template = multiselect_template
    machine_class = MultiSelectMachine

    def frame(self, machine: SelectionMachine) -> MultiSelectFrame:
        page = machine.page()
        return MultiSelectFrame(
            message=self.display_message(),
            help=self.display_help(),
            show_help=machine.state.help_visible,
            filter_message=machine.filter_message,
            entries=page.entries,
            selected_index=page.cursor,
            checked=dict(machine.state.checked),
        )

    def cleanup(self, session: PromptSession, answer: Any) -> None:
        chosen = [option for option in answer or () if isinstance(option, Option)]
        frame = MultiSelectFrame(
            message=self.display_message(),
            help=self.display_help(),
            answer=chosen,
            show_answer=True,
        )
        session.renderer.render(self.template(), frame)


__all__ = ["MultiSelect"]

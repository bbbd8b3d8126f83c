"""Keystroke state machines backing Select and MultiSelect.

Each key is classified into a key kind and dispatched through a
variant-specific ``KeyTransitionTable``. Non-terminal transitions refilter
the option set and clamp focus; accepting resolves the final answer.

Single select keeps a ``use_default`` flag from the start of the prompt
until the first arrow (or vim) navigation. Filter edits alone leave it set,
so typing a filter and pressing Enter still answers with the configured
default.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from . import keys
from .errors import ConfigurationError
from .key_registry import KeyBinding, KeyTransitionTable
from .options import DEFAULT_PAGE_SIZE, Option, OptionSet
from .pagination import Page, paginate

logger = logging.getLogger(__name__)

HELP = "HELP"
PRINTABLE = "PRINTABLE"
OTHER = "OTHER"

_NAMED_KINDS = frozenset(
    {
        keys.UP,
        keys.DOWN,
        keys.ENTER,
        keys.ESC,
        keys.SPACE,
        keys.BACKSPACE,
        keys.DELETE,
        keys.DELETE_WORD,
        keys.DELETE_LINE,
        keys.INTERRUPT,
        keys.EOT,
    }
)


class Outcome(enum.Enum):
    CONTINUE = "continue"
    ACCEPT = "accept"
    CANCEL = "cancel"


@dataclass
class SelectionState:
    focused_index: int = 0
    filter_text: str = ""
    checked: dict[str, bool] = field(default_factory=dict)
    vim_mode: bool = False
    help_visible: bool = False
    use_default: bool = False


class SelectionMachine(ABC):
    """Navigation, filtering, help, and vim transitions shared by both variants."""

    def __init__(
        self,
        options: OptionSet,
        *,
        help: str = "",
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = False,
        help_rune: str = "?",
        filter_message: str = "",
    ) -> None:
        self.options = options
        self.help = help
        self.page_size = page_size if page_size > 0 else DEFAULT_PAGE_SIZE
        self.help_rune = help_rune
        self.state = SelectionState(vim_mode=vim_mode)
        self.filter_message = filter_message
        self._key = ""
        self.table: KeyTransitionTable[Outcome] = self._build_table()

    def _build_table(self) -> KeyTransitionTable[Outcome]:
        table: KeyTransitionTable[Outcome] = KeyTransitionTable(fallback=self._ignore)
        return table.register_bindings(
            KeyBinding((keys.UP,), self._move_up),
            KeyBinding((keys.DOWN,), self._move_down),
            KeyBinding((HELP,), self._show_help),
            KeyBinding((keys.ESC,), self._toggle_vim_mode),
            KeyBinding((keys.DELETE_WORD, keys.DELETE_LINE), self._clear_filter),
            KeyBinding((keys.BACKSPACE, keys.DELETE), self._drop_filter_char),
            KeyBinding((PRINTABLE,), self._append_filter_char),
            KeyBinding((keys.ENTER, keys.EOT), self._accept),
            KeyBinding((keys.INTERRUPT,), self._cancel),
        )

    def start(self) -> None:
        """Seed state for a new prompt run; fails when there is nothing to pick."""
        if len(self.options) == 0:
            raise ConfigurationError("please provide options to select from")
        self.state.focused_index = 0
        self.state.filter_text = ""

    def classify(self, key: str) -> str:
        """Map a decoded key token to the kind used by the transition table."""
        if self.state.vim_mode and key == "k":
            return keys.UP
        if self.state.vim_mode and key == "j":
            return keys.DOWN
        if key == self.help_rune and self.help:
            return HELP
        if key in _NAMED_KINDS:
            return key
        if len(key) == 1 and key.isprintable():
            return PRINTABLE
        return OTHER

    def handle_key(self, key: str) -> Outcome:
        """Apply one keystroke and report whether the loop should continue."""
        kind = self.classify(key)
        self._key = key
        old_filter = self.state.filter_text
        outcome = self.table.dispatch(kind)
        if outcome is None:
            outcome = Outcome.CONTINUE
        if outcome is Outcome.CONTINUE:
            self._after_transition(old_filter)
        logger.debug("key %r -> %s (%s), focus=%d", key, kind, outcome.value, self.state.focused_index)
        return outcome

    def _after_transition(self, old_filter: str) -> None:
        state = self.state
        self.filter_message = f" {state.filter_text}" if state.filter_text else ""
        if state.filter_text == old_filter:
            return
        filtered = self.filtered()
        if filtered and state.focused_index >= len(filtered):
            state.focused_index = len(filtered) - 1

    def filtered(self) -> list[Option]:
        return self.options.filtered(self.state.filter_text)

    def page(self) -> Page[Option]:
        return paginate(self.filtered(), self.page_size, self.state.focused_index)

    def focused_option(self) -> Option | None:
        filtered = self.filtered()
        if 0 <= self.state.focused_index < len(filtered):
            return filtered[self.state.focused_index]
        return None

    def _move(self, direction: int) -> None:
        count = len(self.filtered())
        if count == 0:
            return
        self.state.focused_index = (self.state.focused_index + direction) % count

    def _move_up(self) -> Outcome:
        self._move(-1)
        return Outcome.CONTINUE

    def _move_down(self) -> Outcome:
        self._move(1)
        return Outcome.CONTINUE

    def _show_help(self) -> Outcome:
        self.state.help_visible = True
        return Outcome.CONTINUE

    def _toggle_vim_mode(self) -> Outcome:
        self.state.vim_mode = not self.state.vim_mode
        return Outcome.CONTINUE

    def _clear_filter(self) -> Outcome:
        self.state.filter_text = ""
        return Outcome.CONTINUE

    def _drop_filter_char(self) -> Outcome:
        self.state.filter_text = self.state.filter_text[:-1]
        return Outcome.CONTINUE

    def _append_filter_char(self) -> Outcome:
        self.state.filter_text += self._key
        return Outcome.CONTINUE

    def _accept(self) -> Outcome:
        return Outcome.ACCEPT

    def _cancel(self) -> Outcome:
        return Outcome.CANCEL

    def _ignore(self) -> Outcome:
        return Outcome.CONTINUE

    def _reset_filter(self) -> list[Option]:
        filtered = self.filtered()
        self.state.filter_text = ""
        self.filter_message = ""
        return filtered

    @abstractmethod
    def accept(self):
        """Resolve the answer once Enter or EOT is pressed."""


class SingleSelectMachine(SelectionMachine):
    """Single-choice variant: space is filter text, Enter honours the default."""

    def _build_table(self) -> KeyTransitionTable[Outcome]:
        table = super()._build_table()
        return table.register_binding(KeyBinding((keys.SPACE,), self._append_filter_char))

    def start(self) -> None:
        super().start()
        default = self.options.default
        if default is not None:
            idx = self.options.index_of(default)
            if idx is not None:
                self.state.focused_index = idx
        self.state.use_default = True

    def _move_up(self) -> Outcome:
        self.state.use_default = False
        return super()._move_up()

    def _move_down(self) -> Outcome:
        self.state.use_default = False
        return super()._move_down()

    def accept(self) -> Option | None:
        """Resolve the answer and reset the filter for the cleanup frame."""
        filtered = self._reset_filter()
        idx = self.state.focused_index
        if self.state.use_default or not (0 <= idx < len(filtered)):
            if self.options.default is not None:
                return self.options.default
            if filtered:
                return filtered[0]
            return None
        return filtered[idx]


class MultiSelectMachine(SelectionMachine):
    """Multi-choice variant: space toggles the focused option's check mark."""

    def _build_table(self) -> KeyTransitionTable[Outcome]:
        table = super()._build_table()
        return table.register_binding(KeyBinding((keys.SPACE,), self._toggle_focused))

    def start(self) -> None:
        super().start()
        checked: dict[str, bool] = {}
        for default in self.options.defaults:
            for option in self.options:
                if option is default:
                    checked[option.display] = True
                    break
        self.state.checked = checked

    def _toggle_focused(self) -> Outcome:
        option = self.focused_option()
        if option is not None:
            checked = self.state.checked
            checked[option.display] = not checked.get(option.display, False)
        return Outcome.CONTINUE

    def accept(self) -> list[Option]:
        """Return checked options in option-set order."""
        self._reset_filter()
        return [option for option in self.options if self.state.checked.get(option.display)]


__all__ = [
    "HELP",
    "PRINTABLE",
    "OTHER",
    "Outcome",
    "SelectionState",
    "SelectionMachine",
    "SingleSelectMachine",
    "MultiSelectMachine",
]

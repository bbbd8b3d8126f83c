"""Selectable options and the substring filter over them.

Options are identity-compared records owned by one ``OptionSet``; filtered
views and pages hold references, never copies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_PAGE_SIZE = 7


@dataclass(frozen=True, eq=False)
class Option:
    """Display label paired with the payload returned to the caller."""

    display: str
    value: object = None

    def __str__(self) -> str:
        return self.display


def substring_index(query: str, candidate: str) -> int | None:
    """Return case-insensitive position of ``query`` in ``candidate``."""
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def filter_options(options: Sequence[Option], text: str) -> list[Option]:
    """Return options whose display contains ``text``, in original order."""
    if not text:
        return list(options)
    return [option for option in options if substring_index(text, option.display) is not None]


def options_values(options: Iterable[Option]) -> list[object]:
    """Unwrap options into their payload values."""
    return [option.value for option in options]


class OptionSet:
    """Ordered, append-only collection of options with recorded defaults."""

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._labels: set[str] = set()
        self.defaults: list[Option] = []

    def add(self, display: str, value: object = None, default: bool = False) -> Option:
        """Append an option; ``value=None`` stores the display label as value.

        Labels must be unique because checked state is keyed by label.
        """
        if display in self._labels:
            raise ConfigurationError(f"duplicate option label: {display!r}")
        option = Option(display, display if value is None else value)
        self._options.append(option)
        self._labels.add(display)
        if default:
            self.defaults.append(option)
        return option

    @property
    def default(self) -> Option | None:
        """Most recently flagged default, as used by single select."""
        if not self.defaults:
            return None
        return self.defaults[-1]

    def index_of(self, option: Option) -> int | None:
        """Return position of ``option`` matched by identity."""
        for idx, candidate in enumerate(self._options):
            if candidate is option:
                return idx
        return None

    def filtered(self, text: str) -> list[Option]:
        return filter_options(self._options, text)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __getitem__(self, idx: int) -> Option:
        return self._options[idx]


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Option",
    "OptionSet",
    "filter_options",
    "options_values",
    "substring_index",
]

"""Windowing of filtered options into the visible page.

``paginate`` is pure: the same inputs always produce the same page, so
re-rendering unchanged state draws an identical list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .options import DEFAULT_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """Visible slice of choices and the focus position inside it."""

    entries: list[T]
    cursor: int


def paginate(choices: Sequence[T], page_size: int, selected_index: int) -> Page[T]:
    """Return the page around ``selected_index``.

    Short lists are shown whole. Otherwise the focus stays at the top while
    it is in the first half page, at its offset from the end while in the last
    half page, and centred (``page_size // 2`` rows above it) in between.
    """
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE

    total = len(choices)
    half = page_size // 2
    if total <= page_size:
        start, end, cursor = 0, total, selected_index
    elif selected_index < half:
        start, end, cursor = 0, page_size, selected_index
    elif total - selected_index - 1 < half:
        start = total - page_size
        end = total
        cursor = selected_index - start
    else:
        above = half
        below = page_size - above
        start = selected_index - above
        end = selected_index + below
        cursor = above
    end = min(end, total)
    return Page(list(choices[start:end]), cursor)


__all__ = ["Page", "paginate"]

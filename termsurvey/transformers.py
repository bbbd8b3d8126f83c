"""Answer transformers applied after validation.

A transformer returns the new answer, or ``None`` to keep the original.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

Transformer = Callable[[Any], Any]

_WORD_START_RE = re.compile(r"(?<!\w)\w")


def transform_string(fn: Callable[[str], str]) -> Transformer:
    """Apply ``fn`` to string answers; other answers are left untouched."""

    def transform(answer: Any) -> Any:
        if not isinstance(answer, str):
            return None
        return fn(answer)

    return transform


def _title_case(text: str) -> str:
    # Upper-case word starts only; unlike str.title the rest is untouched.
    return _WORD_START_RE.sub(lambda match: match.group(0).upper(), text)


to_lower = transform_string(str.lower)
title = transform_string(_title_case)


def compose_transformers(*transformers: Transformer) -> Transformer:
    """Chain transformers, feeding each non-``None`` result forward."""

    def transform(answer: Any) -> Any:
        current = answer
        for transformer in transformers:
            result = transformer(current)
            if result is not None:
                current = result
        return current

    return transform


__all__ = ["Transformer", "transform_string", "to_lower", "title", "compose_transformers"]

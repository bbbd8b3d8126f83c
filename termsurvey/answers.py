"""Writing shaped answers into the caller's answer sink.

A sink is either a mutable mapping (answers stored under the question name)
or an object whose attribute is located by name. Dataclass fields can opt
into a different question name with ``field(metadata={"survey": "name"})``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import MutableMapping
from typing import Any

from .errors import AnswerWriteError
from .options import Option, options_values

FIELD_TAG = "survey"


def shape_answer(answer: Any) -> Any:
    """Unwrap options to their values; other answers pass through."""
    if isinstance(answer, Option):
        return answer.value
    if isinstance(answer, list) and all(isinstance(item, Option) for item in answer):
        return options_values(answer)
    return answer


def _candidate_attributes(sink: object) -> list[str]:
    names: list[str] = []
    if dataclasses.is_dataclass(sink):
        names.extend(f.name for f in dataclasses.fields(sink))
    names.extend(name for name in getattr(sink, "__dict__", {}) if name not in names)
    for name in getattr(type(sink), "__annotations__", {}):
        if name not in names:
            names.append(name)
    return names


def resolve_attribute(sink: object, name: str) -> str:
    """Return attribute of ``sink`` that receives the answer for ``name``.

    Lookup order: dataclass field tagged with ``name``, exact attribute name,
    then a case-insensitive match.
    """
    if dataclasses.is_dataclass(sink):
        for f in dataclasses.fields(sink):
            if f.metadata.get(FIELD_TAG) == name:
                return f.name
    candidates = _candidate_attributes(sink)
    if name in candidates:
        return name
    folded = name.casefold()
    for candidate in candidates:
        if candidate.casefold() == folded:
            return candidate
    raise AnswerWriteError(f"could not find field matching {name!r} on {type(sink).__name__}")


def write_answer(sink: Any, name: str, value: Any) -> None:
    """Store ``value`` under ``name`` in ``sink``."""
    if sink is None:
        raise AnswerWriteError("cannot write answers to None")
    if isinstance(sink, MutableMapping):
        try:
            sink[name] = value
        except (TypeError, ValueError) as exc:
            raise AnswerWriteError(f"could not store answer {name!r}: {exc}") from exc
        return
    attribute = resolve_attribute(sink, name)
    try:
        setattr(sink, attribute, value)
    except (AttributeError, TypeError, ValueError) as exc:
        raise AnswerWriteError(f"could not set field {attribute!r}: {exc}") from exc


__all__ = ["FIELD_TAG", "resolve_attribute", "shape_answer", "write_answer"]

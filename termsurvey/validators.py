"""Answer validators.

A validator receives the raw answer and signals rejection by raising
``ValidationError``. Returning an exception instance or a non-empty message
string is accepted too; ``run_validator`` normalizes all three forms.
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import Any

from .errors import ValidationError
from .options import Option

Validator = Callable[[Any], Any]


def run_validator(validate: Validator, answer: Any) -> ValidationError | None:
    """Return the rejection raised or returned by ``validate``, or ``None``."""
    try:
        result = validate(answer)
    except ValidationError as exc:
        return exc
    if isinstance(result, ValidationError):
        return result
    if isinstance(result, BaseException):
        return ValidationError(str(result))
    if isinstance(result, str) and result:
        return ValidationError(result)
    return None


def _is_empty(answer: Any) -> bool:
    if answer is None:
        return True
    if isinstance(answer, Option):
        return False
    if isinstance(answer, Sized):
        return len(answer) == 0
    return False


def required(answer: Any) -> None:
    """Reject missing answers, empty strings, and empty selections."""
    if _is_empty(answer):
        raise ValidationError("Value is required")


def _measure(answer: Any) -> int:
    if isinstance(answer, Sized):
        return len(answer)
    raise ValidationError(f"cannot enforce length on response of type {type(answer).__name__}")


def max_length(length: int) -> Validator:
    """Reject answers (strings or selections) longer than ``length``."""

    def validate(answer: Any) -> None:
        if _measure(answer) > length:
            raise ValidationError(f"value is too long. Max length is {length}")

    return validate


def min_length(length: int) -> Validator:
    """Reject answers (strings or selections) shorter than ``length``."""

    def validate(answer: Any) -> None:
        if _measure(answer) < length:
            raise ValidationError(f"value is too short. Min length is {length}")

    return validate


def compose_validators(*validators: Validator) -> Validator:
    """Run validators in order; the first rejection wins."""

    def validate(answer: Any) -> None:
        for validator in validators:
            invalid = run_validator(validator, answer)
            if invalid is not None:
                raise invalid

    return validate


__all__ = [
    "Validator",
    "run_validator",
    "required",
    "max_length",
    "min_length",
    "compose_validators",
]

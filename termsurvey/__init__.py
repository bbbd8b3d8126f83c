"""Public package surface for termsurvey.

Exports the prompt types, the ``ask``/``ask_one`` orchestration, and the
validators and transformers commonly passed to questions.
"""

from __future__ import annotations

from .errors import (
    AnswerWriteError,
    ConfigurationError,
    InputError,
    InterruptError,
    SurveyError,
    ValidationError,
)
from .options import DEFAULT_PAGE_SIZE, Option, OptionSet, options_values
from .prompts import Confirm, Input, MultiSelect, Select
from .session import PromptSession
from .survey import Question, ask, ask_one
from .theme import RenderConfig
from .transformers import compose_transformers, title, to_lower, transform_string
from .validators import compose_validators, max_length, min_length, required


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "ask",
    "ask_one",
    "Question",
    "PromptSession",
    "RenderConfig",
    "Confirm",
    "Input",
    "Select",
    "MultiSelect",
    "Option",
    "OptionSet",
    "options_values",
    "DEFAULT_PAGE_SIZE",
    "required",
    "min_length",
    "max_length",
    "compose_validators",
    "transform_string",
    "to_lower",
    "title",
    "compose_transformers",
    "SurveyError",
    "ConfigurationError",
    "ValidationError",
    "InputError",
    "InterruptError",
    "AnswerWriteError",
]

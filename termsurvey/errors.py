"""Exception hierarchy shared by prompts, sessions, and the ask loop.

Fatal errors propagate out of ``ask``; ``ValidationError`` is the only
recoverable one and triggers a re-prompt.
"""

from __future__ import annotations


class SurveyError(Exception):
    """Base class for every error raised by termsurvey."""


class ConfigurationError(SurveyError):
    """Prompt was configured in a way that cannot be presented."""


class ValidationError(SurveyError):
    """Answer was rejected by a validator; the question is asked again."""


class InputError(SurveyError):
    """Key or line source failed (I/O error or end of stream)."""


class InterruptError(SurveyError):
    """User cancelled the prompt with the interrupt key."""

    def __init__(self, message: str = "interrupt") -> None:
        super().__init__(message)


class AnswerWriteError(SurveyError):
    """Answer sink could not accept a shaped answer."""


__all__ = [
    "SurveyError",
    "ConfigurationError",
    "ValidationError",
    "InputError",
    "InterruptError",
    "AnswerWriteError",
]

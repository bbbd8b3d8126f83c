"""Question orchestration: prompt, validate, transform, clean up, store.

``ask`` resolves questions strictly in order against one prompt session and
writes each shaped answer into the caller's sink. A validator failure is
rendered and the same question is asked again; every other error aborts the
batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .answers import shape_answer, write_answer
from .errors import AnswerWriteError
from .prompts.base import Prompt
from .session import PromptSession
from .transformers import Transformer
from .validators import Validator, run_validator

logger = logging.getLogger(__name__)


@dataclass
class Question:
    """One named entry of a questionnaire."""

    name: str
    prompt: Prompt
    validate: Validator | None = None
    transform: Transformer | None = None


def _resolve(question: Question, session: PromptSession) -> Any:
    prompt = question.prompt
    # Counts carry over into re-prompts so a rejected frame is replaced.
    session.renderer.reset()
    answer = prompt.prompt(session)
    if question.validate is not None:
        while True:
            invalid = run_validator(question.validate, answer)
            if invalid is None:
                break
            logger.debug("answer for %r rejected: %s", question.name, invalid)
            prompt.error(session, invalid)
            answer = prompt.prompt(session)

    if question.transform is not None:
        transformed = question.transform(answer)
        if transformed is not None:
            answer = transformed

    prompt.cleanup(session, answer)
    return answer


def ask(questions: Iterable[Question], answers: Any, session: PromptSession | None = None) -> Any:
    """Ask every question and store answers in ``answers``.

    ``answers`` is a mutable mapping keyed by question name or an object whose
    attributes match the names. Returns ``answers`` for convenience::

        qs = [Question("name", Input(message="What is your name?"), required, title)]
        answers = ask(qs, {})
    """
    if answers is None:
        raise AnswerWriteError("cannot call ask() without an answer sink")
    if session is None:
        session = PromptSession.open()

    for question in questions:
        logger.debug("asking %r", question.name)
        answer = _resolve(question, session)
        write_answer(answers, question.name, shape_answer(answer))
    return answers


def ask_one(
    prompt: Prompt,
    validate: Validator | None = None,
    transform: Transformer | None = None,
    session: PromptSession | None = None,
) -> Any:
    """Ask a single prompt and return its shaped answer."""
    answers: dict[str, Any] = {}
    ask([Question("", prompt, validate, transform)], answers, session=session)
    return answers[""]


__all__ = ["Question", "ask", "ask_one"]

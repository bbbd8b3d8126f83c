"""Render-data frames and the default prompt templates.

A template is any callable ``(frame, config) -> str``. Templates are pure:
rendering the same frame with the same config always yields the same text.
Styling comes from ``config.theme``; cursor movement is left to the renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .options import Option
from .theme import RenderConfig


@dataclass(frozen=True)
class QuestionFrame:
    message: str = ""
    help: str = ""
    show_help: bool = False


@dataclass(frozen=True)
class ConfirmFrame(QuestionFrame):
    default_hint: str = ""
    answer: str = ""


@dataclass(frozen=True)
class InputFrame(QuestionFrame):
    default_hint: str = ""
    answer: str = ""
    show_answer: bool = False


@dataclass(frozen=True)
class SelectFrame(QuestionFrame):
    filter_message: str = ""
    entries: Sequence[Option] = ()
    selected_index: int = 0
    answer: Option | None = None
    show_answer: bool = False


@dataclass(frozen=True)
class MultiSelectFrame(QuestionFrame):
    filter_message: str = ""
    entries: Sequence[Option] = ()
    selected_index: int = 0
    checked: Mapping[str, bool] = field(default_factory=dict)
    answer: Sequence[Option] = ()
    show_answer: bool = False


@dataclass(frozen=True)
class ErrorFrame:
    error: str


Template = Callable[[Any, RenderConfig], str]


def _help_line(frame: QuestionFrame, config: RenderConfig) -> str:
    if not frame.show_help:
        return ""
    theme = config.theme
    return f"{theme.help}{config.icons.help} {frame.help}{theme.reset}\n"


def _question_head(frame: QuestionFrame, config: RenderConfig, suffix: str = "") -> str:
    theme = config.theme
    return (
        f"{theme.question_icon}{config.icons.question} {theme.reset}"
        f"{theme.message}{frame.message}{suffix}{theme.reset}"
    )


def _list_hint(frame: QuestionFrame, config: RenderConfig) -> str:
    theme = config.theme
    more = ""
    if frame.help and not frame.show_help:
        more = f", {config.help_rune} for more help"
    return f"  {theme.hint}[Use arrows to move, type to filter{more}]{theme.reset}\n"


def _line_help_hint(frame: QuestionFrame, config: RenderConfig) -> str:
    if not frame.help or frame.show_help:
        return ""
    theme = config.theme
    return f"{theme.hint}[{config.help_rune} for help]{theme.reset} "


def confirm_template(frame: ConfirmFrame, config: RenderConfig) -> str:
    theme = config.theme
    out = _help_line(frame, config) + _question_head(frame, config, " ")
    if frame.answer:
        return out + f"{theme.answer}{frame.answer}{theme.reset}\n"
    out += _line_help_hint(frame, config)
    return out + f"{theme.default}{frame.default_hint} {theme.reset}"


def input_template(frame: InputFrame, config: RenderConfig) -> str:
    theme = config.theme
    out = _help_line(frame, config) + _question_head(frame, config, " ")
    if frame.show_answer:
        return out + f"{theme.answer}{frame.answer}{theme.reset}\n"
    out += _line_help_hint(frame, config)
    if frame.default_hint:
        out += f"{theme.default}({frame.default_hint}) {theme.reset}"
    return out


def select_template(frame: SelectFrame, config: RenderConfig) -> str:
    theme = config.theme
    out = _help_line(frame, config) + _question_head(frame, config, frame.filter_message)
    if frame.show_answer:
        display = frame.answer.display if frame.answer is not None else ""
        return out + f" {theme.answer}{display}{theme.reset}\n"
    lines = [out + _list_hint(frame, config)]
    for idx, option in enumerate(frame.entries):
        if idx == frame.selected_index:
            lines.append(f"{theme.focus}{config.icons.select_focus} ")
        else:
            lines.append(f"{theme.option}  ")
        lines.append(f"{option.display}{theme.reset}\n")
    return "".join(lines)


def multiselect_template(frame: MultiSelectFrame, config: RenderConfig) -> str:
    theme = config.theme
    icons = config.icons
    out = _help_line(frame, config) + _question_head(frame, config, frame.filter_message)
    if frame.show_answer:
        displays = ", ".join(option.display for option in frame.answer)
        return out + f" {theme.answer}{displays}{theme.reset}\n"
    lines = [out + _list_hint(frame, config)]
    for idx, option in enumerate(frame.entries):
        if idx == frame.selected_index:
            lines.append(f"{theme.focus}{icons.select_focus}{theme.reset}")
        else:
            lines.append(" ")
        if frame.checked.get(option.display):
            lines.append(f"{theme.marked} {icons.marked} ")
        else:
            lines.append(f"{theme.option} {icons.unmarked} ")
        lines.append(f"{theme.reset} {option.display}\n")
    return "".join(lines)


def error_template(frame: ErrorFrame, config: RenderConfig) -> str:
    theme = config.theme
    return f"{theme.error}{config.icons.error} Sorry, your reply was invalid: {frame.error}{theme.reset}\n"


__all__ = [
    "Template",
    "QuestionFrame",
    "ConfirmFrame",
    "InputFrame",
    "SelectFrame",
    "MultiSelectFrame",
    "ErrorFrame",
    "confirm_template",
    "input_template",
    "select_template",
    "multiselect_template",
    "error_template",
]

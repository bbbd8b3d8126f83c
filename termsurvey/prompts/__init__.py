"""Prompt types: Confirm, Input, Select, and MultiSelect."""

from .base import Defaulter, Prompt, QuestionPrompt, QuestionText, Selection
from .confirm import Confirm
from .input import Input
from .multiselect import MultiSelect
from .select import Select, SelectionPrompt

__all__ = [
    "Prompt",
    "Defaulter",
    "Selection",
    "QuestionText",
    "QuestionPrompt",
    "SelectionPrompt",
    "Confirm",
    "Input",
    "Select",
    "MultiSelect",
]

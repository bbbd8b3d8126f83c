"""Reusable key-kind transition table primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class KeyBinding(Generic[R]):
    """Mapping from one or more key kinds to a single transition callback."""

    kinds: tuple[str, ...]
    handler: Callable[[], R]


class KeyTransitionTable(Generic[R]):
    """Small key-dispatch table with a fallback for unbound kinds."""

    def __init__(self, fallback: Callable[[], R] | None = None) -> None:
        """Initialize empty table with optional handler for unknown kinds."""
        self._fallback = fallback
        self._handlers: dict[str, Callable[[], R]] = {}

    def register_binding(self, binding: KeyBinding[R]) -> KeyTransitionTable[R]:
        """Register one binding, overwriting existing handlers for same kinds."""
        for kind in binding.kinds:
            self._handlers[kind] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding[R]) -> KeyTransitionTable[R]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, kind: str) -> R | None:
        """Invoke handler bound to ``kind`` (or the fallback) and return its result."""
        handler = self._handlers.get(kind, self._fallback)
        if handler is None:
            return None
        return handler()


__all__ = ["KeyBinding", "KeyTransitionTable"]

"""Exceptions raised by nanotimers."""
from __future__ import annotations

from typing import Iterable


class NanoTimerError(Exception):
    pass


class InvalidStateError(NanoTimerError):
    """An action or metric query was made in a state that forbids it."""

    def __init__(self, operation: str, state: str, allowed: Iterable[str]) -> None:
        self.operation = operation
        self.state = state
        self.allowed = tuple(allowed)
        super().__init__(
            f"cannot {operation} timer while {state}: requires {' or '.join(self.allowed)}"
        )


class IndexOutOfRangeError(NanoTimerError, IndexError):
    def __init__(self, kind: str, index: int, bound: int) -> None:
        self.index = index
        self.bound = bound
        super().__init__(f"{kind} index {index} out of range: 0 <= index < {bound}")

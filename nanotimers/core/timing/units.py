"""Time units for reading timer metrics."""
from __future__ import annotations

from enum import Enum

from nanotimers.sdk.ids import NS_PER_MS, NS_PER_S, NS_PER_US


class TimeUnit(Enum):
    """A unit of time with its size in nanoseconds and a short symbol."""

    NANOSECONDS = (1, "ns")
    MICROSECONDS = (NS_PER_US, "us")
    MILLISECONDS = (NS_PER_MS, "ms")
    SECONDS = (NS_PER_S, "s")
    MINUTES = (60 * NS_PER_S, "min")
    HOURS = (3_600 * NS_PER_S, "h")
    DAYS = (86_400 * NS_PER_S, "d")

    def __init__(self, factor: int, symbol: str) -> None:
        self.factor = factor
        self.symbol = symbol

    @property
    def label(self) -> str:
        return self.name.lower()

    def convert(self, nanos: int) -> int:
        """Convert ``nanos`` to this unit, truncating toward zero."""
        q = abs(nanos) // self.factor
        return q if nanos >= 0 else -q

    @classmethod
    def parse(cls, text: "str | TimeUnit") -> "TimeUnit":
        """Look up a unit by name (any case) or by symbol, e.g. ``"ms"``."""
        if isinstance(text, cls):
            return text
        key = str(text).strip()
        for unit in cls:
            if key.upper() == unit.name or key.lower() == unit.symbol:
                return unit
        raise ValueError(f"unknown time unit: {text!r}")

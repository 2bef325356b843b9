"""Lightweight nanosecond interval timers with splits and pauses."""

from nanotimers.core.errors import IndexOutOfRangeError, InvalidStateError, NanoTimerError
from nanotimers.core.timing import NanoTimer, TimeUnit, TimerAction, TimerState, new_timer
from nanotimers.sdk.registry import REGISTRY, create_timer, find_timer

__version__ = "0.1.0"

__all__ = [
    "IndexOutOfRangeError",
    "InvalidStateError",
    "NanoTimer",
    "NanoTimerError",
    "REGISTRY",
    "TimeUnit",
    "TimerAction",
    "TimerState",
    "create_timer",
    "find_timer",
    "new_timer",
]

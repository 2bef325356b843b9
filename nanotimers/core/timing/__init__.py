"""Timer state machine, actions and time units."""

from .actions import TimerAction, TimerState
from .units import TimeUnit
from .nano_timer import NanoTimer, Segment, TimerEvent, new_timer

__all__ = [
    "NanoTimer",
    "Segment",
    "TimeUnit",
    "TimerAction",
    "TimerEvent",
    "TimerState",
    "new_timer",
]

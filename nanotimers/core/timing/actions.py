"""States and actions of a :class:`~nanotimers.core.timing.nano_timer.NanoTimer`.

Each member's value is its lowercase display name, used in ``str(timer)`` and
as the fallback label of a segment.
"""
from __future__ import annotations

from enum import Enum


class TimerState(str, Enum):
    UNINITIALISED = "uninitialised"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class TimerAction(str, Enum):
    RESET = "reset"
    START = "start"
    SPLIT = "split"
    PAUSE = "pause"
    RESUME = "resume"
    STOP = "stop"


def display_name(member: Enum) -> str:
    return str(member.value)

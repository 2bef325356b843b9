"""Nanosecond interval timer with splits and pause/resume.

A :class:`NanoTimer` records monotonic timestamps for each action and, once
stopped, derives elapsed time, split times and split periods with paused time
removed. Instances are meant to be driven from a single thread.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from nanotimers.core.errors import IndexOutOfRangeError, InvalidStateError
from nanotimers.sdk.ids import new_ulid, now_monotonic_ns
from nanotimers.sdk.logging import get_logger

from .actions import TimerAction, TimerState, display_name
from .units import TimeUnit

log = get_logger(__name__)

Clock = Callable[[], int]

_ACTIVE = (TimerState.RUNNING, TimerState.PAUSED)
_ACTIVE_NAMES = tuple(display_name(s) for s in _ACTIVE)


@dataclass(frozen=True)
class TimerEvent:
    action: TimerAction
    timestamp: int


@dataclass(frozen=True)
class Segment:
    """Span opened by a boundary action, holding its own pause/resume events."""

    label: Optional[str] = None
    events: Tuple[TimerEvent, ...] = ()

    @property
    def opened_at(self) -> int:
        return self.events[0].timestamp

    @property
    def display_name(self) -> str:
        if self.label is not None:
            return self.label
        return display_name(self.events[0].action)

    def paused_ns(self) -> int:
        events = self.events
        total = 0
        for i in range(1, len(events) - 1, 2):
            total += events[i + 1].timestamp - events[i].timestamp
        return total


class NanoTimer:
    def __init__(self, name: Optional[str] = None, clock: Optional[Clock] = None) -> None:
        self._name = name or ""
        self._clock: Clock = clock or now_monotonic_ns
        self.timer_id = new_ulid()
        self._state = TimerState.UNINITIALISED
        self._segments: List[Segment] = []
        self._elapsed: Optional[int] = None
        self._split_times: Optional[List[int]] = None
        self._split_periods: Optional[List[int]] = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def start(self, label: Optional[str] = None) -> "NanoTimer":
        now = self._clock()
        if self._state is not TimerState.UNINITIALISED:
            self._reject("start", (TimerState.UNINITIALISED.value,))
        self._segments = [Segment(label, (TimerEvent(TimerAction.START, now),))]
        self._transition(TimerState.RUNNING)
        return self

    def split(self, label: Optional[str] = None) -> "NanoTimer":
        now = self._clock()
        if self._state not in _ACTIVE:
            self._reject("split", _ACTIVE_NAMES)
        self._close_pause(now)
        self._segments.append(Segment(label, (TimerEvent(TimerAction.SPLIT, now),)))
        self._transition(TimerState.RUNNING)
        return self

    def pause(self) -> None:
        """Pause the timer; pausing an already paused timer does nothing."""
        now = self._clock()
        if self._state not in _ACTIVE:
            self._reject("pause", _ACTIVE_NAMES)
        if self._state is TimerState.RUNNING:
            self._record(TimerEvent(TimerAction.PAUSE, now))
            self._transition(TimerState.PAUSED)

    def resume(self) -> None:
        """Resume the timer; resuming a running timer does nothing."""
        now = self._clock()
        if self._state not in _ACTIVE:
            self._reject("resume", _ACTIVE_NAMES)
        if self._state is TimerState.PAUSED:
            self._close_pause(now)
            self._transition(TimerState.RUNNING)

    def stop(self, label: Optional[str] = None) -> "NanoTimer":
        now = self._clock()
        if self._state not in _ACTIVE:
            self._reject("stop", _ACTIVE_NAMES)
        self._close_pause(now)
        self._segments.append(Segment(label, (TimerEvent(TimerAction.STOP, now),)))
        self._transition(TimerState.STOPPED)
        return self

    def reset(self) -> None:
        self._segments = []
        self._elapsed = None
        self._split_times = None
        self._split_periods = None
        if self._state is not TimerState.UNINITIALISED:
            self._transition(TimerState.UNINITIALISED)

    def __enter__(self) -> "NanoTimer":
        if self._state is TimerState.UNINITIALISED:
            self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._state in _ACTIVE:
            self.stop()
        return False

    # ------------------------------------------------------------------
    # Metrics (only available once stopped)
    # ------------------------------------------------------------------
    def elapsed_time(self, unit: TimeUnit = TimeUnit.NANOSECONDS) -> int:
        """Total running time from start to stop, excluding pauses."""
        self._require_stopped("read elapsed time of")
        if self._elapsed is None:
            segs = self._segments
            paused = sum(s.paused_ns() for s in segs[:-1])
            self._elapsed = segs[-1].opened_at - segs[0].opened_at - paused
        return unit.convert(self._elapsed)

    def split_times(self, unit: TimeUnit = TimeUnit.NANOSECONDS) -> List[int]:
        """Running time from start up to each split and finally the stop.

        Each value has all pauses before that boundary removed.
        """
        self._require_stopped("read split times of")
        if self._split_times is None:
            segs = self._segments
            origin = segs[0].opened_at
            paused = 0
            times = []
            for prev, cur in zip(segs, segs[1:]):
                paused += prev.paused_ns()
                times.append(cur.opened_at - origin - paused)
            self._split_times = times
        return [unit.convert(t) for t in self._split_times]

    def split_time(self, index: int, unit: TimeUnit = TimeUnit.NANOSECONDS) -> int:
        self._require_stopped("read split times of")
        self._check_index("split time", index)
        return self.split_times(unit)[index]

    def split_time_with_name(self, index: int, unit: TimeUnit = TimeUnit.NANOSECONDS) -> str:
        """Format split ``index`` as ``label[value unit]``, labelled by the boundary it ends at."""
        value = self.split_time(index, unit)
        return f"{self._segments[index + 1].display_name}[{value} {unit.label}]"

    def split_periods(self, unit: TimeUnit = TimeUnit.NANOSECONDS) -> List[int]:
        """Running time of each segment alone, excluding its own pauses."""
        self._require_stopped("read split periods of")
        if self._split_periods is None:
            segs = self._segments
            self._split_periods = [
                cur.opened_at - prev.opened_at - prev.paused_ns()
                for prev, cur in zip(segs, segs[1:])
            ]
        return [unit.convert(p) for p in self._split_periods]

    def split_period(self, index: int, unit: TimeUnit = TimeUnit.NANOSECONDS) -> int:
        self._require_stopped("read split periods of")
        self._check_index("split period", index)
        return self.split_periods(unit)[index]

    def split_period_with_name(self, index: int, unit: TimeUnit = TimeUnit.NANOSECONDS) -> str:
        value = self.split_period(index, unit)
        return f"{self._segments[index].display_name}[{value} {unit.label}]"

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def to_string(self, unit: TimeUnit = TimeUnit.NANOSECONDS) -> str:
        if self._state is not TimerState.STOPPED:
            return f"timer {display_name(self._state)}"
        blocks = []
        for seg in self._segments:
            actions = ",".join(f"{display_name(e.action)}({e.timestamp})" for e in seg.events)
            blocks.append(
                "    {\n"
                f"      name: {seg.display_name},\n"
                f"      actions: [{actions}],\n"
                f"      paused: {seg.paused_ns()}\n"
                "    }"
            )
        return (
            "{\n"
            f'  name: "{self._name}",\n'
            f"  elapsed: {self.elapsed_time(unit)} {unit.label},\n"
            "  splits: [\n" + ",\n".join(blocks) + "\n  ]\n"
            "}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"NanoTimer(name={self._name!r}, state={self._state.value})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _record(self, event: TimerEvent) -> None:
        current = self._segments[-1]
        self._segments[-1] = replace(current, events=current.events + (event,))

    def _close_pause(self, now: int) -> None:
        if self._state is TimerState.PAUSED:
            self._record(TimerEvent(TimerAction.RESUME, now))

    def _transition(self, new_state: TimerState) -> None:
        log.debug("timer %r: %s -> %s", self._name, self._state.value, new_state.value)
        self._state = new_state

    def _reject(self, operation: str, allowed: Tuple[str, ...]) -> None:
        log.debug("timer %r: rejected %s while %s", self._name, operation, self._state.value)
        raise InvalidStateError(operation, display_name(self._state), allowed)

    def _require_stopped(self, operation: str) -> None:
        if self._state is not TimerState.STOPPED:
            self._reject(operation, (TimerState.STOPPED.value,))

    def _check_index(self, kind: str, index: int) -> None:
        bound = len(self._segments) - 1
        if not 0 <= index < bound:
            raise IndexOutOfRangeError(kind, index, bound)


def new_timer(name: Optional[str] = None, clock: Optional[Clock] = None) -> NanoTimer:
    """Create an uninitialised timer, optionally named."""
    return NanoTimer(name, clock=clock)

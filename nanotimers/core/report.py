"""Read-only reports built from stopped timers."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from nanotimers.core.timing import NanoTimer, TimeUnit


class SplitReport(BaseModel):
    """One segment of a stopped timer."""

    index: int
    label: str
    period_label: str
    split_time: int
    split_period: int


class TimerReport(BaseModel):
    """Elapsed time and per-segment metrics of a stopped timer in one unit."""

    timer_id: str
    name: str
    unit: str
    symbol: str
    elapsed: int
    splits: List[SplitReport] = Field(default_factory=list)


def build_report(timer: NanoTimer, unit: Optional[TimeUnit] = None) -> TimerReport:
    """Collect the metrics of ``timer`` converted to ``unit``.

    Raises :class:`~nanotimers.core.errors.InvalidStateError` unless the timer
    is stopped. ``label`` names the boundary the split time runs up to and
    ``period_label`` the segment the period covers, matching
    ``split_time_with_name`` and ``split_period_with_name``.
    """

    unit = unit or TimeUnit.NANOSECONDS
    times = timer.split_times(unit)
    periods = timer.split_periods(unit)
    segments = timer.segments
    splits = [
        SplitReport(
            index=i,
            label=segments[i + 1].display_name,
            period_label=segments[i].display_name,
            split_time=times[i],
            split_period=periods[i],
        )
        for i in range(len(times))
    ]
    return TimerReport(
        timer_id=timer.timer_id,
        name=timer.name,
        unit=unit.label,
        symbol=unit.symbol,
        elapsed=timer.elapsed_time(unit),
        splits=splits,
    )


def render_report(report: TimerReport) -> List[str]:
    lines = [f"elapsed   : {report.elapsed}{report.symbol}"]
    lines += [f"split[{s.index}]  : {s.split_time}{report.symbol}" for s in report.splits]
    lines += [f"period[{s.index}] : {s.split_period}{report.symbol}" for s in report.splits]
    return lines


__all__ = ["SplitReport", "TimerReport", "build_report", "render_report"]

from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence, Tuple

import typer

from nanotimers.core.errors import NanoTimerError
from nanotimers.core.report import build_report, render_report
from nanotimers.core.timing import NanoTimer, TimeUnit
from nanotimers.sdk.config import get_config
from nanotimers.sdk.registry import create_timer

# Each step is "<action>" or "<action>:<label>"; labels apply to start/split/stop.
SCENARIOS: List[Tuple[str, List[str]]] = [
    ("scenario 1: start - stop", ["start", "stop"]),
    ("scenario 2: start - split(split1) - stop", ["start", "split:split1", "stop"]),
    ("scenario 3: start - pause - resume - stop", ["start", "pause", "resume", "stop"]),
    ("scenario 4: start - pause - stop", ["start", "pause", "stop"]),
    (
        "scenario 5: start - split(split1) - pause - resume - stop",
        ["start", "split:split1", "pause", "resume", "stop"],
    ),
    (
        "scenario 6: start - split(split1) - pause - stop",
        ["start", "split:split1", "pause", "stop"],
    ),
    (
        "scenario 7: start - split(split1) - pause - resume - pause - resume"
        " - split(split2) - pause - resume - stop",
        [
            "start", "split:split1", "pause", "resume", "pause", "resume",
            "split:split2", "pause", "resume", "stop",
        ],
    ),
]

_LABELLED = {"start", "split", "stop"}
_UNLABELLED = {"pause", "resume", "reset"}


def apply_step(timer: NanoTimer, step: str) -> None:
    action, _, label = step.partition(":")
    action = action.strip().lower()
    if action in _LABELLED:
        getattr(timer, action)(label or None)
    elif action in _UNLABELLED and not label:
        getattr(timer, action)()
    else:
        raise ValueError(f"unknown timer step: {step!r}")


def run_steps(
    timer: NanoTimer,
    steps: Sequence[str],
    delay_ms: int,
    sleep: Callable[[float], None] = time.sleep,
) -> NanoTimer:
    """Reset ``timer`` and apply ``steps``, waiting ``delay_ms`` between them."""
    timer.reset()
    for i, step in enumerate(steps):
        if i and delay_ms > 0:
            sleep(delay_ms / 1000)
        apply_step(timer, step)
    return timer


def _resolve_unit(unit: Optional[str]) -> TimeUnit:
    if unit is None:
        return get_config().default_unit
    try:
        return TimeUnit.parse(unit)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--unit")


def _present(timer: NanoTimer, unit: TimeUnit, as_json: bool) -> None:
    report = build_report(timer, unit)
    if as_json:
        typer.echo(report.model_dump_json())
        return
    typer.echo(f"timer => {timer.to_string(unit)}\n")
    for line in render_report(report):
        typer.echo(line)
    typer.echo("")


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def scenarios(
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Output unit, e.g. us, ms, SECONDS"),
    delay_ms: Optional[int] = typer.Option(None, "--delay-ms", min=0, help="Delay between actions"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON report per scenario"),
) -> None:
    """Run the built-in demo scenarios and print their timings."""

    out_unit = _resolve_unit(unit)
    delay = get_config().demo_delay_ms if delay_ms is None else delay_ms
    for name, steps in SCENARIOS:
        timer = run_steps(create_timer(name), steps, delay)
        if not as_json:
            typer.echo(f"[nanotimers] {name}")
        _present(timer, out_unit, as_json)


@app.command()
def run(
    steps: List[str] = typer.Argument(..., help="Steps such as: start split:lap1 pause resume stop"),
    name: str = typer.Option("cli", "--name", "-n", help="Timer name"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Output unit, e.g. us, ms, SECONDS"),
    delay_ms: Optional[int] = typer.Option(None, "--delay-ms", min=0, help="Delay between actions"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Drive one timer through the given steps and print its timings."""

    out_unit = _resolve_unit(unit)
    delay = get_config().demo_delay_ms if delay_ms is None else delay_ms
    timer = create_timer(name)
    try:
        run_steps(timer, steps, delay)
        _present(timer, out_unit, as_json)
    except (NanoTimerError, ValueError) as exc:
        typer.echo(f"[nanotimers] {exc}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

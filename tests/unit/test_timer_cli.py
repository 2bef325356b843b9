import json

import pytest
from typer.testing import CliRunner

from nanotimers.apps.timer_cli import SCENARIOS, app, apply_step, run_steps
from nanotimers.core.timing import TimerState, new_timer

runner = CliRunner()


def test_run_steps_sleeps_between_actions(clock):
    delays = []

    def fake_sleep(seconds):
        delays.append(seconds)
        clock.advance_ms(round(seconds * 1000))

    t = run_steps(new_timer(clock=clock), ["start", "split:a", "stop"], 25, sleep=fake_sleep)
    assert delays == [0.025, 0.025]
    assert t.split_times() == [25_000_000, 50_000_000]
    assert t.segments[1].display_name == "a"


def test_run_steps_resets_first(clock):
    t = new_timer(clock=clock).start()
    run_steps(t, ["start", "stop"], 0)
    assert t.state is TimerState.STOPPED


def test_apply_step_rejects_unknown(clock):
    t = new_timer(clock=clock)
    with pytest.raises(ValueError):
        apply_step(t, "jump")
    with pytest.raises(ValueError):
        apply_step(t, "pause:label")


def test_scenarios_cover_all_demos():
    assert len(SCENARIOS) == 7
    for _, steps in SCENARIOS:
        assert steps[0] == "start" and steps[-1] == "stop"


def test_scenarios_command_text():
    result = runner.invoke(app, ["scenarios", "--delay-ms", "0", "--unit", "us"])
    assert result.exit_code == 0, result.output
    assert result.output.count("elapsed   :") == 7
    assert "scenario 7" in result.output
    assert "period[2] :" in result.output


def test_scenarios_command_json():
    result = runner.invoke(app, ["scenarios", "--delay-ms", "0", "--json"])
    assert result.exit_code == 0, result.output
    reports = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    assert len(reports) == 7
    assert reports[0]["name"] == "scenario 1: start - stop"
    assert len(reports[6]["splits"]) == 3


def test_run_command():
    result = runner.invoke(app, ["run", "start", "split:lap", "pause", "stop", "--delay-ms", "0", "-u", "ms"])
    assert result.exit_code == 0, result.output
    assert "timer => {" in result.output
    assert "name: lap" in result.output
    assert "split[1]  :" in result.output


def test_run_command_reports_invalid_sequence():
    result = runner.invoke(app, ["run", "start", "start", "--delay-ms", "0"])
    assert result.exit_code == 1
    assert "cannot start timer" in result.output


def test_run_command_requires_stop():
    result = runner.invoke(app, ["run", "start", "--delay-ms", "0"])
    assert result.exit_code == 1


def test_bad_unit_is_rejected():
    result = runner.invoke(app, ["run", "start", "stop", "--unit", "parsecs"])
    assert result.exit_code != 0

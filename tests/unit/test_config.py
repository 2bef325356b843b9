# tests/unit/test_config.py
import os
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from nanotimers.core.timing import TimeUnit
from nanotimers.sdk import config as config_mod


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Keep the cached config from leaking between tests."""
    for var in ("NANOTIMERS_DEFAULT_UNIT", "NANOTIMERS_LOG_LEVEL", "NANOTIMERS_DEMO_DELAY_MS"):
        monkeypatch.delenv(var, raising=False)
    yield
    monkeypatch.undo()
    config_mod.get_config(force_refresh=True)


def test_defaults():
    cfg = config_mod.get_config(force_refresh=True)
    assert cfg.default_unit is TimeUnit.NANOSECONDS
    assert cfg.log_level == "WARNING"
    assert cfg.demo_delay_ms == 50


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("NANOTIMERS_DEFAULT_UNIT", "us")
    monkeypatch.setenv("NANOTIMERS_LOG_LEVEL", "debug")
    monkeypatch.setenv("NANOTIMERS_DEMO_DELAY_MS", "5")
    cfg = config_mod.get_config(force_refresh=True)
    assert cfg.default_unit is TimeUnit.MICROSECONDS
    assert cfg.log_level == "DEBUG"
    assert cfg.demo_delay_ms == 5


def test_get_config_is_cached(monkeypatch):
    first = config_mod.get_config(force_refresh=True)
    monkeypatch.setenv("NANOTIMERS_DEMO_DELAY_MS", "7")
    assert config_mod.get_config() is first
    assert config_mod.get_config(force_refresh=True).demo_delay_ms == 7


@pytest.mark.parametrize(
    "var,value",
    [
        ("NANOTIMERS_DEFAULT_UNIT", "fortnights"),
        ("NANOTIMERS_LOG_LEVEL", "LOUD"),
        ("NANOTIMERS_DEMO_DELAY_MS", "-1"),
        ("NANOTIMERS_DEMO_DELAY_MS", "soon"),
    ],
)
def test_invalid_env_raises(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        config_mod.get_config(force_refresh=True)


def test_explicit_values():
    cfg = config_mod.TimerConfig(default_unit="SECONDS", log_level="info", demo_delay_ms=0)
    assert cfg.default_unit is TimeUnit.SECONDS
    assert cfg.log_level == "INFO"


def _import_and_time(env_overrides):
    """Import the timer package in a fresh interpreter with the given env."""
    repo_root = Path(__file__).resolve().parents[2]
    env = dict(os.environ)
    env.update(env_overrides)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(repo_root), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", "from nanotimers import new_timer; print(new_timer().start().stop().state.value)"],
        capture_output=True,
        text=True,
        cwd=str(repo_root),
        env=env,
    )


@pytest.mark.parametrize(
    "var,value",
    [
        ("NANOTIMERS_DEFAULT_UNIT", "fortnights"),
        ("NANOTIMERS_DEMO_DELAY_MS", "soon"),
        ("NANOTIMERS_DEMO_DELAY_MS", "-1"),
    ],
)
def test_bad_demo_settings_do_not_break_timer_import(var, value):
    proc = _import_and_time({var: value})
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "stopped"


def test_bad_log_level_falls_back_to_warning():
    proc = _import_and_time({"NANOTIMERS_LOG_LEVEL": "LOUD"})
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "stopped"
    assert "ignoring invalid NANOTIMERS_LOG_LEVEL" in proc.stderr


def test_log_config_reads_only_level(monkeypatch):
    monkeypatch.setenv("NANOTIMERS_DEFAULT_UNIT", "fortnights")
    monkeypatch.setenv("NANOTIMERS_LOG_LEVEL", "error")
    assert config_mod.LogConfig().log_level == "ERROR"

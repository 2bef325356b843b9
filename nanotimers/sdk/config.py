
from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from typing import Optional
import os

from nanotimers.core.timing.units import TimeUnit

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class LogConfig(BaseModel):
    """The only setting the timer core reads."""
    log_level: str = Field(default_factory=lambda: os.getenv('NANOTIMERS_LOG_LEVEL', 'WARNING'))

    model_config = {"validate_default": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_level(cls, v):
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

class TimerConfig(LogConfig):
    default_unit: TimeUnit = Field(default_factory=lambda: os.getenv('NANOTIMERS_DEFAULT_UNIT', 'NANOSECONDS'))
    demo_delay_ms: int = Field(default_factory=lambda: os.getenv('NANOTIMERS_DEMO_DELAY_MS', '50'), ge=0)

    @field_validator("default_unit", mode="before")
    @classmethod
    def _parse_unit(cls, v):
        return TimeUnit.parse(v)

_config_singleton: Optional[TimerConfig] = None

def get_config(force_refresh: bool = False) -> TimerConfig:
    """Return a cached TimerConfig read from the environment.

    Built on first use, so a bad setting only fails the caller that needs it.
    """
    global _config_singleton
    if force_refresh or _config_singleton is None:
        _config_singleton = TimerConfig()
    return _config_singleton

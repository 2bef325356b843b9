"""Logging setup shared by the library and the demo CLI.

The level comes from ``NANOTIMERS_LOG_LEVEL`` and is applied once per process.
An invalid level falls back to WARNING rather than failing the import.
"""
from __future__ import annotations

import logging

from pydantic import ValidationError

_CONFIGURED = False
_DEFAULT_LEVEL = "WARNING"


def _configure_once() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    from .config import LogConfig

    logger = logging.getLogger("nanotimers")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    try:
        level = LogConfig().log_level
    except ValidationError:
        level = _DEFAULT_LEVEL
        logger.setLevel(getattr(logging, level))
        logger.warning("ignoring invalid NANOTIMERS_LOG_LEVEL, using %s", level)
    else:
        logger.setLevel(getattr(logging, level))
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    _configure_once()
    return logging.getLogger(name)

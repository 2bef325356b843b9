
from __future__ import annotations
import threading
from typing import Callable, Dict, List, Optional
from nanotimers.core.timing.nano_timer import Clock, NanoTimer
from nanotimers.sdk.logging import get_logger

log = get_logger(__name__)

class TimerRegistry:
    """Named timers, kept separately for each thread."""
    def __init__(self, factory: Callable[..., NanoTimer] = NanoTimer):
        self._factory = factory
        self._local = threading.local()
    def _map(self) -> Dict[str, NanoTimer]:
        m = getattr(self._local, "timers", None)
        if m is None:
            m = self._local.timers = {}
        return m
    def create(self, name: Optional[str] = None, clock: Optional[Clock] = None) -> NanoTimer:
        timer = self._factory(name, clock=clock)
        key = name if name is not None else timer.timer_id
        if key in self._map():
            log.debug("replacing timer %r", key)
        self._map()[key] = timer
        log.debug("created timer %r", key)
        return timer
    def find(self, name: str) -> Optional[NanoTimer]:
        return self._map().get(name)
    def names(self) -> List[str]:
        return list(self._map())
    def discard(self, name: str) -> Optional[NanoTimer]:
        return self._map().pop(name, None)
    def clear(self) -> None:
        self._map().clear()
REGISTRY = TimerRegistry()
def create_timer(name: Optional[str] = None, clock: Optional[Clock] = None) -> NanoTimer:
    return REGISTRY.create(name, clock=clock)
def find_timer(name: str) -> Optional[NanoTimer]:
    return REGISTRY.find(name)

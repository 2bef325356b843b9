"""Clock reads and identifiers."""
from __future__ import annotations
import time, ulid
NS_PER_US = 1_000
NS_PER_MS = 1_000 * NS_PER_US
NS_PER_S = 1_000 * NS_PER_MS
def now_monotonic_ns() -> int: return time.monotonic_ns()
def new_ulid() -> str: return str(ulid.new())

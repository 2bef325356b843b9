import pytest

from nanotimers.sdk.ids import NS_PER_MS


class FakeClock:
    """Scripted monotonic clock; time only moves when a test advances it."""

    def __init__(self, start_ns: int = 0):
        self.now = start_ns
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms * NS_PER_MS


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ms():
    return lambda n: n * NS_PER_MS

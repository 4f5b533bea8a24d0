# utility classes for tests
from elapsedtime.clock import TimeSource
from elapsedtime.duration import NANOS_PER_MILLI, NANOS_PER_SECOND


class ManualTimeSource(TimeSource):
    """A time source that only moves when told to."""

    def __init__(self, start_ns: int = 42 * NANOS_PER_SECOND):
        self._now = start_ns
        self.calls = 0

    def now_ns(self) -> int:
        self.calls += 1
        return self._now

    def advance(self, nanosec: int = 0, millis: int = 0, seconds: int = 0):
        self._now += nanosec + millis * NANOS_PER_MILLI + seconds * NANOS_PER_SECOND

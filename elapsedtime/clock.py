import time
import typing as t
from abc import ABC, abstractmethod


class TimeSource(ABC):
    """Supplies the current instant, in nanoseconds, for elapsed-time measurement.

    Only differences between two readings of the same source are meaningful.
    """

    @abstractmethod
    def now_ns(self) -> int:
        """The current instant in nanoseconds"""


class PerfCounterTimeSource(TimeSource):
    """Wall-clock time from the performance counter."""

    def now_ns(self) -> int:
        return time.perf_counter_ns()


class ProcessTimeSource(TimeSource):
    """CPU time of the current process. Any `sleep` is not counted."""

    def now_ns(self) -> int:
        return time.process_time_ns()


class TimeSourceFactory:
    """Factory for `TimeSource`s"""

    DEFAULT_TIME_SOURCE_TYPE = "PERF_COUNTER"

    CLASS_MAP: t.Dict[str, t.Type[TimeSource]] = {
        "PERF_COUNTER": PerfCounterTimeSource,
        "PROCESS": ProcessTimeSource,
    }

    @classmethod
    def get_time_source(cls, type_: t.Optional[str] = None, **kwargs) -> TimeSource:
        return cls.CLASS_MAP[(type_ or cls.DEFAULT_TIME_SOURCE_TYPE).upper()](**kwargs)

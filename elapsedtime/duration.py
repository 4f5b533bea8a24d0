import functools
import typing as t
from datetime import timedelta

import pydantic as pyd

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

INFINITY_STRING = "∞"
"""Printed in place of the infinite sentinel."""

_MAX_SECONDS = 2**63 - 1


@functools.total_ordering
class Duration(pyd.BaseModel, frozen=True):
    """An immutable, non-negative amount of time with nanosecond resolution."""

    nanosec: pyd.NonNegativeInt

    @classmethod
    def of_seconds(cls, seconds: int) -> "Duration":
        return cls(nanosec=seconds * NANOS_PER_SECOND)

    @classmethod
    def of_millis(cls, millis: int) -> "Duration":
        return cls(nanosec=millis * NANOS_PER_MILLI)

    @classmethod
    def between(cls, start_ns: int, end_ns: int) -> "Duration":
        """The duration between two instants read from the same time source."""
        return cls(nanosec=end_ns - start_ns)

    @property
    def is_infinite(self) -> bool:
        """Whether this is the "cannot be estimated yet" sentinel."""
        return self.nanosec >= INFINITE_DURATION.nanosec

    @property
    def total_seconds(self) -> float:
        return self.nanosec / NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        # timedelta has microsecond resolution, the rest is truncated
        return timedelta(microseconds=self.nanosec // 1000)

    def __lt__(self, other: t.Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanosec < other.nanosec

    def __str__(self) -> str:
        return format_duration(self)


ZERO_DURATION = Duration(nanosec=0)
INFINITE_DURATION = Duration(nanosec=_MAX_SECONDS * NANOS_PER_SECOND + 999_999_999)


def format_duration(duration: Duration) -> str:
    """Formats a duration as `HH:mm:ss`, zero-padded.

    Hours are not wrapped into days, so long durations simply get more hour
    digits. The sub-second part is truncated. The infinite sentinel is rendered
    as `INFINITY_STRING`.

    Args:
        duration (Duration): the duration to format.

    Returns:
        str: the formatted duration.
    """
    if duration.is_infinite:
        return INFINITY_STRING

    total_seconds = duration.nanosec // NANOS_PER_SECOND
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

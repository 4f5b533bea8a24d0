import typing as t
from enum import Enum

from elapsedtime.clock import PerfCounterTimeSource, TimeSource
from elapsedtime.duration import ZERO_DURATION, Duration
from elapsedtime.errors import InvalidStateError


class StopwatchState(Enum):
    NOT_STARTED = "not_started"
    STARTED = "started"
    STOPPED = "stopped"


class Stopwatch:
    """Measures the elapsed time between a start and an optional stop.

    The stopwatch can be started and stopped exactly once: ``NOT_STARTED`` ->
    ``STARTED`` -> ``STOPPED``. While running, the elapsed time is recomputed
    from the time source on every call; once stopped it is frozen.
    """

    def __init__(self, time_source: t.Optional[TimeSource] = None):
        """Constructor for a `Stopwatch`

        Args:
            time_source (TimeSource, optional): where the current instant is read
                from. Defaults to the performance counter.
        """
        self._time_source = time_source or PerfCounterTimeSource()
        self._state = StopwatchState.NOT_STARTED
        self._start_ns: t.Optional[int] = None
        self._stop_ns: t.Optional[int] = None

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def start_instant(self) -> t.Optional[int]:
        return self._start_ns

    @property
    def stop_instant(self) -> t.Optional[int]:
        return self._stop_ns

    @property
    def is_running(self) -> bool:
        return self._state is StopwatchState.STARTED

    def start(self) -> None:
        if self._state is not StopwatchState.NOT_STARTED:
            raise InvalidStateError(
                f"Cannot start a stopwatch in state {self._state.name}"
            )
        self._start_ns = self._time_source.now_ns()
        self._state = StopwatchState.STARTED

    def stop(self) -> None:
        if self._state is not StopwatchState.STARTED:
            raise InvalidStateError(
                f"Cannot stop a stopwatch in state {self._state.name}"
            )
        self._stop_ns = self._time_source.now_ns()
        self._state = StopwatchState.STOPPED

    def elapsed(self) -> Duration:
        if self._state is StopwatchState.NOT_STARTED:
            return ZERO_DURATION
        end_ns = (
            self._stop_ns
            if self._state is StopwatchState.STOPPED
            else self._time_source.now_ns()
        )
        return Duration.between(self._start_ns, end_ns)  # type: ignore

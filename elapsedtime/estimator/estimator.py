import typing as t

from loguru import logger

from elapsedtime.clock import TimeSource
from elapsedtime.duration import Duration, format_duration
from elapsedtime.errors import InvalidArgumentError, InvalidStateError
from elapsedtime.estimator.base import EstimationStrategy, WorkProgress
from elapsedtime.estimator.factory import StrategyFactory
from elapsedtime.stopwatch import Stopwatch, StopwatchState


class Estimator:
    """Estimates the remaining time of a task made of a known number of work units.

    The estimator owns a `Stopwatch` measuring the elapsed time and an
    `EstimationStrategy` turning elapsed time and work accounting into a remaining
    time. A typical loop looks like::

        estimator = Estimator().init_and_start(len(files))
        for f in files:
            process(f)
            estimator.complete_work_units(1)
            print(estimator.remaining_time_as_string())
        estimator.stop()

    The estimator is not thread-safe.
    """

    def __init__(
        self,
        strategy: t.Union[EstimationStrategy, str, None] = None,
        time_source: t.Optional[TimeSource] = None,
        total_work_units: int = 0,
        completed_work_units: int = 0,
    ):
        """Constructor for an `Estimator`

        Args:
            strategy (Union[EstimationStrategy, str, None], optional): the strategy
                instance or its `StrategyFactory` name. Defaults to the ratio
                strategy.
            time_source (TimeSource, optional): where the current instant is read
                from. Defaults to the performance counter.
            total_work_units (int, optional): the total work units. Defaults to 0.
            completed_work_units (int, optional): the work units already completed.
                Defaults to 0.

        Raises:
            InvalidArgumentError: if the total is negative or the completed units
                are not in [0, total].
            InvalidStateError: if the strategy instance already belongs to another
                estimator.
        """
        if total_work_units < 0:
            raise InvalidArgumentError(
                f"Total work units may not be negative, got {total_work_units}"
            )
        if completed_work_units < 0 or completed_work_units > total_work_units:
            raise InvalidArgumentError(
                f"Completed work units must be between 0 and {total_work_units}, "
                f"got {completed_work_units}"
            )

        if strategy is None or isinstance(strategy, str):
            strategy = StrategyFactory.get_strategy(strategy)
        strategy.bind()

        self._strategy = strategy
        self._stopwatch = Stopwatch(time_source)
        self._total = total_work_units
        self._completed = completed_work_units

    @classmethod
    def create_and_start(cls, total_work_units: int, **kwargs) -> "Estimator":
        """Creates an estimator and starts it right away"""
        estimator = cls(total_work_units=total_work_units, **kwargs)
        estimator.start()
        return estimator

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def strategy(self) -> EstimationStrategy:
        return self._strategy

    @property
    def time_source(self) -> TimeSource:
        return self._stopwatch.time_source

    @property
    def state(self) -> StopwatchState:
        return self._stopwatch.state

    @property
    def is_running(self) -> bool:
        return self._stopwatch.is_running

    @property
    def total_work_units(self) -> int:
        return self._total

    @total_work_units.setter
    def total_work_units(self, value: int):
        if value < 0:
            raise InvalidArgumentError(
                f"Total work units may not be negative, got {value}"
            )
        if self._completed > 0 and value != self._total:
            raise InvalidStateError(
                "Total work units cannot change once work has been completed"
            )
        self._total = value

    @property
    def completed_work_units(self) -> int:
        return self._completed

    @property
    def remaining_work_units(self) -> int:
        return self._total - self._completed

    @property
    def progress(self) -> WorkProgress:
        return WorkProgress(total=self._total, completed=self._completed)

    def init_and_start(self, total_work_units: int) -> "Estimator":
        """Sets the total work units and starts the estimator.

        Args:
            total_work_units (int): the total work units, must be positive.

        Raises:
            InvalidStateError: if the estimator has already been started.
            InvalidArgumentError: if `total_work_units` is not positive.

        Returns:
            Estimator: this estimator, to allow chaining.
        """
        if self.state is not StopwatchState.NOT_STARTED:
            raise InvalidStateError("Estimator has already been started")
        if total_work_units <= 0:
            raise InvalidArgumentError(
                f"Total work units must be greater than zero, got {total_work_units}"
            )
        self.total_work_units = total_work_units
        self.start()
        return self

    def start(self) -> None:
        if self._total < 1:
            raise InvalidStateError(
                "To start the estimator the total work units must be greater than zero"
            )
        self._stopwatch.start()
        logger.debug(
            "Estimator started: {} work units, {} strategy",
            self._total,
            type(self._strategy).__name__,
        )

    def stop(self) -> None:
        self._stopwatch.stop()
        logger.debug(
            "Estimator stopped: {}/{} work units in {}",
            self._completed,
            self._total,
            self.elapsed_time_as_string(),
        )

    def complete_work_units(self, work_units: int) -> None:
        """Marks some work units as completed.

        Args:
            work_units (int): the number of work units just completed.

        Raises:
            InvalidArgumentError: if `work_units` is negative.
            InvalidStateError: if `work_units` exceeds the remaining work units.
        """
        if work_units < 0:
            raise InvalidArgumentError(
                f"Completed work units may not be negative, got {work_units}"
            )
        remaining = self.remaining_work_units
        if work_units > remaining:
            raise InvalidStateError(
                f"Cannot complete {work_units} work units, "
                f"only {remaining} remaining"
            )

        self._strategy.record(self.time_source.now_ns(), work_units)
        self._completed += work_units

    def elapsed_time(self) -> Duration:
        return self._stopwatch.elapsed()

    def elapsed_time_as_string(self) -> str:
        return format_duration(self.elapsed_time())

    def remaining_time(self) -> Duration:
        """The estimated remaining time, `INFINITE_DURATION` if it cannot be
        estimated yet."""
        return self._strategy.remaining_time(self.progress, self.elapsed_time())

    def remaining_time_as_string(self) -> str:
        return format_duration(self.remaining_time())

import typing as t
from abc import ABC, abstractmethod
from itertools import count

import pydantic as pyd

from elapsedtime.clock import TimeSource
from elapsedtime.duration import Duration, format_duration
from elapsedtime.estimator import EstimationStrategy, Estimator, StrategyFactory


class EstimateReport(pyd.BaseModel, frozen=True):
    """Progress and time estimate of a running task."""

    chunk: int = 0
    """The task number, unique among the tasks of the process"""

    message: str = ""
    """A short description of the task"""

    total: int
    """The total number of work units"""

    completed: int = 0
    """The work units completed so far"""

    elapsed: Duration
    """The time elapsed since the task started"""

    remaining: Duration
    """The estimated remaining time"""

    finished: bool = False
    """Whether the task has finished"""

    @property
    def elapsed_str(self) -> str:
        return format_duration(self.elapsed)

    @property
    def remaining_str(self) -> str:
        return format_duration(self.remaining)


class TrackCallback(ABC):
    """A custom callback receiving the estimates of a running task"""

    @abstractmethod
    def update(self, report: EstimateReport) -> None:
        """What to do when the task advances

        Args:
            report (EstimateReport): The current estimate.
        """


class EstimatedTask:
    """Context manager to track a single task with a remaining-time estimate."""

    CHUNK_COUNTER: t.ClassVar[t.Iterator[int]] = count()

    def __init__(
        self,
        total: int,
        callbacks: t.Sequence[TrackCallback] = (),
        message: str = "",
        estimator: t.Optional[Estimator] = None,
    ):
        self._total = total
        self._callbacks = callbacks
        self._message = message
        self._estimator = estimator or Estimator()
        self._chunk = next(EstimatedTask.CHUNK_COUNTER)

    @property
    def estimator(self) -> Estimator:
        return self._estimator

    @property
    def chunk(self) -> int:
        return self._chunk

    @property
    def message(self) -> str:
        return self._message

    def report(self, finished: bool = False) -> EstimateReport:
        return EstimateReport(
            chunk=self._chunk,
            message=self._message,
            total=self._estimator.total_work_units,
            completed=self._estimator.completed_work_units,
            elapsed=self._estimator.elapsed_time(),
            remaining=self._estimator.remaining_time(),
            finished=finished,
        )

    def start(self):
        """Start the estimator and emit the first report."""
        self._estimator.init_and_start(self._total)
        self._emit()

    def advance(self, advance: int = 1):
        """Complete a custom amount of work units."""
        self._estimator.complete_work_units(advance)
        self._emit()

    def finish(self):
        """Stop the estimator and emit the final report."""
        if self._estimator.is_running:
            self._estimator.stop()
        self._emit(finished=True)

    def track(self, iterable: t.Iterable):
        """Track a generic iterable sequence"""
        for x in iterable:
            yield x
            self.advance()

    def _emit(self, finished: bool = False):
        report = self.report(finished)
        for cb in self._callbacks:
            cb.update(report)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, exc_tb):
        self.finish()


class Tracker:
    """Creates estimated tasks sharing the same callbacks and strategy"""

    def __init__(
        self,
        *callbacks: TrackCallback,
        strategy: t.Optional[str] = None,
        time_source: t.Optional[TimeSource] = None,
        **strategy_kwargs,
    ) -> None:
        """Constructor for a `Tracker`

        Args:
            callbacks (TrackCallback, optional): The callbacks to use.
            strategy (str, optional): The `StrategyFactory` name of the estimation
                strategy. Each task gets its own instance. Defaults to None.
            time_source (TimeSource, optional): The time source of every task.
                Defaults to None, ie, the performance counter.
            strategy_kwargs: Extra arguments for the strategy, eg, `window_size`.
        """
        self._callbacks = callbacks
        self._time_source = time_source
        self._strategy = strategy
        self._strategy_kwargs = strategy_kwargs

    def track(
        self,
        seq: t.Union[t.Iterable, t.Sequence],
        size: t.Optional[int] = None,
        message: str = "",
    ) -> t.Iterable:
        """Track a generic iterable sequence"""

        with self.create_task(
            total=len(seq) if size is None else size, message=message  # type: ignore
        ) as task:
            yield from task.track(seq)

    def _new_strategy(self) -> EstimationStrategy:
        return StrategyFactory.get_strategy(self._strategy, **self._strategy_kwargs)

    def create_task(self, total: int, message: str = "") -> EstimatedTask:
        """Explicit task creation"""

        estimator = Estimator(
            strategy=self._new_strategy(), time_source=self._time_source
        )
        return EstimatedTask(total, self._callbacks, message, estimator)

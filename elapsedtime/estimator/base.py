from abc import ABC, abstractmethod

import pydantic as pyd

from elapsedtime.duration import Duration
from elapsedtime.errors import InvalidStateError


class WorkProgress(pyd.BaseModel, frozen=True):
    """A snapshot of the work accounting of an estimator."""

    total: pyd.NonNegativeInt
    """The total number of work units"""

    completed: pyd.NonNegativeInt = 0
    """The number of work units completed so far"""

    @property
    def remaining(self) -> int:
        return self.total - self.completed


class EstimationStrategy(ABC):
    """An algorithm computing the remaining time of a running task.

    A strategy may keep state about the completions it observes, so an instance
    belongs to a single estimator, see `bind`.
    """

    _bound: bool = False

    @property
    def is_bound(self) -> bool:
        return self._bound

    def bind(self) -> None:
        """Marks this strategy as owned by an estimator.

        Raises:
            InvalidStateError: if the strategy already belongs to an estimator.
        """
        if self._bound:
            raise InvalidStateError(
                f"{type(self).__name__} instance already belongs to an estimator"
            )
        self._bound = True

    def record(self, now_ns: int, work_units: int) -> None:
        """Observe a completion. Called once the completion has been validated,
        right before the accounting is updated.

        Args:
            now_ns (int): the instant of the completion, in nanoseconds.
            work_units (int): the number of work units just completed.
        """
        pass

    @abstractmethod
    def remaining_time(self, progress: WorkProgress, elapsed: Duration) -> Duration:
        """The estimated time to complete the remaining work

        Args:
            progress (WorkProgress): the current work accounting.
            elapsed (Duration): the time elapsed since the start.

        Returns:
            Duration: the estimated remaining time, the infinite sentinel if no
                estimate is possible yet.
        """
        pass

import typing as t
from collections import deque

from loguru import logger

from elapsedtime.duration import INFINITE_DURATION, ZERO_DURATION, Duration
from elapsedtime.errors import InvalidArgumentError
from elapsedtime.estimator.base import EstimationStrategy, WorkProgress
from elapsedtime.estimator.ratio import ratio_remaining_time


class WindowedStrategy(EstimationStrategy):
    """Moving average of the time per work unit over the most recent completions.

    Each completion after the first one adds a sample: the time since the previous
    completion divided by the number of units just completed. Only the last
    `window_size` samples are kept, so the estimate follows changes in the rate.
    Until the first sample is available the ratio estimate is used.
    """

    DEFAULT_WINDOW_SIZE = 3

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE):
        if window_size < 1:
            raise InvalidArgumentError(
                f"Window size must be at least 1, got {window_size}"
            )
        self._samples: t.Deque[int] = deque(maxlen=window_size)
        self._last_completion_ns: t.Optional[int] = None

    @property
    def window_size(self) -> int:
        return self._samples.maxlen  # type: ignore

    @property
    def sample_count(self) -> int:
        return len(self._samples)

    @property
    def samples(self) -> t.Tuple[int, ...]:
        """The per-unit nanosecond samples in the window, oldest first"""
        return tuple(self._samples)

    def record(self, now_ns: int, work_units: int) -> None:
        if work_units == 0:
            return

        if self._last_completion_ns is not None:
            per_unit_ns = (now_ns - self._last_completion_ns) // work_units
            if len(self._samples) == self.window_size:
                logger.debug("Evicting sample {}ns from the window", self._samples[0])
            self._samples.append(per_unit_ns)
        self._last_completion_ns = now_ns

    def remaining_time(self, progress: WorkProgress, elapsed: Duration) -> Duration:
        if progress.remaining == 0:
            return ZERO_DURATION
        if not self._samples:
            return ratio_remaining_time(progress, elapsed)

        average_ns = sum(self._samples) / len(self._samples)
        estimate = Duration(nanosec=int(average_ns * progress.remaining))
        return min(estimate, INFINITE_DURATION)

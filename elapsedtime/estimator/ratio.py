from fractions import Fraction

from elapsedtime.duration import INFINITE_DURATION, ZERO_DURATION, Duration
from elapsedtime.estimator.base import EstimationStrategy, WorkProgress


def ratio_remaining_time(progress: WorkProgress, elapsed: Duration) -> Duration:
    """Linear extrapolation of the elapsed time to the remaining work units.

    The ratio `remaining / completed` is applied to the elapsed nanoseconds with
    exact rational arithmetic, then truncated to an integral number of
    nanoseconds, so the result does not depend on the magnitude of the inputs.
    """
    if progress.total == 0 or progress.remaining == 0:
        return ZERO_DURATION
    if progress.completed == 0:
        return INFINITE_DURATION

    ratio = Fraction(progress.remaining, progress.completed)
    remaining_ns = int(ratio * elapsed.nanosec)
    return min(Duration(nanosec=remaining_ns), INFINITE_DURATION)


class RatioStrategy(EstimationStrategy):
    """Assumes a uniform cost per work unit: the remaining time is the elapsed
    time scaled by the ratio between remaining and completed work units."""

    def remaining_time(self, progress: WorkProgress, elapsed: Duration) -> Duration:
        return ratio_remaining_time(progress, elapsed)

"""Top-level package for elapsedtime."""

__author__ = "eyecan"
__email__ = "daniele.degregorio@eyecan.ai"
__version__ = "0.1.0"

from elapsedtime.errors import (
    ElapsedTimeError,
    InvalidArgumentError,
    InvalidStateError,
)
from elapsedtime.duration import (
    INFINITE_DURATION,
    INFINITY_STRING,
    ZERO_DURATION,
    Duration,
    format_duration,
)
from elapsedtime.clock import (
    PerfCounterTimeSource,
    ProcessTimeSource,
    TimeSource,
    TimeSourceFactory,
)
from elapsedtime.stopwatch import Stopwatch, StopwatchState
from elapsedtime.estimator import (
    EstimationStrategy,
    Estimator,
    RatioStrategy,
    StrategyFactory,
    WindowedStrategy,
    WorkProgress,
)
from elapsedtime.config import EstimatorConfig

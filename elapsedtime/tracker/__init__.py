from elapsedtime.tracker.base import (
    EstimateReport,
    EstimatedTask,
    TrackCallback,
    Tracker,
)
from elapsedtime.tracker.factory import TrackCallbackFactory

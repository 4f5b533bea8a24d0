import os
import typing as t

from loguru import logger

from elapsedtime.tracker.base import EstimateReport, TrackCallback


class LoguruTrackCallback(TrackCallback):
    """Logs every estimate through loguru.

    Args:
        level: Logging level to use. Can also be set via the environment variable
            ELAPSEDTIME_PROGRESS_LOG_LEVEL, which takes precedence. Defaults to
            "INFO".
    """

    LOG_LEVEL_ENV_VAR: t.ClassVar[str] = "ELAPSEDTIME_PROGRESS_LOG_LEVEL"

    def __init__(self, level: str = "INFO") -> None:
        super().__init__()
        self._level = os.getenv(self.LOG_LEVEL_ENV_VAR, level).upper()

    @property
    def level(self) -> str:
        return self._level

    def update(self, report: EstimateReport):
        logger.log(
            self._level,
            "{} | It: {}/{} | Elapsed: {} | Remaining: {} [{}]",
            report.message,
            report.completed,
            report.total,
            report.elapsed_str,
            report.remaining_str,
            "COMPLETED" if report.finished else "RUNNING",
        )

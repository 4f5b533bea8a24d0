from elapsedtime.duration import Duration
from elapsedtime.tracker import EstimateReport
from elapsedtime.tracker.loguru import LoguruTrackCallback


def _report(**kwargs) -> EstimateReport:
    data = dict(
        message="msg",
        total=10,
        completed=5,
        elapsed=Duration.of_seconds(1),
        remaining=Duration.of_seconds(1),
    )
    data.update(kwargs)
    return EstimateReport(**data)  # type: ignore


class TestLoguruTrackCallback:
    def test_callback(self, loguru_sink):
        callback = LoguruTrackCallback()
        assert callback.level == "INFO"

        callback.update(_report())
        loguru_sink.seek(0)
        line = loguru_sink.readlines()[-1]
        assert "INFO" in line
        assert "msg | It: 5/10 | Elapsed: 00:00:01 | Remaining: 00:00:01" in line
        assert "[RUNNING]" in line

    def test_finished(self, loguru_sink):
        LoguruTrackCallback().update(_report(completed=10, finished=True))
        loguru_sink.seek(0)
        assert "[COMPLETED]" in loguru_sink.readlines()[-1]

    def test_level_from_env(self, monkeypatch, loguru_sink):
        monkeypatch.setenv(LoguruTrackCallback.LOG_LEVEL_ENV_VAR, "debug")
        callback = LoguruTrackCallback(level="WARNING")
        assert callback.level == "DEBUG"

        callback.update(_report())
        loguru_sink.seek(0)
        assert "DEBUG" in loguru_sink.readlines()[-1]

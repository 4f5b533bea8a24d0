import pydantic as pyd
import pytest

from elapsedtime.clock import PerfCounterTimeSource, ProcessTimeSource
from elapsedtime.config import EstimatorConfig
from elapsedtime.estimator import RatioStrategy, WindowedStrategy


class TestEstimatorConfig:
    def test_defaults(self):
        cfg = EstimatorConfig()
        assert cfg.strategy == "RATIO"
        assert cfg.window_size == WindowedStrategy.DEFAULT_WINDOW_SIZE
        assert cfg.time_source == "PERF_COUNTER"

        estimator = cfg.create_estimator(10)
        assert isinstance(estimator.strategy, RatioStrategy)
        assert isinstance(estimator.time_source, PerfCounterTimeSource)
        assert estimator.total_work_units == 10
        assert not estimator.is_running

    def test_windowed(self):
        cfg = EstimatorConfig(strategy="windowed", window_size=7, time_source="process")
        assert cfg.strategy == "WINDOWED"

        estimator = cfg.create_estimator()
        assert isinstance(estimator.strategy, WindowedStrategy)
        assert estimator.strategy.window_size == 7
        assert isinstance(estimator.time_source, ProcessTimeSource)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"strategy": "crystal_ball"},
            {"time_source": "sundial"},
            {"window_size": 0},
            {"window_size": -3},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(pyd.ValidationError):
            EstimatorConfig(**kwargs)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ELAPSEDTIME_STRATEGY", "windowed")
        monkeypatch.setenv("ELAPSEDTIME_WINDOW_SIZE", "5")
        monkeypatch.delenv("ELAPSEDTIME_TIME_SOURCE", raising=False)

        cfg = EstimatorConfig.from_env(strategy="ratio", time_source="process")
        assert cfg.strategy == "WINDOWED"
        assert cfg.window_size == 5
        assert cfg.time_source == "PROCESS"

    def test_from_env_empty(self, monkeypatch):
        for name in ("STRATEGY", "WINDOW_SIZE", "TIME_SOURCE"):
            monkeypatch.delenv("ELAPSEDTIME_" + name, raising=False)
        assert EstimatorConfig.from_env() == EstimatorConfig()

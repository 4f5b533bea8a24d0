import pytest

from elapsedtime.estimator import (
    EstimationStrategy,
    RatioStrategy,
    StrategyFactory,
    WindowedStrategy,
)


class TestStrategyFactory:
    def test_get_strategy(self):
        strategy = StrategyFactory.get_strategy()
        assert isinstance(strategy, EstimationStrategy)
        assert isinstance(strategy, RatioStrategy)

    def test_get_windowed(self):
        strategy = StrategyFactory.get_strategy("windowed", window_size=4)
        assert isinstance(strategy, WindowedStrategy)
        assert strategy.window_size == 4

    def test_new_instance_each_time(self):
        assert StrategyFactory.get_strategy("WINDOWED") is not (
            StrategyFactory.get_strategy("WINDOWED")
        )

    def test_unknown(self):
        with pytest.raises(KeyError):
            StrategyFactory.get_strategy("crystal_ball")

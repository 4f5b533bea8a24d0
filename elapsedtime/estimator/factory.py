import typing as t

from elapsedtime.estimator.base import EstimationStrategy
from elapsedtime.estimator.ratio import RatioStrategy
from elapsedtime.estimator.windowed import WindowedStrategy


class StrategyFactory:
    """Factory for `EstimationStrategy`s"""

    DEFAULT_STRATEGY_TYPE = "RATIO"

    CLASS_MAP: t.Dict[str, t.Type[EstimationStrategy]] = {
        "RATIO": RatioStrategy,
        "WINDOWED": WindowedStrategy,
    }

    @classmethod
    def get_strategy(
        cls, type_: t.Optional[str] = None, **kwargs
    ) -> EstimationStrategy:
        return cls.CLASS_MAP[(type_ or cls.DEFAULT_STRATEGY_TYPE).upper()](**kwargs)

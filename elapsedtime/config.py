import os
import typing as t

import pydantic as pyd

from elapsedtime.clock import TimeSourceFactory
from elapsedtime.estimator import Estimator, StrategyFactory, WindowedStrategy


class EstimatorConfig(pyd.BaseModel, frozen=True):
    """Configuration of an `Estimator`.

    Every field can also be set via environment variables, see `from_env`.
    """

    ENV_VAR_PREFIX: t.ClassVar[str] = "ELAPSEDTIME_"

    strategy: str = pyd.Field(
        StrategyFactory.DEFAULT_STRATEGY_TYPE,
        description="The estimation strategy, one of `RATIO` or `WINDOWED`.",
    )
    window_size: pyd.PositiveInt = pyd.Field(
        WindowedStrategy.DEFAULT_WINDOW_SIZE,
        description="The number of recent samples averaged by the `WINDOWED` strategy.",
    )
    time_source: str = pyd.Field(
        TimeSourceFactory.DEFAULT_TIME_SOURCE_TYPE,
        description="The time source, one of `PERF_COUNTER` or `PROCESS`.",
    )

    @pyd.field_validator("strategy")
    @classmethod
    def check_strategy(cls, v: str) -> str:
        v = v.upper()
        if v not in StrategyFactory.CLASS_MAP:
            raise ValueError(f"Unknown estimation strategy `{v}`")
        return v

    @pyd.field_validator("time_source")
    @classmethod
    def check_time_source(cls, v: str) -> str:
        v = v.upper()
        if v not in TimeSourceFactory.CLASS_MAP:
            raise ValueError(f"Unknown time source `{v}`")
        return v

    @classmethod
    def from_env(cls, **kwargs) -> "EstimatorConfig":
        """Builds a configuration from `ELAPSEDTIME_*` environment variables, eg,
        `ELAPSEDTIME_STRATEGY=windowed`. Environment variables take precedence over
        the keyword arguments.
        """
        env_values = {}
        for name in ("strategy", "window_size", "time_source"):
            value = os.getenv(cls.ENV_VAR_PREFIX + name.upper())
            if value is not None:
                env_values[name] = value
        return cls(**{**kwargs, **env_values})

    def create_estimator(self, total_work_units: int = 0) -> Estimator:
        strategy_kwargs = (
            {"window_size": self.window_size} if self.strategy == "WINDOWED" else {}
        )
        return Estimator(
            strategy=StrategyFactory.get_strategy(self.strategy, **strategy_kwargs),
            time_source=TimeSourceFactory.get_time_source(self.time_source),
            total_work_units=total_work_units,
        )

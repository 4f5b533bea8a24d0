from elapsedtime.estimator.base import EstimationStrategy, WorkProgress
from elapsedtime.estimator.ratio import RatioStrategy, ratio_remaining_time
from elapsedtime.estimator.windowed import WindowedStrategy
from elapsedtime.estimator.factory import StrategyFactory
from elapsedtime.estimator.estimator import Estimator

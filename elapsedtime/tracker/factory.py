import typing as t

from elapsedtime.tracker.base import TrackCallback
from elapsedtime.tracker.loguru import LoguruTrackCallback
from elapsedtime.tracker.tqdm_bars import TqdmTrackCallback


class TrackCallbackFactory:
    """Factory for `TrackCallback`s"""

    DEFAULT_CALLBACK_TYPE = "LOGURU"

    CLASS_MAP: t.Dict[str, t.Type[TrackCallback]] = {
        "LOGURU": LoguruTrackCallback,
        "TQDM": TqdmTrackCallback,
    }

    @classmethod
    def get_callback(cls, type_: t.Optional[str] = None, **kwargs) -> TrackCallback:
        return cls.CLASS_MAP[(type_ or cls.DEFAULT_CALLBACK_TYPE).upper()](**kwargs)

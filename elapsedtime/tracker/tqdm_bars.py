import shutil
import typing as t

from elapsedtime.tracker.base import EstimateReport, TrackCallback


class TqdmTrackCallback(TrackCallback):
    """Shows a tqdm bar with the estimated remaining time as postfix.

    Each task gets its own bar, keyed on the report chunk, so nested tasks sharing
    the same callback do not interfere. A bar is closed when its task finishes.
    """

    def __init__(
        self,
        ncols: t.Optional[int] = None,
        position: t.Optional[int] = None,
        file: t.Optional[t.TextIO] = None,
    ):
        super().__init__()
        self._ncols = ncols
        self._position = position
        self._file = file
        self._bars: t.Dict[int, t.Any] = {}

    @staticmethod
    def _tty_length():
        return shutil.get_terminal_size((80, 20)).columns

    def _new_bar(self, report: EstimateReport):
        from tqdm import tqdm

        return tqdm(
            total=report.total,
            desc=report.message or None,
            colour="#4CAE4F",
            position=self._position,
            file=self._file,
            ncols=(
                self._tty_length()
                if self._ncols is None
                else (None if self._ncols <= 0 else self._ncols)
            ),
            dynamic_ncols=self._ncols is None,
        )

    @property
    def bars(self) -> t.Dict[int, t.Any]:
        """The open bars, by task chunk"""
        return dict(self._bars)

    def update(self, report: EstimateReport):
        # create and show the bar upon the first report of a task
        if report.chunk not in self._bars:
            self._bars[report.chunk] = self._new_bar(report)
        bar = self._bars[report.chunk]

        if bar.n < report.completed:
            bar.update(report.completed - bar.n)
        bar.set_postfix_str(f"ETA {report.remaining_str}", refresh=False)
        bar.refresh()

        if report.finished:
            bar.close()
            del self._bars[report.chunk]

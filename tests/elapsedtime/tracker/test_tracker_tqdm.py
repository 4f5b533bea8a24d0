from io import StringIO

from elapsedtime.estimator import Estimator
from elapsedtime.tracker import EstimatedTask
from elapsedtime.tracker.tqdm_bars import TqdmTrackCallback


class TestTqdmTrackCallback:
    def test_callback(self, time_source):
        stream = StringIO()
        callback = TqdmTrackCallback(ncols=100, file=stream)
        estimator = Estimator(time_source=time_source)

        with EstimatedTask(4, [callback], "bars", estimator) as task:
            bar = callback.bars[task.chunk]
            assert bar.total == 4
            for i in range(4):
                time_source.advance(seconds=1)
                task.advance()
                assert bar.n == i + 1

        # the bar is closed with the task
        assert callback.bars == {}

        output = stream.getvalue()
        assert "bars" in output
        assert "ETA ∞" in output
        assert "ETA 00:00:00" in output

    def test_one_bar_per_task(self, time_source):
        callback = TqdmTrackCallback(ncols=100, file=StringIO())
        for _ in range(2):
            estimator = Estimator(time_source=time_source)
            with EstimatedTask(2, [callback], estimator=estimator) as task:
                bar = callback.bars[task.chunk]
                task.advance(2)
                assert callback.bars[task.chunk] is bar
            assert callback.bars == {}

    def test_nested_tasks(self, time_source):
        callback = TqdmTrackCallback(ncols=100, file=StringIO())
        outer_estimator = Estimator(time_source=time_source)
        with EstimatedTask(10, [callback], "outer", outer_estimator) as outer:
            outer_bar = callback.bars[outer.chunk]
            time_source.advance(seconds=1)
            outer.advance()

            inner_estimator = Estimator(time_source=time_source)
            with EstimatedTask(3, [callback], "inner", inner_estimator) as inner:
                assert inner.chunk != outer.chunk
                assert len(callback.bars) == 2
                inner_bar = callback.bars[inner.chunk]
                assert inner_bar is not outer_bar
                for _ in range(3):
                    time_source.advance(seconds=1)
                    inner.advance()
                assert inner_bar.n == 3
                assert outer_bar.n == 1

            # only the inner bar has been closed
            assert list(callback.bars) == [outer.chunk]
            assert callback.bars[outer.chunk] is outer_bar

            time_source.advance(seconds=1)
            outer.advance(9)
            assert outer_bar.n == 10
            assert outer_bar.total == 10

        assert callback.bars == {}

"""
Тесты накопительного таймера шагов.
"""

import time

from lloyd_kmeans.utils.timers import Timer


class TestTimer:
    """Тесты контекстного менеджера Timer."""

    def test_timer_basic(self):
        with Timer() as t:
            time.sleep(0.05)

        assert t.elapsed >= 0.05
        assert t.total == t.elapsed
        assert t.laps == 1

    def test_timer_accumulates_laps(self):
        timer = Timer()

        with timer:
            time.sleep(0.05)
        first = timer.elapsed

        with timer:
            pass

        assert timer.laps == 2
        assert timer.elapsed < 0.05
        assert abs(timer.total - (first + timer.elapsed)) < 1e-9

    def test_timer_nested(self):
        with Timer() as outer:
            time.sleep(0.02)
            with Timer() as inner:
                time.sleep(0.02)

        assert outer.elapsed > inner.elapsed

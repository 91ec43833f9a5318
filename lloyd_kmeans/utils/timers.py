"""
Таймер для замера шагов назначения и обновления в цикле KMeans.
"""
from __future__ import annotations
import time
from typing import Any


class Timer:
    """
    Накопительный таймер шага на основе time.perf_counter().

    Один экземпляр живёт весь fit(...): каждый вход в блок ``with``
    замеряет очередной круг. ``elapsed`` хранит время последнего круга,
    ``total`` и ``laps`` накапливаются по всем кругам.

        t_assign = Timer()
        for _ in range(n):
            with t_assign:
                model.assign_clusters(X, centroids)
        t_assign.total, t_assign.laps
    """

    def __init__(self) -> None:
        self.start: float = 0.0
        self.elapsed: float = 0.0
        self.total: float = 0.0
        self.laps: int = 0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed = time.perf_counter() - self.start
        self.total += self.elapsed
        self.laps += 1

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from lloyd_kmeans.utils.timers import Timer


class KMeansBase(ABC):
    """
    Базовый класс для реализаций KMeans.

    Отвечает за цикл итераций, проверку сходимости и сбор таймингов:
    - T_назначения: время шага assign_clusters;
    - T_обновления: время шага update_centroids;
    - T_итерации: сумма двух предыдущих.
    """

    def __init__(
        self,
        n_clusters: int,
        limit: int | None = None,
        logger: Any | None = None,
    ):
        self.K = n_clusters
        self.limit = limit  # None: без ограничения на число итераций
        self.logger = logger

        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None
        self.converged: bool = False

        # агрегированные тайминги за один вызов fit(...)
        self.t_assign_total: float = 0.0
        self.t_update_total: float = 0.0
        self.t_iter_total: float = 0.0

        # Количество итераций, после которых центроиды были заменены
        self.n_iters_actual: int = 0

    def _limit_label(self) -> str:
        return "inf" if self.limit is None else str(self.limit)

    def fit(self, X: np.ndarray, initial_centroids: np.ndarray) -> None:
        """
        Основной цикл KMeans с остановкой по точной сходимости.

        Алгоритм останавливается, когда:
        - Новые центроиды в точности равны предыдущим, ИЛИ
        - Число итераций достигло limit

        При сходимости остаются предыдущие центроиды и разбиение по ним.
        При limit == 0 цикл не выполняется, а разбиение считается один раз
        по начальным центроидам.
        """
        self.centroids = initial_centroids.copy()
        self.labels = None
        self.converged = False

        # сбрасываем накопленные тайминги для нового запуска
        t_assign = Timer()
        t_update = Timer()
        self.t_assign_total = 0.0
        self.t_update_total = 0.0
        self.t_iter_total = 0.0
        self.n_iters_actual = 0

        while self.limit is None or self.n_iters_actual < self.limit:
            with t_assign:
                self.labels = self.assign_clusters(X, self.centroids)
            with t_update:
                new_centroids = self.update_centroids(X, self.labels)

            t_assign_elapsed = t_assign.elapsed
            t_update_elapsed = t_update.elapsed

            self.t_assign_total = t_assign.total
            self.t_update_total = t_update.total
            self.t_iter_total = t_assign.total + t_update.total

            # Точное сравнение, без допуска
            self.converged = bool(
                new_centroids.shape == self.centroids.shape
                and np.array_equal(new_centroids, self.centroids)
            )
            if self.converged:
                break

            self.centroids = new_centroids
            self.n_iters_actual += 1

            i = self.n_iters_actual
            if self.logger and (i == 1 or i % 10 == 0):
                self.logger.info(
                    f"  Iteration {i}/{self._limit_label()} "
                    f"(T_assign={t_assign_elapsed:.6f}s, "
                    f"T_update={t_update_elapsed:.6f}s)"
                )

        if self.labels is None:
            self.labels = self.assign_clusters(X, self.centroids)

        if self.logger:
            if self.converged:
                self.logger.info(
                    f"  Convergence reached after {self.n_iters_actual} iterations"
                )
            else:
                self.logger.info(
                    f"  Iteration limit {self._limit_label()} reached without convergence"
                )

    @abstractmethod
    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Шаг назначения точек кластерам."""
        raise NotImplementedError

    @abstractmethod
    def update_centroids(self, X: np.ndarray, labels: np.ndarray) -> np.ndarray:
        """Шаг обновления центроидов по присвоенным меткам."""
        raise NotImplementedError

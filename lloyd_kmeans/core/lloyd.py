# core/lloyd.py
from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .base import KMeansBase
from .initializer import random_centroids
from .primitives import distance_matrix, floor_value, sequential_sum


class KMeansLloyd(KMeansBase):
    """
    Однопоточный алгоритм Ллойда на NumPy с округлением вниз.

    Расстояния и координаты средних центроидов округляются вниз,
    пустой кластер получает новый случайный центроид.
    """

    def __init__(
        self,
        n_clusters: int,
        limit: int | None = None,
        rng: np.random.Generator | None = None,
        logger: Any | None = None,
    ):
        super().__init__(n_clusters=n_clusters, limit=limit, logger=logger)
        self.rng = rng if rng is not None else np.random.default_rng()

    def assign_clusters(self, X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        # argmin берёт первый минимум: при равенстве побеждает меньший индекс
        distances = distance_matrix(X, centroids)
        return np.argmin(distances, axis=1)

    def update_centroids(self, X: np.ndarray, labels: np.ndarray) -> np.ndarray:
        D = X.shape[1]
        centroids = np.zeros((self.K, D), dtype=np.float64)

        for k in range(self.K):
            points = X[labels == k]
            if len(points) > 0:
                centroids[k] = floor_value(sequential_sum(points, axis=0) / len(points))
            else:
                # Все точки лежат в каком-либо кластере, так что это весь X
                centroids[k] = random_centroids(1, X, self.rng)[0]
                if self.logger:
                    self.logger.info(f"  Cluster {k} is empty, reseeding its centroid")

        return centroids


def split_clusters(X: np.ndarray, labels: np.ndarray, k: int) -> list[np.ndarray]:
    """Группирует точки по меткам, сохраняя исходный порядок внутри кластера."""
    return [X[labels == idx] for idx in range(k)]


def assign(centroids: np.ndarray, points: np.ndarray) -> list[np.ndarray]:
    """Шаг назначения: k кластеров, ближайших к соответствующим центроидам."""
    centroids = np.asarray(centroids, dtype=np.float64)
    points = np.asarray(points, dtype=np.float64)
    model = KMeansLloyd(n_clusters=len(centroids))
    labels = model.assign_clusters(points, centroids)
    return split_clusters(points, labels, len(centroids))


def mean_centroids(
    clusters: Sequence[np.ndarray],
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Шаг обновления по готовым кластерам.

    Пустые кластеры пересеваются по объединению точек всех кластеров.
    """
    clusters = [np.asarray(cl, dtype=np.float64) for cl in clusters]
    non_empty = [cl for cl in clusters if len(cl) > 0]
    X = np.vstack(non_empty)
    labels = np.concatenate(
        [np.full(len(cl), idx, dtype=np.int64) for idx, cl in enumerate(clusters)]
    )
    model = KMeansLloyd(n_clusters=len(clusters), rng=rng)
    return model.update_centroids(X, labels)

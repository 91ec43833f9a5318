"""
Точка входа кластеризации: проверка входа, инициализация, цикл Ллойда
и подсчёт суммарного расстояния.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from lloyd_kmeans.core.initializer import random_centroids
from lloyd_kmeans.core.lloyd import KMeansLloyd, split_clusters
from lloyd_kmeans.core.primitives import total_distance
from lloyd_kmeans.errors import InvalidInputError


@dataclass(frozen=True)
class ClusterizeConfig:
    """Параметры одного запуска кластеризации."""

    data: Any
    k: int | None = None
    limit: int | None = None  # None: без ограничения
    centroids: Any | None = None


@dataclass(frozen=True, eq=False)
class ClusterizeResult:
    """Результат кластеризации: кластер i принадлежит центроиду i."""

    clusters: list[np.ndarray]
    centroids: np.ndarray
    iterations: int
    total_distance: float
    labels: np.ndarray = field(repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Представление для JSON: вложенные списки вместо массивов."""
        return {
            "clusters": [cl.tolist() for cl in self.clusters],
            "centroids": self.centroids.tolist(),
            "iterations": self.iterations,
            "totalDistance": self.total_distance,
        }


def _as_table(values: Any, message: str) -> np.ndarray:
    """Приводит последовательность точек к массиву (N x D) или бросает ошибку."""
    try:
        table = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(message) from exc
    if table.ndim != 2 or table.shape[1] == 0:
        raise InvalidInputError(message)
    return table


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def validate(config: ClusterizeConfig) -> tuple[np.ndarray, np.ndarray | None]:
    """
    Проверяет входные параметры до начала вычислений.

    Returns:
        Кортеж (X, centroids) в виде массивов float64; centroids может быть None

    Raises:
        InvalidInputError: Если нарушено одно из предусловий
    """
    k = config.k
    data = config.data
    centroids = config.centroids

    if k is not None and not _is_integer(k):
        raise InvalidInputError("K should be an integer!")
    if k is not None and k < 2:
        raise InvalidInputError("K should be greater than 1!")
    if data is None or len(data) == 0:
        raise InvalidInputError("Your data set is empty!")
    if centroids is not None and k is not None and len(centroids) != k:
        raise InvalidInputError(
            "K is not equal to the number of centroids provided!"
        )
    if centroids is not None and k is None:
        raise InvalidInputError("When providing centroids, please provide K!")
    if k is None:
        raise InvalidInputError("K is required!")
    if config.limit is not None and (not _is_integer(config.limit) or config.limit < 0):
        raise InvalidInputError("Limit should be a non-negative integer!")

    X = _as_table(data, "All points must have the same number of dimensions!")

    initial = None
    if centroids is not None:
        initial = _as_table(
            centroids,
            "Centroids must have the same number of dimensions as the data!",
        )
        if initial.shape[1] != X.shape[1]:
            raise InvalidInputError(
                "Centroids must have the same number of dimensions as the data!"
            )

    return X, initial


def clusterize(
    config: ClusterizeConfig | None = None,
    *,
    rng: np.random.Generator | int | None = None,
    logger: logging.Logger | None = None,
    **params: Any,
) -> ClusterizeResult:
    """
    Разбивает точки на k кластеров алгоритмом Ллойда.

    Args:
        config: Параметры запуска; вместо него можно передать поля
            ClusterizeConfig именованными аргументами
        rng: Генератор numpy или seed; по умолчанию новый генератор
            на энтропии ОС (свой для каждого вызова)
        logger: Логгер для сообщений о ходе итераций

    Returns:
        ClusterizeResult с кластерами, центроидами, числом итераций
        и суммарным расстоянием

    Raises:
        InvalidInputError: Если входные данные некорректны
    """
    if config is None:
        config = ClusterizeConfig(**params)
    elif params:
        raise TypeError("Pass either a ClusterizeConfig or keyword parameters, not both")

    X, initial = validate(config)
    if rng is None or isinstance(rng, (int, np.integer)):
        generator = np.random.default_rng(rng)
    else:
        # Любой объект с методом random(size), например подменный генератор в тестах
        generator = rng
    K = config.k

    if initial is None:
        # 1. Случайные начальные центроиды в пределах диапазона данных
        initial = random_centroids(K, X, generator)

    # 2. Назначение и пересчёт до сходимости или до limit
    model = KMeansLloyd(n_clusters=K, limit=config.limit, rng=generator, logger=logger)
    model.fit(X, initial)

    clusters = split_clusters(X, model.labels, K)

    return ClusterizeResult(
        clusters=clusters,
        centroids=model.centroids,
        iterations=model.n_iters_actual,
        total_distance=total_distance(clusters, model.centroids),
        labels=model.labels,
    )

"""
Числовые примитивы для K-means с округлением вниз.

Все промежуточные вычисления выполняются в float64, а округление вниз
применяется только в точках вывода: расстояние, случайное значение,
координата среднего центроида.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def floor_value(x: float | np.ndarray) -> float | np.ndarray:
    """Округление вниз, единое для всего пакета."""
    return np.floor(x)


def minmax(points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Покоординатные минимум и максимум по всем точкам.

    Args:
        points: Массив точек (N x D), N >= 1

    Returns:
        Кортеж (min_point, max_point), каждый формы (D,)
    """
    points = np.asarray(points, dtype=np.float64)
    return points.min(axis=0), points.max(axis=0)


def random_int(
    low: float | np.ndarray,
    high: float | np.ndarray,
    rng: np.random.Generator,
) -> float | np.ndarray:
    """
    Случайное целое значение из отрезка [low, high].

    Равномерное число из [0, 1) масштабируется на (high - low + 1),
    сдвигается на low и округляется вниз. Для массивов low/high
    значения тянутся независимо по каждой координате.
    """
    low = np.asarray(low, dtype=np.float64)
    high = np.asarray(high, dtype=np.float64)
    draw = rng.random(low.shape) if low.shape else rng.random()
    value = floor_value(draw * (high - low + 1) + low)
    return float(value) if np.ndim(value) == 0 else value


def sequential_sum(values: np.ndarray, axis: int = -1) -> np.ndarray:
    """
    Сумма слагаемых строго слева направо вдоль оси.

    Порядок сложения как у последовательной свёртки; np.sum его
    не гарантирует (попарное суммирование).
    """
    return np.take(np.cumsum(values, axis=axis), -1, axis=axis)


def distance_matrix(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Округлённые вниз евклидовы расстояния (N, K) от точек до центроидов."""
    # (N, K, D) → (N, K)
    diff = X[:, None, :] - centroids[None, :, :]
    return floor_value(np.sqrt(sequential_sum(diff * diff, axis=2)))


def euc_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """floor(sqrt(sum((a_i - b_i)^2))) для точек одинаковой размерности."""
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(floor_value(np.sqrt(sequential_sum(diff * diff))))


def points_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Точное совпадение размерности и всех координат."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a.shape == b.shape and bool(np.all(a == b))


def total_distance(clusters: Sequence[np.ndarray], centroids: np.ndarray) -> float:
    """
    Суммарное расстояние от каждой точки до центроида её кластера.

    Каждое расстояние округляется вниз, затем округляется и сумма.
    """
    total = 0.0
    for centroid, cluster in zip(centroids, clusters):
        if len(cluster) == 0:
            continue
        total += float(np.sum(distance_matrix(cluster, centroid[None, :])))
    return float(floor_value(total))

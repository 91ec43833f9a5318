from __future__ import annotations

import logging
import math

import numpy as np

from lloyd_kmeans.core.primitives import minmax, points_equal, random_int
from lloyd_kmeans.errors import InvalidInputError

logger = logging.getLogger(__name__)


def lattice_size(low: np.ndarray, high: np.ndarray) -> int:
    """
    Количество различных точек, которые может выдать random_int.

    По координате d достижимы целые от floor(low_d) до ceil(high_d).
    """
    sizes = np.ceil(high) - np.floor(low) + 1
    return math.prod(int(s) for s in sizes)


def random_centroids(
    k: int,
    points: np.ndarray,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Выбирает k попарно различных случайных центроидов.

    Каждая координата кандидата тянется из [min_d, max_d] по наблюдаемому
    диапазону данных. Кандидаты, в точности совпадающие с уже выбранным
    центроидом, отбрасываются.

    Args:
        k: Количество центроидов
        points: Массив точек (N x D), N >= 1
        rng: Генератор случайных чисел

    Returns:
        Массив центроидов (k x D)

    Raises:
        InvalidInputError: Если в диапазоне данных меньше k различных кандидатов
    """
    low, high = minmax(points)

    if lattice_size(low, high) < k:
        raise InvalidInputError(
            "Not enough distinct values in the data to pick K centroids!"
        )

    centroids: list[np.ndarray] = []
    rejected = 0
    while len(centroids) < k:
        candidate = random_int(low, high, rng)
        if any(points_equal(ct, candidate) for ct in centroids):
            rejected += 1
            continue
        centroids.append(candidate)

    if rejected:
        logger.debug(f"Picked {k} random centroids, {rejected} duplicates rejected")

    return np.vstack(centroids)

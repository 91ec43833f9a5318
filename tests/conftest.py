"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest


class ScriptedRng:
    """Подменный генератор: отдаёт заранее заданные значения из [0, 1)."""

    def __init__(self, values):
        self._values = list(values)

    def random(self, size=None):
        if size is None:
            return self._values.pop(0)
        n = int(np.prod(size))
        out = np.array([self._values.pop(0) for _ in range(n)], dtype=np.float64)
        return out.reshape(size)


@pytest.fixture
def rng():
    """Детерминированный генератор numpy."""
    return np.random.default_rng(42)


@pytest.fixture
def scripted_rng():
    """Фабрика подменных генераторов с заданной последовательностью значений."""
    return ScriptedRng


@pytest.fixture
def three_groups_3d():
    """12 трёхмерных точек: три явно разделённые группы по 4 точки."""
    return [
        [1, 2, 3],
        [2010, 2030, 2010],
        [2015, 2000, 2030],
        [210, 200, 250],
        [3, 4, 5],
        [5, 3, 6],
        [210, 250, 230],
        [2, 1, 1],
        [250, 230, 260],
        [2000, 2050, 2050],
        [211, 200, 250],
        [2020, 2030, 2010],
    ]


@pytest.fixture
def two_groups_2d():
    """Две группы по 4 точки: около (2, 2) и около (1220, 1220)."""
    return [
        [1, 2],
        [3, 4],
        [5, 3],
        [2, 1],
        [1210, 1250],
        [1210, 1200],
        [1250, 1230],
        [1211, 1200],
    ]


@pytest.fixture
def simple_2d_dataset():
    """Фикстура с очень простым 2D датасетом для базовых тестов."""
    X = np.array([
        [0.0, 0.0],
        [1.0, 1.0],
        [2.0, 2.0],
        [10.0, 10.0],
        [11.0, 11.0],
        [12.0, 12.0],
    ])
    initial_centroids = np.array([
        [0.5, 0.5],
        [11.0, 11.0],
    ])
    return X, initial_centroids

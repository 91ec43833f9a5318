"""
Тесты выбора случайных начальных центроидов.
"""

import numpy as np
import pytest

from lloyd_kmeans.core.initializer import lattice_size, random_centroids
from lloyd_kmeans.errors import InvalidInputError


class TestRandomCentroids:
    """Тесты random_centroids."""

    def test_shape_and_bounds(self, three_groups_3d, rng):
        X = np.array(three_groups_3d, dtype=np.float64)

        centroids = random_centroids(3, X, rng)

        assert centroids.shape == (3, 3)
        assert np.all(centroids >= X.min(axis=0))
        assert np.all(centroids <= X.max(axis=0))
        assert np.all(centroids == np.floor(centroids))

    def test_centroids_pairwise_distinct(self, rng):
        # Всего 4 возможных кандидата, так что дубликаты неизбежны
        X = np.array([[1.0, 1.0], [2.0, 2.0]])

        centroids = random_centroids(4, X, rng)

        assert len({tuple(ct) for ct in centroids}) == 4

    def test_duplicates_rejected(self, scripted_rng):
        X = np.array([[0.0, 0.0], [9.0, 9.0]])
        # второй кандидат совпадает с первым и отбрасывается
        fake = scripted_rng([0.0, 0.0, 0.0, 0.0, 0.95, 0.95])

        centroids = random_centroids(2, X, fake)

        np.testing.assert_array_equal(centroids, [[0.0, 0.0], [9.0, 9.0]])

    def test_reproducible_with_seed(self, three_groups_3d):
        X = np.array(three_groups_3d, dtype=np.float64)

        a = random_centroids(3, X, np.random.default_rng(123))
        b = random_centroids(3, X, np.random.default_rng(123))

        np.testing.assert_array_equal(a, b)

    def test_not_enough_candidates(self, rng):
        X = np.array([[5.0, 5.0], [5.0, 5.0], [5.0, 5.0]])

        with pytest.raises(InvalidInputError, match="Not enough distinct values"):
            random_centroids(2, X, rng)


class TestLatticeSize:
    """Тесты подсчёта достижимых кандидатов."""

    def test_integer_bounds(self):
        assert lattice_size(np.array([1.0, 1.0]), np.array([2.0, 2.0])) == 4

    def test_fractional_bounds(self):
        # по второй координате достижимы 20..51
        assert lattice_size(np.array([0.0, 20.0]), np.array([0.0, 50.55])) == 32

    def test_single_point(self):
        assert lattice_size(np.array([3.0]), np.array([3.0])) == 1

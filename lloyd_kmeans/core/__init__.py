from .base import KMeansBase
from .lloyd import KMeansLloyd, assign, mean_centroids, split_clusters
from .initializer import random_centroids
from .primitives import (
    euc_distance,
    minmax,
    points_equal,
    random_int,
    total_distance,
)

__all__ = [
    "KMeansBase",
    "KMeansLloyd",
    "assign",
    "mean_centroids",
    "split_clusters",
    "random_centroids",
    "euc_distance",
    "minmax",
    "points_equal",
    "random_int",
    "total_distance",
]

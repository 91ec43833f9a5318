from .api import ClusterizeConfig, ClusterizeResult, clusterize, validate
from .errors import InvalidInputError
from .core import (
    KMeansLloyd,
    assign,
    euc_distance,
    mean_centroids,
    minmax,
    points_equal,
    random_centroids,
    random_int,
    total_distance,
)

__all__ = [
    "ClusterizeConfig",
    "ClusterizeResult",
    "clusterize",
    "validate",
    "InvalidInputError",
    "KMeansLloyd",
    "assign",
    "euc_distance",
    "mean_centroids",
    "minmax",
    "points_equal",
    "random_centroids",
    "random_int",
    "total_distance",
]

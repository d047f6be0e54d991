from .errors import (
    ConvergenceError,
    DivideByZeroError,
    EmptyClusterError,
    InvalidArgumentError,
    InvalidComparisonError,
    KMeansError,
)
from .vector import Vector
from .cluster import Cluster
from .cluster_set import ClusterSet
from .lloyd import KMeansLloyd, kmeans

__all__ = [
    "KMeansError",
    "DivideByZeroError",
    "EmptyClusterError",
    "InvalidArgumentError",
    "InvalidComparisonError",
    "ConvergenceError",
    "Vector",
    "Cluster",
    "ClusterSet",
    "KMeansLloyd",
    "kmeans",
]

"""K-means (алгоритм Ллойда) над n-мерными точками."""

from .core import (
    Cluster,
    ClusterSet,
    ConvergenceError,
    DivideByZeroError,
    EmptyClusterError,
    InvalidArgumentError,
    InvalidComparisonError,
    KMeansError,
    KMeansLloyd,
    Vector,
    kmeans,
)
from .data import DataSet, validate_dataset

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Cluster",
    "ClusterSet",
    "DataSet",
    "KMeansLloyd",
    "kmeans",
    "validate_dataset",
    "KMeansError",
    "DivideByZeroError",
    "EmptyClusterError",
    "InvalidArgumentError",
    "InvalidComparisonError",
    "ConvergenceError",
]

"""
Общие фикстуры для всех тестов.
"""

import numpy as np
import pytest

from kmeans.core.vector import Vector
from kmeans.data.dataset import DataSet


def _build_dataset(points):
    dataset = DataSet()
    for p in points:
        dataset.add(Vector(p))
    return dataset


@pytest.fixture
def make_dataset():
    """Фабрика датасетов из списков координат."""
    return _build_dataset


@pytest.fixture
def diagonal_points():
    """Точки (0,0), (1,1), (2,2), (3,3), (4,4)."""
    return [Vector([float(i), float(i)]) for i in range(5)]


@pytest.fixture
def diagonal_dataset(diagonal_points):
    """Датасет из пяти точек на диагонали."""
    dataset = DataSet()
    for p in diagonal_points:
        dataset.add(p)
    return dataset


@pytest.fixture
def demo_dataset():
    """Демо-датасет (1,1)..(9,9)."""
    return _build_dataset([[float(i), float(i)] for i in range(1, 10)])


@pytest.fixture
def small_array():
    """Небольшой массив (2D, 2 явно разделённых кластера)."""
    np.random.seed(42)
    cluster1 = np.random.randn(30, 2) + [0, 0]
    cluster2 = np.random.randn(30, 2) + [10, 10]
    return np.vstack([cluster1, cluster2])


@pytest.fixture
def medium_array():
    """Средний массив (10D, 3 кластера по 50 точек подряд)."""
    rng = np.random.default_rng(42)
    cluster1 = rng.standard_normal((50, 10)) + 0.0
    cluster2 = rng.standard_normal((50, 10)) + 8.0
    cluster3 = rng.standard_normal((50, 10)) - 8.0
    return np.vstack([cluster1, cluster2, cluster3])

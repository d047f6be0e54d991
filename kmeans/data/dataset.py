"""
Набор точек для кластеризации.

Модуль предоставляет класс DataSet: упорядоченную коллекцию векторов,
которая умеет выбрать начальные кластеры и разложить по ним все точки.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import numpy as np

from kmeans.core.cluster import Cluster
from kmeans.core.cluster_set import ClusterSet
from kmeans.core.errors import InvalidArgumentError
from kmeans.core.vector import Vector

logger = logging.getLogger(__name__)


class DataSet:
    """
    Датасет для кластеризации K-means.

    Создаётся пустым и пополняется методом add(); во время прогона
    алгоритма только читается.
    """

    def __init__(self) -> None:
        self._items: list[Vector] = []

    @classmethod
    def from_array(cls, X: np.ndarray) -> DataSet:
        """
        Создаёт датасет из массива (N, D): каждая строка становится точкой.

        Args:
            X: Двумерный массив координат
        """
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise InvalidArgumentError(f"Expected a 2D array, got shape {X.shape}")
        dataset = cls()
        for row in X:
            dataset.add(Vector(row))
        return dataset

    @classmethod
    def from_txt(cls, path: str | Path) -> DataSet:
        """
        Загружает точки из текстового файла.

        Формат файла:
        - по одной точке на строку, координаты через пробел;
        - пустые строки и строки, начинающиеся с #, пропускаются.
        """
        path = Path(path)
        logger.info(f"Loading dataset from {path}")

        dataset = cls()
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                # Пропускаем комментарии и пустые строки
                if not line or line.startswith("#"):
                    continue
                dataset.add(Vector([float(value) for value in line.split()]))

        logger.info(f"Dataset loaded: N={len(dataset)}, D={dataset.dimension}")
        return dataset

    @property
    def points(self) -> tuple[Vector, ...]:
        return tuple(self._items)

    @property
    def dimension(self) -> int:
        """Размерность первой точки (0 для пустого датасета)."""
        return self._items[0].dimension if self._items else 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"DataSet(N={len(self)}, D={self.dimension})"

    def add(self, point: Vector) -> None:
        """Добавляет точку в конец датасета."""
        self._items.append(point)

    def seed_clusters(self, k: int) -> ClusterSet:
        """
        Берёт первые k точек (в порядке добавления) как начальные центроиды.

        Raises:
            InvalidArgumentError: если k отрицательно или больше размера датасета
        """
        if k < 0:
            raise InvalidArgumentError(f"Number of clusters must be >= 0, got {k}")
        if k > len(self._items):
            raise InvalidArgumentError(
                f"Cannot seed {k} clusters from a dataset of {len(self._items)} points"
            )
        return ClusterSet.from_clusters(
            Cluster.from_seed(point) for point in self._items[:k]
        )

    def classify(self, clusters: ClusterSet) -> ClusterSet:
        """
        Раскладывает все точки по ближайшим кластерам.

        Точки обрабатываются по порядку: каждая добавляется в ближайший
        кластер, и рабочий набор заменяется до перехода к следующей точке.
        Ближайший кластер выбирается только по центроиду, поэтому
        накопленные суммы на выбор не влияют.
        """
        working = clusters
        for point in self._items:
            nearest = working.find_nearest(point).accumulate(point)
            working = working.replace(nearest)
        return working

    def labels(self, clusters: ClusterSet) -> np.ndarray:
        """Индекс ближайшего кластера для каждой точки."""
        return np.array(
            [clusters.nearest_index(point) for point in self._items],
            dtype=np.int64,
        )

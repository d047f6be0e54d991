# core/cluster_set.py
"""
Упорядоченный набор кластеров фиксированной длины K.

Каждая операция возвращает новый ClusterSet, предыдущая версия остаётся
доступной для сравнения (это используется в тестах и в цикле Ллойда).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from .cluster import Cluster
from .errors import InvalidArgumentError, InvalidComparisonError
from .vector import Vector


@dataclass(frozen=True)
class ClusterSet:
    clusters: tuple[Cluster, ...]

    @classmethod
    def from_clusters(cls, clusters: Iterable[Cluster]) -> ClusterSet:
        return cls(tuple(clusters))

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self.clusters)

    def __getitem__(self, index: int) -> Cluster:
        return self.clusters[index]

    def centroids(self) -> np.ndarray:
        """Центроиды в виде массива (K, D)."""
        if not self.clusters:
            return np.empty((0, 0), dtype=np.float64)
        return np.vstack([c.centroid.to_numpy() for c in self.clusters])

    def counts(self) -> list[int]:
        return [c.points_count for c in self.clusters]

    def nearest_index(self, point: Vector) -> int:
        """
        Индекс кластера с ближайшим к точке центроидом.

        При равенстве расстояний побеждает первый по порядку кластер
        (строгое «<» при проходе слева направо).

        Raises:
            InvalidArgumentError: если набор пуст
            InvalidComparisonError: если расстояние не является конечным числом
        """
        if not self.clusters:
            raise InvalidArgumentError("Cannot find nearest cluster in an empty set")

        best_index = -1
        best_distance = math.inf
        for index, cluster in enumerate(self.clusters):
            distance = point.distance(cluster.centroid)
            if not math.isfinite(distance):
                raise InvalidComparisonError(
                    f"Non-finite distance {distance} between {point!r} "
                    f"and centroid {cluster.centroid!r}"
                )
            if best_index < 0 or distance < best_distance:
                best_index = index
                best_distance = distance
        return best_index

    def find_nearest(self, point: Vector) -> Cluster:
        return self.clusters[self.nearest_index(point)]

    def replace(self, updated: Cluster) -> ClusterSet:
        """
        Заменяет все кластеры с тем же центроидом, что у updated.

        Сопоставление идёт по значению центроида, а не по идентичности:
        если два кластера делят центроид, заменяются оба.
        """
        return ClusterSet(
            tuple(
                updated if cluster.centroid == updated.centroid else cluster
                for cluster in self.clusters
            )
        )

    def recentered(self) -> ClusterSet:
        """Каждый кластер превращается в пустой кластер в своём новом центроиде."""
        return ClusterSet(tuple(cluster.recentered() for cluster in self.clusters))

    def total_oscillation(self) -> float:
        """Суммарное смещение центроидов: сигнал сходимости для цикла Ллойда."""
        return sum((cluster.oscillation() for cluster in self.clusters), 0.0)

# core/cluster.py
from __future__ import annotations

from dataclasses import dataclass

from .errors import EmptyClusterError
from .vector import Vector


@dataclass(frozen=True)
class Cluster:
    """
    Накопитель кластера.

    Хранит текущий центроид, количество точек и их сумму, накопленные
    с момента последней фиксации центроида. Инвариант: при
    points_count == 0 сумма равна нулевому вектору размерности центроида.
    """

    centroid: Vector
    points_count: int
    points_sum: Vector

    @classmethod
    def from_seed(cls, point: Vector) -> Cluster:
        """Новый пустой кластер с центроидом в точке point."""
        return cls(
            centroid=point,
            points_count=0,
            points_sum=Vector.zeros(point.dimension),
        )

    def accumulate(self, point: Vector) -> Cluster:
        """Возвращает новый кластер с учётом точки; self не меняется."""
        return Cluster(
            centroid=self.centroid,
            points_count=self.points_count + 1,
            points_sum=self.points_sum + point,
        )

    def next_centroid(self) -> Vector:
        """
        Среднее накопленных точек.

        Raises:
            EmptyClusterError: если кластер не получил ни одной точки
        """
        if self.points_count == 0:
            raise EmptyClusterError(
                f"Cluster at {self.centroid!r} received no points, "
                "cannot compute its next centroid"
            )
        return self.points_sum / self.points_count

    def recentered(self) -> Cluster:
        return Cluster.from_seed(self.next_centroid())

    def oscillation(self) -> float:
        """Насколько сместится центроид, если пересчитать его сейчас."""
        return self.centroid.distance(self.next_centroid())

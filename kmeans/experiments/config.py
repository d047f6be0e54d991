from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class BenchmarkId(str, Enum):
    ADD_TWO = "add_two"
    DISTANCE_TWO = "distance_two"
    KMEANS = "kmeans"
    KMEANS_BLOBS = "kmeans_blobs"


@dataclass
class BenchmarkConfig:
    id: BenchmarkId
    description: str
    repeats: int = 1000
    warmup: int = 10
    params: Dict[str, Any] = field(default_factory=dict)


# Четыре близкие географические точки (долгота, широта)
GEO_POINTS: List[List[float]] = [
    [-114.635458, 34.876902],
    [-114.636768000000103, 34.885705],
    [-114.636725, 34.889107],
    [-114.635425, 34.895192],
]


BENCHMARKS: Dict[BenchmarkId, BenchmarkConfig] = {
    BenchmarkId.ADD_TWO: BenchmarkConfig(
        id=BenchmarkId.ADD_TWO,
        description="Сложение двух векторов",
        repeats=10_000,
        warmup=100,
    ),
    BenchmarkId.DISTANCE_TWO: BenchmarkConfig(
        id=BenchmarkId.DISTANCE_TWO,
        description="Евклидово расстояние между двумя векторами",
        repeats=10_000,
        warmup=100,
    ),
    BenchmarkId.KMEANS: BenchmarkConfig(
        id=BenchmarkId.KMEANS,
        description="Полный прогон K-means на четырёх точках, K=2",
        repeats=1_000,
        warmup=10,
        params={"K": 2, "threshold": 0.02},
    ),
    BenchmarkId.KMEANS_BLOBS: BenchmarkConfig(
        id=BenchmarkId.KMEANS_BLOBS,
        description="Полный прогон K-means на синтетических блобах",
        repeats=10,
        warmup=1,
        params={"N": 500, "D": 2, "K": 4, "threshold": 1e-6, "max_iters": 300},
    ),
}

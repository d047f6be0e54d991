import logging
from typing import Any, Callable, Dict, List

import numpy as np

from kmeans.core.cluster import Cluster
from kmeans.core.cluster_set import ClusterSet
from kmeans.core.lloyd import kmeans
from kmeans.core.vector import Vector
from kmeans.data.dataset import DataSet
from kmeans.data.generator import generate_blobs
from kmeans.experiments.config import BENCHMARKS, GEO_POINTS, BenchmarkId
from kmeans.metrics.timers import Timer
from kmeans.utils.logging import format_run_prefix


def geo_dataset() -> DataSet:
    """Датасет из четырёх географических точек."""
    dataset = DataSet()
    for point in GEO_POINTS:
        dataset.add(Vector(point))
    return dataset


class BenchmarkRunner:
    """
    Запускает микробенчмарки операций библиотеки.

    Каждый кейс сводится к callable без аргументов; подготовка данных
    выполняется вне замеров.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger

    def _make_case(self, bench_id: BenchmarkId) -> Callable[[], Any]:
        params = BENCHMARKS[bench_id].params

        if bench_id == BenchmarkId.ADD_TWO:
            p0, p1 = (Vector(p) for p in GEO_POINTS[:2])
            return lambda: p0 + p1

        if bench_id == BenchmarkId.DISTANCE_TWO:
            p0, p1 = (Vector(p) for p in GEO_POINTS[:2])
            return lambda: p0.distance(p1)

        if bench_id == BenchmarkId.KMEANS:
            dataset = geo_dataset()
            return lambda: kmeans(
                dataset,
                dataset.seed_clusters(params["K"]),
                params["threshold"],
            )

        if bench_id == BenchmarkId.KMEANS_BLOBS:
            generated = generate_blobs(params["N"], params["D"], params["K"])
            # Стартуем из истинных центров, чтобы ни один кластер не опустел
            initial = ClusterSet.from_clusters(
                Cluster.from_seed(Vector(center)) for center in generated.centers
            )
            if self.logger:
                self.logger.info(
                    f"{format_run_prefix(params['N'], params['D'], params['K'])} "
                    "Blobs generated"
                )
            return lambda: kmeans(
                generated.dataset,
                initial,
                params["threshold"],
                max_iters=params["max_iters"],
            )

        raise ValueError(f"Benchmark {bench_id} is not implemented.")

    def run(
        self,
        bench_id: BenchmarkId,
        repeats: int | None = None,
        warmup: int | None = None,
    ) -> Dict[str, Any]:
        """
        Прогоняет один кейс с таймингом.

        :param bench_id: идентификатор кейса
        :param repeats: количество измеряемых прогонов (по умолчанию из BENCHMARKS)
        :param warmup: количество «разогревочных» запусков
        :return: словарь с агрегированной статистикой времени
        """
        config = BENCHMARKS[bench_id]
        repeats = config.repeats if repeats is None else repeats
        warmup = config.warmup if warmup is None else warmup
        if repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {repeats}")

        case = self._make_case(bench_id)

        if self.logger:
            self.logger.info(f"[{bench_id.value}] Warmup x{warmup}, repeats x{repeats}")

        for _ in range(warmup):
            case()

        times: List[float] = []
        for _ in range(repeats):
            with Timer() as t:
                case()
            times.append(t.elapsed)

        stats: Dict[str, Any] = {
            "bench": bench_id.value,
            "T_avg": float(np.mean(times)),
            "T_std": float(np.std(times)),
            "T_min": float(np.min(times)),
            "T_med": float(np.median(times)),
            "repeats_done": len(times),
            "warmup": warmup,
        }

        if self.logger:
            self.logger.info(
                f"[{bench_id.value}] Timing: "
                f"T_avg={stats['T_avg']:.9f}s, "
                f"T_std={stats['T_std']:.9f}s, "
                f"T_min={stats['T_min']:.9f}s, "
                f"T_med={stats['T_med']:.9f}s"
            )

        return stats

    def run_all(self, repeats: int | None = None) -> List[Dict[str, Any]]:
        return [self.run(bench_id, repeats=repeats) for bench_id in BenchmarkId]

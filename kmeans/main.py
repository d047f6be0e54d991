from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from kmeans.core.errors import KMeansError
from kmeans.core.lloyd import KMeansLloyd
from kmeans.core.vector import Vector
from kmeans.data.dataset import DataSet
from kmeans.data.validation import validate_dataset
from kmeans.experiments.config import BenchmarkId
from kmeans.experiments.runner import BenchmarkRunner
from kmeans.utils.logging import format_run_prefix, setup_logger


def demo_dataset() -> DataSet:
    """Точки (1,1), (2,2), ..., (9,9)."""
    dataset = DataSet()
    for i in range(1, 10):
        dataset.add(Vector([float(i), float(i)]))
    return dataset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmeans-demo",
        description="Кластеризация K-means (алгоритм Ллойда) на демо- или пользовательском датасете.",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Текстовый файл с точками (координаты через пробел, # — комментарий). "
        "По умолчанию используются демо-точки (1,1)..(9,9).",
    )
    parser.add_argument(
        "-k",
        "--clusters",
        type=int,
        default=2,
        help="Количество кластеров K.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.02,
        help="Порог сходимости по суммарному смещению центроидов.",
    )
    parser.add_argument(
        "--max-iters",
        type=int,
        default=None,
        help="Ограничение на количество итераций (по умолчанию без ограничения).",
    )
    parser.add_argument(
        "--bench",
        type=str,
        choices=[b.value for b in BenchmarkId] + ["all"],
        default=None,
        help="Запустить микробенчмарки вместо кластеризации.",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=None,
        help="Количество измеряемых прогонов для --bench.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный (DEBUG) вывод логов.",
    )
    return parser


def run_bench(bench: str, repeats: int | None, logger: logging.Logger) -> None:
    runner = BenchmarkRunner(logger=logger)
    if bench == "all":
        results = runner.run_all(repeats=repeats)
    else:
        results = [runner.run(BenchmarkId(bench), repeats=repeats)]
    for r in results:
        print(json.dumps(r, ensure_ascii=False))


def run_clustering(args: argparse.Namespace, logger: logging.Logger) -> None:
    dataset = DataSet.from_txt(args.input) if args.input else demo_dataset()
    validate_dataset(dataset, args.clusters)

    prefix = format_run_prefix(len(dataset), dataset.dimension, args.clusters)
    logger.info(f"{prefix} threshold={args.threshold}")

    model = KMeansLloyd(
        n_clusters=args.clusters,
        threshold=args.threshold,
        max_iters=args.max_iters,
        logger=logger,
    )
    model.fit(dataset)

    print(f"final centroids {args.clusters}:")
    for cluster in model.cluster_set:
        print(
            f"  centroid={cluster.centroid.to_list()} "
            f"points_count={cluster.points_count} "
            f"points_sum={cluster.points_sum.to_list()}"
        )
    logger.info(f"{prefix} Finished in {model.n_iters_actual} iterations")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.bench:
            run_bench(args.bench, args.repeats, logger)
        else:
            run_clustering(args, logger)
    except KMeansError as e:
        logger.error(f"K-means run failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

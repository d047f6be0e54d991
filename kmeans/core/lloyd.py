from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

import numpy as np

from kmeans.metrics.timers import Timer

from .cluster_set import ClusterSet
from .errors import ConvergenceError, InvalidArgumentError

if TYPE_CHECKING:
    from kmeans.data.dataset import DataSet


class KMeansLloyd:
    """
    Алгоритм Ллойда поверх DataSet/ClusterSet.

    Отвечает за цикл итераций и сбор таймингов:
    - T_классификации: время шага DataSet.classify;
    - T_пересчёта: время подсчёта смещения и пересчёта центроидов;
    - T_итерации: сумма двух предыдущих.
    """

    def __init__(
        self,
        n_clusters: int,
        threshold: float = 0.02,
        max_iters: int | None = None,
        logger: Any | None = None,
    ):
        if max_iters is not None and max_iters < 1:
            raise InvalidArgumentError(f"max_iters must be >= 1, got {max_iters}")
        self.K = n_clusters
        self.threshold = threshold  # Порог сходимости (суммарное смещение центроидов)
        self.max_iters = max_iters  # None: без ограничения
        self.logger = logger

        self.cluster_set: ClusterSet | None = None
        self.centroids: np.ndarray | None = None
        self.labels: np.ndarray | None = None
        self.oscillation_history: list[float] = []

        self.t_classify_total: float = 0.0
        self.t_recenter_total: float = 0.0
        self.t_iter_total: float = 0.0

        self.n_iters_actual: int = 0

    def fit(
        self, dataset: DataSet, initial_clusters: ClusterSet | None = None
    ) -> KMeansLloyd:
        """
        Основной цикл: классификация, замер смещения, пересчёт центроидов.

        Останавливается, когда суммарное смещение <= threshold. Итоговым
        ответом считается набор кластеров после последней классификации
        (с накопленными суммами), а не пересчитанный.

        Raises:
            EmptyClusterError: если какой-то кластер остался без точек
            ConvergenceError: если задан max_iters и он исчерпан
        """
        if initial_clusters is None:
            clusters = dataset.seed_clusters(self.K)
        else:
            if len(initial_clusters) != self.K:
                raise InvalidArgumentError(
                    f"Expected {self.K} initial clusters, got {len(initial_clusters)}"
                )
            clusters = initial_clusters

        self.t_classify_total = 0.0
        self.t_recenter_total = 0.0
        self.t_iter_total = 0.0
        self.n_iters_actual = 0
        self.oscillation_history = []

        iterations = itertools.count() if self.max_iters is None else range(self.max_iters)
        limit = "inf" if self.max_iters is None else str(self.max_iters)

        for i in iterations:
            with Timer("classify", self.logger) as t_classify:
                classified = dataset.classify(clusters)
            with Timer("recenter", self.logger) as t_recenter:
                oscillation = classified.total_oscillation()
                converged = oscillation <= self.threshold
                if not converged:
                    clusters = classified.recentered()

            self.t_classify_total += t_classify.elapsed
            self.t_recenter_total += t_recenter.elapsed
            self.t_iter_total += t_classify.elapsed + t_recenter.elapsed
            self.n_iters_actual = i + 1
            self.oscillation_history.append(oscillation)

            if self.logger and (i == 0 or (i + 1) % 10 == 0 or converged):
                status = " (converged)" if converged else ""
                self.logger.info(
                    f"  Iteration {i + 1}/{limit}{status} "
                    f"(T_classify={t_classify.elapsed:.6f}s, "
                    f"T_recenter={t_recenter.elapsed:.6f}s, "
                    f"oscillation={oscillation:.2e})"
                )

            if converged:
                self.cluster_set = classified
                self.centroids = classified.centroids()
                self.labels = dataset.labels(classified)
                if self.logger:
                    self.logger.info(
                        f"  Convergence reached after {i + 1} iterations "
                        f"(oscillation={oscillation:.2e} <= threshold={self.threshold:.2e})"
                    )
                return self

        raise ConvergenceError(
            f"No convergence after {self.max_iters} iterations "
            f"(last oscillation={self.oscillation_history[-1]:.2e}, "
            f"threshold={self.threshold:.2e})"
        )

    def predict(self, dataset: DataSet) -> np.ndarray:
        """Метки ближайших центроидов после fit()."""
        if self.cluster_set is None:
            raise InvalidArgumentError("Model is not fitted yet")
        return dataset.labels(self.cluster_set)


def kmeans(
    dataset: DataSet,
    clusters: ClusterSet,
    threshold: float,
    *,
    max_iters: int | None = None,
    logger: Any | None = None,
) -> ClusterSet:
    """Запускает цикл Ллойда от заданных кластеров и возвращает итоговый набор."""
    model = KMeansLloyd(
        n_clusters=len(clusters),
        threshold=threshold,
        max_iters=max_iters,
        logger=logger,
    )
    return model.fit(dataset, clusters).cluster_set

"""
Тесты цикла Ллойда (KMeansLloyd и функция kmeans).
"""

import logging
import math

import numpy as np
import pytest

from kmeans.core.cluster import Cluster
from kmeans.core.cluster_set import ClusterSet
from kmeans.core.errors import (
    ConvergenceError,
    DivideByZeroError,
    EmptyClusterError,
    InvalidArgumentError,
)
from kmeans.core.lloyd import KMeansLloyd, kmeans
from kmeans.core.vector import Vector
from kmeans.data.dataset import DataSet


class TestKMeansLloyd:
    """Тесты полного цикла."""

    def test_demo_converges(self, demo_dataset):
        """(1,1)..(9,9), K=2: сходимость за 4 прохода к центрам 2.5 и 7."""
        model = KMeansLloyd(n_clusters=2, threshold=0.02)
        model.fit(demo_dataset)

        assert model.n_iters_actual == 4
        assert model.cluster_set == ClusterSet.from_clusters(
            [
                Cluster(
                    centroid=Vector([2.5, 2.5]),
                    points_count=4,
                    points_sum=Vector([10.0, 10.0]),
                ),
                Cluster(
                    centroid=Vector([7.0, 7.0]),
                    points_count=5,
                    points_sum=Vector([35.0, 35.0]),
                ),
            ]
        )
        assert model.oscillation_history[-1] == 0.0
        assert model.oscillation_history[0] == pytest.approx(3.5 * math.sqrt(2))
        np.testing.assert_array_equal(model.labels, [0, 0, 0, 0, 1, 1, 1, 1, 1])
        np.testing.assert_array_equal(model.centroids, [[2.5, 2.5], [7.0, 7.0]])

    def test_two_points_single_pass(self, make_dataset):
        """Каждая точка — свой кластер, смещения нет."""
        dataset = make_dataset([[0.0, 0.0], [1.0, 1.0]])

        model = KMeansLloyd(n_clusters=2, threshold=0.02).fit(dataset)

        assert model.n_iters_actual == 1
        assert model.oscillation_history == [0.0]
        assert model.cluster_set.counts() == [1, 1]

    def test_large_threshold_single_pass(self, small_array):
        """Порог выше любого возможного смещения: ровно одна классификация."""
        dataset = DataSet.from_array(small_array)

        model = KMeansLloyd(n_clusters=2, threshold=1e9).fit(dataset)

        assert model.n_iters_actual == 1
        assert sum(model.cluster_set.counts()) == len(small_array)

    def test_result_is_classified_not_recentered(self, diagonal_dataset):
        """Итог содержит накопленные суммы последнего прохода."""
        model = KMeansLloyd(n_clusters=2, threshold=1e9).fit(diagonal_dataset)

        assert model.cluster_set == diagonal_dataset.classify(
            diagonal_dataset.seed_clusters(2)
        )
        assert all(c.points_count > 0 for c in model.cluster_set)

    def test_empty_cluster_is_fatal(self, make_dataset):
        dataset = make_dataset([[0.0, 0.0], [1.0, 1.0]])
        clusters = ClusterSet.from_clusters(
            [
                Cluster.from_seed(Vector([0.0, 0.0])),
                Cluster.from_seed(Vector([100.0, 100.0])),
            ]
        )

        with pytest.raises(EmptyClusterError):
            kmeans(dataset, clusters, 0.02)
        with pytest.raises(DivideByZeroError):
            KMeansLloyd(n_clusters=2).fit(dataset, clusters)

    def test_max_iters_exceeded(self, demo_dataset):
        with pytest.raises(ConvergenceError):
            KMeansLloyd(n_clusters=2, threshold=0.02, max_iters=2).fit(demo_dataset)

        model = KMeansLloyd(n_clusters=2, threshold=0.02, max_iters=4).fit(demo_dataset)
        assert model.n_iters_actual == 4

    def test_invalid_max_iters(self):
        with pytest.raises(InvalidArgumentError):
            KMeansLloyd(n_clusters=2, max_iters=0)

    def test_k_exceeds_dataset(self, make_dataset):
        dataset = make_dataset([[1.0, 1.0]])
        with pytest.raises(InvalidArgumentError):
            KMeansLloyd(n_clusters=3).fit(dataset)

    def test_initial_clusters_size_mismatch(self, diagonal_dataset):
        with pytest.raises(InvalidArgumentError):
            KMeansLloyd(n_clusters=3).fit(
                diagonal_dataset, diagonal_dataset.seed_clusters(2)
            )

    def test_predict(self, demo_dataset, make_dataset):
        model = KMeansLloyd(n_clusters=2)
        with pytest.raises(InvalidArgumentError):
            model.predict(demo_dataset)

        model.fit(demo_dataset)
        labels = model.predict(make_dataset([[0.0, 0.0], [100.0, 100.0]]))
        np.testing.assert_array_equal(labels, [0, 1])

    def test_timings_collected(self, small_array):
        model = KMeansLloyd(n_clusters=2, threshold=1e-9)
        model.fit(DataSet.from_array(small_array))

        assert model.t_classify_total > 0
        assert model.t_recenter_total > 0
        assert abs(model.t_iter_total - (model.t_classify_total + model.t_recenter_total)) < 1e-6
        assert len(model.oscillation_history) == model.n_iters_actual

    def test_logging(self, demo_dataset, caplog):
        logger = logging.getLogger("lloyd-test")
        with caplog.at_level(logging.INFO, logger="lloyd-test"):
            KMeansLloyd(n_clusters=2, logger=logger).fit(demo_dataset)

        messages = [r.getMessage() for r in caplog.records]
        assert any("Iteration 1/inf" in m for m in messages)
        assert any("(converged)" in m for m in messages)
        assert any("Convergence reached after 4 iterations" in m for m in messages)


class TestKMeansFunction:
    """Функциональная точка входа."""

    def test_matches_estimator(self, demo_dataset):
        result = kmeans(demo_dataset, demo_dataset.seed_clusters(2), 0.02)
        model = KMeansLloyd(n_clusters=2, threshold=0.02).fit(demo_dataset)

        assert result == model.cluster_set

    def test_input_cluster_set_untouched(self, demo_dataset):
        initial = demo_dataset.seed_clusters(2)
        snapshot = demo_dataset.seed_clusters(2)

        kmeans(demo_dataset, initial, 0.02)

        assert initial == snapshot

    def test_three_blobs(self, medium_array):
        dataset = DataSet.from_array(medium_array)
        initial = ClusterSet.from_clusters(
            Cluster.from_seed(Vector(medium_array[i])) for i in (0, 50, 100)
        )

        result = kmeans(dataset, initial, 1e-9)

        assert result.counts() == [50, 50, 50]
        np.testing.assert_allclose(
            result.centroids(),
            [medium_array[i : i + 50].mean(axis=0) for i in (0, 50, 100)],
            rtol=1e-10,
            atol=1e-10,
        )

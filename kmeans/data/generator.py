"""
Генератор синтетических датасетов.

Использует sklearn.make_blobs для создания кластеризованных данных
с заданными параметрами N, D, K.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from sklearn.datasets import make_blobs

from kmeans.data.dataset import DataSet


@dataclass
class GeneratedDataset:
    """Контейнер для сгенерированных данных."""

    dataset: DataSet
    labels: np.ndarray
    centers: np.ndarray


def generate_blobs(
    n_points: int,
    dimension: int,
    n_clusters: int,
    cluster_std: float = 1.0,
    seed: int = 42,
) -> GeneratedDataset:
    """
    Генерация синтетического датасета с помощью make_blobs.

    Args:
        n_points: Количество точек
        dimension: Размерность пространства
        n_clusters: Количество кластеров
        cluster_std: Стандартное отклонение кластеров
        seed: Seed для воспроизводимости

    Returns:
        GeneratedDataset с датасетом, истинными метками (N,) и центрами (K x D)
    """
    data, labels, centers = make_blobs(
        n_samples=n_points,
        n_features=dimension,
        centers=n_clusters,
        cluster_std=cluster_std,
        center_box=(-10.0, 10.0),
        random_state=seed,
        return_centers=True,
    )
    return GeneratedDataset(
        dataset=DataSet.from_array(data),
        labels=labels,
        centers=centers,
    )

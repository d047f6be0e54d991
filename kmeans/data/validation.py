"""
Проверка датасета перед запуском цикла Ллойда.

Ошибки размера и размерности должны всплывать до первой итерации,
а не посреди прогона.
"""

from __future__ import annotations

from kmeans.core.errors import InvalidArgumentError
from kmeans.data.dataset import DataSet


def validate_dataset(dataset: DataSet, k: int) -> None:
    """
    Проверяет, что по датасету можно построить k кластеров.

    Args:
        dataset: Экземпляр DataSet для валидации
        k: Запрошенное количество кластеров

    Raises:
        InvalidArgumentError: если датасет пуст, точки разной размерности
            или k вне диапазона 1..len(dataset)
    """
    if len(dataset) == 0:
        raise InvalidArgumentError("Dataset is empty")

    D = dataset.dimension
    for index, point in enumerate(dataset):
        if point.dimension != D:
            raise InvalidArgumentError(
                f"Point {index} has dimension {point.dimension}, expected {D}"
            )

    if k < 1:
        raise InvalidArgumentError(f"Number of clusters must be >= 1, got {k}")
    if k > len(dataset):
        raise InvalidArgumentError(
            f"Cannot seed {k} clusters from a dataset of {len(dataset)} points"
        )

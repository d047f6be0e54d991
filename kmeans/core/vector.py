# core/vector.py
"""
Неизменяемый n-мерный вектор поверх NumPy.

Все арифметические операции возвращают новый Vector; внутренний массив
помечен как read-only, поэтому вектор можно безопасно разделять между
кластерами и датасетом.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .errors import DivideByZeroError, InvalidArgumentError


class Vector:
    """Точка (или центроид) в D-мерном пространстве."""

    __slots__ = ("_data",)

    def __init__(self, components: Iterable[float] | np.ndarray) -> None:
        data = np.array(components, dtype=np.float64)
        if data.ndim != 1:
            raise InvalidArgumentError(
                f"Vector must be one-dimensional, got shape {data.shape}"
            )
        data.setflags(write=False)
        self._data = data

    @classmethod
    def zeros(cls, dimension: int) -> Vector:
        """Нулевой вектор заданной размерности."""
        return cls(np.zeros(dimension, dtype=np.float64))

    @property
    def dimension(self) -> int:
        return int(self._data.shape[0])

    def to_numpy(self) -> np.ndarray:
        """Read-only представление компонент."""
        return self._data

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def _check_dimension(self, other: Vector) -> None:
        # Без этой проверки NumPy молча применил бы broadcasting (D=1 против D=n)
        if self._data.shape != other._data.shape:
            raise InvalidArgumentError(
                f"Dimension mismatch: {self.dimension} != {other.dimension}"
            )

    # --- поэлементная арифметика ---

    def add(self, other: Vector) -> Vector:
        self._check_dimension(other)
        return Vector(self._data + other._data)

    def subtract(self, other: Vector) -> Vector:
        self._check_dimension(other)
        return Vector(self._data - other._data)

    def multiply(self, other: Vector) -> Vector:
        self._check_dimension(other)
        return Vector(self._data * other._data)

    def divide(self, scalar: float) -> Vector:
        """
        Делит каждую компоненту на скаляр.

        Raises:
            DivideByZeroError: если scalar == 0
        """
        if scalar == 0:
            raise DivideByZeroError("Cannot divide a vector by zero")
        return Vector(self._data / scalar)

    def square(self) -> Vector:
        return self.multiply(self)

    def sum_components(self) -> float:
        return float(np.sum(self._data))

    def distance(self, other: Vector) -> float:
        """
        Евклидово расстояние: sqrt(sum((a - b)^2)).

        Всегда >= 0, distance(a, a) == 0.
        """
        return float(np.sqrt(self.subtract(other).square().sum_components()))

    # --- операторы как псевдонимы именованных методов ---

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __mul__(self, other: Vector) -> Vector:
        return self.multiply(other)

    def __truediv__(self, scalar: float) -> Vector:
        return self.divide(scalar)

    # --- value-семантика ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

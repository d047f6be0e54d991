"""
Иерархия исключений библиотеки.

Все ошибки являются ошибками программиста или входных данных, поэтому
библиотека их не перехватывает: они доходят до вызывающего кода.
"""

from __future__ import annotations


class KMeansError(Exception):
    """Базовое исключение пакета kmeans."""


class DivideByZeroError(KMeansError, ZeroDivisionError):
    """Деление вектора на нулевой скаляр."""


class EmptyClusterError(DivideByZeroError):
    """Попытка пересчитать центроид кластера, не получившего ни одной точки."""


class InvalidArgumentError(KMeansError, ValueError):
    """Некорректный аргумент (например, K больше размера датасета)."""


class InvalidComparisonError(KMeansError, ArithmeticError):
    """Сравнение расстояний с нечисловым значением (NaN/inf)."""


class ConvergenceError(KMeansError, RuntimeError):
    """Цикл Ллойда не сошёлся за заданное число итераций."""

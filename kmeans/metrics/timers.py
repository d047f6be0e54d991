"""
Таймер для замеров шагов алгоритма и микробенчмарков.

Контекстный менеджер поверх time.perf_counter(); при наличии логгера
пишет затраченное время на уровне DEBUG.
"""
from __future__ import annotations
import logging
import time
from typing import Any


class Timer:
    """
    Контекстный менеджер для измерения времени выполнения кода.

    Пример использования:
        with Timer("classify") as t:
            clusters = dataset.classify(clusters)
        elapsed_time = t.elapsed
    """

    def __init__(self, name: str = "", logger: logging.Logger | None = None) -> None:
        self.name = name
        self.logger = logger
        self.start: float = 0.0
        self.end: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> Timer:
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        if self.logger and self.name:
            self.logger.debug(f"{self.name}: {self.elapsed:.6f}s")

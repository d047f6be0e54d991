from .config import BENCHMARKS, BenchmarkConfig, BenchmarkId
from .runner import BenchmarkRunner

__all__ = ["BENCHMARKS", "BenchmarkConfig", "BenchmarkId", "BenchmarkRunner"]

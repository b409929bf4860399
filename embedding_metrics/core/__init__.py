"""Core module - benchmark harness."""

from embedding_metrics.core.benchmark import DEFAULT_DIMENSIONS, BenchmarkRunner

__all__ = [
    "DEFAULT_DIMENSIONS",
    "BenchmarkRunner",
]

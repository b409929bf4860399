"""Schemas module - serialized output formats."""

from embedding_metrics.schemas.report import BenchmarkEntry, BenchmarkReport

__all__ = [
    "BenchmarkEntry",
    "BenchmarkReport",
]

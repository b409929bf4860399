"""Data models for embedding-metrics."""

from embedding_metrics.models.embedding import Embedding
from embedding_metrics.models.benchmark import BenchmarkResult

__all__ = [
    "Embedding",
    "BenchmarkResult",
]

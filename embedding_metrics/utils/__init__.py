"""Utility functions for embedding-metrics."""

from embedding_metrics.utils.similarity import (
    LengthMismatchError,
    cosine_similarity,
    euclidean_distance,
)
from embedding_metrics.utils.generators import uniform_random_embedding

__all__ = [
    "LengthMismatchError",
    "cosine_similarity",
    "euclidean_distance",
    "uniform_random_embedding",
]

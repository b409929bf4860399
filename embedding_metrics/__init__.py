"""embedding-metrics: similarity and distance metrics for embeddings.

Pure functions for comparing two embedding vectors of equal length,
plus a random embedding generator and a benchmark harness.

Example:
    ```python
    from embedding_metrics import cosine_similarity, euclidean_distance

    cosine_similarity([1.0, 0.0], [0.0, 1.0])   # 0.0
    euclidean_distance([0.0, 0.0], [3.0, 4.0])  # 5.0
    ```
"""

__version__ = "0.1.0"

# Models
from embedding_metrics.models.embedding import Embedding
from embedding_metrics.models.benchmark import BenchmarkResult

# Metrics
from embedding_metrics.utils.similarity import (
    LengthMismatchError,
    cosine_similarity,
    euclidean_distance,
)
from embedding_metrics.utils.generators import uniform_random_embedding

# Benchmarking
from embedding_metrics.core.benchmark import DEFAULT_DIMENSIONS, BenchmarkRunner
from embedding_metrics.schemas.report import BenchmarkEntry, BenchmarkReport

__all__ = [
    # Version
    "__version__",
    # Models
    "Embedding",
    "BenchmarkResult",
    # Metrics
    "LengthMismatchError",
    "cosine_similarity",
    "euclidean_distance",
    "uniform_random_embedding",
    # Benchmarking
    "DEFAULT_DIMENSIONS",
    "BenchmarkRunner",
    "BenchmarkEntry",
    "BenchmarkReport",
]

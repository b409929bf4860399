"""Benchmark harness for the embedding metrics.

Times the random generator and both metrics over a fixed set of
embedding dimensions, the way the metrics are exercised by callers
working with common embedding model sizes.
"""

import random
import time
from typing import Any, Callable, Iterable

from embedding_metrics.models.benchmark import BenchmarkResult
from embedding_metrics.utils.generators import uniform_random_embedding
from embedding_metrics.utils.similarity import cosine_similarity, euclidean_distance


DEFAULT_DIMENSIONS: tuple[int, ...] = (2, 3, 4, 128, 384, 768, 1024, 1536)


class BenchmarkRunner:
    """Runs latency benchmarks for each operation and dimension.

    Example:
        ```python
        runner = BenchmarkRunner(dimensions=[128, 1536], iterations=500, seed=7)
        for result in runner.run():
            print(result.label, result.avg_ns)
        ```
    """

    def __init__(
        self,
        dimensions: Iterable[int] = DEFAULT_DIMENSIONS,
        iterations: int = 1000,
        warmup: int = 100,
        seed: int | None = None,
        logger: Any | None = None,
    ):
        """Initialize the runner.

        Args:
            dimensions: Embedding dimensions to benchmark.
            iterations: Timed calls per case.
            warmup: Untimed calls per case before timing starts.
            seed: Seed for the input generator. None draws fresh inputs.
            logger: Optional logger for progress output. If None, no logging.

        Raises:
            ValueError: If a dimension is negative, iterations < 1 or warmup < 0.
        """
        self.dimensions = list(dimensions)
        for dimension in self.dimensions:
            if dimension < 0:
                raise ValueError(f"Dimension cannot be negative: {dimension}")
        if iterations < 1:
            raise ValueError(f"Iterations must be at least 1: {iterations}")
        if warmup < 0:
            raise ValueError(f"Warmup cannot be negative: {warmup}")

        self.iterations = iterations
        self.warmup = warmup
        self.seed = seed
        self._rng = random.Random(seed)
        self._logger = logger

    def _log(self, message: str, level: str = "debug") -> None:
        """Log message if logger is configured."""
        if self._logger is None:
            return

        log_func = getattr(self._logger, level, self._logger.debug)
        log_func(message)

    def _measure(
        self,
        name: str,
        dimension: int,
        call: Callable[[], Any],
    ) -> BenchmarkResult:
        for _ in range(self.warmup):
            call()

        samples: list[int] = []
        for _ in range(self.iterations):
            start = time.perf_counter_ns()
            call()
            samples.append(time.perf_counter_ns() - start)

        result = BenchmarkResult(name=name, dimension=dimension, samples_ns=samples)
        self._log(
            f"{result.label}: avg {result.avg_ns:.0f} ns over {result.iterations} calls"
        )
        return result

    def bench_generator(self, dimension: int) -> BenchmarkResult:
        """Time uniform_random_embedding at the given dimension."""
        rng = self._rng
        return self._measure(
            "uniform_random_embedding",
            dimension,
            lambda: uniform_random_embedding(dimension, rng),
        )

    def bench_cosine(self, dimension: int) -> BenchmarkResult:
        """Time cosine_similarity on one pair of random embeddings."""
        a = uniform_random_embedding(dimension, self._rng)
        b = uniform_random_embedding(dimension, self._rng)
        return self._measure(
            "cosine_similarity",
            dimension,
            lambda: cosine_similarity(a, b),
        )

    def bench_euclidean(self, dimension: int) -> BenchmarkResult:
        """Time euclidean_distance on one pair of random embeddings."""
        a = uniform_random_embedding(dimension, self._rng)
        b = uniform_random_embedding(dimension, self._rng)
        return self._measure(
            "euclidean_distance",
            dimension,
            lambda: euclidean_distance(a, b),
        )

    def run(self) -> list[BenchmarkResult]:
        """Run every operation at every configured dimension.

        Returns:
            Results grouped by operation (generator, cosine, euclidean),
            each group in the configured dimension order.
        """
        self._log(
            f"Benchmarking dimensions {self.dimensions} "
            f"({self.iterations} iterations, {self.warmup} warmup)",
            level="info",
        )

        results: list[BenchmarkResult] = []
        for bench in (self.bench_generator, self.bench_cosine, self.bench_euclidean):
            for dimension in self.dimensions:
                results.append(bench(dimension))

        return results

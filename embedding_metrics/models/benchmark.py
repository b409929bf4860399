"""Benchmark result data models."""

import math
from dataclasses import dataclass, field


@dataclass
class BenchmarkResult:
    """Timings collected for one operation at one dimension.

    Attributes:
        name: Operation label (e.g. "cosine_similarity").
        dimension: Embedding dimension the operation was run with.
        samples_ns: Wall-clock time of each timed call, in nanoseconds.
    """
    name: str
    dimension: int
    samples_ns: list[int] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Display label, e.g. "cosine_similarity(128-d)"."""
        return f"{self.name}({self.dimension}-d)"

    @property
    def iterations(self) -> int:
        return len(self.samples_ns)

    @property
    def avg_ns(self) -> float:
        if not self.samples_ns:
            return 0.0
        return sum(self.samples_ns) / len(self.samples_ns)

    @property
    def min_ns(self) -> int:
        return min(self.samples_ns, default=0)

    @property
    def max_ns(self) -> int:
        return max(self.samples_ns, default=0)

    @property
    def p75_ns(self) -> int:
        return self.percentile(75)

    @property
    def p99_ns(self) -> int:
        return self.percentile(99)

    @property
    def ops_per_second(self) -> float:
        """Calls per second derived from the average latency."""
        avg = self.avg_ns
        if avg == 0:
            return 0.0
        return 1e9 / avg

    def percentile(self, pct: float) -> int:
        """Nearest-rank percentile of the samples.

        Args:
            pct: Percentile in the range (0, 100].

        Returns:
            The sample at that rank, or 0 when there are no samples.
        """
        if not 0 < pct <= 100:
            raise ValueError(f"Percentile must be in (0, 100]: {pct}")

        if not self.samples_ns:
            return 0

        ordered = sorted(self.samples_ns)
        rank = math.ceil(pct * len(ordered) / 100)
        return ordered[rank - 1]

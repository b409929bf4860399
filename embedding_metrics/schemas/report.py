"""Pydantic schemas for machine-readable benchmark reports."""

import platform
from typing import Iterable

from pydantic import BaseModel, Field

from embedding_metrics.models.benchmark import BenchmarkResult


# ─────────────────────────────────────────────────────────────────
# Single Case
# ─────────────────────────────────────────────────────────────────

class BenchmarkEntry(BaseModel):
    """Summary statistics for one operation at one dimension."""

    name: str = Field(
        description="Benchmarked operation, e.g. cosine_similarity"
    )
    dimension: int = Field(
        ge=0,
        description="Embedding dimension used for the inputs",
    )
    iterations: int = Field(
        ge=0,
        description="Number of timed calls",
    )
    avg_ns: float = Field(description="Mean latency per call in nanoseconds")
    min_ns: int = Field(description="Fastest call in nanoseconds")
    max_ns: int = Field(description="Slowest call in nanoseconds")
    p75_ns: int = Field(description="75th percentile latency in nanoseconds")
    p99_ns: int = Field(description="99th percentile latency in nanoseconds")
    ops_per_second: float = Field(
        description="Throughput derived from the mean latency"
    )

    @classmethod
    def from_result(cls, result: BenchmarkResult) -> "BenchmarkEntry":
        return cls(
            name=result.name,
            dimension=result.dimension,
            iterations=result.iterations,
            avg_ns=result.avg_ns,
            min_ns=result.min_ns,
            max_ns=result.max_ns,
            p75_ns=result.p75_ns,
            p99_ns=result.p99_ns,
            ops_per_second=result.ops_per_second,
        )


# ─────────────────────────────────────────────────────────────────
# Full Run
# ─────────────────────────────────────────────────────────────────

class BenchmarkReport(BaseModel):
    """All cases of one benchmark run plus the settings that produced them."""

    python_version: str = Field(
        default_factory=platform.python_version,
        description="Interpreter version the benchmark ran on",
    )
    iterations: int = Field(ge=1, description="Timed calls per case")
    warmup: int = Field(ge=0, description="Untimed calls per case")
    seed: int | None = Field(
        default=None,
        description="Seed of the random input generator, if fixed",
    )
    entries: list[BenchmarkEntry] = Field(default_factory=list)

    @classmethod
    def from_results(
        cls,
        results: Iterable[BenchmarkResult],
        iterations: int,
        warmup: int,
        seed: int | None = None,
    ) -> "BenchmarkReport":
        """Build a report from raw runner results."""
        return cls(
            iterations=iterations,
            warmup=warmup,
            seed=seed,
            entries=[BenchmarkEntry.from_result(r) for r in results],
        )

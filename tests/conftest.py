"""Test configuration and fixtures."""

import random

import pytest

from embedding_metrics.config import ENV_PREFIX
from embedding_metrics.models.benchmark import BenchmarkResult


# ─────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible inputs."""
    return random.Random(1234)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every EMBEDDING_METRICS_* variable for the test."""
    for name in ("DIMENSIONS", "ITERATIONS", "WARMUP", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)
    return monkeypatch


# ─────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────

def create_test_result(
    name: str = "cosine_similarity",
    dimension: int = 128,
    samples_ns: list[int] | None = None,
) -> BenchmarkResult:
    """Create a benchmark result with known samples."""
    return BenchmarkResult(
        name=name,
        dimension=dimension,
        samples_ns=samples_ns if samples_ns is not None else [10, 20, 30, 40],
    )

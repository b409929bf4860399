"""Tests for data models and report schemas."""

import json
import platform

import pytest
from pydantic import ValidationError

from embedding_metrics.models.benchmark import BenchmarkResult
from embedding_metrics.schemas.report import BenchmarkEntry, BenchmarkReport

from tests.conftest import create_test_result


class TestBenchmarkResult:
    """Tests for BenchmarkResult."""

    def test_statistics(self) -> None:
        result = create_test_result(samples_ns=[40, 10, 30, 20])

        assert result.iterations == 4
        assert result.avg_ns == 25.0
        assert result.min_ns == 10
        assert result.max_ns == 40
        assert result.p75_ns == 30
        assert result.p99_ns == 40
        assert result.ops_per_second == pytest.approx(4e7)

    def test_label(self) -> None:
        result = create_test_result(name="euclidean_distance", dimension=384)

        assert result.label == "euclidean_distance(384-d)"

    def test_single_sample_percentiles(self) -> None:
        result = create_test_result(samples_ns=[123])

        assert result.p75_ns == 123
        assert result.p99_ns == 123
        assert result.percentile(100) == 123

    def test_empty_samples(self) -> None:
        result = BenchmarkResult(name="cosine_similarity", dimension=2)

        assert result.iterations == 0
        assert result.avg_ns == 0.0
        assert result.min_ns == 0
        assert result.max_ns == 0
        assert result.p99_ns == 0
        assert result.ops_per_second == 0.0

    @pytest.mark.parametrize("pct", [0, -5, 101])
    def test_invalid_percentile_raises(self, pct: float) -> None:
        result = create_test_result()

        with pytest.raises(ValueError, match="Percentile"):
            result.percentile(pct)


class TestBenchmarkReport:
    """Tests for BenchmarkReport and BenchmarkEntry."""

    def test_entry_from_result(self) -> None:
        entry = BenchmarkEntry.from_result(create_test_result())

        assert entry.name == "cosine_similarity"
        assert entry.dimension == 128
        assert entry.iterations == 4
        assert entry.avg_ns == 25.0
        assert entry.p75_ns == 30

    def test_from_results(self) -> None:
        results = [
            create_test_result(name="cosine_similarity", dimension=2),
            create_test_result(name="euclidean_distance", dimension=2),
        ]

        report = BenchmarkReport.from_results(results, iterations=4, warmup=1, seed=9)

        assert report.iterations == 4
        assert report.warmup == 1
        assert report.seed == 9
        assert report.python_version == platform.python_version()
        assert [e.name for e in report.entries] == [
            "cosine_similarity",
            "euclidean_distance",
        ]

    def test_json_round_trip(self) -> None:
        report = BenchmarkReport.from_results(
            [create_test_result()], iterations=4, warmup=0
        )

        data = json.loads(report.model_dump_json())

        assert data["seed"] is None
        assert data["entries"][0]["ops_per_second"] == pytest.approx(4e7)
        assert BenchmarkReport.model_validate(data) == report

    def test_rejects_zero_iterations(self) -> None:
        with pytest.raises(ValidationError):
            BenchmarkReport(iterations=0, warmup=0)

"""CLI entry point for embedding-metrics.

Usage:
    # Benchmark every operation at the default dimensions
    python -m embedding_metrics bench

    # With custom settings
    python -m embedding_metrics bench --dimensions 384,1536 --iterations 5000 --seed 42

    # Machine-readable output
    python -m embedding_metrics bench --json
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from embedding_metrics.config import load_settings, parse_dimensions
from embedding_metrics.core.benchmark import BenchmarkRunner
from embedding_metrics.models.benchmark import BenchmarkResult
from embedding_metrics.schemas.report import BenchmarkReport

# Load environment variables from .env
load_dotenv()


def _dimensions_arg(text: str) -> list[int]:
    try:
        return parse_dimensions(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid dimensions '{text}': {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="embedding-metrics",
        description="Cosine similarity and Euclidean distance for embeddings",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # bench command
    bench_parser = subparsers.add_parser(
        "bench",
        help="Benchmark the metrics across embedding dimensions",
    )
    bench_parser.add_argument(
        "--dimensions",
        type=_dimensions_arg,
        default=None,
        help="Comma-separated dimensions (default: $EMBEDDING_METRICS_DIMENSIONS "
             "or 2,3,4,128,384,768,1024,1536)",
    )
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Timed calls per case (default: $EMBEDDING_METRICS_ITERATIONS or 1000)",
    )
    bench_parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Untimed calls per case (default: $EMBEDDING_METRICS_WARMUP or 100)",
    )
    bench_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random inputs (default: $EMBEDDING_METRICS_SEED)",
    )

    # Output settings
    bench_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    bench_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "bench":
        run_bench(parser, args)
    else:
        parser.print_help()


def run_bench(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Run the benchmark and print the results."""
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    if args.dimensions is not None:
        settings.dimensions = args.dimensions
    if args.iterations is not None:
        settings.iterations = args.iterations
    if args.warmup is not None:
        settings.warmup = args.warmup
    if args.seed is not None:
        settings.seed = args.seed
    if args.verbose:
        settings.log_level = "DEBUG"

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        runner = BenchmarkRunner(
            dimensions=settings.dimensions,
            iterations=settings.iterations,
            warmup=settings.warmup,
            seed=settings.seed,
            logger=logging.getLogger("embedding_metrics.benchmark"),
        )
    except ValueError as e:
        parser.error(str(e))

    results = runner.run()

    if args.json:
        report = BenchmarkReport.from_results(
            results,
            iterations=settings.iterations,
            warmup=settings.warmup,
            seed=settings.seed,
        )
        print(report.model_dump_json(indent=2))
    else:
        _print_results(results)


def format_duration(ns: float) -> str:
    """Format a nanosecond duration with a readable unit."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    if ns < 1_000_000:
        return f"{ns / 1_000:.2f} µs"
    if ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    return f"{ns / 1_000_000_000:.2f} s"


def _print_results(results: list[BenchmarkResult]) -> None:
    width = max((len(r.label) for r in results), default=0)
    current = None
    for result in results:
        if result.name != current:
            if current is not None:
                print()
            current = result.name
        print(
            f"{result.label:<{width}}  "
            f"avg {format_duration(result.avg_ns):>10}  "
            f"min {format_duration(result.min_ns):>10}  "
            f"max {format_duration(result.max_ns):>10}  "
            f"p75 {format_duration(result.p75_ns):>10}  "
            f"p99 {format_duration(result.p99_ns):>10}  "
            f"{result.ops_per_second:>14,.0f} ops/s"
        )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Benchmark script for datalocations performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

ITERATIONS = 10000


def benchmark_import_time() -> float:
    """Measure import time of datalocations package."""
    start = time.perf_counter()
    import datalocations  # noqa: F401

    return time.perf_counter() - start


def benchmark_filepath() -> float:
    """Measure Filepath construction and derivation."""
    from datalocations import Filepath

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        filepath = Filepath.of("/tmp/this/is", "an/example.txt")
        filepath.dirname().join("other", "file.md").parse()
    return time.perf_counter() - start


def benchmark_url() -> float:
    """Measure URL construction and merge-precedence joins."""
    from datalocations import URL

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        url = URL.from_location("http://example.com:8080/this/is/a/path?with=search#andFragment")
        url.join("..", "other", "?q=1", "#top")
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run datalocations benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Filepath (10k iterations)", "unit": "seconds", "value": benchmark_filepath()},
        {"name": "URL (10k iterations)", "unit": "seconds", "value": benchmark_url()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

"""Lightweight performance budget checks.

Times text extraction, digit resolution and the full analysis on synthetic
data. It avoids external fixtures so it can run in constrained CI environments.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from benford_engine.analysis.pipeline import analyze_values
from benford_engine.digits.resolver import leading_digits
from benford_engine.extraction.tokens import extract_values
from benford_engine.schema.analysis_config import AnalysisConfig
from benford_engine.simulation.synthetic import benford_values


def benchmark_extraction(n: int) -> float:
    text = " ".join(f"{v:,.2f}" for v in benford_values(n, seed=0))
    start = time.perf_counter()
    _ = extract_values(text)
    return (time.perf_counter() - start) * 1000


def benchmark_resolution(n: int, mode: str) -> float:
    values = benford_values(n, mode, seed=0)
    start = time.perf_counter()
    _ = [leading_digits(v, mode) for v in values]
    return (time.perf_counter() - start) * 1000


def benchmark_analysis(n: int, mode: str) -> float:
    values = benford_values(n, mode, seed=0)
    config = AnalysisConfig(mode=mode)
    start = time.perf_counter()
    _ = analyze_values(values, config)
    return (time.perf_counter() - start) * 1000


def main() -> None:
    parser = argparse.ArgumentParser(description="Performance budget checks")
    parser.add_argument("--n", type=int, default=100_000, help="Number of synthetic values")
    parser.add_argument("--out", type=Path, default=None, help="Optional file to write timings (JSON)")
    args = parser.parse_args()

    metrics = {
        "extraction_ms": benchmark_extraction(args.n),
        "resolution_first_digit_ms": benchmark_resolution(args.n, "first_digit"),
        "analysis_first_digit_ms": benchmark_analysis(args.n, "first_digit"),
        "analysis_first_two_digit_ms": benchmark_analysis(args.n, "first_two_digit"),
    }

    for key, value in metrics.items():
        print(f"{key}: {value:.2f} ms")

    if args.out:
        args.out.write_text(json.dumps(metrics, indent=2))


if __name__ == "__main__":
    main()

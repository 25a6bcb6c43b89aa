"""Terminal rendering of analysis results."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table

from benford_engine.analysis.models import BenfordAnalysisResult


def _pct(value: Optional[float]) -> str:
    return "-" if value is None else f"{value * 100:.2f}%"


def _signed_pct(value: Optional[float]) -> str:
    return "-" if value is None else f"{value * 100:+.2f}%"


def build_bucket_table(result: BenfordAnalysisResult, max_samples: int = 3) -> Table:
    table = Table(title=f"Benford {result.mode.replace('_', ' ')} distribution (n={result.total_count})")
    table.add_column("Digit", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Observed", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Diff", justify="right")
    table.add_column("Samples")
    for bucket in result.buckets:
        samples = ", ".join(f"{v:g}" for v in bucket.samples[:max_samples])
        table.add_row(
            str(bucket.digit),
            str(bucket.count),
            _pct(bucket.observed_pct),
            _pct(bucket.expected_pct),
            _signed_pct(bucket.difference),
            samples,
        )
    return table


def summary_lines(result: BenfordAnalysisResult) -> List[str]:
    if result.status != "ok":
        return [f"[yellow]Status: {result.status}[/yellow]", result.message or ""]
    band = result.conformity_band or "no calibrated band for this mode"
    verdict_style = "green" if result.goodness_of_fit and result.goodness_of_fit.passed else "red"
    return [
        "[bold]Status:[/bold] ok",
        f"[bold]MAD:[/bold] {result.mad_score:.5f} ({band})",
        (
            f"[bold]Chi-squared:[/bold] {result.chi_squared:.3f} "
            f"(dof={result.degrees_of_freedom}, p={result.p_value:.4g}, alpha={result.significance_alpha})"
        ),
        f"[{verdict_style}]Verdict: {result.goodness_of_fit_verdict}[/{verdict_style}]",
    ]


def render_result(result: BenfordAnalysisResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(build_bucket_table(result))
    for line in summary_lines(result):
        console.print(line)


__all__ = ["build_bucket_table", "render_result", "summary_lines"]

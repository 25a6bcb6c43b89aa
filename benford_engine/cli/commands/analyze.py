"""Analyze CLI command wiring."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from benford_engine.analysis.pipeline import analyze_text, analyze_values
from benford_engine.cli.validation import validate_analyze_inputs
from benford_engine.config.loader import load_config_with_precedence
from benford_engine.data.loader import load_csv_column, load_text
from benford_engine.reporting.report import render_result
from benford_engine.schema.run_meta import RunMeta
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_analyze")

RESULT_FILENAME = "benford_result.json"
INSUFFICIENT_DATA_EXIT_CODE = 2


def analyze(
    source: str = typer.Argument(..., help="Text/CSV file path, or the text itself with --text"),
    text: bool = typer.Option(False, "--text", help="Treat SOURCE as inline text"),
    column: Optional[str] = typer.Option(None, "--column", help="CSV column holding the values"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    mode: Optional[str] = typer.Option(None, "--mode", help="first_digit or first_two_digit"),
    alpha: Optional[float] = typer.Option(None, "--alpha", help="Significance level for chi-squared"),
    retention: Optional[int] = typer.Option(None, "--retention", help="Sample values kept per digit"),
    min_count: Optional[int] = typer.Option(None, "--min-count", help="Minimum values for a conclusive test"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Optional[Path] = typer.Option(None, "--output", help="Directory for benford_result.json"),
) -> None:
    """Test the leading-digit distribution of SOURCE against Benford's Law."""
    validate_analyze_inputs(source=source, text=text, column=column)
    analysis_config = load_config_with_precedence(
        config,
        {
            "mode": mode,
            "significance_alpha": alpha,
            "sample_retention_count": retention,
            "minimum_total_count": min_count,
        },
    )

    label = "<inline>" if text else source
    if text:
        result = analyze_text(source, analysis_config, source=label)
    elif column:
        result = analyze_values(load_csv_column(Path(source), column), analysis_config, source=label)
    else:
        result = analyze_text(load_text(Path(source)), analysis_config, source=label)

    if as_json:
        typer.echo(result.to_json())
    else:
        render_result(result, Console())

    if output is not None:
        output.mkdir(parents=True, exist_ok=True)
        meta = RunMeta.capture_context(
            run_id=uuid.uuid4().hex,
            source=label,
            config=analysis_config.to_dict(),
            result=result.to_dict(),
        )
        target = output / RESULT_FILENAME
        meta.write_atomic(target)
        log.info("Result written", extra={"run_id": meta.run_id, "path": str(target)})

    if result.status != "ok":
        raise typer.Exit(code=INSUFFICIENT_DATA_EXIT_CODE)

"""Generate CLI command: synthetic datasets for demos and calibration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from benford_engine.cli.validation import validate_generate_inputs
from benford_engine.digits.modes import get_mode_spec
from benford_engine.simulation.synthetic import benford_values, uniform_digit_values
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_generate")

GENERATORS = {"benford": benford_values, "uniform": uniform_digit_values}


def generate(
    output: Path = typer.Option(..., "--output", help="CSV file to write (column 'value')"),
    kind: str = typer.Option("benford", "--kind", help="benford or uniform"),
    count: int = typer.Option(1000, "--count", help="Number of values"),
    mode: str = typer.Option("first_digit", "--mode", help="first_digit or first_two_digit"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Write a synthetic dataset with Benford or uniform leading digits."""
    validate_generate_inputs(kind=kind, count=count)
    spec = get_mode_spec(mode)
    values = GENERATORS[kind](count, spec, seed=seed)

    output.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({"value": values}).to_csv(output, index=False)
    log.info("Synthetic dataset written", extra={"mode": spec.name, "path": str(output), "rows": count})
    typer.echo(f"Wrote {count} {kind} values to {output}")

"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from benford_engine.cli.commands.analyze import analyze
from benford_engine.cli.commands.generate import generate
from benford_engine.exceptions import (
    ConfigError,
    DataSourceError,
    InsufficientDataError,
    InvariantViolationError,
    SchemaError,
)
from benford_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Benford's Law conformity engine")


app.command()(analyze)
app.command()(generate)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except InsufficientDataError as exc:
        log.error(f"Data validation failed: {exc}")
        raise SystemExit(2)
    except (DataSourceError, SchemaError) as exc:
        log.error(f"Input could not be loaded: {exc}")
        raise SystemExit(3)
    except InvariantViolationError as exc:
        log.exception(f"Internal invariant violated: {exc}")
        raise SystemExit(4)
    except KeyboardInterrupt:
        log.info("Shutdown requested.")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    # Use sys.exit to ensure proper exit code propagation under raw python invocation
    sys.exit(main())

#!/usr/bin/env python3
"""Command line interface: export transactions from YAML into a ledger journal.

USAGE:
    ledger-export transactions.yaml -o export.journal
    ledger-export transactions.yaml --config ~/ledger_export.yaml --log-level DEBUG

Without ``-o`` the journal is written to standard output. If any transaction
had an error, the summary is printed to standard error and the exit code is 1;
the journal is written in full either way.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ledger_export.config import ConfigError, load_settings
from ledger_export.journal import export_journal
from ledger_export.loader import load_transactions

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Export transactions as ledger .journal file")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the package logger."""
    package_logger = logging.getLogger("ledger_export")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


@app.command()
def main(
    input_file: Path = typer.Argument(..., help="YAML file with accounts and transactions"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Journal file to write"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file"),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    configure_logging(log_level)

    try:
        settings = load_settings(config)
        batches = load_transactions(input_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if output is None:
        summary = export_journal(batches, sys.stdout, settings)
    else:
        try:
            stream = open(output, "w", encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot open {output}: {e}")
            typer.echo(f"Error: cannot open {output}: {e}", err=True)
            raise typer.Exit(code=2)
        with stream:
            summary = export_journal(batches, stream, settings)
        logger.info(f"Journal written to {output}")

    if summary:
        typer.echo(summary, err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from name_parser.cli.utils import build_parser, run_batch, write_json

console = Console()


def stats_command(
    source: Path = typer.Argument(..., exists=True, readable=True, help="CSV, XLSX or TXT of full names"),
    column: Optional[str] = typer.Option(
        None,
        "--column",
        "-c",
        help="CSV header holding the full name (default from config)",
    ),
    policy: Optional[str] = typer.Option(
        None,
        "--policy",
        help="Credential policy: retain or strip",
    ),
    lexicon: Optional[Path] = typer.Option(
        None,
        "--lexicon",
        exists=True,
        readable=True,
        help="YAML file overriding lexicon tables",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for parsing a file of names.
    """
    parser = build_parser(policy=policy, lexicon_file=lexicon)
    result = run_batch(source, parser=parser, column=column, verbose=verbose)
    stats = result.stats

    if as_json:
        write_json(stats.to_dict(), out=None, pretty=True)
        return

    table = Table(title="Name Parsing Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Processed", str(stats.processed))
    table.add_row("Person names", str(stats.with_person_name))
    table.add_row("With honorific", str(stats.with_honorific))
    table.add_row("With suffix", str(stats.with_suffix))
    table.add_row("Organizational", str(stats.organizational))
    table.add_row("Empty", str(stats.empty))

    console.print(table)

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from name_parser.cli.utils import build_parser, run_batch

console = Console()


def batch_command(
    source: Path = typer.Argument(..., exists=True, readable=True, help="CSV, XLSX or TXT of full names"),
    out: Path = typer.Argument(..., help="Output file (.csv, .xlsx or .json)"),
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse every name in a file and write the split fields to another file.
    """
    parser = build_parser(policy=policy, lexicon_file=lexicon)

    if verbose:
        console.log(f"Parsing {source}")

    result = run_batch(source, output_path=out, parser=parser, column=column, verbose=verbose)

    console.print(
        f"Processed {result.stats.processed} names "
        f"({result.stats.empty} empty, {result.stats.organizational} organizational) -> {out}"
    )

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from name_parser.cli.utils import build_parser, write_json

console = Console()


def parse_command(
    names: List[str] = typer.Argument(..., help="One or more full names (quote each one)"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
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
):
    """
    Parse full names given on the command line.
    """
    parser = build_parser(policy=policy, lexicon_file=lexicon)
    rows = parser.parse_many(names)

    if as_json:
        write_json(
            [{"full_name": raw, **parsed.to_dict()} for raw, parsed in rows],
            out=None,
            pretty=True,
        )
        return

    table = Table(title="Parsed Names")
    table.add_column("Full name", style="bold")
    table.add_column("Honorific")
    table.add_column("First name")
    table.add_column("Last name")
    table.add_column("Suffix")

    for raw, parsed in rows:
        table.add_row(raw, parsed.honorific, parsed.first_name, parsed.last_name, parsed.suffix)

    console.print(table)

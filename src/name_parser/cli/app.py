from __future__ import annotations

import typer

from name_parser.cli.commands.batch import batch_command
from name_parser.cli.commands.parse import parse_command
from name_parser.cli.commands.stats import stats_command
from name_parser.logging import configure_logging

app = typer.Typer(
    name="name-parser",
    help="Split directory full names into honorific, first name, last name and suffix",
    add_completion=False,
)


@app.callback()
def _setup_logging() -> None:
    configure_logging()


app.command("parse")(parse_command)
app.command("batch")(batch_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()

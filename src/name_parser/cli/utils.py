from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from name_parser.config import get_config
from name_parser.core.context import BatchContext
from name_parser.core.exceptions import PipelineError
from name_parser.core.pipeline import BatchPipeline, BatchResult
from name_parser.lexicon import load_lexicon
from name_parser.logging import get_logger
from name_parser.parsing import NameParser

console = Console()
log = get_logger("cli")


def build_parser(
    *,
    policy: Optional[str] = None,
    lexicon_file: Optional[Path] = None,
) -> NameParser:
    """
    Build a NameParser from config, with CLI overrides taking precedence.
    """
    cfg = get_config()
    lexicon_path = lexicon_file or cfg.lexicon_file
    lexicon = None
    if lexicon_path:
        try:
            lexicon = load_lexicon(lexicon_path)
        except (OSError, ValueError) as exc:
            console.print(f"[red]Cannot load lexicon:[/red] {escape(str(exc))}")
            raise typer.Exit(code=2)
        log.info("Using lexicon overrides from %s", lexicon_path)

    try:
        return NameParser(lexicon=lexicon, credential_policy=policy or cfg.credential_policy)
    except PipelineError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)


def run_batch(
    input_path: Path,
    *,
    output_path: Optional[Path] = None,
    parser: NameParser,
    column: Optional[str] = None,
    verbose: bool = False,
) -> BatchResult:
    """
    Load, parse and optionally export one input file.
    """
    cfg = get_config()
    ctx = BatchContext(
        config=cfg,
        logger=log,
        input_path=str(input_path),
        output_path=str(output_path) if output_path else None,
        name_column=column or cfg.name_column,
        progress_every=cfg.progress_every,
    )

    t0 = time.perf_counter()
    try:
        result = BatchPipeline(ctx, parser=parser).run()
    except PipelineError as exc:
        console.print(f"[red]Batch failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {result.stats.processed} names in {elapsed:.2f}s")

    return result


def write_json(
    data: Any,
    *,
    out: Optional[Path],
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)

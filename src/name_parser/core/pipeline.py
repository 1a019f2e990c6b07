from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from name_parser.core.context import BatchContext
from name_parser.core.exceptions import PipelineError
from name_parser.core.stats import BatchStats
from name_parser.exporter import export_rows
from name_parser.loader import load_names
from name_parser.models import ParsedName
from name_parser.parsing import NameParser


@dataclass
class BatchResult:
    rows: List[Tuple[str, ParsedName]] = field(default_factory=list)
    stats: BatchStats = field(default_factory=BatchStats)


class BatchPipeline:
    """
    Orchestrates a batch run: load names, parse each one, write the rows.
    No parsing logic lives here.
    """

    def __init__(self, context: BatchContext, parser: Optional[NameParser] = None):
        self.ctx = context
        self.log = context.logger
        self.parser = parser or NameParser()

    def parse_all(self, names: Iterable[str]) -> BatchResult:
        result = BatchResult()
        stats = result.stats
        every = max(int(self.ctx.progress_every or 0), 1)

        for raw in names:
            if raw is None or not str(raw).strip():
                continue
            raw = str(raw)
            parsed = self.parser.parse(raw)
            result.rows.append((raw, parsed))

            stats.processed += 1
            if parsed.is_empty:
                stats.empty += 1
                self.log.debug("No name extracted from %r", raw)
            elif self.parser.is_organizational(raw):
                stats.organizational += 1
            if parsed.honorific:
                stats.with_honorific += 1
            if parsed.suffix:
                stats.with_suffix += 1

            if stats.processed % every == 0:
                self.log.info("Processed %d names...", stats.processed)

        self.ctx.stats = stats.to_dict()
        return result

    def run(self) -> BatchResult:
        self.log.info("Batch starting: %s", self.ctx.input_path)

        try:
            names = load_names(self.ctx.input_path, self.ctx.name_column)
            result = self.parse_all(names)

            if self.ctx.output_path:
                export_rows(result.rows, self.ctx.output_path)

            self.log.info(
                "Batch complete: processed=%d organizational=%d empty=%d",
                result.stats.processed,
                result.stats.organizational,
                result.stats.empty,
            )
            return result

        except PipelineError:
            self.log.exception("Batch execution failed")
            raise
        except Exception as exc:
            self.log.exception("Batch execution failed")
            raise PipelineError(str(exc)) from exc

"""
exporter.py
Writes parsed names to CSV, XLSX or JSON.

Every output row carries the raw input next to the four parsed fields:

    full_name, honorific, first_name, last_name, suffix
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

from openpyxl import Workbook

from name_parser.core.exceptions import ExportError
from name_parser.logging import get_logger
from name_parser.models import FIELD_NAMES, ParsedName

log = get_logger(__name__)

OUTPUT_COLUMNS: Tuple[str, ...] = ("full_name",) + FIELD_NAMES

Row = Tuple[str, ParsedName]


def rows_to_records(rows: Iterable[Row]) -> List[Dict[str, str]]:
    return [{"full_name": raw, **parsed.to_dict()} for raw, parsed in rows]


def _write_csv(records: Sequence[Dict[str, str]], path: Path) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(OUTPUT_COLUMNS))
        writer.writeheader()
        writer.writerows(records)


def _write_xlsx(records: Sequence[Dict[str, str]], path: Path) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = "parsed_names"
    ws.append(list(OUTPUT_COLUMNS))
    for record in records:
        ws.append([record[col] for col in OUTPUT_COLUMNS])
    wb.save(path)


def _write_json(records: Sequence[Dict[str, str]], path: Path, *, pretty: bool) -> None:
    if pretty:
        payload = json.dumps(records, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(records, separators=(",", ":"), ensure_ascii=False)
    path.write_text(payload, encoding="utf-8")


def export_rows(rows: Iterable[Row], output_path: Union[str, Path], *, pretty: bool = False) -> int:
    """
    Write ``(raw, ParsedName)`` rows to ``output_path``; the format follows
    the file extension. Returns the number of rows written.

    Raises:
        ExportError: on an unsupported extension or a write failure.
    """
    path = Path(output_path)
    suffix = path.suffix.lower()
    writers: Dict[str, Any] = {
        ".csv": _write_csv,
        ".xlsx": _write_xlsx,
        ".json": lambda recs, p: _write_json(recs, p, pretty=pretty),
    }
    if suffix not in writers:
        raise ExportError(f"Unsupported output type {suffix!r}; expected .csv, .xlsx or .json")

    records = rows_to_records(rows)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        writers[suffix](records, path)
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc

    log.info("Wrote %d parsed names to %s", len(records), path)
    return len(records)

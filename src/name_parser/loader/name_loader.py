"""
Name loader

Reads raw full names from CSV, XLSX or plain-text files. Blank cells are
skipped; everything else is yielded verbatim for the parser to clean.
"""

from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import Iterator, Optional, Union

import openpyxl

from name_parser.core.exceptions import InputFormatError
from name_parser.logging import get_logger

log = get_logger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".txt")
HEADER_NAME = "full_name"


def resolve_input_path(path: Union[str, Path, None]) -> Optional[Path]:
    """
    Convert a user-provided path into an absolute validated file path.

    Returns:
        Absolute path, or None if no input path was provided.
    """
    if path is None:
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = Path(os.path.abspath(path))
    log.debug("Resolving input file: %s", abs_path)

    if not abs_path.exists():
        log.error("Input file does not exist: %s", abs_path)
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not abs_path.is_file():
        log.error("Input path is not a file: %s", abs_path)
        raise InputFormatError(f"Input path is not a file: {abs_path}")

    return abs_path


def _cell_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def iter_names_csv(path: Union[str, Path], column: str = HEADER_NAME) -> Iterator[str]:
    """
    Yield names from a CSV file.

    When the first row contains ``column`` it is treated as a header and
    that column is read; otherwise the first column of every row is read.
    """
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return

        lowered = [h.strip().lower() for h in header]
        if column.lower() in lowered:
            index = lowered.index(column.lower())
        else:
            index = 0
            first = _cell_text(header[0]) if header else ""
            if first:
                yield first

        for row in reader:
            if index < len(row):
                value = _cell_text(row[index])
                if value:
                    yield value


def iter_names_xlsx(path: Union[str, Path], column: str = HEADER_NAME) -> Iterator[str]:
    """Yield names from the first column of the active sheet (header row skipped)."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        for row_number, row in enumerate(ws.iter_rows(max_col=1, values_only=True), start=1):
            value = _cell_text(row[0] if row else None)
            if row_number == 1 and value.lower() == column.lower():
                continue
            if value:
                yield value
    finally:
        wb.close()


def iter_names_text(path: Union[str, Path]) -> Iterator[str]:
    """Yield one name per non-blank line."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            value = line.strip()
            if value:
                yield value


def load_names(path: Union[str, Path], column: str = HEADER_NAME) -> Iterator[str]:
    """
    Dispatch on file extension.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        InputFormatError: if the extension is not supported.
    """
    file_path = resolve_input_path(path)
    suffix = file_path.suffix.lower()

    if suffix == ".csv":
        return iter_names_csv(file_path, column)
    if suffix == ".xlsx":
        return iter_names_xlsx(file_path, column)
    if suffix == ".txt":
        return iter_names_text(file_path)

    raise InputFormatError(
        f"Unsupported input type {suffix!r}; expected one of {', '.join(SUPPORTED_SUFFIXES)}"
    )

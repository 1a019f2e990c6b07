# tests/test_loader.py

from __future__ import annotations

import pytest
from openpyxl import Workbook

from name_parser.core.exceptions import InputFormatError
from name_parser.loader import load_names, resolve_input_path


def test_resolve_input_path_none() -> None:
    assert resolve_input_path(None) is None


def test_resolve_input_path_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        resolve_input_path(tmp_path / "nope.csv")


def test_resolve_input_path_directory(tmp_path) -> None:
    with pytest.raises(InputFormatError):
        resolve_input_path(tmp_path)


def test_csv_with_named_column(tmp_path) -> None:
    path = tmp_path / "staff.csv"
    path.write_text(
        "title,full_name,email\n"
        "Coach,Dr. Jane A. Smith,jane@example.edu\n"
        "Trainer,,blank@example.edu\n"
        'AD,"Smith, John Jr.",john@example.edu\n',
        encoding="utf-8",
    )
    assert list(load_names(path)) == ["Dr. Jane A. Smith", "Smith, John Jr."]


def test_csv_custom_column_is_case_insensitive(tmp_path) -> None:
    path = tmp_path / "staff.csv"
    path.write_text("Name\nMary Jo Thompson\n", encoding="utf-8")
    assert list(load_names(path, column="name")) == ["Mary Jo Thompson"]


def test_csv_without_header_reads_first_column(tmp_path) -> None:
    path = tmp_path / "staff.csv"
    path.write_text("John Smith,x\nMaria Van Der Berg,y\n", encoding="utf-8")
    assert list(load_names(path)) == ["John Smith", "Maria Van Der Berg"]


def test_csv_with_byte_order_mark(tmp_path) -> None:
    path = tmp_path / "staff.csv"
    path.write_bytes("\ufefffull_name\nJohn Smith\n".encode("utf-8"))
    assert list(load_names(path)) == ["John Smith"]


def test_text_file_one_name_per_line(tmp_path) -> None:
    path = tmp_path / "staff.txt"
    path.write_text("John Smith\n\n   \nDr. Jane Doe\n", encoding="utf-8")
    assert list(load_names(path)) == ["John Smith", "Dr. Jane Doe"]


def test_xlsx_first_column_header_skipped(tmp_path) -> None:
    path = tmp_path / "staff.xlsx"
    wb = Workbook()
    ws = wb.active
    ws.append(["full_name", "email"])
    ws.append(["Dr. Jane A. Smith", "jane@example.edu"])
    ws.append([None, "blank@example.edu"])
    ws.append(["John Smith Jr.", "john@example.edu"])
    wb.save(path)

    assert list(load_names(path)) == ["Dr. Jane A. Smith", "John Smith Jr."]


def test_unsupported_extension(tmp_path) -> None:
    path = tmp_path / "staff.pdf"
    path.write_text("John Smith", encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_names(path)

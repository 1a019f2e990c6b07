"""
Exporter package.

Re-exports the writer entry point used by the batch pipeline.
"""

from __future__ import annotations

from .exporter import OUTPUT_COLUMNS, export_rows, rows_to_records

__all__ = ["OUTPUT_COLUMNS", "export_rows", "rows_to_records"]

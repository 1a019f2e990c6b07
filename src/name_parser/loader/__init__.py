# src/name_parser/loader/__init__.py

"""
Readers that turn directory exports into a stream of raw full-name strings.

    from name_parser.loader import load_names, resolve_input_path
"""

from __future__ import annotations

from .name_loader import (
    SUPPORTED_SUFFIXES,
    iter_names_csv,
    iter_names_text,
    iter_names_xlsx,
    load_names,
    resolve_input_path,
)

__all__ = [
    "SUPPORTED_SUFFIXES",
    "iter_names_csv",
    "iter_names_text",
    "iter_names_xlsx",
    "load_names",
    "resolve_input_path",
]

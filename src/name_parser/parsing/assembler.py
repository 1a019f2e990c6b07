"""
Assembler: final comma/whitespace cleanup and record construction.
"""

from __future__ import annotations

import re

from name_parser.models import ParsedName

_TRAILING_COMMAS_RE = re.compile(r",+\s*$")
_LEADING_COMMAS_RE = re.compile(r"^\s*,+")
_INNER_COMMA_RE = re.compile(r"\s*,\s*")


def clean(field: str) -> str:
    """Strip leading/trailing commas and turn interior commas into spaces."""
    if not field:
        return ""
    field = _TRAILING_COMMAS_RE.sub("", field)
    field = _LEADING_COMMAS_RE.sub("", field)
    field = _INNER_COMMA_RE.sub(" ", field)
    return field.strip()


def assemble(honorific: str = "", first: str = "", last: str = "", suffix: str = "") -> ParsedName:
    return ParsedName(
        honorific=clean(honorific),
        first_name=clean(first),
        last_name=clean(last),
        suffix=clean(suffix),
    )

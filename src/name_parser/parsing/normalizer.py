"""
Normalizer: strips directory noise from a raw full-name string.

Runs an ordered sequence of cleaning steps; each step works on the output of
the previous one:

    1. collapse whitespace
    2. drop quoted nicknames            Robert "Bob" Smith   -> Robert Smith
    3. drop graduation-year tokens      Jane Doe '22, M'24   -> Jane Doe
    4. resolve the comma tail           John Smith, '19, MD  -> John Smith, MD
    5. drop space-separated credentials (strip policy only)
    6. drop a trailing stray initial    John Smith B         -> John Smith
    7. drop (parenthetical) and [bracketed] asides
    8. drop bare years 1900-2099
    9. flatten commas and whitespace

``normalize`` is total and idempotent on already-clean input.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from name_parser.lexicon import Lexicon, default_lexicon

RETAIN = "retain"
STRIP = "strip"

_WS_RE = re.compile(r"\s+")

# Straight and typographic double quotes.
_Q = "\"“”"
_NICKNAME_BETWEEN_RE = re.compile(rf"(\w+)\s*[{_Q}]([^{_Q}]+)[{_Q}]\s*(\w+)")
_NICKNAME_TRAILING_RE = re.compile(rf"(\w+)\s*[{_Q}]([^{_Q}]+)[{_Q}]\s*$")

# Straight and typographic apostrophes.
_A = "'’"
_GRAD_YEAR_RES: Tuple[Pattern[str], ...] = (
    re.compile(rf"\s*,\s*[A-Z]+[{_A}][0-9]{{2,4}}\s*"),   # Smith, M'24
    re.compile(rf"\s*\b[A-Z]+[{_A}][0-9]{{2,4}}\s*"),     # M'24  BS'24
    re.compile(rf"\s*[{_A}][0-9]{{2,4}}[A-Z]*\s*"),        # '22  '18MSES
)
_GRAD_SEGMENT_RES: Tuple[Pattern[str], ...] = (
    re.compile(rf"^[{_A}]?\d{{2,4}}$"),
    re.compile(rf"^[A-Z]+[{_A}]?\d{{2,4}}$"),
)
_ACRONYM_SEGMENT_RE = re.compile(r"^[A-Z]{2,6}\.?$")

_TRAILING_INITIAL_RE = re.compile(r"\s+[A-Z]\s*$")
_PAREN_RE = re.compile(r"\s*\([^)]*\)\s*")
_BRACKET_RE = re.compile(r"\s*\[[^\]]*\]\s*")
_BARE_YEAR_RE = re.compile(r"\s*\b(?:19|20)\d{2}\b\s*")
_TRAILING_COMMA_RE = re.compile(r",\s*$")
_COMMA_RE = re.compile(r"\s*,\s*")


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


# ----------------------------------------------------------
# Individual steps
# ----------------------------------------------------------

def strip_nicknames(name: str) -> str:
    """Remove a quoted nickname between two words, or at the end of the string."""
    name = _NICKNAME_BETWEEN_RE.sub(r"\1 \3", name)
    return _NICKNAME_TRAILING_RE.sub(r"\1", name)


def strip_graduation_years(name: str) -> str:
    for pattern in _GRAD_YEAR_RES:
        name = pattern.sub(" ", name)
    return name


def _is_graduation_segment(segment: str) -> bool:
    return any(p.match(segment) for p in _GRAD_SEGMENT_RES)


def resolve_comma_tail(name: str) -> str:
    """
    Keep the main name and every comma segment that is not graduation-year
    noise. Kept segments are credentials, left for suffix extraction.
    """
    if "," not in name:
        return name

    parts = name.split(",")
    keep: List[str] = [parts[0].strip()]
    for raw_part in parts[1:]:
        part = raw_part.strip()
        if not part or _is_graduation_segment(part):
            continue
        keep.append(part)
    return ", ".join(keep)


@lru_cache(maxsize=8)
def _credential_patterns(credentials: Tuple[str, ...]) -> Tuple[Pattern[str], Pattern[str]]:
    alternation = "|".join(re.escape(c) for c in sorted(credentials, key=len, reverse=True))
    segment = re.compile(rf"^(?:{alternation})\.?$", re.IGNORECASE)
    trailing = re.compile(rf"\s+(?:{alternation})(?:\s+(?:{alternation}))*\s*$", re.IGNORECASE)
    return segment, trailing


def drop_credential_tail(name: str, lexicon: Lexicon) -> str:
    """
    Strip-policy counterpart of ``resolve_comma_tail``: if any comma segment
    looks like a credential, everything after the first comma is deleted.
    """
    if "," not in name or not lexicon.strip_credentials:
        return name

    segment_re, _ = _credential_patterns(lexicon.strip_credentials)
    parts = name.split(",")
    for raw_part in parts[1:]:
        part = raw_part.strip()
        if part and (_ACRONYM_SEGMENT_RE.match(part) or segment_re.match(part)):
            return parts[0].strip()
    return name


def strip_trailing_credentials(name: str, lexicon: Lexicon) -> str:
    """Remove one or more space-separated credentials at the end of the name."""
    if not lexicon.strip_credentials:
        return name
    _, trailing_re = _credential_patterns(lexicon.strip_credentials)
    return trailing_re.sub("", name)


def strip_asides(name: str) -> str:
    name = _PAREN_RE.sub(" ", name)
    return _BRACKET_RE.sub(" ", name)


def flatten_commas(name: str) -> str:
    name = _TRAILING_COMMA_RE.sub("", name.strip())
    return _COMMA_RE.sub(" ", name)


# ----------------------------------------------------------
# Entry point
# ----------------------------------------------------------

def normalize(
    raw: Optional[str],
    lexicon: Optional[Lexicon] = None,
    credential_policy: str = RETAIN,
) -> str:
    if not raw:
        return ""
    lexicon = lexicon or default_lexicon()

    name = collapse_whitespace(str(raw))
    if not name:
        return ""

    name = strip_nicknames(name)
    name = strip_graduation_years(name)

    if credential_policy == STRIP:
        name = drop_credential_tail(name, lexicon)
        name = strip_trailing_credentials(name, lexicon)
    else:
        name = resolve_comma_tail(name)

    name = _TRAILING_INITIAL_RE.sub("", name)
    name = strip_asides(name)
    name = _BARE_YEAR_RE.sub(" ", name)
    name = flatten_commas(name)

    return collapse_whitespace(name)

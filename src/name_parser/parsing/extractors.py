"""
Honorific and suffix extraction.

Honorifics are peeled off the front of the span before suffixes are peeled
off the back, so the two can never claim the same token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from name_parser.lexicon import Lexicon
from name_parser.parsing.tokenizer import TokenSpan

MAX_HONORIFIC_WORDS = 3


@dataclass(frozen=True)
class Extraction:
    text: str
    span: TokenSpan


def extract_honorific(span: TokenSpan, lexicon: Lexicon) -> Optional[Extraction]:
    """
    Match the longest honorific phrase at the start of ``span``.

    Three-word phrases are tried before two-word phrases, which are tried
    before single words, so "Rev. Dr." is not split into "Rev." plus a
    stray "Dr." first name.
    """
    tokens = span.items()
    for width in range(min(MAX_HONORIFIC_WORDS, len(tokens)), 0, -1):
        words = [t.text for t in tokens[:width]]
        if lexicon.is_honorific(" ".join(words)):
            return Extraction(text=" ".join(words), span=span.drop_front(width))
    return None


def extract_suffix(span: TokenSpan, lexicon: Lexicon) -> Optional[Extraction]:
    """
    Match the single trailing token of ``span`` against the suffix lexicon.

    Full-word "Senior"/"Junior" directly after a lone first name is kept as
    the surname rather than taken as a generational marker.
    """
    if span.is_empty:
        return None

    last = span.tokens[span.end]
    if last.key not in lexicon.suffixes:
        return None

    if last.key in lexicon.surname_like_suffixes and len(span) == 2:
        return None

    return Extraction(text=last.text, span=span.drop_back(1))

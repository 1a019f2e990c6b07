"""
Lexicon Store: immutable reference tables consulted by the parsing stages.
"""

from name_parser.lexicon.store import (
    Lexicon,
    SurnamePattern,
    default_lexicon,
    load_lexicon,
    normalize_phrase,
)

__all__ = [
    "Lexicon",
    "SurnamePattern",
    "default_lexicon",
    "load_lexicon",
    "normalize_phrase",
]

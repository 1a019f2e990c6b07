"""
Core name splitter: decides where the first name ends and the surname begins.

Given the words left after honorific and suffix extraction:

    0 words   -> nothing
    1 word    -> surname
    2 words   -> first + surname (a leading initial is dropped)
    3+ words  -> drop initials, then
                 compound rules (exactly three words left),
                 surname-prefix detection ("Maria Van Der Berg"),
                 default split (first word vs. the rest)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from name_parser.lexicon import Lexicon
from name_parser.parsing.rules import resolve_compound
from name_parser.parsing.tokenizer import is_initial


@dataclass(frozen=True)
class Split:
    first: str = ""
    last: str = ""


def elide_initials(words: Sequence[str]) -> List[str]:
    """
    Drop bare initials from a span of more than two words.

    Interior initials always go; the first word goes only if it is an
    initial; the last word is always kept.
    """
    if len(words) <= 2:
        return list(words)

    kept: List[str] = []
    if not is_initial(words[0]):
        kept.append(words[0])
    kept.extend(w for w in words[1:-1] if not is_initial(w))
    kept.append(words[-1])
    return kept


@lru_cache(maxsize=256)
def _prefix_pattern(prefix: str) -> "re.Pattern[str]":
    # Starts at a word boundary that is also a token boundary.
    return re.compile(r"(?<!\S)" + re.escape(prefix) + r"\b")


def find_prefix_split(words: Sequence[str], lexicon: Lexicon) -> Optional[int]:
    """
    Return the index of the first surname word, located by a surname prefix.

    Prefixes are tried longest first. A prefix found at word 0 is rejected
    (there must be a first name before it) and the next prefix is tried.
    """
    lowered = " ".join(words).lower()
    for prefix in lexicon.surname_prefixes:
        match = _prefix_pattern(prefix).search(lowered)
        if match is None:
            continue
        before = lowered[:match.start()].strip()
        words_before = len(before.split()) if before else 0
        if words_before >= 1:
            return words_before
    return None


def _split_at(words: Sequence[str], index: int) -> Split:
    return Split(first=" ".join(words[:index]), last=" ".join(words[index:]))


def split_multiword(words: Sequence[str], lexicon: Lexicon) -> Tuple[Split, str]:
    """
    Split an initial-free list of words. Returns the split and the name of
    the rule that decided it.
    """
    if not words:
        return Split(), "empty"
    if len(words) == 1:
        return Split(last=words[0]), "single_word"

    if len(words) == 3:
        decision = resolve_compound(words, lexicon)
        if decision is not None:
            return Split(first=decision.first, last=decision.last), decision.rule

    index = find_prefix_split(words, lexicon)
    if index is not None:
        return _split_at(words, index), "surname_prefix"

    return _split_at(words, 1), "default"


def split_name(words: Sequence[str], lexicon: Lexicon) -> Split:
    """Assign the remaining words to first and last name."""
    count = len(words)
    if count == 0:
        return Split()
    if count == 1:
        return Split(last=words[0])
    if count == 2:
        if is_initial(words[0]):
            return Split(last=words[1])
        return Split(first=words[0], last=words[1])

    split, _ = split_multiword(elide_initials(words), lexicon)
    return split

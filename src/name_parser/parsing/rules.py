"""
Compound-name resolution rules for three-word names.

A three-word name "A B C" can be a compound first name ("Mary Jo Smith") or
a compound surname ("Laura Marzano Kemper"). The evidence for each reading is
gathered once into ``CompoundEvidence`` and then run through an ordered list
of ``CompoundRule`` objects; the first rule whose predicate holds decides the
split. When no rule fires the caller falls back to prefix detection and the
default split.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from name_parser.lexicon import Lexicon

COMPOUND_FIRST = "compound_first"
COMPOUND_LAST = "compound_last"

# Titles and generational markers that may still cling to a three-word
# candidate; they are ignored when testing surname patterns.
_LEADING_TITLE_RE = re.compile(r"^(Dr\.|Mrs\.|Mr\.|Ms\.|Prof\.|Rev\.|Captain)\s+", re.IGNORECASE)
_TRAILING_MARKER_RE = re.compile(r"\s+(Jr\.|Sr\.|III|IV|V|PhD|MD)\.?$", re.IGNORECASE)


@dataclass(frozen=True)
class CompoundEvidence:
    words: Tuple[str, str, str]
    is_compound_first: bool
    is_very_common_first: bool
    surname_pattern: Optional[str]

    @property
    def suggests_compound_last(self) -> bool:
        return self.surname_pattern is not None


@dataclass(frozen=True)
class CompoundRule:
    name: str
    predicate: Callable[[CompoundEvidence], bool]
    outcome: str


@dataclass(frozen=True)
class CompoundDecision:
    rule: str
    outcome: str
    first: str
    last: str


DEFAULT_RULES: Tuple[CompoundRule, ...] = (
    CompoundRule(
        "compound_first_only",
        lambda e: e.is_compound_first and not e.suggests_compound_last,
        COMPOUND_FIRST,
    ),
    CompoundRule(
        "compound_last_only",
        lambda e: e.suggests_compound_last and not e.is_compound_first,
        COMPOUND_LAST,
    ),
    CompoundRule(
        "both_very_common_first",
        lambda e: e.is_compound_first and e.suggests_compound_last and e.is_very_common_first,
        COMPOUND_FIRST,
    ),
    CompoundRule(
        "both_prefer_last",
        lambda e: e.is_compound_first and e.suggests_compound_last,
        COMPOUND_LAST,
    ),
)


def suggests_compound_last(text: str, lexicon: Lexicon) -> Optional[str]:
    """Return the name of the first surname-suggestive pattern matching ``text``."""
    candidate = _LEADING_TITLE_RE.sub("", text)
    candidate = _TRAILING_MARKER_RE.sub("", candidate).strip()
    pattern = lexicon.matching_surname_pattern(candidate)
    return pattern.name if pattern else None


def gather_evidence(words: Sequence[str], lexicon: Lexicon) -> CompoundEvidence:
    if len(words) != 3:
        raise ValueError(f"Compound evidence needs exactly three words, got {len(words)}")
    first_pair = f"{words[0]} {words[1]}"
    return CompoundEvidence(
        words=(words[0], words[1], words[2]),
        is_compound_first=lexicon.is_compound_first(first_pair),
        is_very_common_first=lexicon.is_very_common_compound_first(first_pair),
        surname_pattern=suggests_compound_last(" ".join(words), lexicon),
    )


def resolve_compound(
    words: Sequence[str],
    lexicon: Lexicon,
    rules: Sequence[CompoundRule] = DEFAULT_RULES,
) -> Optional[CompoundDecision]:
    """Apply ``rules`` first-match-wins to a three-word name."""
    evidence = gather_evidence(words, lexicon)
    a, b, c = evidence.words
    for rule in rules:
        if not rule.predicate(evidence):
            continue
        if rule.outcome == COMPOUND_FIRST:
            return CompoundDecision(rule.name, rule.outcome, f"{a} {b}", c)
        return CompoundDecision(rule.name, rule.outcome, a, f"{b} {c}")
    return None

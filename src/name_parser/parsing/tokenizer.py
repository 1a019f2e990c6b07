# src/name_parser/parsing/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from name_parser.lexicon import normalize_phrase

_INITIAL_RE = re.compile(r"^[A-Z]\.?$")


@dataclass(frozen=True)
class Token:
    """
    One whitespace-delimited word of a normalized name.

    Attributes:
        index: 0-based position in the token sequence.
        text: The word exactly as it appeared (casing and periods kept).
    """
    index: int
    text: str

    @property
    def key(self) -> str:
        """Case- and punctuation-insensitive form used for lexicon lookups."""
        return normalize_phrase(self.text)

    @property
    def is_initial(self) -> bool:
        """A single capital letter, optionally followed by a period."""
        return is_initial(self.text)


def is_initial(text: str) -> bool:
    return bool(_INITIAL_RE.match(text.strip()))


@dataclass(frozen=True)
class TokenSpan:
    """
    The tokens ``tokens[start..end]`` (inclusive) still awaiting assignment.

    ``start == end + 1`` is a valid empty span.
    """
    tokens: Tuple[Token, ...]
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end + 1:
            raise ValueError(f"Invalid span: start={self.start} end={self.end}")

    @classmethod
    def covering(cls, tokens: Tuple[Token, ...]) -> "TokenSpan":
        return cls(tokens=tokens, start=0, end=len(tokens) - 1)

    def __len__(self) -> int:
        return self.end - self.start + 1

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def items(self) -> Tuple[Token, ...]:
        return self.tokens[self.start:self.end + 1]

    def texts(self) -> Tuple[str, ...]:
        return tuple(t.text for t in self.items())

    def drop_front(self, count: int) -> "TokenSpan":
        return TokenSpan(self.tokens, min(self.start + count, self.end + 1), self.end)

    def drop_back(self, count: int) -> "TokenSpan":
        return TokenSpan(self.tokens, self.start, max(self.end - count, self.start - 1))


def tokenize(name: str) -> Tuple[Token, ...]:
    """Split a normalized name on whitespace into ordered tokens."""
    return tuple(Token(index=i, text=word) for i, word in enumerate(name.split()))

"""
NameParser: the full-name classification pipeline.

    raw -> normalize -> organizational? -> tokenize
        -> honorific (front) -> suffix (back) -> split -> assemble

Parsing is a pure function of the input string and the lexicon: no I/O, no
shared mutable state, no exceptions for odd input. Anything that cannot be
read as a person name comes back as an all-empty ``ParsedName``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from name_parser.core.exceptions import ConfigError
from name_parser.lexicon import Lexicon, default_lexicon
from name_parser.models import ParsedName
from name_parser.parsing.assembler import assemble
from name_parser.parsing.extractors import extract_honorific, extract_suffix
from name_parser.parsing.normalizer import RETAIN, STRIP, normalize
from name_parser.parsing.organizational import is_organizational
from name_parser.parsing.splitter import split_name
from name_parser.parsing.tokenizer import TokenSpan, tokenize

CREDENTIAL_POLICIES = (RETAIN, STRIP)


class NameParser:
    def __init__(self, lexicon: Optional[Lexicon] = None, credential_policy: str = RETAIN):
        policy = (credential_policy or RETAIN).lower()
        if policy not in CREDENTIAL_POLICIES:
            raise ConfigError(
                f"Unknown credential policy {credential_policy!r}; "
                f"expected one of {', '.join(CREDENTIAL_POLICIES)}"
            )
        self.lexicon = lexicon or default_lexicon()
        self.credential_policy = policy

    def normalize(self, raw: Optional[str]) -> str:
        return normalize(raw, self.lexicon, self.credential_policy)

    def is_organizational(self, raw: Optional[str]) -> bool:
        return is_organizational(self.normalize(raw), self.lexicon)

    def parse(self, full_name: Optional[str]) -> ParsedName:
        name = self.normalize(full_name)
        if not name:
            return ParsedName()

        if is_organizational(name, self.lexicon):
            return ParsedName(first_name=name)

        span = TokenSpan.covering(tokenize(name))
        honorific = suffix = ""

        found = extract_honorific(span, self.lexicon)
        if found is not None:
            honorific, span = found.text, found.span

        found = extract_suffix(span, self.lexicon)
        if found is not None:
            suffix, span = found.text, found.span

        split = split_name(span.texts(), self.lexicon)
        return assemble(honorific, split.first, split.last, suffix)

    def parse_many(self, names: Iterable[Optional[str]]) -> List[Tuple[str, ParsedName]]:
        """Parse every non-blank entry, keeping input order."""
        results: List[Tuple[str, ParsedName]] = []
        for raw in names:
            if raw is None or not str(raw).strip():
                continue
            results.append((str(raw), self.parse(str(raw))))
        return results


_default_parser: Optional[NameParser] = None


def _parser() -> NameParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = NameParser()
    return _default_parser


def parse_name(full_name: Optional[str], lexicon: Optional[Lexicon] = None) -> ParsedName:
    """Parse one raw full name with the built-in lexicon (or ``lexicon``)."""
    if lexicon is not None:
        return NameParser(lexicon).parse(full_name)
    return _parser().parse(full_name)


def parse_names(names: Iterable[Optional[str]]) -> List[Tuple[str, ParsedName]]:
    return _parser().parse_many(names)

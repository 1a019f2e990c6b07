"""
Lexicon Store.

A ``Lexicon`` bundles every reference table the parsing stages consult. It is
built once (from the built-in defaults, optionally overridden by a YAML file)
and passed into the parser; nothing mutates it afterwards, so a single
instance can be shared by any number of concurrent callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Pattern, Tuple, Union

import yaml

from name_parser.lexicon import defaults
from name_parser.logging import get_logger

log = get_logger(__name__)


def normalize_phrase(text: str) -> str:
    """Lowercase, drop periods/commas and collapse spaces for lexicon matching."""
    if not text:
        return ""
    cleaned = text.lower().replace(".", "").replace(",", "")
    return " ".join(cleaned.split())


@dataclass(frozen=True)
class SurnamePattern:
    """A named regex that suggests the last two of three words form a surname."""

    name: str
    regex: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class Lexicon:
    honorifics: FrozenSet[str]
    suffixes: FrozenSet[str]
    surname_like_suffixes: FrozenSet[str]
    strip_credentials: Tuple[str, ...]
    # Longest phrase first, so "van der" is tried before "van".
    surname_prefixes: Tuple[str, ...]
    compound_first_names: FrozenSet[str]
    very_common_compound_first_names: FrozenSet[str]
    surname_patterns: Tuple[SurnamePattern, ...]
    organizational_patterns: Tuple[Pattern[str], ...]
    source: str = field(default="defaults", compare=False)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def is_honorific(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self.honorifics

    def is_suffix(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self.suffixes

    def is_compound_first(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self.compound_first_names

    def is_very_common_compound_first(self, phrase: str) -> bool:
        return normalize_phrase(phrase) in self.very_common_compound_first_names

    def matching_surname_pattern(self, text: str) -> Optional[SurnamePattern]:
        """Return the first surname-suggestive pattern matching ``text``."""
        for pattern in self.surname_patterns:
            if pattern.matches(text):
                return pattern
        return None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_tables(
        cls,
        *,
        honorifics: Iterable[str],
        suffixes: Iterable[str],
        surname_like_suffixes: Iterable[str],
        strip_credentials: Iterable[str],
        surname_prefixes: Iterable[str],
        compound_first_names: Iterable[str],
        very_common_compound_first_names: Iterable[str],
        surname_patterns: Iterable[Tuple[str, str]],
        organizational_patterns: Iterable[str],
        source: str = "defaults",
    ) -> "Lexicon":
        prefixes = _dedupe(p.lower().strip() for p in surname_prefixes if p and p.strip())
        return cls(
            honorifics=frozenset(normalize_phrase(h) for h in honorifics if h),
            suffixes=frozenset(normalize_phrase(s) for s in suffixes if s),
            surname_like_suffixes=frozenset(normalize_phrase(s) for s in surname_like_suffixes if s),
            strip_credentials=tuple(strip_credentials),
            surname_prefixes=tuple(sorted(prefixes, key=len, reverse=True)),
            compound_first_names=frozenset(normalize_phrase(c) for c in compound_first_names if c),
            very_common_compound_first_names=frozenset(
                normalize_phrase(c) for c in very_common_compound_first_names if c
            ),
            surname_patterns=tuple(
                SurnamePattern(name=name, regex=re.compile(rx)) for name, rx in surname_patterns
            ),
            organizational_patterns=tuple(
                re.compile(rx, re.IGNORECASE) for rx in organizational_patterns
            ),
            source=source,
        )

    def tables(self) -> Dict[str, Any]:
        """Return the tables in the shape accepted by ``from_tables``."""
        return {
            "honorifics": sorted(self.honorifics),
            "suffixes": sorted(self.suffixes),
            "surname_like_suffixes": sorted(self.surname_like_suffixes),
            "strip_credentials": self.strip_credentials,
            "surname_prefixes": self.surname_prefixes,
            "compound_first_names": sorted(self.compound_first_names),
            "very_common_compound_first_names": sorted(self.very_common_compound_first_names),
            "surname_patterns": [(p.name, p.regex.pattern) for p in self.surname_patterns],
            "organizational_patterns": [p.pattern for p in self.organizational_patterns],
        }

    def replace_tables(self, overrides: Mapping[str, Any], *, source: str) -> "Lexicon":
        """
        Build a new lexicon where each table named in ``overrides`` is replaced.

        Raises:
            ValueError: on an unknown table name or a malformed table.
        """
        unknown = set(overrides) - set(_TABLE_KEYS)
        if unknown:
            raise ValueError(f"Unknown lexicon tables: {', '.join(sorted(map(str, unknown)))}")

        tables = self.tables()
        for key, value in overrides.items():
            tables[key] = _checked_table(key, value)
        return Lexicon.from_tables(source=source, **tables)


_TABLE_KEYS = (
    "honorifics",
    "suffixes",
    "surname_like_suffixes",
    "strip_credentials",
    "surname_prefixes",
    "compound_first_names",
    "very_common_compound_first_names",
    "surname_patterns",
    "organizational_patterns",
)

_PATTERN_TABLES = ("surname_patterns", "organizational_patterns")


def _compile_check(key: str, regex: str) -> None:
    try:
        re.compile(regex)
    except re.error as exc:
        raise ValueError(f"Lexicon table {key!r} has an invalid regex {regex!r}: {exc}") from exc


def _checked_table(key: str, value: Any) -> List[Any]:
    """
    Validate one override table. Word tables are lists of strings;
    ``surname_patterns`` is a name-to-regex mapping or a list of pairs.
    """
    if key == "surname_patterns" and isinstance(value, Mapping):
        value = list(value.items())
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ValueError(f"Lexicon table {key!r} must be a list, got {type(value).__name__}")

    if key == "surname_patterns":
        pairs = []
        for item in value:
            if (
                not isinstance(item, (list, tuple))
                or len(item) != 2
                or not all(isinstance(part, str) for part in item)
            ):
                raise ValueError(f"Lexicon table {key!r} entries must be (name, regex) pairs: {item!r}")
            _compile_check(key, item[1])
            pairs.append((item[0], item[1]))
        return pairs

    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Lexicon table {key!r} entries must be strings: {item!r}")
        if key in _PATTERN_TABLES:
            _compile_check(key, item)
    return list(value)


def _dedupe(items: Iterable[str]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return tuple(seen)


def _default_tables() -> Dict[str, Any]:
    return {
        "honorifics": defaults.HONORIFICS,
        "suffixes": defaults.SUFFIXES,
        "surname_like_suffixes": defaults.SURNAME_LIKE_SUFFIXES,
        "strip_credentials": defaults.STRIP_CREDENTIALS,
        "surname_prefixes": defaults.SURNAME_PREFIXES,
        "compound_first_names": defaults.COMPOUND_FIRST_NAMES,
        "very_common_compound_first_names": defaults.VERY_COMMON_COMPOUND_FIRST_NAMES,
        "surname_patterns": defaults.SURNAME_PATTERNS,
        "organizational_patterns": defaults.ORGANIZATIONAL_PATTERNS,
    }


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Return the shared built-in lexicon."""
    return Lexicon.from_tables(**_default_tables())


def load_lexicon(path: Union[str, Path]) -> Lexicon:
    """
    Build a lexicon from a YAML override file.

    Each top-level key names a table (``honorifics``, ``suffixes``,
    ``surname_prefixes``, ...). Tables present in the file replace the
    built-in table wholesale; absent tables keep their defaults.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        ValueError: if the file is not YAML, not a mapping, or holds an
            unknown or malformed table.
    """
    lexicon_path = Path(path)
    if not lexicon_path.is_file():
        log.error("Lexicon file not found: %s", lexicon_path)
        raise FileNotFoundError(f"Lexicon file not found: {lexicon_path}")

    with lexicon_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Lexicon file is not valid YAML: {lexicon_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Lexicon file must contain a mapping: {lexicon_path}")

    log.info("Loading lexicon overrides for %s from %s", ", ".join(sorted(map(str, data))), lexicon_path)
    return default_lexicon().replace_tables(data, source=str(lexicon_path))

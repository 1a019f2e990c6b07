from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

FIELD_NAMES = ("honorific", "first_name", "last_name", "suffix")


@dataclass(frozen=True)
class ParsedName:
    """
    The four normalized fields extracted from one raw full name.

    Every field is a string and defaults to ``""``; an all-empty record means
    no person name could be extracted.
    """

    honorific: str = ""
    first_name: str = ""
    last_name: str = ""
    suffix: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.honorific or self.first_name or self.last_name or self.suffix)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

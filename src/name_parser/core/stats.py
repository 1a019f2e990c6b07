from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class BatchStats:
    """Counters collected while a batch of names is parsed."""

    processed: int = 0
    with_honorific: int = 0
    with_suffix: int = 0
    organizational: int = 0
    empty: int = 0

    @property
    def with_person_name(self) -> int:
        return self.processed - self.organizational - self.empty

    def to_dict(self) -> Dict[str, int]:
        data = asdict(self)
        data["with_person_name"] = self.with_person_name
        return data

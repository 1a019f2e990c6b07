from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class BatchContext:
    """
    Shared batch context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    name_column: str = "full_name"
    progress_every: int = 1000

    stats: Dict[str, Any] = field(default_factory=dict)

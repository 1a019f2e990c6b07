"""
Organizational-entry detection.

Some directory rows name a department mailbox or a role ("General Ticket
Office") rather than a person. Those rows bypass name splitting entirely.
"""

from __future__ import annotations

from typing import Optional

from name_parser.lexicon import Lexicon, default_lexicon


def is_organizational(name: str, lexicon: Optional[Lexicon] = None) -> bool:
    """Return True when the whole normalized ``name`` reads as a department label."""
    if not name:
        return False
    lexicon = lexicon or default_lexicon()
    lowered = name.strip().lower()
    return any(p.match(lowered) for p in lexicon.organizational_patterns)

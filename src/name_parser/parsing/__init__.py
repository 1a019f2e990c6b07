"""
Name-classification pipeline stages.

Only the parser facade is re-exported; stage modules are imported directly
where needed.
"""

from name_parser.parsing.parser import NameParser, parse_name, parse_names

__all__ = [
    "NameParser",
    "parse_name",
    "parse_names",
]

"""
Directory name parser.

Splits free-form staff-directory full names into honorific, first name,
last name and suffix:

    >>> from name_parser import parse_name
    >>> parse_name("Dr. Jane A. Smith").to_dict()
    {'honorific': 'Dr.', 'first_name': 'Jane', 'last_name': 'Smith', 'suffix': ''}
"""

from name_parser.lexicon import Lexicon, default_lexicon, load_lexicon
from name_parser.models import ParsedName
from name_parser.parsing import NameParser, parse_name, parse_names

__version__ = "0.1.0"

__all__ = [
    "Lexicon",
    "NameParser",
    "ParsedName",
    "default_lexicon",
    "load_lexicon",
    "parse_name",
    "parse_names",
]

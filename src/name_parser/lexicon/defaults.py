"""
Built-in lexicon tables.

Honorific, suffix and compound-name phrases are stored already normalized:
lowercase, periods and commas removed, single spaces between words. Dotted
spellings such as ``"Ph.D."`` or ``"Lt. Col."`` collapse onto these keys at
match time. Surname prefixes are matched as written against lowercased text.
"""

from __future__ import annotations

from typing import Tuple

# ==========================================================
# HONORIFICS
# ==========================================================

HONORIFICS: Tuple[str, ...] = (
    "mr", "mrs", "ms", "miss", "mister",
    "dr", "doctor", "prof", "professor",
    "rev", "reverend", "fr", "father", "pastor", "rabbi",
    "hon", "honorable", "sir", "dame", "lord", "lady",
    "capt", "captain", "lt", "lieutenant", "maj", "major",
    "col", "colonel", "gen", "general", "adm", "admiral",
    "sgt", "sergeant", "cpl", "corporal", "pvt", "private",
    # Military compound ranks
    "lt col", "maj gen", "brig gen", "lt gen", "lt cmdr",
    # Religious compound honorifics
    "reverend dr", "rev dr", "the reverend", "the rev", "the honorable",
    "the reverend dr", "the rev dr",
)

# ==========================================================
# SUFFIXES (generational markers and credentials)
# ==========================================================

SUFFIXES: Tuple[str, ...] = (
    "jr", "junior", "sr", "senior",
    "ii", "iii", "iv", "v", "vi",
    "esq", "esquire",
    "phd", "md", "dds", "jd", "cpa", "rn", "pe", "dvm", "do",
    "edd", "psyd", "mph", "mba", "ms", "ma", "bs", "ba",
    "od", "dc", "dat", "lat", "atc", "pt", "dpt", "pharmd",
    "llb", "ces", "pes", "msat", "mses", "nraemt", "lmt",
    "atc/lat", "lat/atc",
)

# Full-word generational markers that may also be legal surnames.
SURNAME_LIKE_SUFFIXES: Tuple[str, ...] = ("senior", "junior")

# Credentials removed outright under the "strip" credential policy.
STRIP_CREDENTIALS: Tuple[str, ...] = (
    "MS", "MA", "BA", "BS", "DDS", "JD", "LLB", "MBA", "MD", "PhD", "PharmD",
    "DVM", "RN", "LAT", "ATC", "CES", "PES", "MSAT", "MSES", "NRAEMT", "LMT",
    "ATC/LAT", "LAT/ATC",
)

# ==========================================================
# SURNAME PREFIXES
# ==========================================================

SURNAME_PREFIXES: Tuple[str, ...] = (
    # European particles
    "de", "del", "della", "de la", "de las", "de los", "da", "das", "do", "dos",
    "di", "du", "le", "la", "les", "van", "van der", "van den", "von", "von der",
    # Celtic
    "mc", "mac", "o'", "ó",
    # Religious / geographic
    "st", "st.", "saint", "san", "santa", "santo",
    # Compound surnames that open with a family name
    "ponce de", "abreu de", "sandoval de", "martinez de", "garcia de",
    "furlaneto de",
)

# ==========================================================
# COMPOUND FIRST NAMES
# ==========================================================

COMPOUND_FIRST_NAMES: Tuple[str, ...] = (
    # Female
    "mary jo", "mary jane", "mary ann", "mary anne", "mary beth", "mary kay",
    "mary lou", "mary sue",
    "anna mae", "anna lee", "anna beth", "anna marie", "anna grace",
    "sarah jane", "sarah beth", "sarah anne", "sarah grace",
    "leigh anne", "leigh ann", "leigh marie",
    "amy jo", "amy lynn", "amy sue",
    "lisa marie", "lisa ann", "lisa jane",
    "linda sue", "linda kay", "linda marie",
    "betty jo", "betty sue", "betty ann",
    "carol ann", "carol lynn", "carol sue",
    "donna marie", "donna lynn", "donna kay",
    "jean marie", "jean ann", "jean louise",
    "jo ann", "jo anne", "jo lynn",
    "sue ann", "sue ellen", "sue marie",
    "kimberly anne", "kimberly ann", "kimberly marie",
    # Male
    "john paul", "john michael", "john david", "john robert",
    "james michael", "james robert", "james william",
    "robert james", "robert john", "robert michael",
    "william james", "william john", "william robert",
    "billy joe", "billy bob", "billy ray",
    "bobby joe", "bobby ray", "bobby lee",
    "tommy lee", "tommy joe", "tommy ray",
    "jimmy lee", "jimmy joe", "jimmy ray",
    # Modern
    "austin james", "austin lee", "austin michael",
    "hunter james", "hunter lee", "hunter michael",
    "tyler james", "tyler lee", "tyler michael",
)

# Tie-break allow-list when a compound first name and a compound surname
# are both plausible.
VERY_COMMON_COMPOUND_FIRST_NAMES: Tuple[str, ...] = (
    "mary jane", "mary jo", "mary ann", "mary anne", "mary beth",
    "john paul", "john michael", "billy ray", "bobby joe",
    "leigh anne", "anna marie", "sarah jane",
)

# ==========================================================
# SURNAME-SUGGESTIVE PATTERNS (three-word names)
# ==========================================================

# Ordered (name, regex) pairs; evaluated first-match-wins against
# "First Middle Last".
SURNAME_PATTERNS: Tuple[Tuple[str, str], ...] = (
    # Italian-style endings: "Laura Marzano Kemper"
    ("italian_o", r"^[A-Z][a-z]+ [A-Z][a-z]+o [A-Z][a-z]+$"),
    ("italian_i", r"^[A-Z][a-z]+ [A-Z][a-z]+i [A-Z][a-z]+$"),
    ("italian_a", r"^[A-Z][a-z]+ [A-Z][a-z]+a [A-Z][a-z]+$"),
    # German/Dutch-style endings: "Maribeth Boeke Ganzell"
    ("germanic_ke", r"^[A-Z][a-z]+ [A-Z][a-z]+ke [A-Z][a-z]+$"),
    ("germanic_er", r"^[A-Z][a-z]+ [A-Z][a-z]+er [A-Z][a-z]+$"),
    ("germanic_en", r"^[A-Z][a-z]+ [A-Z][a-z]+en [A-Z][a-z]+$"),
    # British-style compound surnames: "Anne Westbrook Gay"
    ("british_brook", r"^[A-Z][a-z]+ [A-Z][a-z]+brook [A-Z][a-z]+$"),
    ("british_field", r"^[A-Z][a-z]+ [A-Z][a-z]+field [A-Z][a-z]+$"),
    ("british_wood", r"^[A-Z][a-z]+ [A-Z][a-z]+wood [A-Z][a-z]+$"),
    ("british_ton", r"^[A-Z][a-z]+ [A-Z][a-z]+ton [A-Z][a-z]+$"),
    ("british_land", r"^[A-Z][a-z]+ [A-Z][a-z]+land [A-Z][a-z]+$"),
    ("british_burg", r"^[A-Z][a-z]+ [A-Z][a-z]+burg [A-Z][a-z]+$"),
    # Long middle word followed by a short last word
    ("long_middle_short_last", r"^[A-Z][a-z]+ [A-Z][a-z]{5,} [A-Z][a-z]{2,4}$"),
    ("british_son", r"^[A-Z][a-z]+ [A-Z][a-z]+son [A-Z][a-z]+$"),
    ("british_man", r"^[A-Z][a-z]+ [A-Z][a-z]+man [A-Z][a-z]+$"),
)

# ==========================================================
# ORGANIZATIONAL ENTRIES
# ==========================================================

ORGANIZATIONAL_PATTERNS: Tuple[str, ...] = (
    r"^general\s+(inquiries|information|correspondence|operations|marketing|ticket|office)\b",
    r"^general\s+[a-z]+\s+(information|inquiries|office)\b",
)

# tests/test_parser.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from name_parser import NameParser, ParsedName, parse_name, parse_names
from name_parser.core.exceptions import ConfigError
from name_parser.lexicon import default_lexicon


def fields(parsed: ParsedName):
    return (parsed.honorific, parsed.first_name, parsed.last_name, parsed.suffix)


# ----------------------------------------------------------
# Reference scenarios
# ----------------------------------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Dr. Jane A. Smith", ("Dr.", "Jane", "Smith", "")),
        ("John Smith Jr.", ("", "John", "Smith", "Jr.")),
        ("Maria Van Der Berg", ("", "Maria", "Van Der Berg", "")),
        ("Mary Jo Thompson", ("", "Mary Jo", "Thompson", "")),
        ("General Ticket Office", ("", "General Ticket Office", "", "")),
        ('Robert "Bobby" Jones \'22', ("", "Robert", "Jones", "")),
    ],
)
def test_reference_scenarios(raw, expected) -> None:
    assert fields(parse_name(raw)) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Rev. Dr. Smith", ("Rev. Dr.", "", "Smith", "")),
        ("Lt. Col. John A. Smith III", ("Lt. Col.", "John", "Smith", "III")),
        ("John Smith, MD", ("", "John", "Smith", "MD")),
        ("Jane Doe, '22, PhD", ("", "Jane", "Doe", "PhD")),
        ("John Senior", ("", "John", "Senior", "")),
        ("John Smith Senior", ("", "John", "Smith", "Senior")),
        ("J. Smith", ("", "", "Smith", "")),
        ("Smith", ("", "", "Smith", "")),
        ("Gabe Ponce De Leon", ("", "Gabe", "Ponce De Leon", "")),
        ("Laura Marzano Kemper", ("", "Laura", "Marzano Kemper", "")),
        ("Ms. Mary Ann Smith (Head Coach)", ("Ms.", "Mary Ann", "Smith", "")),
        ("Coach John Smith", ("", "Coach", "John Smith", "")),
        ("Dr.", ("Dr.", "", "", "")),
        ("Jr.", ("", "", "", "Jr.")),
    ],
)
def test_mixed_directory_entries(raw, expected) -> None:
    assert fields(parse_name(raw)) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "(Vacant)", "'22", "2019"])
def test_noise_only_input_yields_empty_record(raw) -> None:
    parsed = parse_name(raw)
    assert parsed == ParsedName()
    assert parsed.is_empty


# ----------------------------------------------------------
# Properties
# ----------------------------------------------------------

MESSY = [
    "Dr. Jane A. Smith",
    "  ,,, ",
    '"Bob"',
    "Ms",
    "Sr.",
    "A B C D E",
    "Maj. Gen. Robert E. Lee IV, Ret.",
    "O'Neil-Smith, Mary [Alumni] '99",
    "Jean-Luc de la Tour du Pin",
    "General Marketing",
    "¡Hola! Señor Núñez",
]


@pytest.mark.parametrize("raw", MESSY)
def test_every_field_is_a_string(raw) -> None:
    parsed = parse_name(raw)
    for value in fields(parsed):
        assert isinstance(value, str)


@pytest.mark.parametrize("raw", MESSY)
def test_parsing_is_deterministic(raw) -> None:
    assert parse_name(raw) == parse_name(raw)


def test_honorific_and_suffix_never_share_a_token() -> None:
    # A lone token that is both an honorific and a suffix goes to the front.
    assert fields(parse_name("Ms")) == ("Ms", "", "", "")
    assert fields(parse_name("Ms. Smith MS")) == ("Ms.", "", "Smith", "MS")


def test_longest_honorific_phrase_wins() -> None:
    assert parse_name("The Reverend Dr. Jane Smith").honorific == "The Reverend Dr."
    assert parse_name("Rev. Dr. Jane Smith").honorific == "Rev. Dr."
    assert parse_name("Rev. Jane Smith").honorific == "Rev."


def test_parallel_parsing_matches_sequential() -> None:
    names = MESSY * 20
    parser = NameParser()
    sequential = [parser.parse(n) for n in names]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(parser.parse, names))
    assert parallel == sequential


# ----------------------------------------------------------
# Configuration seams
# ----------------------------------------------------------

def test_strip_policy_drops_credentials() -> None:
    parser = NameParser(credential_policy="strip")
    assert fields(parser.parse("John Smith, MD")) == ("", "John", "Smith", "")
    assert fields(parser.parse("Jane Doe MS ATC")) == ("", "Jane", "Doe", "")


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(ConfigError):
        NameParser(credential_policy="shred")


def test_substituted_lexicon() -> None:
    lexicon = default_lexicon().replace_tables({"honorifics": ["coach"]}, source="test")
    assert fields(parse_name("Coach John Smith", lexicon=lexicon)) == ("Coach", "John", "Smith", "")
    assert fields(parse_name("Dr. John Smith", lexicon=lexicon)) == ("", "Dr.", "John Smith", "")


def test_is_organizational_uses_normalized_text() -> None:
    parser = NameParser()
    assert parser.is_organizational("  General   Ticket Office (Main) ")
    assert not parser.is_organizational("Dr. Jane Smith")


def test_parse_names_skips_blanks_and_keeps_order() -> None:
    rows = parse_names(["John Smith", "", None, "  ", "Dr. Jane A. Smith"])
    assert [raw for raw, _ in rows] == ["John Smith", "Dr. Jane A. Smith"]
    assert rows[1][1].honorific == "Dr."


def test_mid_name_graduation_token_leaves_no_letters_behind() -> None:
    assert fields(parse_name("Jane BS'24 Doe")) == ("", "Jane", "Doe", "")

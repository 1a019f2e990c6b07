# tests/test_lexicon.py

from __future__ import annotations

import dataclasses

import pytest

from name_parser.lexicon import default_lexicon, load_lexicon, normalize_phrase


def test_normalize_phrase_strips_case_and_punctuation() -> None:
    assert normalize_phrase("Lt. Col.") == "lt col"
    assert normalize_phrase("Ph.D.,") == "phd"
    assert normalize_phrase("  Rev.   Dr. ") == "rev dr"
    assert normalize_phrase("") == ""


def test_surname_prefixes_are_longest_first(lexicon) -> None:
    prefixes = lexicon.surname_prefixes
    assert prefixes.index("van der") < prefixes.index("van")
    assert prefixes.index("de la") < prefixes.index("de")
    lengths = [len(p) for p in prefixes]
    assert lengths == sorted(lengths, reverse=True)


def test_lookups_ignore_case_and_periods(lexicon) -> None:
    assert lexicon.is_honorific("Lt. Col.")
    assert lexicon.is_honorific("REV DR")
    assert lexicon.is_suffix("Ph.D.")
    assert lexicon.is_suffix("jr.,")
    assert not lexicon.is_suffix("Smith")
    assert lexicon.is_compound_first("Mary Jo")
    assert lexicon.is_very_common_compound_first("mary jane")
    assert not lexicon.is_very_common_compound_first("amy lynn")


def test_matching_surname_pattern_returns_named_rule(lexicon) -> None:
    pattern = lexicon.matching_surname_pattern("Laura Marzano Kemper")
    assert pattern is not None
    assert pattern.name == "italian_o"
    assert lexicon.matching_surname_pattern("Jane Ann Smith") is None


def test_default_lexicon_is_shared_and_frozen() -> None:
    lex = default_lexicon()
    assert default_lexicon() is lex
    with pytest.raises(dataclasses.FrozenInstanceError):
        lex.honorifics = frozenset()  # type: ignore[misc]


def test_load_lexicon_replaces_named_tables(tmp_path) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text(
        "honorifics:\n  - Chief\n  - Coach\nsurname_prefixes:\n  - ten\n",
        encoding="utf-8",
    )

    lex = load_lexicon(path)

    assert lex.is_honorific("chief")
    assert not lex.is_honorific("Dr.")
    assert lex.surname_prefixes == ("ten",)
    # Untouched tables keep their defaults.
    assert lex.is_suffix("Jr.")
    assert lex.source == str(path)


def test_load_lexicon_accepts_pattern_mapping(tmp_path) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text(
        "surname_patterns:\n  ends_in_ez: '^[A-Z][a-z]+ [A-Z][a-z]+ez [A-Z][a-z]+$'\n",
        encoding="utf-8",
    )

    lex = load_lexicon(path)

    assert [p.name for p in lex.surname_patterns] == ["ends_in_ez"]
    assert lex.matching_surname_pattern("Ana Lopez Garcia").name == "ends_in_ez"


def test_load_lexicon_rejects_unknown_tables(tmp_path) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text("nicknames:\n  - bob\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_lexicon(path)


def test_load_lexicon_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "nope.yml")


@pytest.mark.parametrize(
    "body, table",
    [
        ("honorifics:\n", "honorifics"),
        ("suffixes: jr\n", "suffixes"),
        ("compound_first_names:\n  - mary jo\n  - 42\n", "compound_first_names"),
        ("surname_patterns:\n  - just_a_name\n", "surname_patterns"),
        ("surname_patterns:\n  bad: '([a-z'\n", "surname_patterns"),
        ("organizational_patterns:\n  - '^general\\s+(office'\n", "organizational_patterns"),
    ],
)
def test_load_lexicon_rejects_malformed_tables(tmp_path, body, table) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError, match=table):
        load_lexicon(path)


def test_empty_list_disables_a_table(tmp_path) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text("honorifics: []\n", encoding="utf-8")

    assert not load_lexicon(path).is_honorific("Dr.")


def test_load_lexicon_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "lexicon.yml"
    path.write_text("honorifics: [dr, mr\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_lexicon(path)

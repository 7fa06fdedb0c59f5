"""
Sanity checks for the bundled lookup tables
"""

import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import name_components
sys.path.insert(0, str(Path(__file__).parent.parent))

from name_components import name_parser_data
from name_components.name_parser_data import _assert_lowercase_keys, _assert_no_blank_values

TABLE_NAMES = [
    "GERMAN_SUFFIXES",
    "GERMAN_SALUTATIONS",
    "GERMAN_LASTNAME_PREFIXES",
    "GERMAN_EXTENSIONS",
    "GERMAN_TITLES",
    "GERMAN_COMPANIES",
    "ENGLISH_SUFFIXES",
    "ENGLISH_SALUTATIONS",
    "ENGLISH_LASTNAME_PREFIXES",
    "ENGLISH_EXTENSIONS",
    "ENGLISH_TITLES",
    "ENGLISH_COMPANIES",
]


def test_tables_are_read_only():
    for table_name in TABLE_NAMES:
        table = getattr(name_parser_data, table_name)
        assert len(table) > 0, f"{table_name} is empty"
        with pytest.raises(TypeError):
            table["new key"] = "value"


def test_keys_are_lowercase_and_values_present():
    for table_name in TABLE_NAMES:
        table = getattr(name_parser_data, table_name)
        for key, value in table.items():
            assert key == key.lower(), f"{table_name}: {key!r} is not lowercase"
            assert value.strip(), f"{table_name}: {key!r} has no display form"


def test_german_titles_combine_all_title_groups():
    titles = name_parser_data.GERMAN_TITLES
    assert titles["dr."] == "Dr."
    assert titles["dr. rer. nat."] == "Dr. rer. nat."
    assert titles["prof."] == "Prof."


def test_salutation_abbreviations_share_display_form():
    salutations = name_parser_data.GERMAN_SALUTATIONS
    assert salutations["hr"] == salutations["herr"] == "Herr"
    assert salutations["fr"] == salutations["frau"] == "Frau"


def test_validation_helpers_reject_bad_tables():
    with pytest.raises(ValueError):
        _assert_lowercase_keys("BAD", {"Herr": "Herr"})
    with pytest.raises(ValueError):
        _assert_no_blank_values("BAD", {"herr": "  "})

    _assert_lowercase_keys("GOOD", {"herr": "Herr"})
    _assert_no_blank_values("GOOD", {"herr": "Herr"})

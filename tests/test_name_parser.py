"""
End-to-end tests for NameParser

Covers the three routes a name can take:
- comma-free names through the default mapper pipeline
- "Lastname, Firstname Middle, Suffix" names through the segment pipelines
- comma-free organisation names short-circuited to a single company part

plus configuration knobs, normalization and the guarantees every parse keeps
(no word created or lost, identical input gives an identical result).
"""

import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import name_components
sys.path.insert(0, str(Path(__file__).parent.parent))

from name_components.name_parser import (
    ENGLISH,
    GERMAN,
    Category,
    LanguageTables,
    NameParser,
    NameParserConfig,
    NormalizationService,
    Part,
    Token,
    get_table_info,
    merge_languages,
    parse_name,
)


@pytest.fixture(scope="session")
def german_parser():
    return NameParser()


@pytest.fixture(scope="session")
def english_parser():
    return NameParser(NameParserConfig.create_default().with_languages(ENGLISH))


# (input, expected components as returned by Name.get_all())
GERMAN_TEST_CASES = [
    ("Peter Pan", {"firstname": "Peter", "lastname": "Pan"}),
    ("peter pan", {"firstname": "Peter", "lastname": "Pan"}),
    ("Peter", {"firstname": "Peter"}),
    (
        "Herr Dr. Hans Peter Müller",
        {"salutation": "Herr", "title": "Dr.", "firstname": "Hans", "middlename": "Peter", "lastname": "Müller"},
    ),
    ("Hr. Schulze", {"salutation": "Herr", "lastname": "Schulze"}),
    ("Frank van Delft", {"firstname": "Frank", "lastname": "van Delft"}),
    ("Anna van der Meer", {"firstname": "Anna", "lastname": "van der Meer"}),
    (
        "Herr Dr. Fritz Freiherr von Rathenburg",
        {
            "salutation": "Herr",
            "title": "Dr.",
            "firstname": "Fritz",
            "extension": "Freiherr",
            "lastname": "von Rathenburg",
        },
    ),
    ("Dr. rer. nat. Hans Meier", {"title": "Dr. rer. nat.", "firstname": "Hans", "lastname": "Meier"}),
    ("Peter Pan Jr.", {"firstname": "Peter", "lastname": "Pan", "suffix": "Jr."}),
    ("  Sean   O’Brien ", {"firstname": "Sean", "lastname": "O'Brien"}),
    ("Schuler, J. Peter M.", {"firstname": "Peter", "initials": "J. M.", "lastname": "Schuler"}),
    ("Müller, Hans, Jr.", {"firstname": "Hans", "lastname": "Müller", "suffix": "Jr."}),
    ("van der Meer, Anna", {"firstname": "Anna", "lastname": "van der Meer"}),
    (
        "Meier, Hans (Hansi) Karl",
        {"firstname": "Hans", "nickname": "Hansi", "middlename": "Karl", "lastname": "Meier"},
    ),
    ("Mustermann GmbH", {"company": "Mustermann GmbH"}),
    ("Müller & Söhne", {"company": "Müller & Söhne"}),
]

ENGLISH_TEST_CASES = [
    (
        "Mr. James (Jim) Morgan T. Smith",
        {
            "salutation": "Mr.",
            "firstname": "James",
            "nickname": "Jim",
            "middlename": "Morgan",
            "initials": "T.",
            "lastname": "Smith",
        },
    ),
    (
        "Dr. John A. Smith III",
        {"salutation": "Dr.", "firstname": "John", "initials": "A.", "lastname": "Smith", "suffix": "III"},
    ),
    ("Mr Smith", {"salutation": "Mr.", "lastname": "Smith"}),
    ("Smith, John Jr.", {"firstname": "John", "lastname": "Smith", "suffix": "Jr."}),
    ("Smith, John, Jr., PhD", {"firstname": "John", "lastname": "Smith", "suffix": "Jr. PhD"}),
    ("John (Big Jim) Smith", {"firstname": "John", "nickname": "Big Jim", "lastname": "Smith"}),
    ("JM Smith", {"initials": "JM", "lastname": "Smith"}),
    ("Acme Widgets Inc.", {"company": "Acme Widgets Inc."}),
]

# Names that are not companies, for the word count checks
WORD_COUNT_CASES = [
    "Peter Pan",
    "Herr Dr. Hans Peter Müller",
    "Herr Dr. Fritz Freiherr von Rathenburg",
    "Schuler, J. Peter M.",
    "Müller, Hans, Jr.",
    "Meier, Hans (Hansi) Karl",
    "van der Meer, Anna",
    "Prof. Dr. Ernst August Otto",
    "a b c d e f",
    "Schmidt,,",
    ",Hans",
    "Hans von Berg Müller",
    "Peter van der Berg Smit",
    "Berg von Hausen zu Alt, Hans",
    "Herr Prof. Dr. med. Dr. rer. nat. Fritz Julius Karl Freiherr von und zu Rathenburg vor der Isar",
    "Herr Prof. Dr. med. Dr. rer. nat. Fritz Julius Karl Freiherr von und zu Rathenburg vor der Isar, MdB",
]


def _run_cases(parser, cases):
    failed = 0
    for input_name, expected in cases:
        result = parser.parse(input_name).get_all()
        if result != expected:
            failed += 1
            print(f"FAILED: '{input_name}': expected {expected}, got {result}")
    return failed


def test_german_names_with_expected_results(german_parser):
    """Test German-table names with their expected components."""
    failed = _run_cases(german_parser, GERMAN_TEST_CASES)
    assert failed == 0, f"German name tests: {failed} failures out of {len(GERMAN_TEST_CASES)} tests"


def test_english_names_with_expected_results(english_parser):
    """Test English-table names with their expected components."""
    failed = _run_cases(english_parser, ENGLISH_TEST_CASES)
    assert failed == 0, f"English name tests: {failed} failures out of {len(ENGLISH_TEST_CASES)} tests"


def test_given_name_keeps_input_order():
    name = parse_name("Schuler, J. Peter M.")
    assert name.get_given_name() == "J. Peter M."


def test_full_name_puts_given_name_before_lastname():
    name = parse_name("Schuler, J. Peter M.")
    assert name.get_full_name() == "J. Peter M. Schuler"


def test_segments_are_concatenated_in_segment_order(german_parser):
    name = german_parser.parse("Müller, Hans, Jr.")
    assert [part.category for part in name.parts] == [Category.LASTNAME, Category.FIRSTNAME, Category.SUFFIX]
    assert name.get_complete_name() == "Hans Müller, Jr."


def test_company_short_circuit_yields_single_part(german_parser):
    name = german_parser.parse("Mustermann GmbH")
    assert name.parts == (Part(Category.COMPANY, "Mustermann GmbH"),)


def test_company_markers_are_ignored_in_comma_names(german_parser):
    name = german_parser.parse("Mustermann, Max")
    assert name.get_company() == ""
    assert name.get_lastname() == "Mustermann"
    assert name.get_firstname() == "Max"


def test_company_marker_matches_inside_words(german_parser):
    """Markers are plain substrings: the short legal form "ag" also fires inside a word."""
    name = german_parser.parse("Hagen Schmidt")
    assert name.get_company() == "Hagen Schmidt"


def test_complete_name_and_string_form(german_parser):
    name = german_parser.parse("Herr Dr. Fritz Freiherr von Rathenburg")
    assert str(name) == "Herr Dr. Fritz Freiherr von Rathenburg"
    assert name.get_complete_name() == "Dr. Fritz Freiherr von Rathenburg"


def test_vcard_export_from_parsed_name(german_parser):
    name = german_parser.parse("Anna van der Meer")
    assert name.get_vcard_array() == {
        "FN": "Anna van der Meer",
        "N": "Meer;Anna;;;van der",
        "NICKNAME": "",
        "ORG": "",
    }
    assert name.get_vcard_array(prefix=True)["N"] == "van der Meer;Anna;;;"


def test_every_word_ends_up_in_the_name(german_parser):
    """Parts plus leftover tokens always match the words of the comma-segmented input."""
    for input_name in WORD_COUNT_CASES:
        expected = sum(len(segment.split()) for segment in input_name.split(","))
        name = german_parser.parse(input_name)
        assert len(name) == expected, f"'{input_name}': {len(name)} parts for {expected} words"


def test_every_word_is_classified(german_parser):
    for input_name in WORD_COUNT_CASES:
        name = german_parser.parse(input_name)
        leftovers = [element for element in name.parts if isinstance(element, Token)]
        assert leftovers == [], f"'{input_name}' left unclassified words: {leftovers}"


def test_parsing_is_deterministic_and_parser_is_reusable(german_parser):
    for input_name, _ in GERMAN_TEST_CASES:
        first = german_parser.parse(input_name)
        second = german_parser.parse(input_name)
        assert first == second
        assert first == NameParser().parse(input_name)


def test_empty_input_yields_empty_name(german_parser):
    for input_name in ("", "   ", "\t\n", ","):
        name = german_parser.parse(input_name)
        assert len(name) == 0
        assert str(name) == ""


def test_empty_segments_contribute_nothing(german_parser):
    name = german_parser.parse("Schmidt,,")
    assert name.get_all() == {"lastname": "Schmidt"}

    name = german_parser.parse(",Hans")
    assert name.get_all() == {"firstname": "Hans"}


def test_every_segment_after_the_second_is_a_trailing_segment(english_parser):
    name = english_parser.parse("Smith, John, Jr., PhD")
    assert len(name) == 4
    assert name.get_suffix() == "Jr. PhD"


def test_suffix_survives_extra_trailing_segment(german_parser):
    name = german_parser.parse("Müller, Hans, Jr., extra")
    assert len(name) == 4
    assert name.get_suffix() == "Jr."
    assert [element.value for element in name.parts if isinstance(element, Token)] == ["extra"]


def test_split_segments_keeps_every_segment(german_parser):
    normalizer = NormalizationService(german_parser.config)
    assert normalizer.split_segments("Müller, Hans, Jr., PhD") == ("Müller", "Hans", "Jr.", "PhD")
    assert normalizer.split_segments("Schmidt,,") == ("Schmidt", "", "")
    assert normalizer.split_segments("Peter Pan") == ("Peter Pan",)


# (input, expected components) for lastnames running on after a lastname prefix
PREFIX_SPAN_CASES = [
    ("Hans von Berg Müller", {"firstname": "Hans", "lastname": "von Berg Müller"}),
    ("Peter van der Berg Smit", {"firstname": "Peter", "lastname": "van der Berg Smit"}),
    ("Hans Peter von Berg Müller", {"firstname": "Hans", "middlename": "Peter", "lastname": "von Berg Müller"}),
]


def test_words_after_lastname_prefix_join_the_lastname(german_parser):
    failed = _run_cases(german_parser, PREFIX_SPAN_CASES)
    assert failed == 0, f"Prefix span tests: {failed} failures out of {len(PREFIX_SPAN_CASES)} tests"

    name = german_parser.parse("Hans von Berg Müller")
    assert str(name) == "Hans von Berg Müller"
    assert name.get_lastname(pure=True) == "Berg Müller"


def test_surname_segment_claims_every_word_after_prefix(german_parser):
    name = german_parser.parse("Berg von Hausen zu Alt, Hans")
    assert name.get_lastname() == "von Hausen zu Alt"
    assert name.get_lastname_prefix() == "von zu"
    assert not [element for element in name.parts if isinstance(element, Token)]


def test_trailing_segment_only_knows_suffixes(german_parser):
    name = german_parser.parse("Eins, Zwei, Drei, Vier, Fünf")
    assert len(name) == 5
    assert name.get_all() == {"firstname": "Zwei", "lastname": "Eins"}
    assert [element.value for element in name.parts if isinstance(element, Token)] == ["Drei", "Vier", "Fünf"]


def test_only_one_title_phrase_per_pass(german_parser):
    """Titles are matched as one phrase; a second, separate title word falls through to the catch-alls."""
    name = german_parser.parse("Prof. Dr. Hans Meier")
    assert name.get_title() == "Prof."
    assert name.get_firstname() == "Dr."
    assert name.get_middlename() == "Hans"
    assert name.get_lastname() == "Meier"


def test_single_letters_are_initials_without_tables():
    parser = NameParser(NameParserConfig.create_default().with_languages())
    name = parser.parse("a, b c")
    assert all(isinstance(element, Part) for element in name.parts)
    assert [element.value for element in name.parts] == ["a", "b", "c"]


def test_non_string_input_raises(german_parser):
    with pytest.raises(TypeError):
        german_parser.parse(None)
    with pytest.raises(TypeError):
        german_parser.parse(["Peter", "Pan"])


def test_without_languages_catch_alls_still_classify():
    parser = NameParser(NameParserConfig.create_default().with_languages())
    name = parser.parse("Herr Hans Müller")
    assert name.get_all() == {"firstname": "Herr", "middlename": "Hans", "lastname": "Müller"}


def test_combined_languages(german_parser):
    parser = NameParser(NameParserConfig.create_default().with_languages(GERMAN, ENGLISH))
    assert parser.parse("Mr Hans Müller").get_salutation() == "Mr."
    assert parser.parse("Herr Hans Müller").get_salutation() == "Herr"
    assert german_parser.parse("Mr Hans Müller").get_salutation() == ""


def test_later_language_wins_on_key_collision():
    first = LanguageTables("first", {"dr": "Doktor", "herr": "Herr"}, {}, {}, {}, {}, {})
    second = LanguageTables("second", {"dr": "Dr."}, {}, {}, {}, {}, {})

    merged = merge_languages([first, second])
    assert dict(merged.salutations) == {"dr": "Dr.", "herr": "Herr"}
    assert merged.name == "first+second"

    merged = merge_languages([second, first])
    assert merged.salutations["dr"] == "Doktor"


def test_max_salutation_index():
    config = NameParserConfig.create_default().with_languages(ENGLISH)

    # A lone word is outside the default window of half the word count
    assert NameParser(config).parse("Mr").get_all() == {"firstname": "Mr"}
    assert NameParser(config.with_max_salutation_index(1)).parse("Mr").get_all() == {"salutation": "Mr."}


def test_max_combined_initials():
    config = NameParserConfig.create_default().with_languages(ENGLISH)

    assert NameParser(config).parse("JM Smith").get_initials() == "JM"
    name = NameParser(config.with_max_combined_initials(1)).parse("JM Smith")
    assert name.get_initials() == ""
    assert name.get_firstname() == "JM"


def test_custom_nickname_delimiters():
    config = NameParserConfig.create_default().with_nickname_delimiters({"«": "»"})
    name = NameParser(config).parse("Hans «Hansi» Meier")
    assert name.get_all() == {"firstname": "Hans", "nickname": "Hansi", "lastname": "Meier"}


def test_custom_whitespace():
    config = NameParserConfig.create_default().with_whitespace(" _")
    name = NameParser(config).parse("Peter__Pan")
    assert name.get_all() == {"firstname": "Peter", "lastname": "Pan"}


def test_apostrophe_variants_are_normalized(german_parser):
    for apostrophe in ("`", "´", "‘", "’", "ʼ", "＇"):
        name = german_parser.parse(f"Sean O{apostrophe}Brien")
        assert name.get_lastname() == "O'Brien", f"apostrophe {apostrophe!r} not normalized"


def test_invalid_configuration_raises():
    config = NameParserConfig.create_default()
    with pytest.raises(ValueError):
        config.with_max_salutation_index(-1)
    with pytest.raises(ValueError):
        config.with_max_combined_initials(-2)
    with pytest.raises(ValueError):
        config.with_nickname_delimiters({"((": "))"})
    with pytest.raises(ValueError):
        config.with_whitespace("")


def test_table_info(german_parser):
    info = german_parser.get_table_info()
    assert info.languages == ("german",)
    assert info.salutations == len(GERMAN.salutations)
    assert info.titles == len(GERMAN.titles)
    assert info.companies == len(GERMAN.companies)

    module_info = get_table_info()
    assert module_info["languages"] == ("german",)
    assert module_info["suffixes"] == len(GERMAN.suffixes)

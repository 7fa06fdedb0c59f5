"""
Personal and Organisation Name Parser

This module splits a free-text name string into its semantic components: salutation,
academic and professional titles, first name, middle names, initials, nickname, lastname
prefix, lastname, nobility extension, generational suffix, or, for organisations, a single
company designation.

## Overview

The core functionality is provided by the `NameParser` class, which runs a fixed chain of
classification passes ("mappers") over the words of a name:

1. **Normalization**: Canonical apostrophes, collapsed whitespace
2. **Segmentation**: Commas switch from "Firstname Lastname" to "Lastname, Firstname, Suffix"
3. **Company Detection**: Comma-free strings carrying an organisation marker are kept whole
4. **Mapping**: Each mapper claims the words it recognises; broad catch-alls run last
5. **Aggregation**: The classified words become a `Name` with per-category accessors

## Architecture

### Part Model
- **Token**: An unclassified word and its position in the input
- **Part**: A word tagged with a `Category` and an optional pre-normalized display form
- **Name**: The ordered, immutable result of one `parse` call

### Mappers
Every mapper takes a sequence of tokens and parts and returns a sequence of the same length.
Only tokens are ever replaced; a part claimed by an earlier mapper is never reclassified
or moved. Pipeline order is priority: specific passes (extensions, titles, prefixes,
salutations, suffixes, nicknames, initials) run before the lastname, firstname and
middlename catch-alls.

### Language Providers
A `LanguageTables` value carries six read-only lookup tables (salutations, suffixes,
lastname prefixes, extensions, titles, companies). Several providers merge by table union,
later providers winning on key collisions.

## Usage Examples

```python
from name_components.name_parser import parse_name

name = parse_name("Herr Dr. Hans Peter Müller")
name.get_salutation()   # "Herr"
name.get_title()        # "Dr."
name.get_firstname()    # "Hans"
name.get_middlename()   # "Peter"
name.get_lastname()     # "Müller"

name = parse_name("Schuler, J. Peter M.")
name.get_given_name()   # "J. Peter M."
name.get_full_name()    # "J. Peter M. Schuler"

from name_components.name_parser import ENGLISH, NameParser, NameParserConfig

parser = NameParser(NameParserConfig.create_default().with_languages(ENGLISH))
str(parser.parse("Mr. James (Jim) Morgan T. Smith"))  # "Mr. James (Jim) Morgan T. Smith"
```

## Error Handling

Parsing never fails for string input. Words nothing specific recognises are claimed by the
firstname, lastname and middlename catch-alls; empty input or empty comma segments simply
contribute no parts. Invalid configuration values raise `ValueError` when the configuration
is built, and non-string input raises `TypeError`.

## Thread Safety

Lookup tables are sorted once when a parser is built and are only read afterwards, so a
`NameParser` instance can be shared between threads and reused across `parse` calls.
"""

from __future__ import annotations
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from name_components.name_parser_data import (
    ENGLISH_COMPANIES,
    ENGLISH_EXTENSIONS,
    ENGLISH_LASTNAME_PREFIXES,
    ENGLISH_SALUTATIONS,
    ENGLISH_SUFFIXES,
    ENGLISH_TITLES,
    GERMAN_COMPANIES,
    GERMAN_EXTENSIONS,
    GERMAN_LASTNAME_PREFIXES,
    GERMAN_SALUTATIONS,
    GERMAN_SUFFIXES,
    GERMAN_TITLES,
)


# ════════════════════════════════════════════════════════════════════════════════
# CATEGORIES AND PART MODEL
# ════════════════════════════════════════════════════════════════════════════════


class Category(Enum):
    """Closed set of name component categories."""

    SALUTATION = "salutation"
    TITLE = "title"
    FIRSTNAME = "firstname"
    MIDDLENAME = "middlename"
    INITIAL = "initial"
    NICKNAME = "nickname"
    LASTNAME_PREFIX = "lastname_prefix"
    LASTNAME = "lastname"
    EXTENSION = "extension"
    SUFFIX = "suffix"
    COMPANY = "company"


GIVEN_NAME_CATEGORIES = frozenset({Category.FIRSTNAME, Category.MIDDLENAME, Category.INITIAL})
LASTNAME_CATEGORIES = frozenset({Category.LASTNAME_PREFIX, Category.LASTNAME})

_ALNUM_RUN_PATTERN = re.compile(r"[^\W_]+")


def camelcase(word: str) -> str:
    """
    Capitalize every run of letters and digits, unless the word already carries capitals.

    "peter" -> "Peter", "o'neil" -> "O'Neil", "McDonald" -> "McDonald"
    """
    if any(c.isupper() for c in word):
        return word
    return _ALNUM_RUN_PATTERN.sub(lambda m: m.group(0).capitalize(), word)


def _keep(word: str) -> str:
    return word


def _upper(word: str) -> str:
    return word.upper()


# Static dispatch from category to the display normalizer used when a part
# carries no pre-normalized form from a lookup table
_DISPLAY_NORMALIZERS: Mapping[Category, Callable[[str], str]] = MappingProxyType(
    {
        Category.SALUTATION: _keep,
        Category.TITLE: _keep,
        Category.FIRSTNAME: camelcase,
        Category.MIDDLENAME: camelcase,
        Category.INITIAL: _upper,
        Category.NICKNAME: camelcase,
        Category.LASTNAME_PREFIX: _keep,
        Category.LASTNAME: camelcase,
        Category.EXTENSION: _keep,
        Category.SUFFIX: _keep,
        Category.COMPANY: _keep,
    }
)


@dataclass(frozen=True)
class Token:
    """An unclassified word of the input and its position among all words."""

    value: str
    position: int = 0


@dataclass(frozen=True)
class Part:
    """A classified word: category, raw value and optional pre-normalized display form."""

    category: Category
    value: str
    normalized: Optional[str] = None

    @property
    def display(self) -> str:
        if self.normalized is not None:
            return self.normalized
        return _DISPLAY_NORMALIZERS[self.category](self.value)

    def __str__(self) -> str:
        return self.display


Element = Union[Token, Part]


def tokenize(segment: str, start: int = 0) -> List[Token]:
    """Split a normalized segment on single spaces, numbering words from `start`."""
    words = [word for word in segment.split(" ") if word]
    return [Token(word, start + offset) for offset, word in enumerate(words)]


# ════════════════════════════════════════════════════════════════════════════════
# LANGUAGE PROVIDERS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class LanguageTables:
    """Immutable language provider: six lookup tables from lowercase key to display form."""

    name: str
    salutations: Mapping[str, str]
    suffixes: Mapping[str, str]
    lastname_prefixes: Mapping[str, str]
    extensions: Mapping[str, str]
    titles: Mapping[str, str]
    companies: Mapping[str, str]

    @classmethod
    def empty(cls, name: str = "") -> "LanguageTables":
        """Factory for a provider without any entries."""
        blank = MappingProxyType({})
        return cls(name, blank, blank, blank, blank, blank, blank)


GERMAN = LanguageTables(
    name="german",
    salutations=GERMAN_SALUTATIONS,
    suffixes=GERMAN_SUFFIXES,
    lastname_prefixes=GERMAN_LASTNAME_PREFIXES,
    extensions=GERMAN_EXTENSIONS,
    titles=GERMAN_TITLES,
    companies=GERMAN_COMPANIES,
)

ENGLISH = LanguageTables(
    name="english",
    salutations=ENGLISH_SALUTATIONS,
    suffixes=ENGLISH_SUFFIXES,
    lastname_prefixes=ENGLISH_LASTNAME_PREFIXES,
    extensions=ENGLISH_EXTENSIONS,
    titles=ENGLISH_TITLES,
    companies=ENGLISH_COMPANIES,
)

_TABLE_FIELDS = ("salutations", "suffixes", "lastname_prefixes", "extensions", "titles", "companies")


def merge_languages(languages: Sequence[LanguageTables]) -> LanguageTables:
    """
    Combine language providers by table union.

    Providers are applied in order, so on a key collision the entry of the later
    provider replaces the earlier one. No providers at all yields empty tables.
    """
    if not languages:
        return LanguageTables.empty()

    merged: Dict[str, Dict[str, str]] = {field_name: {} for field_name in _TABLE_FIELDS}
    for language in languages:
        for field_name in _TABLE_FIELDS:
            table = merged[field_name]
            incoming = getattr(language, field_name)
            collisions = [key for key in incoming if key in table and table[key] != incoming[key]]
            if collisions:
                logging.debug(f"{language.name} overrides {len(collisions)} {field_name} entries: {collisions[:5]}")
            table.update(incoming)

    return LanguageTables(
        name="+".join(language.name for language in languages),
        **{field_name: MappingProxyType(table) for field_name, table in merged.items()},
    )


def sort_descending(table: Mapping[str, str]) -> Tuple[Tuple[str, str], ...]:
    """
    Order table entries most specific first.

    Entries are sorted by the word count of their canonical form, then by its length,
    both descending; entries that tie keep their table order.
    """
    return tuple(sorted(table.items(), key=lambda item: (len(item[1].split()), len(item[1])), reverse=True))


def lookup(table: Mapping[str, str], word: str) -> Optional[str]:
    """Canonical form of `word`: lowercase key first, then the lowercase key without dots."""
    key = word.lower()
    if key in table:
        return table[key]
    return table.get(key.replace(".", ""))


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════

DEFAULT_WHITESPACE = " \r\n\t"

DEFAULT_NICKNAME_DELIMITERS: Mapping[str, str] = MappingProxyType(
    {"(": ")", "[": "]", "{": "}", "<": ">", '"': '"', "'": "'"}
)

# Characters that look like apostrophes; all of them are read as U+0027
APOSTROPHE_VARIANTS = (
    "`"  # GRAVE ACCENT
    "´"  # ACUTE ACCENT
    "ʹ"  # MODIFIER LETTER PRIME
    "ʻ"  # MODIFIER LETTER TURNED COMMA
    "ʼ"  # MODIFIER LETTER APOSTROPHE
    "ʽ"  # MODIFIER LETTER REVERSED COMMA
    "ʾ"  # MODIFIER LETTER RIGHT HALF RING
    "ʿ"  # MODIFIER LETTER LEFT HALF RING
    "ˈ"  # MODIFIER LETTER VERTICAL LINE
    "ˊ"  # MODIFIER LETTER ACUTE ACCENT
    "ʹ"  # GREEK NUMERAL SIGN
    "΄"  # GREEK TONOS
    "՚"  # ARMENIAN APOSTROPHE
    "᾽"  # GREEK KORONIS
    "᾿"  # GREEK PSILI
    "‘"  # LEFT SINGLE QUOTATION MARK
    "’"  # RIGHT SINGLE QUOTATION MARK
    "‛"  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
    "′"  # PRIME
    "‵"  # REVERSED PRIME
    "Ꞌ"  # LATIN CAPITAL LETTER SALTILLO
    "ꞌ"  # LATIN SMALL LETTER SALTILLO
    "＇"  # FULLWIDTH APOSTROPHE
)


def _compile_whitespace(whitespace: str) -> re.Pattern[str]:
    return re.compile("[" + re.escape(whitespace) + "]+")


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable parser configuration with precompiled normalization tables."""

    languages: Tuple[LanguageTables, ...]
    whitespace: str
    nickname_delimiters: Mapping[str, str]
    max_salutation_index: int
    max_combined_initials: int

    # Precompiled normalization (derived from `whitespace` and the apostrophe list)
    whitespace_pattern: re.Pattern[str]
    apostrophe_tr: Dict[int, str]

    def __post_init__(self):
        if not isinstance(self.whitespace, str) or not self.whitespace:
            raise ValueError("whitespace must be a non-empty string of characters")
        if self.max_salutation_index < 0:
            raise ValueError(f"max_salutation_index must be >= 0, got {self.max_salutation_index}")
        if self.max_combined_initials < 0:
            raise ValueError(f"max_combined_initials must be >= 0, got {self.max_combined_initials}")
        for opening, closing in self.nickname_delimiters.items():
            if not (isinstance(opening, str) and isinstance(closing, str) and len(opening) == 1 and len(closing) == 1):
                raise ValueError(f"nickname delimiters must be single characters, got {opening!r} -> {closing!r}")

    @classmethod
    def create_default(cls) -> "NameParserConfig":
        """Factory method for the default configuration (German word tables)."""
        return cls(
            languages=(GERMAN,),
            whitespace=DEFAULT_WHITESPACE,
            nickname_delimiters=DEFAULT_NICKNAME_DELIMITERS,
            max_salutation_index=0,
            max_combined_initials=2,
            whitespace_pattern=_compile_whitespace(DEFAULT_WHITESPACE),
            apostrophe_tr=str.maketrans({c: "'" for c in APOSTROPHE_VARIANTS}),
        )

    def with_languages(self, *languages: LanguageTables) -> "NameParserConfig":
        """Immutable update of the language providers, merged in the given order."""
        return replace(self, languages=tuple(languages))

    def with_whitespace(self, whitespace: str) -> "NameParserConfig":
        """Immutable update of the characters treated as whitespace."""
        if not isinstance(whitespace, str) or not whitespace:
            raise ValueError("whitespace must be a non-empty string of characters")
        return replace(self, whitespace=whitespace, whitespace_pattern=_compile_whitespace(whitespace))

    def with_nickname_delimiters(self, delimiters: Mapping[str, str]) -> "NameParserConfig":
        """Immutable update of the opening -> closing nickname delimiters."""
        return replace(self, nickname_delimiters=MappingProxyType(dict(delimiters)))

    def with_max_salutation_index(self, max_salutation_index: int) -> "NameParserConfig":
        """Salutations are recognised up to this word index; 0 means half the word count."""
        return replace(self, max_salutation_index=max_salutation_index)

    def with_max_combined_initials(self, max_combined_initials: int) -> "NameParserConfig":
        """Upper bound of letters in one all-uppercase word read as an initials run."""
        return replace(self, max_combined_initials=max_combined_initials)


@dataclass(frozen=True)
class TableInfo:
    """Immutable summary of the merged lookup tables of a parser."""

    languages: Tuple[str, ...]
    salutations: int
    suffixes: int
    lastname_prefixes: int
    extensions: int
    titles: int
    companies: int


# ════════════════════════════════════════════════════════════════════════════════
# NORMALIZATION SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class NormalizationService:
    """Lexical cleanup and comma segmentation of raw name strings."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def apply(self, raw_name: str) -> str:
        """Map apostrophe look-alikes to U+0027, collapse whitespace runs and trim."""
        text = raw_name.translate(self._config.apostrophe_tr)
        return self._config.whitespace_pattern.sub(" ", text).strip()

    def split_segments(self, normalized: str) -> Tuple[str, ...]:
        """Split on commas into trimmed segments; a blank segment is the empty string."""
        return tuple(segment.strip() for segment in normalized.split(","))


# ════════════════════════════════════════════════════════════════════════════════
# MAPPERS
# ════════════════════════════════════════════════════════════════════════════════


class Mapper(ABC):
    """
    One classification pass.

    `map` returns a new sequence of the same length in which zero or more tokens were
    replaced by parts of the mapper's category. Parts are never touched.
    """

    @abstractmethod
    def map(self, parts: Sequence[Element]) -> List[Element]:
        """Classify the tokens this pass recognises."""
        pass


class ExtensionMapper(Mapper):
    """Nobility predicates such as "Freiherr", wherever they occur."""

    def __init__(self, extensions: Mapping[str, str]):
        self._extensions = frozenset(extensions.values())

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        for k, element in enumerate(result):
            if isinstance(element, Token) and element.value in self._extensions:
                result[k] = Part(Category.EXTENSION, element.value)
        return result


class MultipartMapper(Mapper):
    """
    Phrases of one or more words, such as "Dr. rer. nat." or "van der".

    Phrases are tried most specific first. For each phrase, every word is looked up as
    the first token with exactly that value anywhere in the sequence; the words do not
    have to be adjacent or in phrase order. The first phrase whose words are all found
    is applied and the pass ends, so at most one phrase is mapped per call.
    """

    def __init__(self, samples: Mapping[str, str], category: Category):
        self._category = category
        self._phrases: Tuple[Tuple[str, ...], ...] = tuple(
            tuple(canonical.split(" ")) for _, canonical in sort_descending(samples)
        )

    @property
    def category(self) -> Category:
        return self._category

    def map(self, parts: Sequence[Element]) -> List[Element]:
        for fragments in self._phrases:
            positions = []
            for fragment in fragments:
                position = self._find_token(parts, fragment)
                if position is None:
                    break
                positions.append(position)
            else:
                mapped = self._map_positions(positions, parts)
                if mapped is not None:
                    return mapped

        return list(parts)

    @staticmethod
    def _find_token(parts: Sequence[Element], fragment: str) -> Optional[int]:
        for k, element in enumerate(parts):
            if isinstance(element, Token) and element.value == fragment:
                return k
        return None

    def _map_positions(self, positions: List[int], parts: Sequence[Element]) -> Optional[List[Element]]:
        """Claim all positions or none; a position claimed twice voids the phrase."""
        result = list(parts)
        for position in positions:
            element = result[position]
            if isinstance(element, Part):
                return None
            result[position] = Part(self._category, element.value)
        return result


class NicknameMapper(Mapper):
    """Words wrapped in delimiter pairs, e.g. "(Jim)" or '"Big Jim"'."""

    def __init__(self, delimiters: Mapping[str, str]):
        self._delimiters = dict(delimiters)

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        closing: Optional[str] = None

        for k, element in enumerate(result):
            if isinstance(element, Part):
                continue

            value = element.value
            if closing is None:
                if not value or value[0] not in self._delimiters:
                    continue
                closing = self._delimiters[value[0]]
                value = value[1:]

            if value.endswith(closing):
                value = value[: -len(closing)]
                closing = None

            result[k] = Part(Category.NICKNAME, value)

        return result


class SalutationMapper(Mapper):
    """Salutations within the leading words, normalized to their display form ("mr" -> "Mr.")."""

    def __init__(self, salutations: Mapping[str, str], max_index: int = 0):
        self._salutations = salutations
        self._max_index = max_index

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        limit = self._max_index if self._max_index > 0 else len(result) // 2

        for k in range(min(limit, len(result))):
            element = result[k]
            if isinstance(element, Part):
                continue
            canonical = lookup(self._salutations, element.value)
            if canonical is not None:
                result[k] = Part(Category.SALUTATION, element.value, canonical)

        return result


class SuffixMapper(Mapper):
    """
    Trailing generational or academic suffixes such as "Jr." or "III".

    Args:
        suffixes: lookup table of known suffixes
        match_single_part: a sequence of exactly one word may be a suffix
        reserved_parts: number of leading positions never read as a suffix

    The scan walks backwards from the last position and stops at the first element
    that is not an unclassified suffix word.
    """

    def __init__(self, suffixes: Mapping[str, str], match_single_part: bool = False, reserved_parts: int = 2):
        if reserved_parts < 0:
            raise ValueError(f"reserved_parts must be >= 0, got {reserved_parts}")
        self._suffixes = suffixes
        self._match_single_part = match_single_part
        self._reserved_parts = reserved_parts

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)

        if self._match_single_part and len(result) == 1:
            self._map_position(result, 0)
            return result

        for k in range(len(result) - 1, self._reserved_parts - 1, -1):
            if not self._map_position(result, k):
                break

        return result

    def _map_position(self, result: List[Element], k: int) -> bool:
        element = result[k]
        if isinstance(element, Part):
            return False
        canonical = lookup(self._suffixes, element.value)
        if canonical is None:
            return False
        result[k] = Part(Category.SUFFIX, element.value, canonical)
        return True


class InitialMapper(Mapper):
    """
    Initials: "J", "J." and short all-uppercase runs such as "JM" or "J.M.".

    An all-uppercase word with at most `max_combined` letters (dots ignored) becomes a
    single initials part. The last word is left alone unless `match_last_part` is set,
    because a trailing single letter is more often a lastname abbreviation.
    """

    def __init__(self, max_combined: int = 2, match_last_part: bool = False):
        self._max_combined = max_combined
        self._match_last_part = match_last_part

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        last = len(result) - 1

        for k, element in enumerate(result):
            if isinstance(element, Part):
                continue
            if not self._match_last_part and k == last:
                continue
            if self._is_initial(element.value):
                result[k] = Part(Category.INITIAL, element.value)

        return result

    def _is_initial(self, word: str) -> bool:
        if len(word) == 1:
            return word.isalpha()
        if len(word) == 2 and word[0].isalpha() and word[1] == ".":
            return True
        if word.isupper():
            letters = word.replace(".", "")
            return letters.isalpha() and 1 < len(letters) <= self._max_combined
        return False


class LastnameMapper(Mapper):
    """
    The lastname catch-all.

    By default the last unclassified word becomes the lastname, provided the sequence
    has at least two elements. When a lastname prefix stands between an unclassified
    word (the firstname to be) and the lastname, the words in between belong to the
    lastname as well: "Hans von Berg Müller" -> "von Berg Müller".

    In prefix-aware mode (used for the part of a "Lastname, Firstname" string before
    the comma) a single word is accepted too, and every unclassified word after the
    first lastname prefix is claimed: "Berg von Hausen zu Alt" -> "von Hausen zu Alt".
    """

    def __init__(self, prefix_aware: bool = False):
        self._prefix_aware = prefix_aware

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        prefix_at = self._first_prefix(result)

        if self._prefix_aware:
            if prefix_at is not None and self._claim(result, prefix_at + 1, len(result)):
                return result
        elif len(result) < 2:
            return result

        lastname_at = next((k for k in range(len(result) - 1, -1, -1) if isinstance(result[k], Token)), None)
        if lastname_at is None:
            return result
        result[lastname_at] = Part(Category.LASTNAME, result[lastname_at].value)

        if prefix_at is not None and prefix_at < lastname_at:
            if any(isinstance(element, Token) for element in result[:prefix_at]):
                self._claim(result, prefix_at + 1, lastname_at)

        return result

    @staticmethod
    def _first_prefix(parts: Sequence[Element]) -> Optional[int]:
        return next(
            (
                k
                for k, element in enumerate(parts)
                if isinstance(element, Part) and element.category == Category.LASTNAME_PREFIX
            ),
            None,
        )

    @staticmethod
    def _claim(result: List[Element], start: int, end: int) -> bool:
        """Turn the tokens in [start, end) into lastname parts; True if any were claimed."""
        claimed = False
        for k in range(start, end):
            if isinstance(result[k], Token):
                result[k] = Part(Category.LASTNAME, result[k].value)
                claimed = True
        return claimed


class FirstnameMapper(Mapper):
    """The first unclassified word is the firstname."""

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        for k, element in enumerate(result):
            if isinstance(element, Token):
                result[k] = Part(Category.FIRSTNAME, element.value)
                break
        return result


class MiddlenameMapper(Mapper):
    """
    Unclassified words after the firstname and before the lastname.

    Parts in between, such as initials or a lastname prefix, are stepped over. Without
    a detected lastname the final element stays unclaimed, unless
    `map_without_lastname` is set (the part of "Lastname, Firstname Middle" after the
    comma has no lastname of its own).
    """

    def __init__(self, map_without_lastname: bool = False):
        self._map_without_lastname = map_without_lastname

    def map(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        minimum = 2 if self._map_without_lastname else 3
        if len(result) < minimum:
            return result

        start = next(
            (
                k
                for k, element in enumerate(result)
                if isinstance(element, Part) and element.category == Category.FIRSTNAME
            ),
            None,
        )
        if start is None:
            return result

        end = next(
            (
                k
                for k in range(start + 1, len(result))
                if isinstance(result[k], Part) and result[k].category == Category.LASTNAME
            ),
            len(result) if self._map_without_lastname else len(result) - 1,
        )
        for k in range(start + 1, end):
            element = result[k]
            if isinstance(element, Token):
                result[k] = Part(Category.MIDDLENAME, element.value)

        return result


class CompanyDetector:
    """Recognises organisation names by a marker occurring anywhere in the string."""

    def __init__(self, companies: Mapping[str, str]):
        self._companies = sort_descending(companies)

    def detect(self, name: str) -> Optional[Part]:
        """Return the whole string as a company part, or None when no marker occurs."""
        if not name:
            return None
        for key, canonical in self._companies:
            if canonical in name or key in name:
                logging.debug(f"'{name}' treated as company (marker {canonical!r})")
                return Part(Category.COMPANY, name)
        return None


# ════════════════════════════════════════════════════════════════════════════════
# PIPELINE
# ════════════════════════════════════════════════════════════════════════════════


class MapperPipeline:
    """Fixed, ordered list of mappers; each mapper sees the output of the previous one."""

    def __init__(self, mappers: Sequence[Mapper]):
        self._mappers: Tuple[Mapper, ...] = tuple(mappers)

    @property
    def mappers(self) -> Tuple[Mapper, ...]:
        return self._mappers

    def run(self, parts: Sequence[Element]) -> List[Element]:
        result = list(parts)
        for mapper in self._mappers:
            result = mapper.map(result)
        return result


class NameParser:
    """Main name parsing service."""

    def __init__(self, config: Optional[NameParserConfig] = None):
        self._config = config or NameParserConfig.create_default()
        self._tables = merge_languages(self._config.languages)
        self._normalizer = NormalizationService(self._config)
        self._company_detector = CompanyDetector(self._tables.companies)

        # Mapper tables are sorted once here and only read by parse()
        self._default_pipeline = self._build_default_pipeline()
        self._surname_pipeline = self._build_surname_pipeline()
        self._given_name_pipeline = self._build_given_name_pipeline()
        self._trailing_pipeline = self._build_trailing_pipeline()

        logging.debug(f"Name parser ready for languages: {self._tables.name or '(none)'}")

    @property
    def config(self) -> NameParserConfig:
        return self._config

    def _build_default_pipeline(self) -> MapperPipeline:
        tables = self._tables
        return MapperPipeline(
            [
                ExtensionMapper(tables.extensions),
                MultipartMapper(tables.titles, Category.TITLE),
                MultipartMapper(tables.lastname_prefixes, Category.LASTNAME_PREFIX),
                NicknameMapper(self._config.nickname_delimiters),
                SalutationMapper(tables.salutations, self._config.max_salutation_index),
                SuffixMapper(tables.suffixes),
                InitialMapper(self._config.max_combined_initials),
                LastnameMapper(),
                FirstnameMapper(),
                MiddlenameMapper(),
            ]
        )

    def _build_surname_pipeline(self) -> MapperPipeline:
        """Mappers for the words before the first comma ("Lastname, ...")."""
        tables = self._tables
        return MapperPipeline(
            [
                ExtensionMapper(tables.extensions),
                MultipartMapper(tables.titles, Category.TITLE),
                MultipartMapper(tables.lastname_prefixes, Category.LASTNAME_PREFIX),
                SalutationMapper(tables.salutations, self._config.max_salutation_index),
                SuffixMapper(tables.suffixes, match_single_part=False, reserved_parts=2),
                LastnameMapper(prefix_aware=True),
                FirstnameMapper(),
                MiddlenameMapper(),
            ]
        )

    def _build_given_name_pipeline(self) -> MapperPipeline:
        """Mappers for the words after the first comma ("..., Firstname Middle")."""
        tables = self._tables
        return MapperPipeline(
            [
                ExtensionMapper(tables.extensions),
                MultipartMapper(tables.titles, Category.TITLE),
                MultipartMapper(tables.lastname_prefixes, Category.LASTNAME_PREFIX),
                SalutationMapper(tables.salutations, self._config.max_salutation_index),
                SuffixMapper(tables.suffixes, match_single_part=True, reserved_parts=1),
                NicknameMapper(self._config.nickname_delimiters),
                InitialMapper(self._config.max_combined_initials, match_last_part=True),
                FirstnameMapper(),
                MiddlenameMapper(map_without_lastname=True),
            ]
        )

    def _build_trailing_pipeline(self) -> MapperPipeline:
        """Mappers for the words after the second comma (", Suffix")."""
        return MapperPipeline([SuffixMapper(self._tables.suffixes, match_single_part=True, reserved_parts=0)])

    def get_table_info(self) -> TableInfo:
        """Get sizes of the merged lookup tables."""
        tables = self._tables
        return TableInfo(
            languages=tuple(language.name for language in self._config.languages),
            salutations=len(tables.salutations),
            suffixes=len(tables.suffixes),
            lastname_prefixes=len(tables.lastname_prefixes),
            extensions=len(tables.extensions),
            titles=len(tables.titles),
            companies=len(tables.companies),
        )

    def parse(self, name: str) -> Name:
        """
        Main API method: split a name string into classified parts.

        Comma-free input is either a company (kept whole) or run through the default
        pipeline. With commas, the segments are parsed as "Lastname, Firstname, Suffix"
        and concatenated in segment order.
        """
        if not isinstance(name, str):
            raise TypeError(f"name must be a string, got {type(name).__name__}")

        normalized = self._normalizer.apply(name)
        segments = self._normalizer.split_segments(normalized)

        if len(segments) > 1:
            return self._parse_split_name(segments)

        company = self._company_detector.detect(normalized)
        if company is not None:
            return Name([company])

        return Name(self._default_pipeline.run(tokenize(normalized)))

    def _parse_split_name(self, segments: Tuple[str, ...]) -> Name:
        """
        "Lastname, Firstname Middle, Suffix": one pipeline per segment, results
        concatenated in segment order. Every segment after the second is a trailing
        segment of its own ("Müller, Hans, Jr., PhD").
        """
        surname_tokens = tokenize(segments[0])
        given_tokens = tokenize(segments[1], start=len(surname_tokens))

        parts = self._surname_pipeline.run(surname_tokens) + self._given_name_pipeline.run(given_tokens)
        for segment in segments[2:]:
            parts += self._trailing_pipeline.run(tokenize(segment, start=len(parts)))

        return Name(parts)


# ════════════════════════════════════════════════════════════════════════════════
# NAME AGGREGATE
# ════════════════════════════════════════════════════════════════════════════════


class Name:
    """The classified parts of one name, in input order, with per-category accessors."""

    def __init__(self, parts: Sequence[Element] = ()):
        self._parts: Tuple[Element, ...] = tuple(parts)

    @property
    def parts(self) -> Tuple[Element, ...]:
        return self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def __repr__(self) -> str:
        return f"Name({list(self._parts)!r})"

    def __str__(self) -> str:
        return " ".join(self.get_all(formatted=True).values())

    def _export(self, categories) -> str:
        return " ".join(
            element.display
            for element in self._parts
            if isinstance(element, Part) and element.category in categories and element.display
        )

    def get_all(self, formatted: bool = False) -> Dict[str, str]:
        """All non-empty components in display order; `formatted` wraps the nickname."""
        values = {
            "salutation": self.get_salutation(),
            "title": self.get_title(),
            "firstname": self.get_firstname(),
            "nickname": self.get_nickname(wrap=formatted),
            "middlename": self.get_middlename(),
            "initials": self.get_initials(),
            "extension": self.get_extension(),
            "lastname": self.get_lastname(),
            "suffix": self.get_suffix(),
            "company": self.get_company(),
        }
        return {key: value for key, value in values.items() if value}

    def get_salutation(self) -> str:
        return self._export({Category.SALUTATION})

    def get_title(self) -> str:
        return self._export({Category.TITLE})

    def get_firstname(self) -> str:
        return self._export({Category.FIRSTNAME})

    def get_middlename(self) -> str:
        return self._export({Category.MIDDLENAME})

    def get_initials(self) -> str:
        return self._export({Category.INITIAL})

    def get_nickname(self, wrap: bool = False) -> str:
        nickname = self._export({Category.NICKNAME})
        if wrap and nickname:
            return f"({nickname})"
        return nickname

    def get_lastname_prefix(self) -> str:
        return self._export({Category.LASTNAME_PREFIX})

    def get_lastname(self, pure: bool = False) -> str:
        """The lastname including its prefix; `pure` leaves the prefix out."""
        if pure:
            return self._export({Category.LASTNAME})
        return self._export(LASTNAME_CATEGORIES)

    def get_extension(self) -> str:
        return self._export({Category.EXTENSION})

    def get_suffix(self) -> str:
        return self._export({Category.SUFFIX})

    def get_company(self) -> str:
        return self._export({Category.COMPANY})

    def get_given_name(self) -> str:
        """Firstname, middle names and initials in the order they were entered."""
        return self._export(GIVEN_NAME_CATEGORIES)

    def get_full_name(self) -> str:
        """The given name followed by the lastname including any prefix."""
        return " ".join(filter(None, [self.get_given_name(), self.get_lastname()]))

    def get_complete_name(self) -> str:
        """Title, given names, extension and lastname on one line, then ", suffix"."""
        complete_name = " ".join(
            filter(
                None,
                [
                    self.get_title(),
                    self.get_firstname(),
                    self.get_middlename(),
                    self.get_initials(),
                    self.get_extension(),
                    self.get_lastname_prefix(),
                    self.get_lastname(pure=True),
                ],
            )
        )
        suffix = self.get_suffix()
        if suffix:
            return f"{complete_name}, {suffix}" if complete_name else suffix
        return complete_name

    def get_vcard_array(self, prefix: bool = False) -> Dict[str, str]:
        """
        Contact card properties FN, N, NICKNAME and ORG (RFC 6350, section 6.2.2).

        N holds five ';'-separated fields: family names, given names, additional names,
        honorific prefixes and honorific suffixes. `prefix` decides where a lastname
        prefix goes:

            True:  Richard Mac Dougall -> N: Mac Dougall;Richard;;;
            False: Otto von Bismarck   -> N: Bismarck;Otto;;;von

        Which one is right depends on the origin of the name, so it is left to the caller.
        """
        company = self.get_company()
        if company:
            return {"FN": company, "N": "", "NICKNAME": self.get_nickname(), "ORG": company}

        if prefix:
            family_names = " ".join(filter(None, [self.get_lastname_prefix(), self.get_lastname(pure=True)]))
            honorific_prefix = ""
        else:
            family_names = self.get_lastname(pure=True)
            honorific_prefix = self.get_lastname_prefix()

        name_fields = ";".join(
            [
                family_names,
                self.get_firstname(),
                ",".join(filter(None, [self.get_middlename().replace(" ", ","), self.get_initials()])),
                ",".join(filter(None, [self.get_salutation(), self.get_title()])),
                ",".join(filter(None, [self.get_extension(), honorific_prefix, self.get_suffix()])),
            ]
        )

        return {
            "FN": self.get_complete_name(),
            "N": name_fields,
            "NICKNAME": self.get_nickname(),
            "ORG": company,
        }


# Global parser instance for module-level functions
_global_parser: Optional[NameParser] = None


def _get_global_parser() -> NameParser:
    """Get or create the global parser instance."""
    global _global_parser
    if _global_parser is None:
        _global_parser = NameParser()
    return _global_parser


def parse_name(name: str) -> Name:
    """
    Module-level convenience function using the default (German) configuration.

    Args:
        name: Input name string

    Returns:
        The classified `Name`
    """
    return _get_global_parser().parse(name)


def get_table_info() -> Dict[str, Union[Tuple[str, ...], int]]:
    """Get table sizes of the global parser as a dictionary."""
    table_info = _get_global_parser().get_table_info()
    return {
        "languages": table_info.languages,
        "salutations": table_info.salutations,
        "suffixes": table_info.suffixes,
        "lastname_prefixes": table_info.lastname_prefixes,
        "extensions": table_info.extensions,
        "titles": table_info.titles,
        "companies": table_info.companies,
    }

from name_components.name_parser import (
    ENGLISH,
    GERMAN,
    Category,
    LanguageTables,
    Name,
    NameParser,
    NameParserConfig,
    Part,
    Token,
    parse_name,
)

__all__ = [
    "ENGLISH",
    "GERMAN",
    "Category",
    "LanguageTables",
    "Name",
    "NameParser",
    "NameParserConfig",
    "Part",
    "Token",
    "parse_name",
]

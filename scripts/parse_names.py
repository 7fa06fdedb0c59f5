"""
Parse names given on the command line or read line by line from a file.

Prints one JSON object per name: the classified components, or the contact card
properties with --vcard.
"""

import sys
import json
import logging
import argparse

from name_components.name_parser import ENGLISH, GERMAN, NameParser, NameParserConfig

LANGUAGES = {"german": GERMAN, "english": ENGLISH}

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Split personal and company names into their components.")
    parser.add_argument("names", nargs="*", help="Names to parse. Quote names that contain blanks.")
    parser.add_argument("--input_path", type=str, default=None, help="Text file with one name per line.")
    parser.add_argument(
        "--language",
        action="append",
        choices=sorted(LANGUAGES),
        help="Word tables to use; repeat to combine (later ones win). Defaults to german.",
    )
    parser.add_argument("--vcard", action="store_true", help="Print contact card properties instead of components.")
    parser.add_argument(
        "--prefix_in_family_name",
        action="store_true",
        help="With --vcard, keep lastname prefixes in the family name field.",
    )
    parser.add_argument("--max_salutation_index", type=int, default=0, help="0 means half the word count.")
    parser.add_argument("--max_combined_initials", type=int, default=2, help="Letters in one all-uppercase initials run.")
    parser.add_argument("--verbose", action="store_true", help="Log debug information to stderr.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = (
        NameParserConfig.create_default()
        .with_languages(*(LANGUAGES[language] for language in (args.language or ["german"])))
        .with_max_salutation_index(args.max_salutation_index)
        .with_max_combined_initials(args.max_combined_initials)
    )
    name_parser = NameParser(config)

    names = list(args.names)
    if args.input_path is not None:
        with open(args.input_path, encoding="utf-8") as f:
            names.extend(line.rstrip("\n") for line in f if line.strip())

    if not names:
        parser.error("no names given")

    for raw_name in names:
        name = name_parser.parse(raw_name)
        if args.vcard:
            output = name.get_vcard_array(prefix=args.prefix_in_family_name)
        else:
            output = name.get_all()
        sys.stdout.write(json.dumps({"input": raw_name, **output}, ensure_ascii=False) + "\n")

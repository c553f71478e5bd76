#!/usr/bin/env python3
"""
Example script demonstrating how raw database records become entries.
"""

import os
import sys

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from folkets.core import Language, ParseError, parse
from folkets.rendering import render_entry

RAW_RECORD = {
    "word": "barn",
    "types": "nn",
    "translations": "child*kid#informal",
    "inflections": "barnet*barn*barnen",
    "examples": "ett barn föds#a child is born*barnen leker#the children are playing",
    "definition": "",
    "explanation": "",
    "phonetic": "bɑːrn",
    "synonyms": "unge",
    "saldos": "w1#i1#a1",
    "comparisons": "",
    "antonyms": "",
    "use": "",
    "variant": "",
    "idioms": "",
    "derivations": "",
    "compounds": "barnvagn#pram",
}


def demonstrate_parsing():
    """Parse one record and walk its fields."""
    print("\n=== Parsed Entry ===")

    entry = parse(RAW_RECORD)
    print(f"Word: {entry.word} /{entry.phonetic}/ ({entry.format_word_types()})")

    print("Translations:")
    for item in entry.translations:
        print(f"  - {item.word}" + (f" [{item.comment}]" if item.comment else ""))

    print("Examples:")
    for item in entry.examples:
        print(f"  - {item.value} = {item.translation}")

    print(f"Explanation present: {entry.has_explanation}")
    print(f"Saldo links worth showing: {len(entry.saldo_links.valid_links())}")


def demonstrate_rendering():
    """Render the entry the way the viewer shows it."""
    print("\n=== Rendered Entry ===\n")
    print(render_entry(parse(RAW_RECORD)))


def demonstrate_errors():
    """Show the two ways a record can fail."""
    print("\n=== Failures ===")

    broken = dict(RAW_RECORD, types="nn,zz")
    try:
        parse(broken)
    except ParseError as exc:
        print(f"  {type(exc).__name__}: {exc}")

    incomplete = {key: value for key, value in RAW_RECORD.items() if key != "saldos"}
    try:
        parse(incomplete)
    except ParseError as exc:
        print(f"  {type(exc).__name__}: {exc}")

    # Language codes fall back instead of failing
    print(f"  Language for 'de': {Language.from_language_code('de').name}")


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_rendering()
    demonstrate_errors()

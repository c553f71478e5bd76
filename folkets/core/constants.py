"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Field delimiters used by the lexical database
ASTERISK_SEPARATOR = "*"  # between independent items of one field
HASH_SEPARATOR = "#"  # between a value and its translation or comment
COMMA_SEPARATOR = ","  # between word type codes

# Database columns
REQUIRED_FIELDS = (
    "word",
    "types",
    "translations",
    "inflections",
    "examples",
    "definition",
    "explanation",
    "phonetic",
    "synonyms",
    "saldos",
    "comparisons",
    "antonyms",
    "use",
    "variant",
    "idioms",
    "derivations",
    "compounds",
)

# Defaults
DEFAULT_DATABASE = "folkets.db"
DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SEARCH_LIMIT = 20

# Display
WORD_TYPE_DISPLAY_SEPARATOR = ", "
PAIR_DISPLAY_SEPARATOR = " - "
SECTION_TITLES = {
    "translations": "Translations",
    "definition": "Definition",
    "explanation": "Explanation",
    "examples": "Examples",
    "antonyms": "Antonyms",
    "compounds": "Compounds",
    "derivations": "Derivations",
    "idioms": "Idioms",
    "usage": "Usage",
    "variant": "Variant",
    "comment": "Comment",
    "inflections": "Inflections",
    "synonyms": "Synonyms",
    "compare_with": "Compare with",
    "saldo_links": "Saldo",
}

# Error messages
ERROR_ENTRY_UNAVAILABLE = "Entry unavailable"
ERROR_DATABASE_MISSING = "Dictionary database not found"

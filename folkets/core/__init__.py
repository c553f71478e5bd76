"""
Core Package.

This package provides the record parsing layer of the folkets package.
"""

from folkets.core.errors import (
    MissingFieldError,
    ParseError,
    StoreError,
    UnrecognizedCodeError,
)
from folkets.core.lexical import (
    Language,
    WordType,
    format_word_types_for_display,
)
from folkets.core.models import (
    Entry,
    SaldoLink,
    SaldoLinks,
    ValuesWithTranslations,
    ValueWithTranslation,
    WordsWithComments,
    WordWithComment,
)
from folkets.core.parsing import (
    parse,
    parse_entry,
    parse_saldo_link,
    parse_saldo_links,
    parse_value_with_translation,
    parse_values_with_translations,
    parse_word_types,
    parse_words_with_comments,
)

__all__ = [
    # Errors
    "ParseError",
    "MissingFieldError",
    "UnrecognizedCodeError",
    "StoreError",
    # Enumerations
    "WordType",
    "Language",
    "format_word_types_for_display",
    # Models
    "Entry",
    "ValueWithTranslation",
    "ValuesWithTranslations",
    "WordWithComment",
    "WordsWithComments",
    "SaldoLink",
    "SaldoLinks",
    # Parsing
    "parse",
    "parse_entry",
    "parse_value_with_translation",
    "parse_values_with_translations",
    "parse_words_with_comments",
    "parse_saldo_link",
    "parse_saldo_links",
    "parse_word_types",
]

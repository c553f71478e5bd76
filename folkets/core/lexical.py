"""
Core lexical enumerations for the Folkets database.

This module defines the closed set of word types used by the lexical store
and the two language datasets an entry can be looked up in, together with the
display and table mappings attached to each member.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from folkets.core.constants import WORD_TYPE_DISPLAY_SEPARATOR
from folkets.core.errors import UnrecognizedCodeError

logger = logging.getLogger(__name__)


class WordType(str, Enum):
    """Grammatical categories, valued by the short code stored in the database."""

    NOUN = "nn"
    VERB = "vb"
    ADJECTIVE = "jj"
    ADVERB = "ab"
    PRONOUN = "pn"
    PREPOSITION = "pp"
    CONJUNCTION = "kn"
    SUBJUNCTION = "sn"
    INTERJECTION = "in"
    NUMERAL = "rg"
    ORDINAL = "ro"
    PROPER_NOUN = "pm"
    INFINITIVE_MARKER = "ie"
    ABBREVIATION = "abbrev"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    ARTICLE = "article"
    INFIX = "infix"

    @classmethod
    def lookup(cls, code: str) -> WordType:
        """Find the word type for a database code.

        Unknown codes mean the dataset and the parser disagree, so this never
        falls back to a default.

        Args:
            code: Short code, e.g. "nn"

        Returns:
            The matching WordType

        Raises:
            UnrecognizedCodeError: If no member has this code
        """
        for word_type in cls:
            if word_type.value == code:
                return word_type
        raise UnrecognizedCodeError(code)

    @property
    def label(self) -> str:
        """Human readable name, e.g. "noun"."""
        return WORD_TYPE_DISPLAY_MAP[self]


class Language(str, Enum):
    """Source language of a lookup; each has its own table in the database."""

    ENGLISH = "en"
    SWEDISH = "sv"

    @property
    def code(self) -> str:
        return self.value

    @property
    def table_name(self) -> str:
        return LANGUAGE_TABLE_MAP[self]

    @classmethod
    def from_language_code(cls, code: Optional[str]) -> Language:
        """Find a language from its two letter code.

        Unlike :meth:`WordType.lookup`, anything unrecognized (including an
        empty or missing code) selects ENGLISH.
        """
        if code == cls.ENGLISH.value:
            return cls.ENGLISH
        elif code == cls.SWEDISH.value:
            return cls.SWEDISH
        logger.debug("Language code %r unknown or invalid, using ENGLISH", code)
        return cls.ENGLISH


# Mapping constants

WORD_TYPE_DISPLAY_MAP = {
    WordType.NOUN: "noun",
    WordType.VERB: "verb",
    WordType.ADJECTIVE: "adjective",
    WordType.ADVERB: "adverb",
    WordType.PRONOUN: "pronoun",
    WordType.PREPOSITION: "preposition",
    WordType.CONJUNCTION: "conjunction",
    WordType.SUBJUNCTION: "subjunction",
    WordType.INTERJECTION: "interjection",
    WordType.NUMERAL: "numeral",
    WordType.ORDINAL: "ordinal",
    WordType.PROPER_NOUN: "proper noun",
    WordType.INFINITIVE_MARKER: "infinitive marker",
    WordType.ABBREVIATION: "abbreviation",
    WordType.PREFIX: "prefix",
    WordType.SUFFIX: "suffix",
    WordType.ARTICLE: "article",
    WordType.INFIX: "infix",
}

# Swedish headwords live in the sv -> en table and vice versa
LANGUAGE_TABLE_MAP = {
    Language.ENGLISH: "folkets_en_sv",
    Language.SWEDISH: "folkets_sv_en",
}


def get_word_type_display(word_type: WordType) -> str:
    """Get display label for a word type."""
    return WORD_TYPE_DISPLAY_MAP[word_type]


def format_word_types_for_display(word_types: Iterable[WordType]) -> str:
    """Join the labels of the given word types, e.g. "noun, verb"."""
    return WORD_TYPE_DISPLAY_SEPARATOR.join(get_word_type_display(t) for t in word_types)

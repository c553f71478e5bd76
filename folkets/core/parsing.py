"""
Field parsers for raw Folkets database records.

Each database row stores its data as delimited text. This module turns one
row, given as a mapping of column name to raw text, into an Entry:
- list fields are split on the asterisk separator
- value/translation and word/comment pairs are split once on the hash separator
- Saldo references are three hash separated links per item
- word types are comma separated codes resolved through WordType.lookup

Blank input never raises; it decodes to empty results. Only a missing column
or an unknown word type code is an error.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Mapping, Optional, Tuple, TypeVar

from folkets.core.constants import (
    COMMA_SEPARATOR,
    HASH_SEPARATOR,
    REQUIRED_FIELDS,
)
from folkets.core.errors import MissingFieldError
from folkets.core.lexical import WordType
from folkets.core.models import (
    Entry,
    SaldoLink,
    SaldoLinks,
    ValuesWithTranslations,
    ValueWithTranslation,
    WordsWithComments,
    WordWithComment,
)
from folkets.core.utils import clean, has_length, is_empty, split_list

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Optional[str]]
T = TypeVar("T")


def _split_pair(raw: Optional[str]) -> Tuple[str, Optional[str]]:
    """Split one item into its head and, if a hash is present, its tail."""
    head, separator, tail = (raw or "").partition(HASH_SEPARATOR)
    if not separator:
        return head.strip(), None
    return head.strip(), tail.strip()


def _parse_pairs(raw: Optional[str], build: Callable[[str, Optional[str]], T]) -> Tuple[T, ...]:
    return tuple(build(*_split_pair(item)) for item in split_list(raw))


def parse_value_with_translation(raw: Optional[str]) -> ValueWithTranslation:
    """Parse a single "value#translation" item.

    >>> parse_value_with_translation("ett barn föds#a child is born")
    ValueWithTranslation(value='ett barn föds', translation='a child is born')
    """
    value, translation = _split_pair(raw)
    return ValueWithTranslation(value=value, translation=translation)


def parse_values_with_translations(raw: Optional[str]) -> ValuesWithTranslations:
    """Parse an asterisk separated list of value/translation pairs."""
    return ValuesWithTranslations(
        _parse_pairs(raw, lambda value, translation: ValueWithTranslation(value=value, translation=translation))
    )


def parse_words_with_comments(raw: Optional[str]) -> WordsWithComments:
    """Parse an asterisk separated list of word/comment pairs."""
    return WordsWithComments(_parse_pairs(raw, lambda word, comment: WordWithComment(word=word, comment=comment)))


def parse_saldo_link(raw: Optional[str]) -> SaldoLink:
    """Parse "word#inflections#associations"; missing trailing parts are None."""
    parts: List[Optional[str]] = [part.strip() for part in (raw or "").split(HASH_SEPARATOR, 2)]
    parts.extend([None] * (3 - len(parts)))
    word_link, inflections_link, associations_link = parts
    return SaldoLink(
        word_link=word_link,
        inflections_link=inflections_link,
        associations_link=associations_link,
    )


def parse_saldo_links(raw: Optional[str]) -> SaldoLinks:
    """Parse the Saldo column.

    A blank column still yields one (blank) link, so callers must filter with
    SaldoLink.has_valid_links().
    """
    raw_links = split_list(raw) or [raw or ""]
    return SaldoLinks(tuple(parse_saldo_link(raw_link) for raw_link in raw_links))


def parse_string_list(raw: Optional[str]) -> Tuple[str, ...]:
    """Parse an asterisk separated list of plain strings."""
    return tuple(item.strip() for item in split_list(raw))


def parse_word_types(raw: Optional[str]) -> Tuple[WordType, ...]:
    """Resolve comma separated word type codes, e.g. "nn,vb".

    Empty codes left by stray commas ("nn,") are skipped.

    Raises:
        UnrecognizedCodeError: If any code is unknown
    """
    codes = [code.strip() for code in split_list(raw, COMMA_SEPARATOR)]
    return tuple(WordType.lookup(code) for code in codes if code)


def parse_optional_text(raw: Optional[str]) -> Optional[str]:
    """Stripped text, or None when the column is blank."""
    return clean(raw) if has_length(raw) else None


def parse_explanation(raw: Optional[str]) -> Optional[ValueWithTranslation]:
    """Explanations are absent, not blank, when the column is empty."""
    if is_empty(raw):
        return None
    return parse_value_with_translation(raw)


def parse(record: RawRecord) -> Entry:
    """Decode one raw database record into an Entry.

    Args:
        record: Mapping of column name to raw text. All of REQUIRED_FIELDS must
            be present; values may be empty or None.

    Returns:
        The parsed, immutable Entry

    Raises:
        MissingFieldError: If a required column is absent
        UnrecognizedCodeError: If a word type code is unknown
    """
    missing = [field for field in REQUIRED_FIELDS if field not in record]
    if missing:
        raise MissingFieldError(missing[0])

    entry = Entry(
        word=clean(record["word"]),
        comment=parse_optional_text(record.get("comment")),
        word_types=parse_word_types(record["types"]),
        translations=parse_words_with_comments(record["translations"]),
        inflections=parse_string_list(record["inflections"]),
        examples=parse_values_with_translations(record["examples"]),
        definition=parse_value_with_translation(record["definition"]),
        explanation=parse_explanation(record["explanation"]),
        phonetic=parse_optional_text(record["phonetic"]),
        synonyms=parse_string_list(record["synonyms"]),
        saldo_links=parse_saldo_links(record["saldos"]),
        compare_with=parse_string_list(record["comparisons"]),
        antonyms=parse_values_with_translations(record["antonyms"]),
        usage=parse_optional_text(record["use"]),
        variant=parse_optional_text(record["variant"]),
        idioms=parse_values_with_translations(record["idioms"]),
        derivations=parse_values_with_translations(record["derivations"]),
        compounds=parse_values_with_translations(record["compounds"]),
    )
    logger.debug("Parsed entry %r", entry.word)
    return entry


parse_entry = parse

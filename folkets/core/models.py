"""
Core domain models for parsed dictionary entries.

Defines the value/translation pairs, word/comment pairs, Saldo cross-reference
links and the Entry aggregate. Every model is frozen: an Entry is built once
from a raw record and never changed afterwards.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel

from folkets.core.lexical import WordType, format_word_types_for_display
from folkets.core.utils import has_length, is_empty


class _SequenceMixin:
    """Expose a tuple root as a read-only sequence."""

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index):
        return self.root[index]


class ValueWithTranslation(BaseModel):
    """A lexical value paired with its rendering in the other language."""

    model_config = ConfigDict(frozen=True)

    value: str = ""
    translation: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return is_empty(self.value) and is_empty(self.translation)


class ValuesWithTranslations(_SequenceMixin, RootModel):
    """Ordered value/translation pairs from one field, blank items included."""

    model_config = ConfigDict(frozen=True)

    root: Tuple[ValueWithTranslation, ...] = ()

    def non_blank(self) -> List[ValueWithTranslation]:
        return [item for item in self.root if not item.is_blank]


class WordWithComment(BaseModel):
    """A translated word with an optional usage comment."""

    model_config = ConfigDict(frozen=True)

    word: str = ""
    comment: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return is_empty(self.word) and is_empty(self.comment)


class WordsWithComments(_SequenceMixin, RootModel):
    """Ordered word/comment pairs from one field, blank items included."""

    model_config = ConfigDict(frozen=True)

    root: Tuple[WordWithComment, ...] = ()

    def non_blank(self) -> List[WordWithComment]:
        return [item for item in self.root if not item.is_blank]


class SaldoLink(BaseModel):
    """References into the Saldo lexicon for one sense of a word."""

    model_config = ConfigDict(frozen=True)

    word_link: Optional[str] = None
    inflections_link: Optional[str] = None
    associations_link: Optional[str] = None

    def has_valid_links(self) -> bool:
        """True if at least one of the three references is non-blank."""
        return any(has_length(link) for link in (self.word_link, self.inflections_link, self.associations_link))


class SaldoLinks(_SequenceMixin, RootModel):
    """All Saldo references of an entry, in database order."""

    model_config = ConfigDict(frozen=True)

    root: Tuple[SaldoLink, ...] = ()

    @property
    def links(self) -> Tuple[SaldoLink, ...]:
        return self.root

    def valid_links(self) -> List[SaldoLink]:
        """Links worth rendering; the rest carry no reference at all."""
        return [link for link in self.root if link.has_valid_links()]


class Entry(BaseModel):
    """A fully parsed dictionary entry for one headword.

    Example:
        Entry(
            word="barn",
            word_types=(WordType.NOUN,),
            translations=WordsWithComments((WordWithComment(word="child"),)),
            inflections=("barnet", "barn", "barnen"),
            phonetic="bɑːrn",
        )
    """

    model_config = ConfigDict(frozen=True)

    word: str
    comment: Optional[str] = None
    word_types: Tuple[WordType, ...] = ()
    translations: WordsWithComments = Field(default_factory=WordsWithComments)
    inflections: Tuple[str, ...] = ()
    examples: ValuesWithTranslations = Field(default_factory=ValuesWithTranslations)
    definition: ValueWithTranslation = Field(default_factory=ValueWithTranslation)
    explanation: Optional[ValueWithTranslation] = Field(
        None, description="None when the record has no explanation at all"
    )
    phonetic: Optional[str] = None
    synonyms: Tuple[str, ...] = ()
    saldo_links: SaldoLinks = Field(default_factory=SaldoLinks)
    compare_with: Tuple[str, ...] = ()
    antonyms: ValuesWithTranslations = Field(default_factory=ValuesWithTranslations)
    usage: Optional[str] = None
    variant: Optional[str] = None
    idioms: ValuesWithTranslations = Field(default_factory=ValuesWithTranslations)
    derivations: ValuesWithTranslations = Field(default_factory=ValuesWithTranslations)
    compounds: ValuesWithTranslations = Field(default_factory=ValuesWithTranslations)

    @property
    def has_explanation(self) -> bool:
        return self.explanation is not None

    def format_word_types(self) -> str:
        """Word types as a display string, e.g. "noun, verb"."""
        return format_word_types_for_display(self.word_types)

"""
Plain text rendering of dictionary entries using Jinja2 templates.

Sections follow the order of the entry detail screen; blank items and empty
sections are left out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folkets.core.constants import PAIR_DISPLAY_SEPARATOR, SECTION_TITLES
from folkets.core.models import (
    Entry,
    SaldoLinks,
    ValuesWithTranslations,
    ValueWithTranslation,
    WordsWithComments,
    WordWithComment,
)
from folkets.core.utils import has_length


class Section(NamedTuple):
    title: str
    lines: List[str]


def format_value_with_translation(item: ValueWithTranslation) -> str:
    """Render "value - translation", dropping whichever side is blank."""
    parts = [part for part in (item.value, item.translation) if has_length(part)]
    return PAIR_DISPLAY_SEPARATOR.join(parts)


def format_word_with_comment(item: WordWithComment) -> str:
    if has_length(item.comment):
        return f"{item.word} ({item.comment})"
    return item.word


def format_saldo_links(links: SaldoLinks) -> List[str]:
    """Number the links that carry at least one reference."""
    lines = []
    for number, link in enumerate(links.valid_links(), start=1):
        refs = [link.word_link or "", link.inflections_link or "", link.associations_link or ""]
        lines.append(f"{number}: {', '.join(refs)}")
    return lines


def _pairs(values: ValuesWithTranslations) -> List[str]:
    return [format_value_with_translation(item) for item in values.non_blank()]


def _words(words: WordsWithComments) -> List[str]:
    return [format_word_with_comment(item) for item in words.non_blank()]


def _single(value: Optional[ValueWithTranslation]) -> List[str]:
    if value is None:
        return []
    text = format_value_with_translation(value)
    return [text] if text else []


def _text(value: Optional[str]) -> List[str]:
    return [value] if has_length(value) else []


def _strings(values: Iterable[str]) -> List[str]:
    return [value for value in values if has_length(value)]


def build_sections(entry: Entry) -> List[Section]:
    """Collect the non-empty sections of an entry in display order."""
    candidates = [
        ("translations", _words(entry.translations)),
        ("definition", _single(entry.definition)),
        ("explanation", _single(entry.explanation)),
        ("examples", _pairs(entry.examples)),
        ("antonyms", _pairs(entry.antonyms)),
        ("compounds", _pairs(entry.compounds)),
        ("derivations", _pairs(entry.derivations)),
        ("idioms", _pairs(entry.idioms)),
        ("usage", _text(entry.usage)),
        ("variant", _text(entry.variant)),
        ("comment", _text(entry.comment)),
        ("inflections", _strings(entry.inflections)),
        ("synonyms", _strings(entry.synonyms)),
        ("compare_with", _strings(entry.compare_with)),
        ("saldo_links", format_saldo_links(entry.saldo_links)),
    ]
    return [Section(SECTION_TITLES[key], lines) for key, lines in candidates if lines]


def _env(template_dir: Optional[str] = None) -> Environment:
    dir_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(dir_path)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_entry(
    entry: Entry,
    template_name: str = "entry.txt.j2",
    template_dir: Optional[str] = None,
) -> str:
    env = _env(template_dir)
    template = env.get_template(template_name)
    return template.render(
        entry=entry,
        word_types=entry.format_word_types(),
        sections=build_sections(entry),
    )

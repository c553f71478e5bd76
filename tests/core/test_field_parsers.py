"""Tests for the field level parsers."""

import pytest

from folkets.core.errors import UnrecognizedCodeError
from folkets.core.lexical import WordType
from folkets.core.models import SaldoLink, ValueWithTranslation, WordWithComment
from folkets.core.parsing import (
    parse_explanation,
    parse_saldo_link,
    parse_saldo_links,
    parse_string_list,
    parse_value_with_translation,
    parse_values_with_translations,
    parse_word_types,
    parse_words_with_comments,
)


class TestValueWithTranslation:
    """Test parse_value_with_translation."""

    def test_value_and_translation(self):
        result = parse_value_with_translation("ett barn föds#a child is born")
        assert result.value == "ett barn föds"
        assert result.translation == "a child is born"

    @pytest.mark.parametrize("raw", ["barn", "  barn  ", "", "a*b", "ett barn"])
    def test_without_hash_translation_is_absent(self, raw):
        """No hash means no translation at all, and value is the stripped input."""
        result = parse_value_with_translation(raw)
        assert result.translation is None
        assert result.value == raw.strip()

    def test_both_sides_are_stripped(self):
        result = parse_value_with_translation("  hej  #  hello ")
        assert result == ValueWithTranslation(value="hej", translation="hello")

    def test_empty_translation_is_present_but_blank(self):
        """A trailing hash gives an empty, not absent, translation."""
        result = parse_value_with_translation("hej#")
        assert result.value == "hej"
        assert result.translation == ""

    def test_empty_value(self):
        result = parse_value_with_translation("#hello")
        assert result.value == ""
        assert result.translation == "hello"

    def test_splits_only_once(self):
        """Later hashes stay in the translation."""
        result = parse_value_with_translation("a#b#c")
        assert result.value == "a"
        assert result.translation == "b#c"

    def test_none_input(self):
        result = parse_value_with_translation(None)
        assert result.value == ""
        assert result.translation is None


class TestValuesWithTranslations:
    """Test parse_values_with_translations."""

    def test_empty_input_gives_empty_sequence(self):
        assert len(parse_values_with_translations("")) == 0
        assert list(parse_values_with_translations(None)) == []
        assert list(parse_values_with_translations("  ")) == []

    def test_preserves_order(self):
        result = parse_values_with_translations("ett#one*två#two*tre#three")
        assert [item.value for item in result] == ["ett", "två", "tre"]
        assert [item.translation for item in result] == ["one", "two", "three"]

    @pytest.mark.parametrize("raw", ["a", "a*b", "a#x*b*c#y", "a**b", "a*b*"])
    def test_one_item_per_asterisk_separated_part(self, raw):
        """Blank items are kept so positions match the raw field."""
        assert len(parse_values_with_translations(raw)) == raw.count("*") + 1

    def test_blank_items_are_retained(self):
        result = parse_values_with_translations("a#x**b")
        assert result[1] == ValueWithTranslation(value="", translation=None)
        assert result[1].is_blank
        assert [item.value for item in result.non_blank()] == ["a", "b"]

    def test_mixed_items(self):
        result = parse_values_with_translations("gå hem#go home*gå ut")
        assert result[0] == ValueWithTranslation(value="gå hem", translation="go home")
        assert result[1] == ValueWithTranslation(value="gå ut", translation=None)


class TestWordsWithComments:
    """Test parse_words_with_comments."""

    def test_words_without_comments(self):
        result = parse_words_with_comments("child*kid")
        assert list(result) == [
            WordWithComment(word="child", comment=None),
            WordWithComment(word="kid", comment=None),
        ]

    def test_word_with_comment(self):
        result = parse_words_with_comments("kid#informal*child")
        assert result[0].word == "kid"
        assert result[0].comment == "informal"
        assert result[1].comment is None

    def test_empty_input(self):
        assert len(parse_words_with_comments("")) == 0

    def test_blank_items_are_retained(self):
        result = parse_words_with_comments("a**b")
        assert len(result) == 3
        assert result[1].is_blank


class TestSaldoLink:
    """Test parse_saldo_link and SaldoLink.has_valid_links."""

    def test_three_links(self):
        link = parse_saldo_link("w1#i1#a1")
        assert link.word_link == "w1"
        assert link.inflections_link == "i1"
        assert link.associations_link == "a1"
        assert link.has_valid_links()

    def test_missing_trailing_links_are_none(self):
        link = parse_saldo_link("w1")
        assert link.word_link == "w1"
        assert link.inflections_link is None
        assert link.associations_link is None

    def test_blank_middle_link(self):
        link = parse_saldo_link("w1##a1")
        assert link.inflections_link == ""
        assert link.has_valid_links()

    def test_extra_hashes_stay_in_last_link(self):
        assert parse_saldo_link("a#b#c#d").associations_link == "c#d"

    def test_all_blank_links_are_not_valid(self):
        assert not parse_saldo_link("").has_valid_links()
        assert not parse_saldo_link(" # # ").has_valid_links()

    def test_has_valid_links_on_constructed_links(self):
        assert not SaldoLink(word_link="", inflections_link="", associations_link="").has_valid_links()
        assert SaldoLink(word_link="x", inflections_link="", associations_link="").has_valid_links()
        assert SaldoLink(associations_link="x").has_valid_links()
        assert not SaldoLink().has_valid_links()


class TestSaldoLinks:
    """Test parse_saldo_links."""

    def test_multiple_links(self):
        links = parse_saldo_links("w1#i1#a1*w2#i2#a2")
        assert len(links) == 2
        assert links[1].word_link == "w2"

    def test_blank_field_gives_one_invalid_link(self):
        """The collection always exists; its lone link is filtered by callers."""
        links = parse_saldo_links("")
        assert len(links) == 1
        assert not links[0].has_valid_links()
        assert links.valid_links() == []

    def test_valid_links_filters_blank_items(self):
        links = parse_saldo_links("w1#i1#a1*##*w3")
        assert len(links) == 3
        assert [link.word_link for link in links.valid_links()] == ["w1", "w3"]


class TestStringList:
    """Test parse_string_list."""

    def test_splits_and_strips(self):
        assert parse_string_list("barnet* barn *barnen") == ("barnet", "barn", "barnen")

    def test_empty(self):
        assert parse_string_list("") == ()


class TestWordTypes:
    """Test parse_word_types."""

    def test_single_code(self):
        assert parse_word_types("nn") == (WordType.NOUN,)

    def test_comma_separated_codes(self):
        assert parse_word_types("nn,vb") == (WordType.NOUN, WordType.VERB)

    def test_codes_are_stripped(self):
        assert parse_word_types("nn, jj") == (WordType.NOUN, WordType.ADJECTIVE)

    def test_asterisk_is_not_a_separator(self):
        """Word types use commas, unlike every other list field."""
        with pytest.raises(UnrecognizedCodeError):
            parse_word_types("nn*vb")

    def test_empty(self):
        assert parse_word_types("") == ()

    def test_unknown_code_raises(self):
        with pytest.raises(UnrecognizedCodeError) as excinfo:
            parse_word_types("nn,zz")
        assert excinfo.value.code == "zz"

    def test_trailing_comma_is_ignored(self):
        assert parse_word_types("nn,") == (WordType.NOUN,)

    def test_empty_codes_are_skipped(self):
        assert parse_word_types("nn, ,,vb") == (WordType.NOUN, WordType.VERB)

    def test_unknown_code_after_stray_comma_raises(self):
        with pytest.raises(UnrecognizedCodeError):
            parse_word_types(",zz")


class TestExplanation:
    """Test parse_explanation."""

    @pytest.mark.parametrize("raw", ["", None, "   "])
    def test_blank_explanation_is_absent(self, raw):
        assert parse_explanation(raw) is None

    def test_present_explanation(self):
        result = parse_explanation("en liten människa#a small person")
        assert result == ValueWithTranslation(value="en liten människa", translation="a small person")

"""Tests for script and language code tables."""

import pytest

from glyphlayout.shaping.tags import (
    COMMON_SCRIPT_CODE,
    ENGLISH_LANGUAGE_CODE,
    LANGUAGE_TAGS,
    LATIN_SCRIPT_CODE,
    SCRIPT_TAGS,
    language_code_for_tag,
    language_tag,
    script_code_for_tag,
    script_tag,
)


class TestScriptTags:
    """Tests for script code lookups."""

    def test_well_known_codes(self):
        assert script_tag(COMMON_SCRIPT_CODE) == "Zyyy"
        assert LATIN_SCRIPT_CODE == 25
        assert script_tag(LATIN_SCRIPT_CODE) == "Latn"
        assert script_tag(2) == "Arab"

    def test_tags_are_four_letters(self):
        assert all(len(tag) == 4 for tag in SCRIPT_TAGS)
        assert len(set(SCRIPT_TAGS)) == len(SCRIPT_TAGS)

    @pytest.mark.parametrize("code", [-1, len(SCRIPT_TAGS)])
    def test_unknown_code(self, code: int):
        assert script_tag(code) is None

    @pytest.mark.parametrize("tag", ["Latn", "latn", "LATN", " Latn "])
    def test_reverse_lookup(self, tag: str):
        assert script_code_for_tag(tag) == LATIN_SCRIPT_CODE

    def test_reverse_lookup_unknown(self):
        assert script_code_for_tag("Xxxx") is None


class TestLanguageTags:
    """Tests for language code lookups."""

    def test_no_language(self):
        assert language_tag(0) is None

    def test_english(self):
        entry = language_tag(ENGLISH_LANGUAGE_CODE)
        assert entry is not None
        assert entry.ot_tag == "ENG "
        assert entry.bcp47 == "en"

    def test_last_entry(self):
        assert len(LANGUAGE_TAGS) == 72
        assert language_tag(71).bcp47 == "cy"  # type: ignore[union-attr]

    @pytest.mark.parametrize("code", [-1, len(LANGUAGE_TAGS)])
    def test_unknown_code(self, code: int):
        assert language_tag(code) is None

    @pytest.mark.parametrize("tag", ["ENG", "eng", "en", "EN"])
    def test_reverse_lookup(self, tag: str):
        assert language_code_for_tag(tag) == ENGLISH_LANGUAGE_CODE

    def test_reverse_lookup_first_match_wins(self):
        assert language_code_for_tag("ml") == 14

    def test_reverse_lookup_unknown(self):
        assert language_code_for_tag("xx") is None

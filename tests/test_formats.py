"""
Tests for fuzzystrings.formats — code point conversion, alignment
rendering and the dict / JSON form of a Match.
"""

import json
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fuzzystrings.core import GAP, Char, Match, alignment, compare
from fuzzystrings.formats import (
    aligned_to_string, codepoints_to_string, string_to_codepoints,
    match_from_dict, match_from_json, match_to_dict, match_to_json,
)


class TestCodepoints:

    def test_ascii(self):
        assert string_to_codepoints("abc") == (97, 98, 99)

    def test_multibyte(self):
        assert string_to_codepoints("é😀") == (0xE9, 0x1F600)
        assert codepoints_to_string((0xE9, 0x1F600)) == "é😀"

    def test_empty(self):
        assert string_to_codepoints("") == ()
        assert codepoints_to_string(()) == ""


class TestAlignedToString:

    def test_inner_gap(self):
        aligned, long, _ = alignment("pattern", "patten")
        assert aligned_to_string(aligned) == "patte-n"
        assert codepoints_to_string(long) == "pattern"

    def test_trailing_gaps_with_placeholder(self):
        aligned, _, _ = alignment("pattern", "patterned")
        assert aligned_to_string(aligned, placeholder="_") == "pattern__"

    def test_plain_elements(self):
        assert aligned_to_string((Char(ord("a")), GAP, Char(ord("b")))) == "a-b"


class TestMatchDict:

    def test_to_dict(self):
        assert match_to_dict(compare("pattern", "pattren")) == {
            "deletions": 0,
            "insertions": 0,
            "substitutions": 2,
            "transpositions": 1,
        }

    def test_from_dict_fills_missing_and_ignores_extra(self):
        assert match_from_dict({"deletions": 2, "score": 2}) == Match(deletions=2)

    def test_json(self):
        match = compare("pattern", "papadums")
        text = match_to_json(match, sort_keys=True)
        assert json.loads(text)["substitutions"] == 5
        assert match_from_json(text) == match

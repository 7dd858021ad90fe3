"""
Tests for fuzzystrings.options — the three predicate variants and the
option bag with its score > max > per-category precedence.
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fuzzystrings.core import Match, compare
from fuzzystrings.errors import OptionsError
from fuzzystrings.options import (
    ByCategory, ByScore, ByUniformMax,
    DEFAULT_OPTIONS, from_mapping, resolve,
)


# ═══════════════════════════════════════════════════════════════════
#  §1  VARIANTS
# ═══════════════════════════════════════════════════════════════════

class TestByScore:

    def test_default_threshold(self):
        assert DEFAULT_OPTIONS == ByScore(3)
        assert ByScore().threshold == 3

    def test_boundary(self):
        assert ByScore(2).evaluate(Match(substitutions=2)) is True
        assert ByScore(1).evaluate(Match(substitutions=2)) is False

    def test_transposition_cost_model(self):
        match = compare("pattern", "pattren")
        assert match.is_match(ByScore(1)) is False
        assert match.is_match(ByScore(1, use_transpositions=True)) is True


class TestByUniformMax:

    @pytest.mark.parametrize("field", [
        "deletions", "insertions", "substitutions", "transpositions",
    ])
    def test_every_counter_is_checked(self, field):
        match = Match(**{field: 2})
        assert match.is_match(ByUniformMax(2)) is True
        assert match.is_match(ByUniformMax(1)) is False

    def test_ignores_the_total(self):
        # score 4, but no single count above 2
        match = Match(deletions=2, insertions=2)
        assert match.is_match(ByUniformMax(2)) is True
        assert match.is_match() is False


class TestByCategory:

    def test_no_thresholds_is_vacuously_true(self):
        assert Match(deletions=100, substitutions=100).is_match(ByCategory()) is True

    def test_thresholds_compose_with_and(self):
        match = Match(deletions=1, substitutions=5)
        assert match.is_match(ByCategory(deletions=1, substitutions=5)) is True
        assert match.is_match(ByCategory(deletions=0, substitutions=5)) is False
        assert match.is_match(ByCategory(deletions=1, substitutions=4)) is False

    def test_unsupplied_category_is_unconstrained(self):
        match = Match(insertions=9, transpositions=1)
        assert match.is_match(ByCategory(transpositions=1)) is True


class TestValidation:

    @pytest.mark.parametrize("build", [
        lambda: ByScore(-1),
        lambda: ByScore(True),
        lambda: ByScore(2.5),
        lambda: ByUniformMax(-3),
        lambda: ByCategory(deletions="1"),
        lambda: ByCategory(transpositions=-1),
    ])
    def test_bad_thresholds(self, build):
        with pytest.raises(OptionsError):
            build()

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            ByUniformMax(-1)
        assert exc_info.value.name == "max"
        assert "non-negative integer" in str(exc_info.value)


# ═══════════════════════════════════════════════════════════════════
#  §2  OPTION BAGS
# ═══════════════════════════════════════════════════════════════════

class TestFromMapping:

    def test_score_wins(self):
        assert from_mapping({"score": 0, "max": 10, "deletions": 1}) == ByScore(0)

    def test_score_with_cost_model(self):
        assert from_mapping({"score": 1, "use_transpositions": True}) == ByScore(1, True)

    def test_max_wins_over_categories(self):
        assert from_mapping({"max": 1, "deletions": 5}) == ByUniformMax(1)

    def test_categories(self):
        assert from_mapping({"deletions": 1, "substitutions": 5}) == ByCategory(
            deletions=1, substitutions=5
        )

    def test_none_counts_as_absent(self):
        assert from_mapping({"score": None, "max": 2}) == ByUniformMax(2)

    def test_empty_bag(self):
        assert from_mapping({}) == ByCategory()

    def test_unknown_key(self):
        with pytest.raises(OptionsError) as exc_info:
            from_mapping({"maximum": 2})
        assert exc_info.value.name == "maximum"

    def test_is_match_accepts_a_bag(self):
        match = compare("pattern", "papadums")
        assert match.is_match({"deletions": 1, "substitutions": 5}) is True
        assert match.is_match({"deletions": 0}) is False
        assert match.is_match({"max": 2}) is False


class TestResolve:

    def test_none_is_default(self):
        assert resolve(None) is DEFAULT_OPTIONS

    def test_variant_passes_through(self):
        opts = ByUniformMax(4)
        assert resolve(opts) is opts

    def test_rejects_other_types(self):
        with pytest.raises(OptionsError):
            Match().is_match(3)

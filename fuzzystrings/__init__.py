"""
fuzzystrings
============

Match words by the operations needed to turn one into the other:
insertions, deletions, substitutions and adjacent transpositions.

    compare("pattern", "pattren")    → { d: 0, i: 0, s: 2, t: 1 }
    compare("pattern", "patten")     → { d: 0, i: 1, s: 0, t: 0 }
    compare("pattern", "patterned")  → { d: 2, i: 0, s: 0, t: 0 }

The counts come from a single left-to-right scan, not from an edit
distance DP, so they are an estimate that is cheap to compute.  The
resulting Match decides whether two words are close enough:

    compare("pattern", "pattren").is_match()                  → True   (score 2 ≤ 3)
    compare("pattern", "chicken").is_match()                  → False
    compare("pattern", "patternless").is_match(ByUniformMax(3)) → False
"""

import logging

from fuzzystrings.core import (
    # Aligned elements
    Element,
    Char,
    Gap,
    GAP,
    # Matching
    Match,
    compare,
    alignment,
    FuzzyStrings,
    FuzzyStr,
    fuzzy_match,
)
from fuzzystrings.errors import FuzzyStringsError, InvalidInputError, OptionsError
from fuzzystrings.options import (
    MatchOptions, ByScore, ByUniformMax, ByCategory, DEFAULT_OPTIONS, from_mapping,
)
from fuzzystrings.formats import (
    string_to_codepoints, codepoints_to_string, aligned_to_string,
    match_to_dict, match_from_dict, match_to_json, match_from_json,
)

__version__ = "0.1.0"
__all__ = [
    "Element", "Char", "Gap", "GAP",
    "Match", "compare", "alignment", "FuzzyStrings", "FuzzyStr", "fuzzy_match",
    "FuzzyStringsError", "InvalidInputError", "OptionsError",
    "MatchOptions", "ByScore", "ByUniformMax", "ByCategory",
    "DEFAULT_OPTIONS", "from_mapping",
    "string_to_codepoints", "codepoints_to_string", "aligned_to_string",
    "match_to_dict", "match_from_dict", "match_to_json", "match_from_json",
]

logging.getLogger("fuzzystrings").addHandler(logging.NullHandler())

"""
fuzzystrings.core — Heuristic single-pass string matching
==========================================================

§1  THE PROBLEM
───────────────

Deciding whether a typed word is "close enough" to a known word needs a
count of the edits separating them:

    cot   → coat    a must be inserted
    coat  → cot     a must be deleted
    cost  → coat    s must be substituted by a
    foo   → floor   l and r must be inserted
    cost  → cots    t and s substituted (cost 2) or transposed (cost 1)

A full Levenshtein / Damerau-Levenshtein DP gives the minimum edit script
at O(m·n).  This module instead does ONE left-to-right scan, O(n), and
classifies every differing position.  The result is an estimate: it is
exact for a single shifted character, a run of trailing characters or a
swapped pair, and falls back to counting substitutions otherwise.


§2  ALIGNMENT
─────────────

Both strings become code point sequences.  The shorter one is SHORT, the
other LONG.  Walking LONG by index i with a cursor j into SHORT:

    LONG[i] == SHORT[j]                    → Char(SHORT[j]), j += 1
    LONG[i] != SHORT[j] == LONG[i+1]       → Gap             (one missing char)
    otherwise, SHORT not exhausted         → Char(SHORT[j]), j += 1
    SHORT exhausted                        → Gap             (trailing)

Only one position of look-ahead is used.  Every Gap is an insertion or a
deletion depending on which argument was shorter:

    second argument shorter → insertions  (insert into it to get the first)
    first argument shorter  → deletions   (delete from the second)

so FuzzyStrings("pattern").compare("patten") reports one insertion and
FuzzyStrings("pattern").compare("patterned") reports two deletions.


§3  SUBSTITUTIONS AND TRANSPOSITIONS
────────────────────────────────────

After alignment SHORT (with gaps) lines up with LONG.  Every non-gap
position holding a different character is a substitution.

Transpositions are counted on the gap-free SHORT against LONG: an
adjacent pair that differs in order but holds the same two characters.

    pattern / pattren   →  s=2 (e↔r, r↔e)   t=1 (er ↔ re)

Both counts are kept: a swap is two substitutions OR one transposition.
Match.score() picks one cost model per call and never adds them up.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .errors import InvalidInputError
from .options import MatchOptions, resolve

logger = logging.getLogger(__name__)

# Code point reserved for "no character" by older callers; rejected on input.
NUL = 0


# ═══════════════════════════════════════════════════════════════════
#  ALIGNED ELEMENTS
# ═══════════════════════════════════════════════════════════════════

class Element:
    """Base class for aligned sequence elements.  Not instantiated directly."""
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Char(Element):
    """A character present in the aligned sequence, by code point."""
    code: int

    def __repr__(self) -> str:
        return f"Char({chr(self.code)!r})"


@dataclass(frozen=True, slots=True)
class Gap(Element):
    """A position where only the longer sequence has a character."""

    def __repr__(self) -> str:
        return "Gap"


GAP = Gap()


# ═══════════════════════════════════════════════════════════════════
#  MATCH RECORD
# ═══════════════════════════════════════════════════════════════════

@dataclass(slots=True)
class Match:
    """
    The operation counts of one comparison, and the policy deciding
    whether they are close enough to call the strings the same word.
    """
    insertions: int = 0
    deletions: int = 0
    substitutions: int = 0
    transpositions: int = 0

    def score(self, use_transpositions: bool = False) -> int:
        """
        Total cost of the operations.

        Substitutions are counted by default.  With use_transpositions the
        transposition count replaces them, so a swapped pair costs 1
        instead of 2.
        """
        changed = self.transpositions if use_transpositions else self.substitutions
        return changed + self.insertions + self.deletions

    cost = score

    def is_match(
        self, options: Union[MatchOptions, Mapping[str, Any], None] = None
    ) -> bool:
        """
        Is it a match?

        Without options: score() <= 3.  Otherwise options is a ByScore,
        ByUniformMax or ByCategory, or an option bag with the keys
        score / max / deletions / insertions / substitutions /
        transpositions (see options.from_mapping for the precedence).
        """
        return resolve(options).evaluate(self)

    def __str__(self) -> str:
        return (
            f"{{ d: {self.deletions}, i: {self.insertions}, "
            f"s: {self.substitutions}, t: {self.transpositions} }}"
        )


# ═══════════════════════════════════════════════════════════════════
#  ALIGNMENT ENGINE
# ═══════════════════════════════════════════════════════════════════

def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _codepoints(text: str, argument: str) -> tuple[int, ...]:
    seq = tuple(ord(c) for c in text)
    if NUL in seq:
        raise InvalidInputError(argument, seq.index(NUL))
    return seq


@dataclass(slots=True)
class _AlignmentState:
    """Working state of one comparison.  Never leaves compare()."""
    short: tuple[int, ...]
    long: tuple[int, ...]
    short_is_second: bool
    aligned: tuple[Element, ...] = ()


def _select(seq_a: tuple[int, ...], seq_b: tuple[int, ...]) -> _AlignmentState:
    if len(seq_a) < len(seq_b):
        return _AlignmentState(short=seq_a, long=seq_b, short_is_second=False)
    return _AlignmentState(short=seq_b, long=seq_a, short_is_second=True)


def _align(state: _AlignmentState) -> int:
    """
    Build state.aligned and return the number of gaps placed.

    Equal lengths leave SHORT as is: no gap can be needed.
    """
    short, long = state.short, state.long

    if len(short) == len(long):
        state.aligned = tuple(Char(c) for c in short)
        return 0

    aligned: list[Element] = []
    gaps = 0
    j = 0

    for i, long_chr in enumerate(long):
        if j >= len(short):
            # SHORT exhausted: pad to LONG's length
            aligned.append(GAP)
            gaps += 1
            continue

        short_chr = short[j]
        if long_chr != short_chr and i + 1 < len(long) and long[i + 1] == short_chr:
            aligned.append(GAP)
            gaps += 1
            continue

        aligned.append(Char(short_chr))
        j += 1

    # Characters of SHORT that LONG ran out of partners for
    aligned.extend(Char(c) for c in short[j:])

    state.aligned = tuple(aligned)
    return gaps


def _count_substitutions(state: _AlignmentState) -> int:
    long = state.long
    count = 0
    for i, elem in enumerate(state.aligned):
        if isinstance(elem, Gap):
            continue
        if i >= len(long) or elem.code != long[i]:
            count += 1
    return count


def _count_transpositions(state: _AlignmentState) -> int:
    short, long = state.short, state.long
    count = 0
    for i in range(len(short) - 1):
        one = short[i:i + 2]
        two = long[i:i + 2]
        if one != two and one == two[::-1]:
            count += 1
    return count


def compare(a: Any, b: Any, allow_transpositions: bool = True) -> Match:
    """
    Compare `b` against the base string `a`.

    Returns a fresh Match holding the insertion, deletion, substitution
    and transposition counts.  Transposition detection is skipped when
    allow_transpositions is False.

    Inputs that are not strings are converted with str(); None is the
    empty string.  Raises InvalidInputError when either input contains
    the NUL character.
    """
    text_a, text_b = _text(a), _text(b)
    seq_a = _codepoints(text_a, "first argument")
    seq_b = _codepoints(text_b, "second argument")

    match = Match()
    if seq_a == seq_b:
        return match

    state = _select(seq_a, seq_b)
    gaps = _align(state)
    if state.short_is_second:
        match.insertions = gaps
    else:
        match.deletions = gaps

    match.substitutions = _count_substitutions(state)
    if allow_transpositions:
        match.transpositions = _count_transpositions(state)

    logger.debug("compare(%r, %r) -> %s", text_a, text_b, match)
    return match


# ═══════════════════════════════════════════════════════════════════
#  CONVENIENCE WRAPPERS
# ═══════════════════════════════════════════════════════════════════

class FuzzyStrings:
    """
    A base pattern to compare candidates against.

        fs = FuzzyStrings("pattern")
        match = fs.compare("pattren")
        match.is_match()   # True
        match.score()      # 2
    """

    def __init__(self, pattern: Any):
        self.pattern = _text(pattern)

    def compare(self, other: Any, allow_transpositions: bool = True) -> Match:
        return compare(self.pattern, other, allow_transpositions)

    def __repr__(self) -> str:
        return f"FuzzyStrings({self.pattern!r})"


class FuzzyStr(str):
    """A str that can compare itself against another string."""

    def fuzzy_match(self, other: Any, allow_transpositions: bool = True) -> Match:
        return compare(str(self), other, allow_transpositions)


def fuzzy_match(text: Any, other: Any, allow_transpositions: bool = True) -> Match:
    """Functional form of FuzzyStr(text).fuzzy_match(other)."""
    return FuzzyStr(_text(text)).fuzzy_match(other, allow_transpositions)


def alignment(a: Any, b: Any) -> tuple[tuple[Element, ...], tuple[int, ...], Optional[str]]:
    """
    The aligned SHORT sequence, LONG, and how gaps are counted.

    Third item is "insertions", "deletions" or None for equal lengths.
    Used for display; compare() is the API for counts.
    """
    seq_a = _codepoints(_text(a), "first argument")
    seq_b = _codepoints(_text(b), "second argument")
    state = _select(seq_a, seq_b)
    _align(state)
    if len(state.short) == len(state.long):
        mode = None
    else:
        mode = "insertions" if state.short_is_second else "deletions"
    return state.aligned, state.long, mode

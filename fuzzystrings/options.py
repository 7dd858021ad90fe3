"""
fuzzystrings.options — Match predicates.

A match predicate is one of three closed variants:

    ByScore(threshold)        score() <= threshold
    ByUniformMax(threshold)   every counter <= threshold
    ByCategory(...)           each supplied per-counter threshold holds

The variants are never combined.  Callers that prefer a plain option bag
(``{"score": 3}``, ``{"max": 1}``, ``{"deletions": 1, "substitutions": 5}``)
go through from_mapping(), which applies the precedence
score > max > per-category.
"""

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from .errors import OptionsError

if TYPE_CHECKING:
    from .core import Match


CATEGORIES = ("deletions", "insertions", "substitutions", "transpositions")

DEFAULT_SCORE_THRESHOLD = 3


def _check_threshold(name: str, value: Any) -> None:
    # bool is an int subclass; True as a threshold is always a mistake
    if type(value) is bool or not isinstance(value, int) or value < 0:
        raise OptionsError(name, value, "a non-negative integer")


@dataclass(frozen=True, slots=True)
class ByScore:
    """Total cost of operations is no greater than threshold."""
    threshold: int = DEFAULT_SCORE_THRESHOLD
    use_transpositions: bool = False

    def __post_init__(self):
        _check_threshold("score", self.threshold)

    def evaluate(self, match: "Match") -> bool:
        return match.score(self.use_transpositions) <= self.threshold


@dataclass(frozen=True, slots=True)
class ByUniformMax:
    """
    No single operation count exceeds threshold.

    The score may be 3 while 2 deletions still fail a threshold of 1.
    Substitutions and transpositions are both checked.
    """
    threshold: int

    def __post_init__(self):
        _check_threshold("max", self.threshold)

    def evaluate(self, match: "Match") -> bool:
        return all(getattr(match, name) <= self.threshold for name in CATEGORIES)


@dataclass(frozen=True, slots=True)
class ByCategory:
    """Per-operation thresholds; an omitted category is unconstrained."""
    deletions: Optional[int] = None
    insertions: Optional[int] = None
    substitutions: Optional[int] = None
    transpositions: Optional[int] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                _check_threshold(f.name, value)

    def evaluate(self, match: "Match") -> bool:
        for name in CATEGORIES:
            limit = getattr(self, name)
            if limit is not None and getattr(match, name) > limit:
                return False
        return True


MatchOptions = Union[ByScore, ByUniformMax, ByCategory]

DEFAULT_OPTIONS = ByScore()

_KNOWN_KEYS = frozenset(("score", "max", "use_transpositions") + CATEGORIES)


def from_mapping(opts: Mapping[str, Any]) -> MatchOptions:
    """
    Convert an option bag into a MatchOptions variant.

    Keys:
        score               → ByScore (wins over everything else)
        max                 → ByUniformMax (wins over per-category keys)
        deletions, insertions, substitutions, transpositions
                            → ByCategory
        use_transpositions  → cost model for ByScore only

    Keys whose value is None count as absent.  An empty bag yields a
    ByCategory with no thresholds, which accepts every match.
    """
    unknown = set(opts) - _KNOWN_KEYS
    if unknown:
        name = sorted(unknown)[0]
        raise OptionsError(name, opts[name], f"one of {sorted(_KNOWN_KEYS)}")

    if opts.get("score") is not None:
        return ByScore(opts["score"], bool(opts.get("use_transpositions", False)))

    if opts.get("max") is not None:
        return ByUniformMax(opts["max"])

    return ByCategory(**{name: opts.get(name) for name in CATEGORIES})


def resolve(options: Union[MatchOptions, Mapping[str, Any], None]) -> MatchOptions:
    """Normalize whatever Match.is_match() was given into a variant."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, (ByScore, ByUniformMax, ByCategory)):
        return options
    if isinstance(options, Mapping):
        return from_mapping(options)
    raise OptionsError("options", options, "a MatchOptions variant, a mapping or None")

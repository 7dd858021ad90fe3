"""
fuzzystrings.formats — Conversions around the matching engine.

Supported conversions:
    • str ↔ code point sequence
    • aligned sequence → printable string (gaps shown as a placeholder)
    • Match ↔ dict ↔ JSON string
"""

import json
from typing import Any, Iterable, Mapping

from .core import Char, Element, Match
from .options import CATEGORIES


GAP_PLACEHOLDER = "-"


# ═══════════════════════════════════════════════════════════════════
#  STRINGS ↔ CODE POINTS
# ═══════════════════════════════════════════════════════════════════

def string_to_codepoints(s: str) -> tuple[int, ...]:
    """One integer per character, as compare() sees the string."""
    return tuple(ord(c) for c in s)


def codepoints_to_string(seq: Iterable[int]) -> str:
    """Inverse of string_to_codepoints."""
    return "".join(chr(c) for c in seq)


def aligned_to_string(seq: Iterable[Element], placeholder: str = GAP_PLACEHOLDER) -> str:
    """
    Render an aligned sequence, one output character per position.

        aligned_to_string(alignment("pattern", "patten")[0])  →  "patte-n"
    """
    return "".join(
        chr(item.code) if isinstance(item, Char) else placeholder
        for item in seq
    )


# ═══════════════════════════════════════════════════════════════════
#  MATCH ↔ DICT / JSON
# ═══════════════════════════════════════════════════════════════════

def match_to_dict(match: Match) -> dict[str, int]:
    """The four counters keyed by name."""
    return {name: getattr(match, name) for name in CATEGORIES}


def match_from_dict(data: Mapping[str, Any]) -> Match:
    """
    Build a Match from counters keyed by name.

    Missing counters are 0.  Other keys (a stored score, say) are ignored.
    """
    return Match(**{name: int(data.get(name, 0)) for name in CATEGORIES})


def match_to_json(match: Match, **kwargs) -> str:
    """Convert a Match to a JSON object string."""
    return json.dumps(match_to_dict(match), **kwargs)


def match_from_json(text: str) -> Match:
    """Parse a JSON object string into a Match."""
    return match_from_dict(json.loads(text))

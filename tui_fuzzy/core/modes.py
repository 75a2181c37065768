"""Alternative filter modes for list widgets.

Comboboxes and autocompletes let the caller choose how typed text
filters options. FUZZY is the subsequence matcher; the other modes are
plain string tests scored so that shorter labels and earlier matches
rank first.
"""

from enum import Enum
from typing import Callable, Iterable, TypeVar

from .matcher import FuzzyMatcher
from .ranking import rank
from .result import EMPTY_MATCH, MatchResult, RankedEntry
from .scoring import fold

T = TypeVar("T")

# Base score for the non-fuzzy modes, reduced by label length and position
MODE_BASE_SCORE = 100


class FilterMode(str, Enum):
    """How typed text filters a list of options."""

    FUZZY = "fuzzy"
    PREFIX = "prefix"
    CONTAINS = "contains"
    EXACT = "exact"
    NONE = "none"

    @classmethod
    def parse(cls, name: str) -> "FilterMode":
        """Look up a mode by name, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            available = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown filter mode '{name}'. Available: {available}") from None


def _find(haystack: tuple[str, ...], needle: tuple[str, ...]) -> int:
    """Position of the first occurrence of needle in haystack, or -1."""
    n = len(needle)
    for start in range(len(haystack) - n + 1):
        if haystack[start:start + n] == needle:
            return start
    return -1


def match_with_mode(
    mode: FilterMode,
    pattern: str,
    target: str,
    matcher: FuzzyMatcher | None = None,
) -> MatchResult | None:
    """Match target against pattern using the given mode.

    Args:
        mode: Filter mode.
        pattern: Typed text.
        target: Option label.
        matcher: Prepared matcher for pattern, reused in FUZZY mode.

    Returns:
        MatchResult (indices cover the matched span) or None.
    """
    if not pattern or mode is FilterMode.NONE:
        return EMPTY_MATCH

    if mode is FilterMode.FUZZY:
        return (matcher or FuzzyMatcher(pattern)).match_str(target)

    folded_pattern = fold(pattern)
    folded_target = fold(target)
    n = len(folded_pattern)

    if mode is FilterMode.PREFIX:
        if folded_target[:n] != folded_pattern:
            return None
        return MatchResult(MODE_BASE_SCORE - len(target), tuple(range(n)))

    if mode is FilterMode.EXACT:
        if folded_target != folded_pattern:
            return None
        return MatchResult(MODE_BASE_SCORE, tuple(range(len(target))))

    # CONTAINS
    pos = _find(folded_target, folded_pattern)
    if pos < 0:
        return None
    return MatchResult(MODE_BASE_SCORE - pos - len(target), tuple(range(pos, pos + n)))


def filter_with_mode(
    mode: FilterMode,
    pattern: str,
    candidates: Iterable[T],
    key: Callable[[T], str] | None = None,
    limit: int | None = None,
    matcher: FuzzyMatcher | None = None,
) -> list[RankedEntry[T]]:
    """Filter and rank candidates using the given mode."""
    if mode is FilterMode.FUZZY:
        matcher = matcher or FuzzyMatcher(pattern)
        return matcher.filter(candidates, key=key, limit=limit)

    return rank(
        lambda label: match_with_mode(mode, pattern, label),
        candidates,
        key=key,
        limit=limit,
    )

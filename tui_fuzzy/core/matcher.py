"""Reusable fuzzy matcher and the one-shot matching functions.

The free functions build a throwaway FuzzyMatcher so there is exactly one
matching code path. Widgets that filter on every keystroke should build
one matcher per query and reuse it across all candidates.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, TypeVar

from .result import MatchResult, RankedEntry
from .scoring import DEFAULT_WEIGHTS, ScoringWeights, fold, score_subsequence

T = TypeVar("T")


@dataclass(frozen=True)
class FuzzyMatcher:
    """Immutable matcher for a single pattern.

    The pattern is case-folded once here instead of on every target.
    A matcher holds no mutable state and can be shared between threads.

    Example:
        >>> matcher = FuzzyMatcher("cp")
        >>> matcher.match_str("CommandPalette")
        MatchResult(score=6, indices=(0, 7))

        >>> strict = matcher.with_min_score(10)
        >>> strict.match_str("CommandPalette") is None
        True
    """

    pattern: str
    min_score: int = 0
    weights: ScoringWeights = DEFAULT_WEIGHTS
    _folded: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_folded", fold(self.pattern))

    def with_min_score(self, min_score: int) -> "FuzzyMatcher":
        """Return a copy that rejects matches scoring below min_score."""
        return replace(self, min_score=min_score)

    def is_empty(self) -> bool:
        """True if the pattern has no characters (show the list unfiltered)."""
        return not self.pattern

    def match_str(self, target: str) -> MatchResult | None:
        """Match the pattern against target.

        Returns:
            MatchResult, or None if the pattern is not a subsequence of
            target or the score is below min_score.
        """
        result = score_subsequence(self.pattern, self._folded, target, self.weights)
        if result is None or result.score < self.min_score:
            return None
        return result

    def filter(
        self,
        candidates: Iterable[T],
        key: Callable[[T], str] | None = None,
        limit: int | None = None,
    ) -> list[RankedEntry[T]]:
        """Matching candidates with their results, best first."""
        from .ranking import rank

        return rank(self.match_str, candidates, key=key, limit=limit)

    def filter_strings(
        self,
        candidates: Iterable[T],
        key: Callable[[T], str] | None = None,
        limit: int | None = None,
    ) -> list[T]:
        """Matching candidates only, best first."""
        return [entry.candidate for entry in self.filter(candidates, key=key, limit=limit)]


def as_matcher(pattern: "str | FuzzyMatcher") -> FuzzyMatcher:
    """Accept either a raw pattern or a prepared matcher."""
    if isinstance(pattern, FuzzyMatcher):
        return pattern
    return FuzzyMatcher(pattern)


def fuzzy_match(pattern: str, target: str) -> MatchResult | None:
    """Match pattern against target as a case-insensitive subsequence.

    Args:
        pattern: The search pattern (e.g., "fzf")
        target: The text to match against (e.g., "fuzzy finder")

    Returns:
        MatchResult with score and matched indices, or None. The empty
        pattern matches everything with score 0.
    """
    return FuzzyMatcher(pattern).match_str(target)


def matches(pattern: str, target: str) -> bool:
    """True if pattern fuzzy-matches target."""
    return fuzzy_match(pattern, target) is not None


def score(pattern: str, target: str) -> int:
    """Score of pattern against target, 0 when it does not match."""
    result = fuzzy_match(pattern, target)
    return result.score if result is not None else 0

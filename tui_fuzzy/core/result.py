"""Pure data classes for match results.

This module contains only data structures with no matching logic.
Scoring lives in scoring.py, ranking in ranking.py.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a successful match of a pattern against one target.

    Attributes:
        score: Relevance score. Only comparable between matches of the
            same pattern.
        indices: Strictly increasing character positions in the target,
            one per pattern character. Empty for an empty pattern.
    """

    score: int = 0
    indices: tuple[int, ...] = ()


# Result of matching the empty pattern against anything
EMPTY_MATCH = MatchResult()


@dataclass(frozen=True)
class RankedEntry(Generic[T]):
    """Candidate paired with its match result.

    Attributes:
        candidate: The original candidate, returned as-is.
        result: How the candidate matched.
    """

    candidate: T
    result: MatchResult

    @property
    def score(self) -> int:
        return self.result.score

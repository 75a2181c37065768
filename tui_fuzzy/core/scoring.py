"""Subsequence scoring for fuzzy matching.

This is the single source of truth for match scoring. FuzzyMatcher and
every free function in the package go through score_subsequence().

A pattern matches a target when all of its characters appear in the
target in order, case-insensitively, with anything in between. The scan
is greedy: each pattern character binds to the first eligible target
character, so the score is not guaranteed to be the best possible
alignment.
"""

from dataclasses import dataclass

from .result import EMPTY_MATCH, MatchResult


@dataclass(frozen=True)
class ScoringWeights:
    """Additive bonuses applied once per matched character.

    Attributes:
        base: Awarded for every matched character.
        case_exact: Target character has the same case as the pattern
            character typed by the user.
        consecutive: Target index directly follows the previous match.
        boundary: Match at the start of the target, after a
            non-alphanumeric character, or on a lower->upper transition
            (camelCase).
    """

    base: int = 1
    case_exact: int = 1
    consecutive: int = 3
    boundary: int = 2


DEFAULT_WEIGHTS = ScoringWeights()


def fold(text: str) -> tuple[str, ...]:
    """Case-fold text one character at a time.

    Folding per character keeps positions aligned with the original
    string even when a character lowers to more than one code point.
    """
    return tuple(ch.lower() for ch in text)


def is_boundary(target: str, index: int) -> bool:
    """Check whether target[index] starts a word or camelCase segment."""
    if index == 0:
        return True
    prev = target[index - 1]
    if not prev.isalnum():
        return True
    return prev.islower() and target[index].isupper()


def score_subsequence(
    pattern: str,
    folded_pattern: tuple[str, ...],
    target: str,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> MatchResult | None:
    """Match a pre-folded pattern against target in one forward scan.

    Args:
        pattern: The pattern as typed, used for the case-exact bonus.
        folded_pattern: fold(pattern), computed once by the caller.
        target: The candidate string.
        weights: Bonus weights.

    Returns:
        MatchResult with the total score and matched positions, or None
        if some pattern character could not be found in order.
    """
    if not folded_pattern:
        return EMPTY_MATCH
    if len(folded_pattern) > len(target):
        return None

    indices: list[int] = []
    score = 0
    cursor = 0
    prev_index = -1

    for i, ch in enumerate(target):
        if ch.lower() != folded_pattern[cursor]:
            continue

        score += weights.base
        if ch == pattern[cursor]:
            score += weights.case_exact
        if prev_index >= 0 and i == prev_index + 1:
            score += weights.consecutive
        if is_boundary(target, i):
            score += weights.boundary

        indices.append(i)
        prev_index = i
        cursor += 1
        if cursor == len(folded_pattern):
            return MatchResult(score=score, indices=tuple(indices))

    return None

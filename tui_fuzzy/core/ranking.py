"""Filter a collection of candidates and rank them by match score.

Ranking uses Python's stable sort, so candidates with equal scores keep
their input order. That keeps dropdowns from reshuffling between
keystrokes when the data set has not changed.

Every call scans all candidates; there is no index. This is meant for
interactive queries over a few thousand labels at most.
"""

import logging
from typing import Callable, Iterable, Sequence, TypeVar

from .matcher import FuzzyMatcher, as_matcher
from .result import MatchResult, RankedEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rank(
    match: Callable[[str], MatchResult | None],
    candidates: Iterable[T],
    key: Callable[[T], str] | None = None,
    limit: int | None = None,
) -> list[RankedEntry[T]]:
    """Apply a match function to every candidate and sort the hits.

    Args:
        match: Returns a MatchResult for a label, or None to drop it.
        candidates: Items to filter. Strings unless key is given.
        key: Extracts the label from a candidate.
        limit: Maximum number of entries to return (after sorting).

    Returns:
        Matching entries sorted by descending score, stable on ties.
    """
    entries = []
    total = 0
    for candidate in candidates:
        total += 1
        label = key(candidate) if key is not None else candidate
        result = match(label)
        if result is not None:
            entries.append(RankedEntry(candidate, result))

    entries.sort(key=lambda entry: entry.result.score, reverse=True)
    logger.debug("Ranked %d of %d candidates", len(entries), total)

    if limit is not None:
        return entries[:limit]
    return entries


def fuzzy_filter(
    pattern: "str | FuzzyMatcher",
    candidates: Iterable[T],
    key: Callable[[T], str] | None = None,
    limit: int | None = None,
) -> list[RankedEntry[T]]:
    """Filter and sort candidates by fuzzy match score.

    Args:
        pattern: The search pattern, or a prepared FuzzyMatcher
        candidates: Items to filter
        key: Extracts the label to match from each candidate
        limit: Maximum number of results to return

    Returns:
        List of RankedEntry, sorted by score (best first)
    """
    return as_matcher(pattern).filter(candidates, key=key, limit=limit)


def fuzzy_filter_strings(
    pattern: "str | FuzzyMatcher",
    candidates: Iterable[T],
    key: Callable[[T], str] | None = None,
    limit: int | None = None,
) -> list[T]:
    """Like fuzzy_filter(), but return only the candidates."""
    return as_matcher(pattern).filter_strings(candidates, key=key, limit=limit)


def match_first(
    pattern: "str | FuzzyMatcher",
    fields: Sequence[str | None],
) -> tuple[int, MatchResult] | None:
    """Match against several fields of one item, first hit wins.

    Used for items with a label plus secondary text, e.g. a command with
    a description and a category. Fields are tried in order and None
    entries are skipped. Each field goes through FuzzyMatcher.match_str,
    so the empty pattern hits the first present field unless the matcher
    has a floor above zero.

    Returns:
        (field index, MatchResult) for the first matching field, or None.
    """
    matcher = as_matcher(pattern)
    for i, text in enumerate(fields):
        if text is None:
            continue
        result = matcher.match_str(text)
        if result is not None:
            return i, result
    return None

"""Fuzzy subsequence matching and ranking for terminal UI widgets.

Usage:
    from tui_fuzzy import fuzzy_match, fuzzy_filter, FuzzyMatcher

    fuzzy_match("fzf", "fuzzy finder")        # MatchResult(score=..., indices=(0, 2, 6))
    fuzzy_filter("app", ["apple", "banana"])  # [RankedEntry("apple", ...)]

    matcher = FuzzyMatcher("cp").with_min_score(4)
    matcher.filter(labels)

    # Launch the demo TUI
    python -m tui_fuzzy
"""

from .core import (
    EMPTY_MATCH,
    DEFAULT_WEIGHTS,
    FilterMode,
    FuzzyMatcher,
    MatchResult,
    RankedEntry,
    ScoringWeights,
    filter_with_mode,
    fuzzy_filter,
    fuzzy_filter_strings,
    fuzzy_match,
    highlight_chars,
    highlight_spans,
    highlight_text,
    match_first,
    match_with_mode,
    matches,
    score,
)
from .config import FuzzyConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "EMPTY_MATCH",
    "DEFAULT_WEIGHTS",
    "FilterMode",
    "FuzzyMatcher",
    "MatchResult",
    "RankedEntry",
    "ScoringWeights",
    "filter_with_mode",
    "fuzzy_filter",
    "fuzzy_filter_strings",
    "fuzzy_match",
    "highlight_chars",
    "highlight_spans",
    "highlight_text",
    "match_first",
    "match_with_mode",
    "matches",
    "score",
    "FuzzyConfig",
    "load_config",
]

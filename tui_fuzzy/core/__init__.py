"""Core fuzzy matching engine.

This package is pure: no I/O, no caches, no widget state. The TUI layer
calls into it on every keystroke.
"""

# Core data structures
from .result import MatchResult, RankedEntry, EMPTY_MATCH

# Scoring
from .scoring import ScoringWeights, DEFAULT_WEIGHTS, score_subsequence

# Matching
from .matcher import FuzzyMatcher, fuzzy_match, matches, score

# Ranking
from .ranking import fuzzy_filter, fuzzy_filter_strings, match_first

# Filter modes
from .modes import FilterMode, match_with_mode, filter_with_mode

# Highlighting
from .highlight import highlight_chars, highlight_spans, highlight_text

__all__ = [
    # Core data structures
    "MatchResult",
    "RankedEntry",
    "EMPTY_MATCH",
    # Scoring
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "score_subsequence",
    # Matching
    "FuzzyMatcher",
    "fuzzy_match",
    "matches",
    "score",
    # Ranking
    "fuzzy_filter",
    "fuzzy_filter_strings",
    "match_first",
    # Filter modes
    "FilterMode",
    "match_with_mode",
    "filter_with_mode",
    # Highlighting
    "highlight_chars",
    "highlight_spans",
    "highlight_text",
]

"""Tests for subsequence scoring."""

import pytest

from tui_fuzzy import MatchResult, ScoringWeights, fuzzy_match, matches, score
from tui_fuzzy.core.scoring import fold, is_boundary, score_subsequence


class TestFuzzyMatch:
    """Tests for single pattern/target matching."""

    def test_non_contiguous_match(self):
        """Test that pattern characters may be separated."""
        result = fuzzy_match("fzf", "fuzzy finder")
        assert result is not None
        assert result.indices == (0, 2, 6)
        assert result.score == 10

    def test_camel_case_boundary(self):
        """Test matching at string start and a camelCase transition."""
        result = fuzzy_match("cp", "CommandPalette")
        assert result == MatchResult(score=6, indices=(0, 7))

    def test_consecutive_beats_scattered(self):
        """Test that contiguous matches score higher than separated ones."""
        assert score("abc", "abcxyz") == 14
        assert score("abc", "axbxcx") == 8
        assert score("abc", "abcxyz") > score("abc", "axbxcx")

    def test_no_match(self):
        """Test that missing characters give no result."""
        assert fuzzy_match("xyz", "abcdef") is None
        assert not matches("xyz", "abcdef")
        assert score("xyz", "abcdef") == 0

    def test_order_matters(self):
        """Test that characters must appear in pattern order."""
        assert fuzzy_match("ba", "ab") is None

    def test_empty_pattern(self):
        """Test that the empty pattern matches anything with score 0."""
        assert fuzzy_match("", "anything") == MatchResult(score=0, indices=())
        assert fuzzy_match("", "") == MatchResult(score=0, indices=())

    def test_empty_target(self):
        """Test that a non-empty pattern never matches an empty target."""
        assert fuzzy_match("a", "") is None

    def test_pattern_longer_than_target(self):
        """Test that a longer pattern cannot match."""
        assert fuzzy_match("abcd", "abc") is None

    def test_case_insensitive_existence(self):
        """Test that case does not affect whether a match exists."""
        assert matches("ABC", "abc")
        assert matches("abc", "ABC")
        assert matches("fZf", "FUZZY FINDER")

    def test_case_exact_bonus(self):
        """Test that matching the typed case scores higher."""
        assert score("abc", "abc") == 14
        assert score("ABC", "abc") == 11

    def test_separator_boundary(self):
        """Test the boundary bonus after non-alphanumeric characters."""
        result = fuzzy_match("fb", "file_browser.py")
        assert result == MatchResult(score=8, indices=(0, 5))

    def test_greedy_first_occurrence(self):
        """Test that each character binds to its first occurrence."""
        # "b" binds to index 1, not the boundary "b" at index 3
        result = fuzzy_match("ab", "ab_b")
        assert result.indices == (0, 1)

    def test_unicode_positions(self):
        """Test that indices are code point positions."""
        result = fuzzy_match("é", "CAFÉ")
        assert result == MatchResult(score=1, indices=(3,))

    def test_multi_codepoint_lowercase(self):
        """Test that a character lowering to two code points keeps indices aligned."""
        result = fuzzy_match("stan", "İstanbul")
        assert result.indices == (1, 2, 3, 4)

    def test_dotted_capital_i_is_not_plain_i(self):
        """Test that "İ" folds to two code points and so never equals "i"."""
        assert fuzzy_match("i", "İ") is None
        assert fuzzy_match("i", "İ".lower()) is not None

    def test_final_sigma_folds_without_context(self):
        """Test that "Σ" folds to "σ" on its own, even at the end of a word."""
        assert fuzzy_match("σ", "ΟΣ") == MatchResult(score=1, indices=(1,))
        # Whole-string lower() picks the final form, which is a different letter
        assert fuzzy_match("σ", "ΟΣ".lower()) is None

    def test_pure(self):
        """Test that repeated calls give identical results."""
        assert fuzzy_match("fzf", "fuzzy finder") == fuzzy_match("fzf", "fuzzy finder")

    @pytest.mark.parametrize(
        "pattern,target",
        [
            ("fzf", "fuzzy finder"),
            ("cp", "CommandPalette"),
            ("abc", "a-b-c"),
            ("aaa", "banana bandana"),
            ("READ", "src/README.md"),
        ],
    )
    def test_result_invariants(self, pattern, target):
        """Test index ordering, range and count for successful matches."""
        result = fuzzy_match(pattern, target)
        assert result is not None
        assert len(result.indices) == len(pattern)
        assert all(0 <= i < len(target) for i in result.indices)
        assert list(result.indices) == sorted(set(result.indices))
        assert result.score > 0


class TestScoringHelpers:
    """Tests for the lower-level scoring functions."""

    def test_fold(self):
        """Test per-character case folding."""
        assert fold("AbC") == ("a", "b", "c")
        assert fold("") == ()

    def test_is_boundary(self):
        """Test boundary detection."""
        assert is_boundary("abc", 0)
        assert is_boundary("a b", 2)
        assert is_boundary("aB", 1)
        assert not is_boundary("ab", 1)
        assert not is_boundary("AB", 1)

    def test_custom_weights(self):
        """Test that weights change the score."""
        weights = ScoringWeights(base=1, case_exact=0, consecutive=0, boundary=0)
        result = score_subsequence("abc", fold("abc"), "abcxyz", weights)
        assert result.score == 3

    def test_default_weights(self):
        """Test default weight values."""
        weights = ScoringWeights()
        assert weights.base == 1
        assert weights.case_exact == 1
        assert weights.consecutive == 3
        assert weights.boundary == 2

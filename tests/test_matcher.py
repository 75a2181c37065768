"""Tests for FuzzyMatcher."""

import dataclasses
import threading

import pytest

from tui_fuzzy import FuzzyMatcher, MatchResult, ScoringWeights, fuzzy_match, score


class TestFuzzyMatcher:
    """Tests for the reusable matcher."""

    def test_same_result_as_free_function(self):
        """Test that match_str agrees with fuzzy_match."""
        matcher = FuzzyMatcher("fzf")
        for target in ["fuzzy finder", "FZF", "no match here", ""]:
            assert matcher.match_str(target) == fuzzy_match("fzf", target)

    def test_default_min_score(self):
        """Test that the default floor accepts any match."""
        assert FuzzyMatcher("ab").min_score == 0

    def test_with_min_score_rejects_low_scores(self):
        """Test that matches below the floor are dropped."""
        matcher = FuzzyMatcher("abc").with_min_score(10)
        assert score("abc", "axbxcx") < 10
        assert matcher.match_str("axbxcx") is None

    def test_with_min_score_keeps_high_scores(self):
        """Test that matches at or above the floor are unchanged."""
        matcher = FuzzyMatcher("abc").with_min_score(14)
        assert matcher.match_str("abcxyz") == fuzzy_match("abc", "abcxyz")

    def test_with_min_score_returns_new_matcher(self):
        """Test that thresholding does not mutate the original."""
        original = FuzzyMatcher("abc")
        strict = original.with_min_score(100)
        assert original.min_score == 0
        assert strict.min_score == 100
        assert strict.pattern == "abc"
        assert original.match_str("abc") is not None
        assert strict.match_str("abc") is None

    def test_is_empty(self):
        """Test empty pattern detection."""
        assert FuzzyMatcher("").is_empty()
        assert not FuzzyMatcher("a").is_empty()

    def test_empty_pattern_matches_everything(self):
        """Test that the empty pattern matches with score 0."""
        assert FuzzyMatcher("").match_str("anything") == MatchResult()

    def test_empty_pattern_with_floor(self):
        """Test that a positive floor rejects the empty pattern's score of 0."""
        assert FuzzyMatcher("").with_min_score(1).match_str("anything") is None

    def test_frozen(self):
        """Test that matchers cannot be modified."""
        matcher = FuzzyMatcher("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            matcher.pattern = "xyz"

    def test_equality_and_hash(self):
        """Test that matchers compare by pattern, floor and weights."""
        assert FuzzyMatcher("ab") == FuzzyMatcher("ab")
        assert FuzzyMatcher("ab") != FuzzyMatcher("ab", min_score=3)
        assert len({FuzzyMatcher("ab"), FuzzyMatcher("ab")}) == 1

    def test_custom_weights(self):
        """Test that custom weights are used for scoring."""
        flat = ScoringWeights(base=1, case_exact=0, consecutive=0, boundary=0)
        assert FuzzyMatcher("abc", weights=flat).match_str("abcxyz").score == 3

    def test_filter_methods(self, fruits):
        """Test filtering through the matcher."""
        matcher = FuzzyMatcher("app")
        entries = matcher.filter(fruits)
        assert [e.candidate for e in entries] == ["apple", "application", "appetite"]
        assert matcher.filter_strings(fruits) == ["apple", "application", "appetite"]

    def test_shared_between_threads(self):
        """Test concurrent use of one matcher."""
        matcher = FuzzyMatcher("fzf")
        expected = fuzzy_match("fzf", "fuzzy finder")
        results = []

        def worker():
            for _ in range(100):
                results.append(matcher.match_str("fuzzy finder"))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert all(r == expected for r in results)

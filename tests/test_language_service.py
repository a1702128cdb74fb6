"""
Unit tests for language byte aggregation and ranking.
"""

import pytest

from profile_report.services.language_service import accumulate_language_bytes, aggregate_languages


class TestAccumulateLanguageBytes:
    """Test accumulate_language_bytes() summing and filtering."""

    def test_sums_across_repositories(self):
        totals = accumulate_language_bytes([{"Python": 300, "Rust": 100}, {"Python": 100, "Go": 50}])
        assert totals == {"Python": 400, "Rust": 100, "Go": 50}

    def test_ignored_languages_are_case_insensitive(self):
        totals = accumulate_language_bytes([{"HTML": 10, "Python": 5}], ignored_languages={"html"})
        assert totals == {"Python": 5}

    def test_invalid_counts_count_as_zero(self):
        totals = accumulate_language_bytes([{"Python": "lots", "Rust": None, "Go": -4, "C": 3}])
        assert totals == {"Python": 0, "Rust": 0, "Go": 0, "C": 3}


class TestAggregateLanguages:
    """Test aggregate_languages() percentage ranking."""

    def test_percentages(self):
        shares = aggregate_languages([{"Python": 300, "Rust": 100}, {"Python": 100}])
        assert [share.name for share in shares] == ["Python", "Rust"]
        assert shares[0].percent == pytest.approx(80.0)
        assert shares[1].percent == pytest.approx(20.0)

    def test_empty_input(self):
        assert aggregate_languages([]) == []
        assert aggregate_languages([{}, {}]) == []

    def test_zero_total_bytes(self):
        assert aggregate_languages([{"Python": 0}, {"Rust": 0}]) == []

    def test_ties_keep_first_seen_order(self):
        assert [s.name for s in aggregate_languages([{"A": 50, "B": 50}])] == ["A", "B"]
        assert [s.name for s in aggregate_languages([{"B": 50}, {"A": 50}])] == ["B", "A"]

    def test_truncates_to_top_ten(self):
        repos = [{f"Lang{index}": (index + 1) * 10} for index in range(12)]
        shares = aggregate_languages(repos)
        assert len(shares) == 10
        assert shares[0].name == "Lang11"
        percents = [share.percent for share in shares]
        assert percents == sorted(percents, reverse=True)
        assert sum(percents) <= 100 + 1e-9

    def test_sums_to_hundred_with_few_languages(self):
        shares = aggregate_languages([{"Python": 7, "Rust": 11}, {"Go": 13, "C": 1}])
        assert sum(share.percent for share in shares) == pytest.approx(100.0)

    def test_custom_top_n(self):
        shares = aggregate_languages([{"A": 3, "B": 2, "C": 1}], top_n=2)
        assert [share.name for share in shares] == ["A", "B"]

    def test_input_is_not_mutated(self):
        repos = [{"Python": 10}, {"Python": 5}]
        aggregate_languages(repos)
        assert repos == [{"Python": 10}, {"Python": 5}]

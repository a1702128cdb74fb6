"""
Unit tests for bar, badge, stats table, and activity row rendering.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from profile_report.models import ActivityEvent, Badge, LanguageShare, StatsSummary
from profile_report.services.github_service import parse_activity_event
from profile_report.views.ascii_view import (
    filled_cells,
    format_activity,
    format_stats,
    render_badge,
    render_badge_model,
    render_bar,
    render_language_line,
)


class TestRenderBar:
    """Test render_bar() fill, transition, and clamping."""

    @pytest.mark.parametrize("width", [1, 5, 20, 33])
    def test_length_is_width_plus_brackets(self, width):
        for percent in range(0, 101):
            bar = render_bar(percent, width)
            assert len(bar) == width + 2
            assert bar.startswith("[") and bar.endswith("]")

    def test_half_filled(self):
        assert render_bar(50, 20) == "[" + "█" * 10 + "▓" + "░" * 9 + "]"

    def test_full_bar_has_no_transition(self):
        assert render_bar(100, 20) == "[" + "█" * 20 + "]"

    def test_empty_bar_starts_with_transition(self):
        assert render_bar(0, 20) == "[" + "▓" + "░" * 19 + "]"

    def test_out_of_range_percent_is_clamped(self):
        assert render_bar(-15, 10) == render_bar(0, 10)
        assert render_bar(250, 10) == render_bar(100, 10)

    def test_nan_percent_renders_as_empty(self):
        assert filled_cells(math.nan, 10) == 0
        assert render_bar(math.nan, 10) == render_bar(0, 10)

    @pytest.mark.parametrize(
        "percent, width, expected",
        [(0, 20, 0), (33.3, 20, 7), (62.5, 20, 13), (99.9, 20, 20), (12.5, 4, 1), (40, 10, 4)],
    )
    def test_filled_glyph_count(self, percent, width, expected):
        assert filled_cells(percent, width) == expected
        assert render_bar(percent, width).count("█") == expected

    def test_single_transition_glyph_below_full(self):
        for percent in (0, 10, 45, 80, 94):
            assert render_bar(percent, 20).count("▓") == 1


class TestRenderBadge:
    """Test render_badge() box layout."""

    def test_stars_badge(self):
        lines = render_badge("Stars", "42", 20).split("\n")
        assert len(lines) == 3
        assert lines[0] == "╭" + "─" * 20 + "╮"
        assert lines[2] == "╰" + "─" * 20 + "╯"
        assert lines[1] == "│ Stars│ 42" + " " * 10 + "│"
        assert len(lines[0]) == len(lines[1]) == len(lines[2])

    def test_content_wider_than_minimum_widens_badge(self):
        lines = render_badge("Contributions", "123456789", 10).split("\n")
        assert lines[0] == "╭" + "─" * 26 + "╮"
        assert "Contributions" in lines[1]
        assert "123456789" in lines[1]
        assert {len(line) for line in lines} == {28}

    def test_empty_value(self):
        lines = render_badge("Followers", "", 0).split("\n")
        assert {len(line) for line in lines} == {15}

    def test_badge_model_matches_function(self):
        assert render_badge_model(Badge(label="Followers", value="7")) == render_badge("Followers", "7", 20)


class TestFormatStats:
    """Test format_stats() table layout."""

    def test_table_layout(self):
        table = format_stats(
            StatsSummary(commits=120, prs=8, issues=3, stars=42, repos_owned=11, contributed_to=4)
        )
        lines = table.split("\n")
        assert len(lines) == 7
        assert {len(line) for line in lines} == {96}
        assert lines[3] == "|   Commits   | " + "120".rjust(22) + " | Issues opened  | " + "3".rjust(36) + " |"
        assert lines[4] == "| PRs opened  | " + "8".rjust(22) + " | Stars received | " + "42".rjust(36) + " |"
        assert lines[5] == "| Repos owned | " + "11".rjust(22) + " | Contributed to | " + "4".rjust(36) + " |"

    def test_zero_summary_still_renders(self):
        table = format_stats(StatsSummary())
        assert table.count("\n") == 6
        assert table.split("\n")[3].endswith("0 |")


class TestFormatActivity:
    """Test format_activity() row layout."""

    def test_push_event_row(self):
        event = parse_activity_event(
            {"type": "PushEvent", "repo": {"name": "a/b"}, "created_at": "2024-01-02T03:04:05Z"}
        )
        assert format_activity(event) == "Push" + " " * 12 + " | " + "a/b" + " " * 12 + " | 2024-01-02 03:04"

    def test_timestamp_keeps_recorded_offset(self):
        event = ActivityEvent(
            kind="Create",
            repo_name="a/b",
            timestamp=datetime(2024, 1, 2, 23, 30, tzinfo=timezone(timedelta(hours=2))),
        )
        assert format_activity(event).endswith("2024-01-02 23:30")

    def test_long_names_are_not_truncated(self):
        event = ActivityEvent(
            kind="PullRequestReview", repo_name="someone/long-repository-name",
            timestamp=datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc),
        )
        assert format_activity(event) == "PullRequestReview | someone/long-repository-name | 2024-05-06 07:08"


class TestRenderLanguageLine:
    """Test render_language_line() row layout."""

    def test_language_row(self):
        line = render_language_line(LanguageShare(name="Rust", percent=62.5))
        assert line == "Rust" + " " * 8 + " " + render_bar(62.5, 20) + " 62.5%"

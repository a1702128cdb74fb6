#------------------------------------------------------------
#                        ascii_view.py
#          Renders bars, badges, the stats table, and
#                     activity log rows.

import math
from ..config import (
    ACTIVITY_KIND_WIDTH,
    ACTIVITY_REPO_WIDTH,
    ACTIVITY_TIMESTAMP_FORMAT,
    BADGE_BOTTOM_LEFT_GLYPH,
    BADGE_BOTTOM_RIGHT_GLYPH,
    BADGE_HORIZONTAL_GLYPH,
    BADGE_MIN_WIDTH,
    BADGE_TOP_LEFT_GLYPH,
    BADGE_TOP_RIGHT_GLYPH,
    BADGE_VERTICAL_GLYPH,
    BAR_EMPTY_GLYPH,
    BAR_FILLED_GLYPH,
    BAR_TRANSITION_GLYPH,
    BAR_WIDTH,
    LANGUAGE_NAME_WIDTH,
)
from ..models import ActivityEvent, Badge, Bar, LanguageShare, StatsSummary

LANGUAGE_LINE_TEMPLATE = "{name:<{name_width}} {bar} {percent:.1f}%"
ACTIVITY_LINE_TEMPLATE = "{kind:<{kind_width}} | {repo:<{repo_width}} | {timestamp}"

STATS_TABLE_TEMPLATE = (
    "+-------------+------------------------+----------------+--------------------------------------+\n"
    "|   Metric    |         Value          |     Metric     |                Value                 |\n"
    "+-------------+------------------------+----------------+--------------------------------------+\n"
    "|   Commits   | {commits:>22} | Issues opened  | {issues:>36} |\n"
    "| PRs opened  | {prs:>22} | Stars received | {stars:>36} |\n"
    "| Repos owned | {repos_owned:>22} | Contributed to | {contributed_to:>36} |\n"
    "+-------------+------------------------+----------------+--------------------------------------+"
)

# This function does compute how many bar cells are filled.
# It clamps the percentage and rounds half away from zero.
def filled_cells(percent: float, width: int) -> int:
    clamped = min(max(float(percent), 0.0), 100.0)
    if math.isnan(clamped):
        clamped = 0.0
    filled = int(math.floor(clamped / 100 * width + 0.5))
    return min(max(filled, 0), width)

# This function does render a fixed-width percentage bar.
# The cell at the fill boundary is a transition glyph; a full bar has none.
def render_bar(percent: float, width: int = BAR_WIDTH) -> str:
    width = max(int(width), 0)
    filled = filled_cells(percent, width)
    cells = []
    for index in range(width):
        if index < filled:
            cells.append(BAR_FILLED_GLYPH)
        elif index == filled:
            cells.append(BAR_TRANSITION_GLYPH)
        else:
            cells.append(BAR_EMPTY_GLYPH)
    return f"[{''.join(cells)}]"

def render_bar_model(bar: Bar) -> str:
    return render_bar(bar.percent, bar.width)

# This function does render a three-line bordered label/value box.
# It widens the box instead of truncating content that does not fit.
def render_badge(label: str, value: str, min_width: int = BADGE_MIN_WIDTH) -> str:
    total_width = max(min_width, len(label) + len(value) + 4)
    label_width = len(label) + 2
    value_width = max(total_width - label_width, 1)

    border = BADGE_HORIZONTAL_GLYPH * total_width
    label_part = " " + label.ljust(label_width - 2)
    value_part = " " + value.ljust(max(value_width - 2, 0)) + " "

    return "\n".join(
        [
            f"{BADGE_TOP_LEFT_GLYPH}{border}{BADGE_TOP_RIGHT_GLYPH}",
            f"{BADGE_VERTICAL_GLYPH}{label_part}{BADGE_VERTICAL_GLYPH}{value_part}{BADGE_VERTICAL_GLYPH}",
            f"{BADGE_BOTTOM_LEFT_GLYPH}{border}{BADGE_BOTTOM_RIGHT_GLYPH}",
        ]
    )

def render_badge_model(badge: Badge) -> str:
    return render_badge(badge.label, badge.value, badge.min_width)

# This function does render one ranked language row.
# It pairs the padded name with its bar and one-decimal percentage.
def render_language_line(share: LanguageShare, bar_width: int = BAR_WIDTH) -> str:
    return LANGUAGE_LINE_TEMPLATE.format(
        name=share.name,
        name_width=LANGUAGE_NAME_WIDTH,
        bar=render_bar_model(Bar(percent=share.percent, width=bar_width)),
        percent=share.percent,
    )

# This function does lay out the six contribution counters.
# It right-aligns values inside the fixed two-column table.
def format_stats(stats: StatsSummary) -> str:
    return STATS_TABLE_TEMPLATE.format(
        commits=stats.commits,
        prs=stats.prs,
        issues=stats.issues,
        stars=stats.stars,
        repos_owned=stats.repos_owned,
        contributed_to=stats.contributed_to,
    )

# This function does format one activity log row.
# The timestamp is rendered in the offset it was recorded with.
def format_activity(event: ActivityEvent) -> str:
    return ACTIVITY_LINE_TEMPLATE.format(
        kind=event.kind,
        kind_width=ACTIVITY_KIND_WIDTH,
        repo=event.repo_name,
        repo_width=ACTIVITY_REPO_WIDTH,
        timestamp=event.timestamp.strftime(ACTIVITY_TIMESTAMP_FORMAT),
    )

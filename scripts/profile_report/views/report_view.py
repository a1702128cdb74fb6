#------------------------------------------------------------
#                       report_view.py
#        Composes the rendered sections into the final
#                     profile document.

from datetime import datetime
from typing import List, Optional, Sequence
from ..art import HEADER_FIGURE, SMALL_ART_LINES
from ..config import (
    ACTIVITY_HEADING,
    BADGE_OFFSET,
    CLOSING_NOTE_LINES,
    CODE_FENCE,
    DEFAULT_ACTIVITY_LIMIT,
    FOLLOWERS_BADGE_LABEL,
    HEADER_CAPTION_LINE,
    LANGUAGE_LINE_WIDTH,
    LANGUAGES_FENCE,
    LANGUAGES_HEADING,
    LAST_UPDATED_FORMAT,
    LAST_UPDATED_TEMPLATE,
    SECTION_RULE,
    SEPARATOR_RULE_WIDTH,
    SMALL_ART_COLUMN_OFFSET,
    STARS_BADGE_LABEL,
    STATS_HEADING,
    WARNING_CALLOUT_LINE,
)
from ..models import Badge, ReportData
from .ascii_view import format_activity, format_stats, render_badge_model, render_language_line

CALLOUT_PREFIX = "> "
SECTION_SEPARATOR = "\n\n"

# The figure is measured in UTF-8 bytes and halved. This is a tuned visual
# parameter for the braille art, not a derived quantity.
def header_column_width(header_lines: Sequence[str]) -> int:
    widest = max((len(line.encode("utf-8")) for line in header_lines), default=0)
    return widest // 2 + 2

# This function does zip the header figure with the badge stack.
# Badges start badge_offset rows down; missing cells are left empty.
def interleave_badges(
    header_lines: Sequence[str],
    badge_lines: Sequence[str],
    badge_offset: int = BADGE_OFFSET,
) -> List[str]:
    column_width = header_column_width(header_lines)
    row_count = max(len(header_lines), len(badge_lines) + badge_offset)

    rows = []
    for index in range(row_count):
        header_part = header_lines[index] if index < len(header_lines) else ""
        badge_index = index - badge_offset
        badge_part = badge_lines[badge_index] if 0 <= badge_index < len(badge_lines) else ""
        rows.append(f"{header_part:<{column_width}} {badge_part}")
    return rows

# This function does attach the small art block to the bottom language rows.
# Only the last min(len(art), len(rows)) rows carry a suffix.
def interleave_language_art(
    language_lines: Sequence[str],
    art_lines: Sequence[str],
    line_width: int = LANGUAGE_LINE_WIDTH,
    art_offset: int = SMALL_ART_COLUMN_OFFSET,
) -> List[str]:
    first_art_row = len(language_lines) - len(art_lines)

    rows = []
    for index, line in enumerate(language_lines):
        if index >= first_art_row:
            art = art_lines[index - first_art_row]
            rows.append(f"{line:<{line_width}} {art:>{art_offset}}")
        else:
            rows.append(line)
    return rows

def build_badge_lines(follower_count: int, star_count: int) -> List[str]:
    badges = [
        Badge(label=FOLLOWERS_BADGE_LABEL, value=str(follower_count)),
        Badge(label=STARS_BADGE_LABEL, value=str(star_count)),
    ]
    stacked = "\n\n".join(render_badge_model(badge) for badge in badges)
    return stacked.splitlines()

def _render_header_section(data: ReportData, header_figure: str) -> str:
    rows = interleave_badges(
        header_figure.splitlines(),
        build_badge_lines(data.follower_count, data.star_count),
    )
    lines = [WARNING_CALLOUT_LINE, CALLOUT_PREFIX + CODE_FENCE]
    lines.extend(CALLOUT_PREFIX + row for row in rows)
    lines.append(CALLOUT_PREFIX + CODE_FENCE)
    lines.append(HEADER_CAPTION_LINE)
    return "\n".join(lines)

def _render_languages_section(data: ReportData, small_art: Sequence[str]) -> str:
    language_lines = [render_language_line(share) for share in data.languages]
    lines = [LANGUAGES_HEADING, LANGUAGES_FENCE]
    lines.extend(interleave_language_art(language_lines, small_art))
    lines.append(CODE_FENCE)
    return "\n".join(lines)

def _render_stats_section(data: ReportData) -> str:
    return "\n".join([STATS_HEADING, CODE_FENCE, format_stats(data.stats), CODE_FENCE])

def _render_activity_section(data: ReportData, generated_at: datetime, activity_limit: int) -> str:
    rule = "-" * SEPARATOR_RULE_WIDTH
    lines = [ACTIVITY_HEADING, CODE_FENCE, rule]
    lines.extend(format_activity(event) for event in data.activities[:activity_limit])
    lines.append(rule)
    lines.append("")
    lines.append(LAST_UPDATED_TEMPLATE.format(timestamp=generated_at.strftime(LAST_UPDATED_FORMAT)))
    lines.append(CODE_FENCE)
    return "\n".join(lines)

# This function does assemble the complete profile document.
# Empty inputs still produce every section's surrounding structure.
def render_report(
    data: ReportData,
    header_figure: str = HEADER_FIGURE,
    small_art: Sequence[str] = SMALL_ART_LINES,
    generated_at: Optional[datetime] = None,
    activity_limit: int = DEFAULT_ACTIVITY_LIMIT,
) -> str:
    if generated_at is None:
        generated_at = datetime.now()

    sections = [
        _render_header_section(data, header_figure),
        SECTION_RULE,
        _render_languages_section(data, small_art),
        _render_stats_section(data),
        _render_activity_section(data, generated_at, activity_limit),
        "\n".join(CLOSING_NOTE_LINES),
    ]
    return SECTION_SEPARATOR.join(sections) + "\n"

#------------------------------------------------------------
#                          config.py
#   Centralizes layout constants, paths, and config loading.

import json
import os
from typing import Set

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_README_OUTPUT_PATH = "README_OUTPUT_PATH"

# Default values for configuration parameters
DEFAULT_GITHUB_USERNAME = "m4ster-slave"
DEFAULT_LANGUAGE_TOP = 10
DEFAULT_ACTIVITY_LIMIT = 5

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_USER_AGENT = "profile-report"
GITHUB_REPOS_PER_PAGE = 100
GITHUB_MAX_REPO_PAGES = 10
GITHUB_REQUEST_TIMEOUT_SECONDS = 30

# Glyphs used by bars and badges.
BAR_FILLED_GLYPH = "█"
BAR_TRANSITION_GLYPH = "▓"
BAR_EMPTY_GLYPH = "░"
BADGE_HORIZONTAL_GLYPH = "─"
BADGE_VERTICAL_GLYPH = "│"
BADGE_TOP_LEFT_GLYPH = "╭"
BADGE_TOP_RIGHT_GLYPH = "╮"
BADGE_BOTTOM_LEFT_GLYPH = "╰"
BADGE_BOTTOM_RIGHT_GLYPH = "╯"

# Layout widths in character cells.
BAR_WIDTH = 20
BADGE_MIN_WIDTH = 20
BADGE_OFFSET = 4
LANGUAGE_NAME_WIDTH = 12
LANGUAGE_BAR_AND_PERCENT_WIDTH = 26
LANGUAGE_LINE_WIDTH = LANGUAGE_NAME_WIDTH + LANGUAGE_BAR_AND_PERCENT_WIDTH
SMALL_ART_COLUMN_OFFSET = 50
ACTIVITY_KIND_WIDTH = 16
ACTIVITY_REPO_WIDTH = 15
SEPARATOR_RULE_WIDTH = 60

ACTIVITY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
LAST_UPDATED_FORMAT = "%Y-%m-%d %H:%M:%S"
EVENT_TYPE_SUFFIX = "Event"

# Badge labels.
FOLLOWERS_BADGE_LABEL = "Followers"
STARS_BADGE_LABEL = "Stars"

# Document sections and messages.
WARNING_CALLOUT_LINE = "> [!WARNING]"
HEADER_CAPTION_LINE = "> <p>You’re coding at the bar ~ Im drunk at the office</p>"
SECTION_RULE = "---"
LANGUAGES_HEADING = "#### 🛠️ Languages"
STATS_HEADING = "#### 📊 Stats"
ACTIVITY_HEADING = "#### 🔥 Activity"
LANGUAGES_FENCE = "```css"
CODE_FENCE = "```"
LAST_UPDATED_TEMPLATE = "Last updated: {timestamp}"
CLOSING_NOTE_LINES = (
    "> [!NOTE]",
    "> <p align=\"center\">This README is <b>auto-generated</b> with Python and Actions"
    " - Credits to the original creator is"
    " <a href=\"https://github.com/vxfemboy/vxfemboy/\">@vxfemboy</a></p>",
)

# The message shown when no GITHUB_TOKEN is provided.
NO_GITHUB_TOKEN_MESSAGE = "ERROR: GITHUB_TOKEN not set - the contributions query requires a token"

# Directory paths for the project and configuration files.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
README_PATH = os.path.join(ROOT_DIR, "README.md")
CONFIG_DIR = os.path.join(SCRIPTS_DIR, "config")
IGNORE_LANGUAGES_PATH = os.path.join(CONFIG_DIR, "language_ignore_list.json")

def resolve_readme_path() -> str:
    configured = os.environ.get(ENV_README_OUTPUT_PATH, "").strip()
    if configured:
        if os.path.isabs(configured):
            return configured
        return os.path.join(ROOT_DIR, configured)
    return README_PATH

# This function does load JSON content from disk safely.
# It returns None when the file is missing or invalid.
def _load_json(path: str):
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            return json.load(file_handle)
    except (OSError, ValueError):
        return None

# This function does load the language ignore list.
# It returns normalized lowercase language names as a set.
def load_ignored_languages(path: str = IGNORE_LANGUAGES_PATH) -> Set[str]:
    data = _load_json(path)
    if not isinstance(data, list):
        return set()
    return {str(item).strip().lower() for item in data if str(item).strip()}

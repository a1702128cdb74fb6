#------------------------------------------------------------
#                          models.py
#     Defines dataclasses used by the report pipeline.

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Set
from .config import BADGE_MIN_WIDTH, BAR_WIDTH, DEFAULT_ACTIVITY_LIMIT, DEFAULT_LANGUAGE_TOP

@dataclass(frozen=True)
class LanguageShare:
    name: str
    percent: float

@dataclass(frozen=True)
class ActivityEvent:
    kind: str
    repo_name: str
    timestamp: datetime
    # Set when created_at could not be parsed and "now" was substituted.
    timestamp_fallback: bool = False

@dataclass(frozen=True)
class StatsSummary:
    commits: int = 0
    prs: int = 0
    issues: int = 0
    stars: int = 0
    repos_owned: int = 0
    contributed_to: int = 0

@dataclass(frozen=True)
class Badge:
    label: str
    value: str
    min_width: int = BADGE_MIN_WIDTH

@dataclass(frozen=True)
class Bar:
    percent: float
    width: int = BAR_WIDTH

@dataclass
class ReportConfig:
    github_username: str
    github_token: str
    readme_path: str
    language_top: int = DEFAULT_LANGUAGE_TOP
    activity_limit: int = DEFAULT_ACTIVITY_LIMIT
    ignored_languages: Set[str] = field(default_factory=set)

@dataclass(frozen=True)
class ReportData:
    activities: List[ActivityEvent]
    languages: List[LanguageShare]
    stats: StatsSummary
    follower_count: int
    star_count: int

#------------------------------------------------------------
#                        controller.py
#           Fetches profile data, renders the report,
#                   and writes the README.

import os
import sys
from datetime import datetime, timezone
from typing import List, Optional
import requests
from dateutil import relativedelta
from .config import (
    DEFAULT_ACTIVITY_LIMIT,
    DEFAULT_GITHUB_USERNAME,
    DEFAULT_LANGUAGE_TOP,
    ENV_GITHUB_TOKEN,
    ENV_GITHUB_USERNAME,
    NO_GITHUB_TOKEN_MESSAGE,
    load_ignored_languages,
    resolve_readme_path,
)
from .models import ActivityEvent, ReportConfig, ReportData
from .services.github_service import GitHubQueryError, GitHubService
from .services.language_service import aggregate_languages
from .services.readme_service import save_readme
from .views.report_view import render_report

TIMESTAMP_FALLBACK_WARNING_TEMPLATE = "WARNING: unparseable timestamp for {kind} on {repo!r}; using current time"
FETCH_ERROR_TEMPLATE = "ERROR fetching profile data: {error}"

# This function does return a human-friendly relative time string.
def relative_time(dt: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = relativedelta.relativedelta(now, dt)
    if delta.years > 0:
        return f"{delta.years} year{'s' if delta.years != 1 else ''} ago"
    if delta.months > 0:
        return f"{delta.months} month{'s' if delta.months != 1 else ''} ago"
    if delta.days > 0:
        return f"{delta.days} day{'s' if delta.days != 1 else ''} ago"
    if delta.hours > 0:
        return f"{delta.hours} hour{'s' if delta.hours != 1 else ''} ago"
    return "just now"

def load_config() -> ReportConfig:
    return ReportConfig(
        github_username=os.environ.get(ENV_GITHUB_USERNAME, DEFAULT_GITHUB_USERNAME),
        github_token=os.environ.get(ENV_GITHUB_TOKEN, ""),
        readme_path=resolve_readme_path(),
        language_top=DEFAULT_LANGUAGE_TOP,
        activity_limit=DEFAULT_ACTIVITY_LIMIT,
        ignored_languages=load_ignored_languages(),
    )

def _warn_timestamp_fallbacks(activities: List[ActivityEvent]) -> None:
    for event in activities:
        if event.timestamp_fallback:
            print(TIMESTAMP_FALLBACK_WARNING_TEMPLATE.format(kind=event.kind, repo=event.repo_name), file=sys.stderr)

# This function does gather every input the report needs.
# All requests complete before any rendering starts.
def collect_report_data(config: ReportConfig, github_service: GitHubService) -> ReportData:
    activities = github_service.fetch_activity()
    print(f"Fetched {len(activities)} activity events")
    _warn_timestamp_fallbacks(activities[:config.activity_limit])

    repos = github_service.fetch_repos()
    print(f"Fetched {len(repos)} repositories")
    if config.ignored_languages:
        print(f"Loaded ignored languages: {len(config.ignored_languages)}")
    languages = aggregate_languages(
        github_service.fetch_all_language_bytes(repos),
        config.ignored_languages,
        config.language_top,
    )
    print(f"Ranked {len(languages)} languages")

    stats = github_service.fetch_stats()
    followers = github_service.fetch_follower_count()
    print(f"Followers: {followers}, stars: {stats.stars}, commits: {stats.commits}")

    return ReportData(
        activities=activities,
        languages=languages,
        stats=stats,
        follower_count=followers,
        star_count=stats.stars,
    )

# This function does execute the full update workflow end-to-end.
# It fetches profile data, renders the document, and writes it out.
def run_update(config: ReportConfig) -> None:
    print(f"Building profile report for {config.github_username} …")
    github_service = GitHubService(config)
    data = collect_report_data(config, github_service)

    if data.activities:
        print(f"  Most recent activity: {relative_time(data.activities[0].timestamp)}")

    report = render_report(data, activity_limit=config.activity_limit)
    save_readme(config.readme_path, report)
    print(f"{config.readme_path} updated successfully.")

def main() -> int:
    config = load_config()
    if not config.github_token:
        print(NO_GITHUB_TOKEN_MESSAGE, file=sys.stderr)
        return 1

    try:
        run_update(config)
    except (requests.RequestException, GitHubQueryError) as exc:
        print(FETCH_ERROR_TEMPLATE.format(error=exc), file=sys.stderr)
        return 1
    return 0

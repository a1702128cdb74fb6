#------------------------------------------------------------
#                      github_service.py
#          Handles GitHub REST/GraphQL requests and
#            shapes responses into typed records.

import sys
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
import requests
from dateutil import parser as date_parser
from ..config import (
    EVENT_TYPE_SUFFIX,
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_GRAPHQL_URL,
    GITHUB_MAX_REPO_PAGES,
    GITHUB_REPOS_PER_PAGE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    GITHUB_USER_AGENT,
)
from ..models import ActivityEvent, ReportConfig, StatsSummary

USER_ENDPOINT_TEMPLATE = "/users/{username}"
USER_EVENTS_ENDPOINT_TEMPLATE = "/users/{username}/events/public"
USER_REPOS_ENDPOINT_TEMPLATE = "/users/{username}/repos"
REPO_QUERY_TEMPLATE = "{base}?per_page={per_page}&page={page}"

PAGE_RESULT_MESSAGE = "Page {page}: Found {count} repositories"
MISSING_LANGUAGES_URL_WARNING_TEMPLATE = "WARNING: no languages_url for {repo!r}; skipping"
LANGUAGES_REQUEST_WARNING_TEMPLATE = "WARNING: languages request for {repo!r} failed ({status}); skipping"
LANGUAGES_PAYLOAD_WARNING_TEMPLATE = "WARNING: unexpected languages payload for {repo!r}; skipping"
FOLLOWERS_WARNING_TEMPLATE = "WARNING: could not fetch followers for {username!r}: {error}"

CONTRIBUTIONS_QUERY = """
query($login: String!) {
  user(login: $login) {
    name
    contributionsCollection {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      restrictedContributionsCount
    }
    repositories(first: 100, ownerAffiliations: OWNER, isFork: false) {
      totalCount
      nodes {
        stargazerCount
      }
    }
    repositoriesContributedTo(first: 1, contributionTypes: [COMMIT, ISSUE, PULL_REQUEST, REPOSITORY]) {
      totalCount
    }
  }
}
"""

class GitHubQueryError(RuntimeError):
    pass

def _as_count(value) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    return 0

# This function does parse an RFC 3339 timestamp string.
# It returns the current UTC time and a fallback flag when parsing fails.
def parse_timestamp(value: str) -> Tuple[datetime, bool]:
    try:
        return date_parser.isoparse(value), False
    except (TypeError, ValueError, OverflowError):
        return datetime.now(timezone.utc), True

# This function does shape one raw event record into an ActivityEvent.
# Missing attributes become empty strings rather than errors.
def parse_activity_event(raw: dict) -> ActivityEvent:
    kind = str(raw.get("type") or "").removesuffix(EVENT_TYPE_SUFFIX)
    repo = raw.get("repo")
    repo_name = str(repo.get("name") or "") if isinstance(repo, dict) else ""
    timestamp, fallback = parse_timestamp(raw.get("created_at") or "")
    return ActivityEvent(kind=kind, repo_name=repo_name, timestamp=timestamp, timestamp_fallback=fallback)

# This function does reduce the contributions query payload to counters.
# Commit totals include restricted (private) contributions.
def parse_stats_summary(user: dict) -> StatsSummary:
    contributions = user.get("contributionsCollection") or {}
    repositories = user.get("repositories") or {}
    contributed = user.get("repositoriesContributedTo") or {}

    stars = sum(_as_count((node or {}).get("stargazerCount")) for node in repositories.get("nodes") or [])

    return StatsSummary(
        commits=_as_count(contributions.get("totalCommitContributions"))
        + _as_count(contributions.get("restrictedContributionsCount")),
        prs=_as_count(contributions.get("totalPullRequestContributions")),
        issues=_as_count(contributions.get("totalIssueContributions")),
        stars=stars,
        repos_owned=_as_count(repositories.get("totalCount")),
        contributed_to=_as_count(contributed.get("totalCount")),
    )

class GitHubService:

    def __init__(self, config: ReportConfig):
        self.config = config

    # This function does build request headers for GitHub API calls.
    # It adds auth headers when a token is configured.
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT_HEADER, "User-Agent": GITHUB_USER_AGENT}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    def _get(self, url: str) -> requests.Response:
        return requests.get(url, headers=self.headers(), timeout=GITHUB_REQUEST_TIMEOUT_SECONDS)

    # This function does fetch the user's recent public events.
    # Records are returned in API order, newest first.
    def fetch_activity(self) -> List[ActivityEvent]:
        url = f"{GITHUB_API_BASE_URL}{USER_EVENTS_ENDPOINT_TEMPLATE.format(username=self.config.github_username)}"
        response = self._get(url)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, list):
            return []
        return [parse_activity_event(item) for item in data if isinstance(item, dict)]

    # This function does fetch the user's repositories.
    # It pages through API results and returns a combined list.
    def fetch_repos(self) -> List[dict]:
        repos: List[dict] = []
        base_url = f"{GITHUB_API_BASE_URL}{USER_REPOS_ENDPOINT_TEMPLATE.format(username=self.config.github_username)}"
        page = 1

        while True:
            url = REPO_QUERY_TEMPLATE.format(base=base_url, per_page=GITHUB_REPOS_PER_PAGE, page=page)
            response = self._get(url)
            response.raise_for_status()
            data = response.json()
            if not data:
                break

            print(PAGE_RESULT_MESSAGE.format(page=page, count=len(data)))
            repos.extend(data)
            if len(data) < GITHUB_REPOS_PER_PAGE:
                break
            page += 1
            if page > GITHUB_MAX_REPO_PAGES:
                break

        return repos

    # This function does fetch the language byte map of one repository.
    # It returns None when the repository has to be skipped.
    def fetch_language_bytes(self, repo: dict) -> Optional[Dict[str, int]]:
        repo_name = repo.get("full_name") or repo.get("name") or ""
        url = repo.get("languages_url")
        if not url:
            print(MISSING_LANGUAGES_URL_WARNING_TEMPLATE.format(repo=repo_name), file=sys.stderr)
            return None

        try:
            response = self._get(url)
        except requests.RequestException as exc:
            print(LANGUAGES_REQUEST_WARNING_TEMPLATE.format(repo=repo_name, status=exc), file=sys.stderr)
            return None
        if response.status_code != 200:
            print(LANGUAGES_REQUEST_WARNING_TEMPLATE.format(repo=repo_name, status=response.status_code), file=sys.stderr)
            return None

        try:
            languages = response.json()
        except ValueError:
            languages = None
        if not isinstance(languages, dict):
            print(LANGUAGES_PAYLOAD_WARNING_TEMPLATE.format(repo=repo_name), file=sys.stderr)
            return None

        return {str(language): _as_count(count) for language, count in languages.items()}

    def fetch_all_language_bytes(self, repos: List[dict]) -> List[Dict[str, int]]:
        per_repo = []
        for repo in repos:
            usage = self.fetch_language_bytes(repo)
            if usage is not None:
                per_repo.append(usage)
        return per_repo

    # This function does fetch the follower count for the user.
    # Any request failure counts as zero followers.
    def fetch_follower_count(self) -> int:
        url = f"{GITHUB_API_BASE_URL}{USER_ENDPOINT_TEMPLATE.format(username=self.config.github_username)}"
        try:
            response = self._get(url)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            print(FOLLOWERS_WARNING_TEMPLATE.format(username=self.config.github_username, error=exc), file=sys.stderr)
            return 0
        if not isinstance(data, dict):
            return 0
        return _as_count(data.get("followers"))

    # This function does run the contributions GraphQL query.
    # It raises GitHubQueryError when the payload carries errors or no user.
    def fetch_stats(self) -> StatsSummary:
        response = requests.post(
            GITHUB_GRAPHQL_URL,
            json={"query": CONTRIBUTIONS_QUERY, "variables": {"login": self.config.github_username}},
            headers=self.headers(),
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        payload = response.json()

        if payload.get("errors"):
            raise GitHubQueryError(f"GraphQL errors: {payload['errors']}")
        user = (payload.get("data") or {}).get("user")
        if not user:
            raise GitHubQueryError(f"User {self.config.github_username!r} not found or no access permissions")

        return parse_stats_summary(user)

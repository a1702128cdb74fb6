"""
Pytest configuration and shared fixtures
"""
from datetime import datetime, timezone
from pathlib import Path
import sys

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))

from profile_report.models import ActivityEvent, LanguageShare, ReportData, StatsSummary  # noqa: E402


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, headers=None):
        self._payload = payload
        self.status_code = status_code
        self.headers = headers or {}

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self):
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def sample_report_data():
    events = [
        ActivityEvent(
            kind="Push",
            repo_name=f"user/repo{index}",
            timestamp=datetime(2024, 1, 2, 3, index, tzinfo=timezone.utc),
        )
        for index in range(7)
    ]
    languages = [
        LanguageShare(name="Rust", percent=62.5),
        LanguageShare(name="Python", percent=25.0),
        LanguageShare(name="Shell", percent=12.5),
    ]
    return ReportData(
        activities=events,
        languages=languages,
        stats=StatsSummary(commits=120, prs=8, issues=3, stars=42, repos_owned=11, contributed_to=4),
        follower_count=17,
        star_count=42,
    )

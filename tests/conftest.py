"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest
from helpers import ok

from repofetch.models import FetchOutcome, RepoIdentity, RepoMetadata, RepoStats


@pytest.fixture
def repo():
    return RepoIdentity(owner="owner", name="repo")


@pytest.fixture
def repo_json():
    """A trimmed ``GET /repos/owner/repo`` response."""
    return {
        "name": "repo",
        "full_name": "owner/repo",
        "clone_url": "https://github.com/owner/repo.git",
        "stargazers_count": 42,
        "subscribers_count": 7,
        "forks_count": 3,
        "size": 2,
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-12-31T00:00:00Z",
        "fork": False,
    }


@pytest.fixture
def now():
    return datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_stats(repo_json):
    """Build a ``RepoStats``; keyword arguments override single slots."""

    def _make(**overrides):
        slots = {
            "metadata": FetchOutcome[RepoMetadata].success(
                RepoMetadata.model_validate(repo_json)
            ),
            "open_issues": ok(12),
            "closed_issues": ok(30),
            "open_prs": ok(2),
            "merged_prs": ok(40),
            "closed_prs": ok(5),
            "help_wanted": ok(3),
            "good_first_issue": ok(1),
            "hacktoberfest": ok(0),
        }
        slots.update(overrides)
        return RepoStats(**slots)

    return _make

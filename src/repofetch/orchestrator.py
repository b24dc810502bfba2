"""Concurrent fetching of every stat for one repository.

One metadata request and eight issue searches run side by side. Each task
turns its own failure into a ``FetchOutcome``, so the join never
short-circuits: a flaky search only costs its own stat line. The metadata
fetch is the exception, since every core stat comes from it.
"""

import asyncio
import logging
from typing import Awaitable, NamedTuple, Optional, TypeVar

import httpx

from repofetch.config import Labels
from repofetch.exceptions import RepoMetadataError
from repofetch.fetcher import GitHubFetcher
from repofetch.models import FetchOutcome, RepoIdentity, RepoMetadata, RepoStats
from repofetch.query import SearchQuery, apply_authorization

logger = logging.getLogger(__name__)

HACKTOBERFEST_LABEL = "hacktoberfest"

T = TypeVar("T")


class StatQueries(NamedTuple):
    """The eight issue searches, in fetch order."""

    open_issues: SearchQuery
    closed_issues: SearchQuery
    open_prs: SearchQuery
    merged_prs: SearchQuery
    closed_prs: SearchQuery
    help_wanted: SearchQuery
    good_first_issue: SearchQuery
    hacktoberfest: SearchQuery


def build_queries(
    repo: RepoIdentity, labels: Labels, token: Optional[str] = None
) -> StatQueries:
    """Build the authorized searches for ``repo``."""
    base = SearchQuery.for_repo(repo)
    issues = base.is_("issue")
    prs = base.is_("pr")
    available = issues.is_("open").no_assignee()

    queries = StatQueries(
        open_issues=issues.is_("open"),
        closed_issues=issues.is_("closed"),
        open_prs=prs.is_("open"),
        merged_prs=prs.is_("merged"),
        closed_prs=prs.is_("closed").is_("unmerged"),
        help_wanted=available.label(labels.help_wanted),
        good_first_issue=available.label(labels.good_first_issue),
        hacktoberfest=available.label(HACKTOBERFEST_LABEL),
    )
    return StatQueries(*(apply_authorization(q, token) for q in queries))


def describe_failure(e: BaseException) -> str:
    """One-line summary of a fetch failure, e.g. ``HTTPStatusError 401``."""
    if isinstance(e, httpx.HTTPStatusError):
        return f"{type(e).__name__} {e.response.status_code}"
    return type(e).__name__


async def _capture(
    outcome_type: type[FetchOutcome], what: str, fetch: Awaitable[T]
) -> FetchOutcome[T]:
    try:
        value = await fetch
    except Exception as e:  # any failure is local to this stat
        logger.info("Couldn't fetch %s: %s", what, describe_failure(e))
        return outcome_type.failure(e)
    return outcome_type.success(value)


async def fetch_stats(
    fetcher: GitHubFetcher,
    repo: RepoIdentity,
    labels: Optional[Labels] = None,
    token: Optional[str] = None,
) -> RepoStats:
    """Run all nine fetches concurrently and collect their outcomes.

    Raises ``RepoMetadataError`` if the repository metadata couldn't be
    fetched; every search failure is kept as a failed outcome instead.
    """
    queries = build_queries(repo, labels or Labels(), token)

    metadata_task = _capture(
        FetchOutcome[RepoMetadata],
        f"{repo} metadata",
        fetcher.fetch_repo_metadata(repo),
    )
    search_tasks = [
        _capture(FetchOutcome[int], query.to_string(), fetcher.search_count(query))
        for query in queries
    ]
    metadata, *counts = await asyncio.gather(metadata_task, *search_tasks)

    if not metadata.ok:
        raise RepoMetadataError(
            f"Could not fetch remote repo data for {repo}: {metadata.error}"
        ) from metadata.exception

    return RepoStats(
        metadata=metadata,
        **dict(zip(StatQueries._fields, counts)),
    )

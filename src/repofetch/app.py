"""The repofetch pipeline: fetch, format, render."""

from datetime import datetime
from typing import Optional

import click
import httpx

from repofetch.art import GITHUB
from repofetch.config import RepofetchConfig
from repofetch.fetcher import GitHubFetcher
from repofetch.models import AsciiArt, RepoIdentity, StatLine
from repofetch.orchestrator import fetch_stats
from repofetch.render import render_panel
from repofetch.stats import format_stats


def style_stat(line: StatLine) -> str:
    return f"{line.icon}{click.style(line.label, bold=True)}: {line.value}"


async def build_report(
    repo: RepoIdentity,
    config: Optional[RepofetchConfig] = None,
    fetcher: Optional[GitHubFetcher] = None,
    art: AsciiArt = GITHUB,
    now: Optional[datetime] = None,
) -> str:
    """Fetch every stat for ``repo`` and return the full report text."""
    config = config or RepofetchConfig()
    fetcher = fetcher or GitHubFetcher()
    async with fetcher:
        stats = await fetch_stats(fetcher, repo, config.labels, config.token)

    lines = format_stats(stats, config.emojis, config.labels, now=now)
    header = click.style(f"{repo}:", bold=True)
    return header + "\n" + render_panel(art, [style_stat(line) for line in lines])


def describe_http_error(repo: RepoIdentity, e: httpx.HTTPStatusError, has_token: bool) -> str:
    """A user-facing explanation of a failed metadata request."""
    status = e.response.status_code
    if status == 404:
        return f"Repository '{repo}' not found. Check the owner/repo name and try again."
    if status == 401:
        return "Authentication failed. Please check your GitHub token."
    if status in (403, 429):
        if "rate limit" in str(e).lower():
            return str(e)
        if has_token:
            return "Access denied. The repository may be private or your token lacks permissions."
        return "Access denied and no GitHub token found. Set GITHUB_TOKEN or github_token in the config."
    return f"GitHub API error ({status}): {e.response.reason_phrase}"

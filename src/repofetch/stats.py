"""Turning fetch outcomes into stat lines.

Every stat is described by one ``StatRule`` in a single table. A rule
names the ``RepoStats`` slots it reads and how to turn a successful value
into text; failed slots become ``???``. Rules marked ``optional`` are
dropped entirely when their count is zero or unknown.
"""

from datetime import datetime, timezone
from typing import Any, Callable, NamedTuple, Optional

import humanize
from wcwidth import wcswidth

from repofetch.config import Emojis, Labels
from repofetch.models import FetchOutcome, RepoStats, StatLine

PLACEHOLDER = "???"
ICON_WIDTH = 2


class StatRule(NamedTuple):
    category: str  # attribute of ``Emojis``
    label: str
    sources: tuple[str, ...]  # attributes of ``RepoStats``, slash-joined
    transform: Callable[[Any], str] = str
    optional: bool = False


# ── Value transforms ──────────────────────────────────────────────────────

def humanize_timespan(when: datetime, now: datetime) -> str:
    """``when`` relative to ``now``, e.g. ``"3 years ago"``."""
    return humanize.naturaltime(when, when=now)


def humanize_size(size_kb: int) -> str:
    """GitHub's size in KB as a binary-unit size, e.g. ``"1.9 KiB"``."""
    try:
        return humanize.naturalsize(size_kb * 1000, binary=True)
    except (TypeError, ValueError, OverflowError):
        return PLACEHOLDER


def originality(fork: bool) -> str:
    return str(not fork).lower()


def pad_icon(icon: str, width: int = ICON_WIDTH) -> str:
    """Right-pad ``icon`` with spaces to ``width`` display columns."""
    columns = wcswidth(icon)
    if columns < 0:
        columns = len(icon)
    return icon + " " * max(0, width - columns)


# ── Rules ─────────────────────────────────────────────────────────────────

def stat_rules(labels: Labels, now: datetime) -> list[StatRule]:
    """The stats column, top to bottom."""
    return [
        StatRule("url", "URL", ("metadata",), lambda m: m.clone_url),
        StatRule("star", "stargazers", ("metadata",), lambda m: str(m.stargazers_count)),
        StatRule("subscriber", "subscribers", ("metadata",), lambda m: str(m.subscribers_count)),
        StatRule("fork", "forks", ("metadata",), lambda m: str(m.forks_count)),
        StatRule("issue", "open/closed issues", ("open_issues", "closed_issues")),
        StatRule(
            "pull_request",
            "open/merged/closed PRs",
            ("open_prs", "merged_prs", "closed_prs"),
        ),
        StatRule("created", "created", ("metadata",), lambda m: humanize_timespan(m.created_at, now)),
        StatRule("updated", "updated", ("metadata",), lambda m: humanize_timespan(m.updated_at, now)),
        StatRule("size", "size", ("metadata",), lambda m: humanize_size(m.size)),
        StatRule("original", "original", ("metadata",), lambda m: originality(m.fork)),
        StatRule(
            "help_wanted",
            f'available "{labels.help_wanted}" issues',
            ("help_wanted",),
            optional=True,
        ),
        StatRule(
            "good_first_issue",
            f'available "{labels.good_first_issue}" issues',
            ("good_first_issue",),
            optional=True,
        ),
        StatRule(
            "hacktoberfest",
            "available hacktoberfest issues",
            ("hacktoberfest",),
            optional=True,
        ),
    ]


# ── Formatting ────────────────────────────────────────────────────────────

def _render_value(outcome: FetchOutcome, transform: Callable[[Any], str]) -> str:
    if not outcome.ok:
        return PLACEHOLDER
    return transform(outcome.value)


def format_stat(rule: StatRule, stats: RepoStats, icon: str = "") -> Optional[StatLine]:
    """Format one rule, or return ``None`` if the line should be omitted."""
    outcomes = [getattr(stats, source) for source in rule.sources]
    if rule.optional and any(not o.ok or not o.value for o in outcomes):
        return None
    value = "/".join(_render_value(o, rule.transform) for o in outcomes)
    return StatLine(icon=pad_icon(icon), label=rule.label, value=value)


def format_stats(
    stats: RepoStats,
    emojis: Optional[Emojis] = None,
    labels: Optional[Labels] = None,
    now: Optional[datetime] = None,
) -> list[StatLine]:
    """Format every stat in display order, skipping omitted ones."""
    emojis = emojis or Emojis()
    labels = labels or Labels()
    now = now or datetime.now(timezone.utc)

    lines = []
    for rule in stat_rules(labels, now):
        line = format_stat(rule, stats, getattr(emojis, rule.category))
        if line is not None:
            lines.append(line)
    return lines

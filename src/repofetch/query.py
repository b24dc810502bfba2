"""GitHub issue-search query building.

Queries are immutable: every builder method returns a new ``SearchQuery``.
Serialisation is plain string composition; GitHub is the only judge of
whether a label exists, so a bad label simply fails its fetch later.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from repofetch.models import RepoIdentity

KINDS = ("issue", "pr")
STATES = ("open", "closed", "merged", "unmerged")


def quote_label(label: str) -> str:
    """Wrap a label in double quotes when it contains spaces or quotes."""
    if any(ch.isspace() for ch in label) or '"' in label:
        escaped = label.replace('"', '\\"')
        return f'"{escaped}"'
    return label


class SearchQuery(BaseModel):
    """An issue-search filter scoped to a single repository."""

    model_config = ConfigDict(frozen=True)

    repo: RepoIdentity
    kind: Optional[str] = None
    states: tuple[str, ...] = ()
    assignee_absent: bool = False
    labels: tuple[str, ...] = ()
    token: Optional[str] = None

    @classmethod
    def for_repo(cls, repo: RepoIdentity) -> "SearchQuery":
        return cls(repo=repo)

    def is_(self, qualifier: str) -> "SearchQuery":
        """Add an ``is:`` qualifier, either a kind or a state."""
        if qualifier in KINDS:
            if self.kind is not None:
                raise ValueError(f"query already has kind {self.kind!r}")
            return self.model_copy(update={"kind": qualifier})
        if qualifier in STATES:
            return self.model_copy(update={"states": self.states + (qualifier,)})
        raise ValueError(f"unknown is: qualifier {qualifier!r}")

    def no_assignee(self) -> "SearchQuery":
        return self.model_copy(update={"assignee_absent": True})

    def label(self, label: str) -> "SearchQuery":
        return self.model_copy(update={"labels": self.labels + (label,)})

    def _qualifiers(self) -> list[str]:
        parts = [f"repo:{self.repo}"]
        if self.kind is not None:
            parts.append(f"is:{self.kind}")
        parts.extend(f"is:{state}" for state in self.states)
        if self.assignee_absent:
            parts.append("no:assignee")
        parts.extend(f"label:{quote_label(label)}" for label in self.labels)
        return parts

    def to_string(self) -> str:
        """Render the query in GitHub search syntax."""
        if self.kind is None:
            raise ValueError("query has no kind; call is_('issue') or is_('pr')")
        return " ".join(self._qualifiers())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        # Keep tokens out of logs and tracebacks.
        auth = ", authorized" if self.token else ""
        return f"SearchQuery({' '.join(self._qualifiers())!r}{auth})"


def apply_authorization(query: SearchQuery, token: Optional[str]) -> SearchQuery:
    """Attach ``token`` to ``query`` if one is configured."""
    if not token:
        return query
    return query.model_copy(update={"token": token})

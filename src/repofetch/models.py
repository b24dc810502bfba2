"""Data models for repofetch."""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

T = TypeVar("T")


# ── Repository identity ───────────────────────────────────────────────────

class RepoIdentity(BaseModel):
    """A GitHub repository, scoped by owner and name."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @field_validator("owner", "name")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def parse(cls, text: str) -> "RepoIdentity":
        """Parse ``owner/name``."""
        owner, sep, name = text.strip().partition("/")
        if not sep or "/" in name:
            raise ValueError(f"expected OWNER/REPOSITORY, got {text!r}")
        return cls(owner=owner, name=name)

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


# ── Raw GitHub data ───────────────────────────────────────────────────────

class RepoMetadata(BaseModel):
    """The subset of ``GET /repos/{owner}/{repo}`` that repofetch shows."""

    clone_url: str
    stargazers_count: int = 0
    subscribers_count: int = 0
    forks_count: int = 0
    size: int = 0  # KB, as reported by GitHub
    created_at: datetime
    updated_at: datetime
    fork: bool = False


# ── Fetch results ─────────────────────────────────────────────────────────

class FetchOutcome(BaseModel, Generic[T]):
    """Either a fetched value or an opaque failure message, never both."""

    value: Optional[T] = None
    error: Optional[str] = None
    _exception: Optional[BaseException] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _exactly_one(self) -> "FetchOutcome[T]":
        if self.error is not None and self.value is not None:
            raise ValueError("an outcome cannot hold both a value and an error")
        return self

    @classmethod
    def success(cls, value: T) -> "FetchOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: object) -> "FetchOutcome[T]":
        outcome = cls(error=str(error) or type(error).__name__)
        if isinstance(error, BaseException):
            outcome._exception = error
        return outcome

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exception(self) -> Optional[BaseException]:
        """The exception behind a failure, when there was one."""
        return self._exception


class RepoStats(BaseModel):
    """Every outcome of one invocation, one slot per query."""

    metadata: FetchOutcome[RepoMetadata]
    open_issues: FetchOutcome[int]
    closed_issues: FetchOutcome[int]
    open_prs: FetchOutcome[int]
    merged_prs: FetchOutcome[int]
    closed_prs: FetchOutcome[int]
    help_wanted: FetchOutcome[int]
    good_first_issue: FetchOutcome[int]
    hacktoberfest: FetchOutcome[int]


# ── Rendering ─────────────────────────────────────────────────────────────

class StatLine(BaseModel):
    """One formatted line of the stats column."""

    icon: str = ""
    label: str
    value: str

    @property
    def text(self) -> str:
        return f"{self.icon}{self.label}: {self.value}"


class AsciiArt(BaseModel):
    """A static art block with its declared bounds."""

    text: str
    max_width: int = Field(default=40, gt=0)
    max_height: int = Field(default=20, gt=0)

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

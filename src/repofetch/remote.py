"""Resolving a local Git repository to its GitHub identity."""

import re
from pathlib import Path
from typing import Union

import git  # GitPython

from repofetch.exceptions import RemoteError
from repofetch.models import RepoIdentity

HTTP_REMOTE_RE = re.compile(r"^https?://github\.com/(?P<owner>[\w.\-]+)/(?P<name>[\w.\-]+?)(?:\.git)?/?$")
SSH_REMOTE_RE = re.compile(r"^(?:ssh://)?git@github\.com[:/](?P<owner>[\w.\-]+)/(?P<name>[\w.\-]+?)(?:\.git)?/?$")


def identity_from_remote(url: str) -> RepoIdentity:
    """Parse a GitHub HTTP(S) or SSH remote URL."""
    match = HTTP_REMOTE_RE.match(url) or SSH_REMOTE_RE.match(url)
    if match is None:
        raise RemoteError(f"Remote {url!r} doesn't look like a GitHub remote")
    return RepoIdentity(owner=match["owner"], name=match["name"])


def discover_identity(path: Union[str, Path] = ".", remote: str = "origin") -> RepoIdentity:
    """Find the repository containing ``path`` and parse its ``remote``."""
    try:
        repo = git.Repo(path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise RemoteError(f"Couldn't discover repository at {path}") from e
    try:
        url = repo.remote(remote).url
    except ValueError as e:
        raise RemoteError(f"Couldn't get remote {remote!r}") from e
    return identity_from_remote(url)

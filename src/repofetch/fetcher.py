"""GitHub data fetching via REST API."""

import logging
from typing import Optional

import httpx

from repofetch import __version__
from repofetch.models import RepoIdentity, RepoMetadata
from repofetch.query import SearchQuery

logger = logging.getLogger(__name__)

USER_AGENT = f"repofetch/{__version__}"


class GitHubFetcher:
    """Fetches repository metadata and search counts from the GitHub REST API.

    Credentials travel with each ``SearchQuery`` rather than with the client,
    so authorized and anonymous queries can share one connection pool.
    """

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": USER_AGENT,
        }

    @staticmethod
    def auth_headers(token: Optional[str]) -> dict[str, str]:
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    async def _get(self, path: str, **kwargs) -> httpx.Response:  # type: ignore[no-untyped-def]
        """GET that turns rate-limit responses into readable errors."""
        client = await self._client_instance()
        logger.debug("GET %s %s", path, kwargs.get("params", ""))
        resp = await client.get(path, **kwargs)
        if resp.status_code in (403, 429) and "rate limit" in resp.text.lower():
            remaining = resp.headers.get("x-ratelimit-remaining", "0")
            if kwargs.get("headers", {}).get("Authorization"):
                hint = f"Authenticated rate limit hit (remaining: {remaining})."
            else:
                hint = (
                    "Running unauthenticated. "
                    "Set GITHUB_TOKEN or github_token in the config for a higher limit."
                )
            raise httpx.HTTPStatusError(
                f"GitHub API rate limit exceeded. {hint}",
                request=resp.request,
                response=resp,
            )
        resp.raise_for_status()
        return resp

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Repo metadata ─────────────────────────────────────────────────────

    async def fetch_repo_metadata(self, repo: RepoIdentity) -> RepoMetadata:
        """Fetch stars, forks, size and friends for a repository.

        Always anonymous, so a bad token can only cost the search stats.
        """
        resp = await self._get(f"/repos/{repo.owner}/{repo.name}")
        return RepoMetadata.model_validate(resp.json())

    # ── Search ────────────────────────────────────────────────────────────

    async def search_count(self, query: SearchQuery, per_page: int = 1) -> int:
        """Return the ``total_count`` of an issue search.

        Only the count is needed, so a single-item page is requested.
        """
        resp = await self._get(
            "/search/issues",
            params={"q": query.to_string(), "per_page": str(per_page)},
            headers=self.auth_headers(query.token),
        )
        data = resp.json()
        return int(data["total_count"])

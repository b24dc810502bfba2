"""Tests for the fetcher module."""

import httpx
import pytest
import respx

from repofetch.fetcher import USER_AGENT, GitHubFetcher
from repofetch.query import SearchQuery, apply_authorization


@pytest.fixture
def github_fetcher():
    return GitHubFetcher()


class TestGitHubFetcher:
    def test_headers_include_api_version(self, github_fetcher):
        assert "X-GitHub-Api-Version" in github_fetcher.headers
        assert github_fetcher.headers["User-Agent"] == USER_AGENT

    def test_headers_never_carry_auth(self, github_fetcher):
        assert "Authorization" not in github_fetcher.headers

    def test_auth_headers(self):
        assert GitHubFetcher.auth_headers("tok") == {"Authorization": "Bearer tok"}
        assert GitHubFetcher.auth_headers(None) == {}

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_repo_metadata(self, github_fetcher, repo, repo_json):
        route = respx.get("https://api.github.com/repos/owner/repo").mock(
            return_value=httpx.Response(200, json=repo_json)
        )
        meta = await github_fetcher.fetch_repo_metadata(repo)
        await github_fetcher.close()

        assert meta.stargazers_count == 42
        assert meta.size == 2
        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_repo_metadata_not_found(self, github_fetcher, repo):
        respx.get("https://api.github.com/repos/owner/repo").mock(
            return_value=httpx.Response(404, json={"message": "Not Found"})
        )
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await github_fetcher.fetch_repo_metadata(repo)
        await github_fetcher.close()
        assert exc_info.value.response.status_code == 404


class TestSearchCount:
    @pytest.mark.asyncio
    @respx.mock
    async def test_search_count(self, github_fetcher, repo):
        route = respx.get("https://api.github.com/search/issues").mock(
            return_value=httpx.Response(200, json={"total_count": 12, "items": []})
        )
        query = SearchQuery.for_repo(repo).is_("issue").is_("open")
        count = await github_fetcher.search_count(query)
        await github_fetcher.close()

        assert count == 12
        request = route.calls.last.request
        assert request.url.params["q"] == "repo:owner/repo is:issue is:open"
        assert request.url.params["per_page"] == "1"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_count_uses_query_token(self, github_fetcher, repo):
        route = respx.get("https://api.github.com/search/issues").mock(
            return_value=httpx.Response(200, json={"total_count": 0})
        )
        query = apply_authorization(SearchQuery.for_repo(repo).is_("pr"), "tok")
        await github_fetcher.search_count(query)
        await github_fetcher.close()

        assert route.calls.last.request.headers["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_count_malformed_body(self, github_fetcher, repo):
        respx.get("https://api.github.com/search/issues").mock(
            return_value=httpx.Response(200, json={"items": []})
        )
        with pytest.raises(KeyError):
            await github_fetcher.search_count(SearchQuery.for_repo(repo).is_("pr"))
        await github_fetcher.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_validation_failed(self, github_fetcher, repo):
        respx.get("https://api.github.com/search/issues").mock(
            return_value=httpx.Response(422, json={"message": "Validation Failed"})
        )
        with pytest.raises(httpx.HTTPStatusError):
            await github_fetcher.search_count(SearchQuery.for_repo(repo).is_("pr"))
        await github_fetcher.close()


class TestRateLimit:
    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_error(self, github_fetcher, repo):
        """Test that rate limit 403 raises an exception with a hint."""
        respx.get("https://api.github.com/repos/owner/repo").mock(
            return_value=httpx.Response(
                403,
                text="API rate limit exceeded",
                headers={"x-ratelimit-remaining": "0"},
            )
        )
        with pytest.raises(httpx.HTTPStatusError, match="unauthenticated"):
            await github_fetcher.fetch_repo_metadata(repo)
        await github_fetcher.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_authenticated_rate_limit_error(self, github_fetcher, repo):
        respx.get("https://api.github.com/search/issues").mock(
            return_value=httpx.Response(
                403,
                text="API rate limit exceeded",
                headers={"x-ratelimit-remaining": "0"},
            )
        )
        query = apply_authorization(SearchQuery.for_repo(repo).is_("issue"), "tok")
        with pytest.raises(httpx.HTTPStatusError, match="Authenticated rate limit"):
            await github_fetcher.search_count(query)
        await github_fetcher.close()


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_close_without_client(self, github_fetcher):
        await github_fetcher.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_context_manager_closes(self, repo, repo_json):
        respx.get("https://api.github.com/repos/owner/repo").mock(
            return_value=httpx.Response(200, json=repo_json)
        )
        async with GitHubFetcher() as fetcher:
            await fetcher.fetch_repo_metadata(repo)
            assert fetcher._client is not None
        assert fetcher._client is None

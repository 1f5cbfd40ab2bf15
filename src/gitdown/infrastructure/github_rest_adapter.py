"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from gitdown.domain.entities import DirEntry, FetchTarget
from gitdown.domain.exceptions import (
    DownloadFailureError,
    GitHubStatusError,
    HttpClientError,
    OtherError,
    ReadFailureError,
    TreeDoesNotExistError,
)
from gitdown.domain.value_objects import RepositoryRef
from gitdown.infrastructure.github_schemas import parse_tree_response

logger = logging.getLogger(__name__)

GITHUB_API_ROOT = "https://api.github.com/repos"
_MEDIA_TYPE = "application/vnd.github.v3+json"


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_root: str = GITHUB_API_ROOT,
        user_agent: str = "gitdown",
    ) -> None:
        self._client = client
        self._api_root = api_root.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": _MEDIA_TYPE,
            "Content-Type": _MEDIA_TYPE,
            "User-Agent": user_agent,
        }
        self._raw_headers: dict[str, str] = {"User-Agent": user_agent}

    async def fetch_tree(self, repo: RepositoryRef) -> list[DirEntry]:
        """GET /{owner}/{repo}/git/trees/{ref}?recursive=1 → blob entries only."""
        ref = quote(repo.ref, safe="/")
        url = f"{self._api_root}/{repo.owner}/{repo.name}/git/trees/{ref}"
        try:
            resp = await self._api_get(url, params={"recursive": "1"})
        except (GitHubStatusError, HttpClientError) as exc:
            # A bad branch name is by far the usual reason this call fails.
            logger.debug("Tree listing failed for %s@%s: %s", repo.full_name, repo.ref, exc)
            raise TreeDoesNotExistError(tree=repo.ref, repo=repo.full_name) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise OtherError(status=f"GitHub API returned invalid JSON for {url}") from exc

        listing = parse_tree_response(payload)
        if listing.truncated:
            logger.warning(
                "Tree listing for %s@%s was truncated by GitHub; some files are missing",
                repo.full_name,
                repo.ref,
            )

        entries = [item.to_entry() for item in listing.tree if item.is_blob]
        logger.debug(
            "Tree %s@%s: %d entries, %d blobs",
            repo.full_name,
            repo.ref,
            len(listing.tree),
            len(entries),
        )
        return entries

    async def fetch_file_content(self, target: FetchTarget) -> str:
        """Fetch raw file content via raw.githubusercontent.com (no rate limit)."""
        try:
            async with self._client.stream(
                "GET", target.raw_url, headers=self._raw_headers
            ) as resp:
                if resp.status_code != 200:
                    raise DownloadFailureError(target.raw_url) from OtherError(
                        status=f"HTTP {resp.status_code}"
                    )
                try:
                    await resp.aread()
                except (httpx.HTTPError, httpx.StreamError) as exc:
                    raise ReadFailureError(target.raw_url) from exc
                return resp.text
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DownloadFailureError(target.raw_url) from exc

    async def _api_get(
        self,
        url: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url, headers=self._api_headers, params=params)
        except httpx.HTTPError as exc:
            raise HttpClientError() from exc

        if resp.status_code == 200:
            return resp

        raise GitHubStatusError(status=resp.status_code, msg=resp.text)

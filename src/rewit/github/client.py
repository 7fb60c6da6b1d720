"""GitHub REST client for repository discovery."""

import os
from collections.abc import AsyncIterator

import httpx
import structlog

from rewit import __version__
from rewit.config.settings import Settings
from rewit.core.exceptions import AuthenticationError, DiscoveryError

logger = structlog.get_logger(__name__)


def resolve_token(envar: str) -> str:
    """Read the access token from the named environment variable."""
    token = os.environ.get(envar, "").strip()
    if not token:
        raise AuthenticationError(
            f"No GitHub token found in environment variable {envar}",
            details={"envar": envar},
        )
    return token


def build_async_client(
    token: str,
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an authenticated ``httpx.AsyncClient`` for the GitHub API."""
    settings = settings or Settings()
    headers = {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "User-Agent": f"rewit/{__version__}",
        "X-GitHub-Api-Version": "2022-11-28",
    }
    return httpx.AsyncClient(
        base_url=settings.github_api_url,
        headers=headers,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )


class GitHubClient:
    """Lists the repositories visible to the authenticated user.

    Pagination follows the ``Link: <...>; rel="next"`` header until the
    provider stops sending one.
    """

    def __init__(self, http: httpx.AsyncClient, per_page: int = 100) -> None:
        self._http = http
        self._per_page = per_page

    async def list_repositories(self) -> AsyncIterator[str]:
        """Yield the full name (owner/name) of every repository, in listing order."""
        url: str | None = "/user/repos"
        params: dict | None = {"type": "all", "per_page": self._per_page}
        page = 0

        while url:
            page += 1
            response = await self._get(url, params)
            try:
                payload = response.json()
            except ValueError:
                payload = None
            if not isinstance(payload, list):
                raise DiscoveryError(
                    "Unexpected response from GitHub while listing repositories",
                    details={"page": page},
                )
            logger.debug("Fetched repository page", page=page, count=len(payload))

            for repo in payload:
                full_name = repo.get("full_name") if isinstance(repo, dict) else None
                if full_name:
                    yield full_name

            next_link = response.links.get("next")
            url = next_link.get("url") if next_link else None
            # The next link already carries the query string
            params = None

    async def _get(self, url: str, params: dict | None) -> httpx.Response:
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            raise DiscoveryError(
                f"Request to GitHub failed: {e}",
                details={"url": url},
            ) from e

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"GitHub rejected the token (HTTP {response.status_code}): {_error_message(response)}",
                details={"status_code": response.status_code},
            )
        if response.is_error:
            raise DiscoveryError(
                f"GitHub returned HTTP {response.status_code}: {_error_message(response)}",
                details={"status_code": response.status_code, "url": str(response.url)},
            )
        return response

    async def close(self) -> None:
        await self._http.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:300]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text[:300]

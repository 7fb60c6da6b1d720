"""Repository discovery service."""

import structlog

from rewit.git.url import DEFAULT_SSH_HOST, to_ssh_address
from rewit.github.client import GitHubClient

logger = structlog.get_logger(__name__)


def matches(full_name: str, include: str | None = None, exclude: str | None = None) -> bool:
    """Apply the include/exclude substring filters to a repository name.

    Exclude takes precedence over include.
    """
    should_include = not include or include in full_name
    should_exclude = bool(exclude) and exclude in full_name
    return should_include and not should_exclude


class DiscoveryService:
    """Builds the list of SSH remotes to rewrite from a GitHub account."""

    def __init__(self, client: GitHubClient, ssh_host: str = DEFAULT_SSH_HOST) -> None:
        self._client = client
        self._ssh_host = ssh_host

    async def discover(self, include: str | None = None, exclude: str | None = None) -> list[str]:
        """Return SSH addresses for every matching repository, in listing order.

        Raises AuthenticationError or DiscoveryError; nothing is returned
        for a partially listed account.
        """
        repos: list[str] = []
        async for full_name in self._client.list_repositories():
            keep = matches(full_name, include, exclude)
            logger.info("Evaluating repository", full_name=full_name, selected=keep)
            if keep:
                repos.append(to_ssh_address(full_name, host=self._ssh_host))
        return repos

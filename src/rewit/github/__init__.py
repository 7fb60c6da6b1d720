"""GitHub integration module for rewit."""

from rewit.github.client import GitHubClient, build_async_client, resolve_token

__all__ = ["GitHubClient", "build_async_client", "resolve_token"]

"""Exception hierarchy for rewit."""

from typing import Any


class RewitError(Exception):
    """Base exception for all rewit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RewitError):
    """The configuration document could not be read."""


class ConfigNotFoundError(ConfigurationError):
    """The configuration document does not exist."""


class ConfigParseError(ConfigurationError):
    """The configuration document is not valid YAML or has the wrong shape."""


class ValidationError(RewitError):
    """The configuration document is incomplete for a rewrite run."""


class AuthenticationError(RewitError):
    """The hosting provider credential is missing or was rejected."""


class DiscoveryError(RewitError):
    """Listing repositories from the hosting provider failed."""


class InvalidTargetError(RewitError):
    """A repository address does not yield a usable directory name."""


class RewriteError(RewitError):
    """A clone, history rewrite or push failed for one repository."""

    def __init__(
        self,
        message: str,
        target: str,
        stage: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details={"target": target, "stage": stage, **(details or {})})
        self.target = target
        self.stage = stage

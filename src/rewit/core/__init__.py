"""Core domain models and exceptions for rewit."""

from rewit.core.exceptions import (
    AuthenticationError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    DiscoveryError,
    InvalidTargetError,
    RewitError,
    RewriteError,
    ValidationError,
)
from rewit.core.models import (
    Identity,
    IdentityOverrides,
    RewitConfig,
    RewriteFailure,
    RewriteSummary,
)

__all__ = [
    # Models
    "Identity",
    "IdentityOverrides",
    "RewitConfig",
    "RewriteFailure",
    "RewriteSummary",
    # Exceptions
    "RewitError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ValidationError",
    "AuthenticationError",
    "DiscoveryError",
    "InvalidTargetError",
    "RewriteError",
]

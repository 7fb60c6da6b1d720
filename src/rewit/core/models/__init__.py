"""Domain models for rewit."""

from rewit.core.models.config import RewitConfig
from rewit.core.models.identity import Identity, IdentityOverrides
from rewit.core.models.rewrite import RewriteFailure, RewriteSummary

__all__ = [
    "Identity",
    "IdentityOverrides",
    "RewitConfig",
    "RewriteFailure",
    "RewriteSummary",
]

"""Business logic services for rewit."""

from rewit.services.discovery import DiscoveryService, matches
from rewit.services.rewrite import RewriteOrchestrator

__all__ = [
    "DiscoveryService",
    "RewriteOrchestrator",
    "matches",
]

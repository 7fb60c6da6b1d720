"""Command line interface for rewit."""

from rewit.cli.main import cli

__all__ = ["cli"]

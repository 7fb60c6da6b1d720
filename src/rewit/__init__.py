"""rewit: rewrite commit authorship across GitHub repositories."""

__version__ = "0.1.0"

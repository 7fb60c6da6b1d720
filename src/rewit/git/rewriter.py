"""History rewriters."""

from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from rewit.core.models.identity import Identity
from rewit.git.runner import GitRunner

logger = structlog.get_logger(__name__)

# Evaluated by filter-branch for every commit. Reads the identity from
# REWIT_NAME and REWIT_EMAIL.
ENV_FILTER = (
    'GIT_AUTHOR_NAME="$REWIT_NAME"; '
    'GIT_AUTHOR_EMAIL="$REWIT_EMAIL"; '
    'GIT_COMMITTER_NAME="$REWIT_NAME"; '
    'GIT_COMMITTER_EMAIL="$REWIT_EMAIL"; '
    "export GIT_AUTHOR_NAME GIT_AUTHOR_EMAIL GIT_COMMITTER_NAME GIT_COMMITTER_EMAIL"
)


class HistoryRewriter(ABC):
    """Rewrites author and committer identity on every reachable commit."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name of the implementation."""

    @abstractmethod
    def rewrite(self, repo_dir: Path, identity: Identity) -> None:
        """Rewrite all branches and tags of the repository in ``repo_dir``.

        Raises subprocess.CalledProcessError or OSError on failure.
        """


class FilterBranchRewriter(HistoryRewriter):
    """Rewrites history with ``git filter-branch``.

    Every ref is traversed (``-- --all``) and tags are rewritten in place
    under their original names (``--tag-name-filter cat``). Messages,
    dates, trees and parents are preserved.
    """

    def __init__(self, runner: GitRunner | None = None) -> None:
        self._runner = runner or GitRunner()

    @property
    def name(self) -> str:
        return "filter-branch"

    def rewrite(self, repo_dir: Path, identity: Identity) -> None:
        logger.info("Rewriting history", repo_dir=str(repo_dir), identity=str(identity))
        self._runner.run(
            "filter-branch",
            "--env-filter",
            ENV_FILTER,
            "--tag-name-filter",
            "cat",
            "--",
            "--all",
            cwd=repo_dir,
            env={
                "REWIT_NAME": identity.name,
                "REWIT_EMAIL": identity.email,
                "FILTER_BRANCH_SQUELCH_WARNING": "1",
            },
        )


class RewriterFactory:
    """Factory for creating history rewriters."""

    def __init__(self, name: str = "filter-branch", runner: GitRunner | None = None) -> None:
        self._name = name
        self._runner = runner

    def create_rewriter(self) -> HistoryRewriter:
        """Create a history rewriter based on configuration."""
        name = self._name.lower()

        if name == "filter-branch":
            return FilterBranchRewriter(runner=self._runner)
        else:
            raise ValueError(f"Unknown history rewriter: {self._name}")

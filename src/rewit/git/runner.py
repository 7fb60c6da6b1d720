"""Git command execution using subprocess."""

import os
import subprocess
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class GitRunner:
    """Runs git commands in an explicit directory.

    Output is not captured: clone, filter-branch and push diagnostics go
    straight to the operator's console.
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def run(
        self,
        *args: str,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        """Run a git command, raising CalledProcessError on failure."""
        command = [self._executable, *args]
        logger.debug("Running git", command=command, cwd=str(cwd) if cwd else None)
        subprocess.run(
            command,
            cwd=cwd,
            env={**os.environ, **env} if env else None,
            check=True,
        )

"""Rewrite orchestration: bare clone, history rewrite, force push."""

import subprocess
from collections.abc import Iterable
from pathlib import Path

import structlog

from rewit.core.exceptions import InvalidTargetError, RewriteError
from rewit.core.models.identity import Identity
from rewit.core.models.rewrite import RewriteFailure, RewriteSummary
from rewit.git.rewriter import FilterBranchRewriter, HistoryRewriter
from rewit.git.runner import GitRunner
from rewit.git.url import repo_dir_name

logger = structlog.get_logger(__name__)

_STAGE_VERBS = {
    "clone": "clone",
    "rewrite": "rewrite history for",
    "push": "force push",
}


class RewriteOrchestrator:
    """Rewrites commit authorship for a list of remotes, one at a time.

    Every step receives ``work_dir`` or the clone directory explicitly;
    the process working directory is never changed. Targets are still
    processed sequentially, in document order.

    With ``fail_fast`` the first failure aborts the run. Otherwise it is
    logged, recorded in the summary and the next target is processed.
    Partial clones are left on disk for inspection.
    """

    def __init__(
        self,
        work_dir: Path | None = None,
        runner: GitRunner | None = None,
        rewriter: HistoryRewriter | None = None,
        fail_fast: bool = False,
    ) -> None:
        self._work_dir = Path(work_dir or Path.cwd()).resolve()
        self._runner = runner or GitRunner()
        self._rewriter = rewriter or FilterBranchRewriter(runner=self._runner)
        self._fail_fast = fail_fast

    @property
    def work_dir(self) -> Path:
        return self._work_dir

    def run(self, targets: Iterable[str], identity: Identity) -> RewriteSummary:
        """Rewrite every target and return what succeeded and what failed."""
        summary = RewriteSummary()
        for target in targets:
            try:
                self.rewrite(target, identity)
            except InvalidTargetError as e:
                if self._fail_fast:
                    raise
                logger.error("Invalid repository URL", target=target)
                summary.failed.append(
                    RewriteFailure(target=target, stage="resolve", message=e.message)
                )
            except RewriteError as e:
                if self._fail_fast:
                    raise
                logger.error(e.message, target=e.target, stage=e.stage)
                summary.failed.append(
                    RewriteFailure(target=e.target, stage=e.stage, message=e.message)
                )
            else:
                summary.succeeded.append(target)
        return summary

    def rewrite(self, target: str, identity: Identity) -> Path:
        """Clone, rewrite and force-push a single remote.

        Returns the bare clone directory.
        """
        clone_dir = self._work_dir / f"{repo_dir_name(target)}.git"
        log = logger.bind(target=target, clone_dir=str(clone_dir))

        log.info("Cloning repository")

        def _clone() -> None:
            self._work_dir.mkdir(parents=True, exist_ok=True)
            self._runner.run("clone", "--bare", target, str(clone_dir), cwd=self._work_dir)

        self._step("clone", target, _clone)

        self._step("rewrite", target, lambda: self._rewriter.rewrite(clone_dir, identity))

        log.info("Force pushing rewritten history")
        self._step(
            "push",
            target,
            lambda: self._runner.run(
                "push", "--force", "--tags", target, "refs/heads/*", cwd=clone_dir
            ),
        )

        log.info("Repository rewritten")
        return clone_dir

    @staticmethod
    def _step(stage: str, target: str, action) -> None:
        try:
            action()
        except subprocess.CalledProcessError as e:
            raise RewriteError(
                f"Failed to {_STAGE_VERBS[stage]} repository {target}: "
                f"git exited with status {e.returncode}",
                target=target,
                stage=stage,
                details={"returncode": e.returncode},
            ) from e
        except OSError as e:
            raise RewriteError(
                f"Failed to {_STAGE_VERBS[stage]} repository {target}: {e}",
                target=target,
                stage=stage,
            ) from e

"""Tests for history rewriters."""

import subprocess
from pathlib import Path

import pytest

from rewit.core.models.identity import Identity
from rewit.git.rewriter import ENV_FILTER, FilterBranchRewriter, RewriterFactory
from rewit.git.runner import GitRunner


class RecordingRunner(GitRunner):
    """GitRunner that records commands instead of running them."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[tuple[str, ...], Path | None, dict | None]] = []

    def run(self, *args: str, cwd: Path | None = None, env: dict | None = None) -> None:
        self.calls.append((args, cwd, env))


@pytest.mark.unit
class TestFilterBranchRewriter:
    """Tests for FilterBranchRewriter."""

    def test_command_covers_all_refs(self, tmp_path: Path, identity: Identity) -> None:
        runner = RecordingRunner()
        FilterBranchRewriter(runner=runner).rewrite(tmp_path, identity)

        args, cwd, env = runner.calls[0]
        assert args[0] == "filter-branch"
        assert args[1:3] == ("--env-filter", ENV_FILTER)
        assert args[3:5] == ("--tag-name-filter", "cat")
        assert args[-2:] == ("--", "--all")
        assert cwd == tmp_path

    def test_identity_passed_through_environment(self, tmp_path: Path) -> None:
        runner = RecordingRunner()
        identity = Identity(name='O"Brien $HOME', email="ob@example.com")
        FilterBranchRewriter(runner=runner).rewrite(tmp_path, identity)

        _, _, env = runner.calls[0]
        assert env["REWIT_NAME"] == 'O"Brien $HOME'
        assert env["REWIT_EMAIL"] == "ob@example.com"
        assert env["FILTER_BRANCH_SQUELCH_WARNING"] == "1"
        assert "O\"Brien" not in ENV_FILTER

    def test_rewrites_bare_clone(
        self, origin_repo: Path, tmp_path: Path, identity: Identity, run_git
    ) -> None:
        clone = tmp_path / "clone.git"
        subprocess.run(
            ["git", "clone", "--bare", str(origin_repo), str(clone)],
            capture_output=True,
            check=True,
        )
        tree_before = run_git("rev-parse", "main^{tree}", cwd=clone)
        messages_before = run_git("log", "--format=%s", "main", cwd=clone)

        FilterBranchRewriter().rewrite(clone, identity)

        people = run_git(
            "log", "--branches", "--tags", "--format=%an <%ae>|%cn <%ce>", cwd=clone
        ).splitlines()
        assert len(people) == 3
        assert set(people) == {"Jane Doe <jane@example.com>|Jane Doe <jane@example.com>"}
        assert run_git("rev-parse", "main^{tree}", cwd=clone) == tree_before
        assert run_git("log", "--format=%s", "main", cwd=clone) == messages_before

    def test_rewrites_tags_in_place(
        self, origin_repo: Path, tmp_path: Path, identity: Identity, run_git
    ) -> None:
        clone = tmp_path / "clone.git"
        subprocess.run(
            ["git", "clone", "--bare", str(origin_repo), str(clone)],
            capture_output=True,
            check=True,
        )

        FilterBranchRewriter().rewrite(clone, identity)

        assert run_git("tag", "--list", cwd=clone).splitlines() == ["v0.1", "v0.2"]
        assert run_git("cat-file", "-t", "v0.2", cwd=clone) == "tag"
        assert run_git("log", "-1", "--format=%an", "v0.1", cwd=clone) == "Jane Doe"
        assert run_git("log", "-1", "--format=%an", "v0.2", cwd=clone) == "Jane Doe"


@pytest.mark.unit
class TestRewriterFactory:
    """Tests for RewriterFactory."""

    def test_filter_branch(self) -> None:
        rewriter = RewriterFactory("filter-branch").create_rewriter()
        assert isinstance(rewriter, FilterBranchRewriter)
        assert rewriter.name == "filter-branch"

    def test_unknown_rewriter(self) -> None:
        with pytest.raises(ValueError, match="Unknown history rewriter"):
            RewriterFactory("filter-repo").create_rewriter()

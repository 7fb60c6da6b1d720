"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from rewit.core.models.config import RewitConfig
from rewit.core.models.identity import Identity


def git(*args: str, cwd: Path) -> str:
    """Run a git command in a test repository and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def identity() -> Identity:
    """The identity every rewritten commit should carry."""
    return Identity(name="Jane Doe", email="jane@example.com")


@pytest.fixture
def sample_config(identity: Identity) -> RewitConfig:
    """A configuration document with a single repository."""
    return RewitConfig(user=identity, repos=["git@github.com:acme/widgets"])


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid rewit.yml and return its path."""
    path = tmp_path / "rewit.yml"
    path.write_text(
        "user:\n"
        "  name: Jane Doe\n"
        "  email: jane@example.com\n"
        "repos:\n"
        "  - git@github.com:acme/widgets\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def origin_repo(tmp_path: Path) -> Path:
    """Create a bare "remote" with two branches and two kinds of tags.

    Commits are authored by Old Name <old@example.com>.
    """
    source = tmp_path / "source"
    source.mkdir()
    git("init", cwd=source)
    git("config", "user.name", "Old Name", cwd=source)
    git("config", "user.email", "old@example.com", cwd=source)
    git("symbolic-ref", "HEAD", "refs/heads/main", cwd=source)

    (source / "README.md").write_text("# Widgets\n")
    git("add", ".", cwd=source)
    git("commit", "-m", "Initial commit", cwd=source)
    git("tag", "v0.1", cwd=source)

    (source / "widget.py").write_text("print('widget')\n")
    git("add", ".", cwd=source)
    git("commit", "-m", "Add widget", cwd=source)
    git("tag", "-a", "v0.2", "-m", "Release 0.2", cwd=source)

    git("checkout", "-b", "feature", cwd=source)
    (source / "feature.py").write_text("print('feature')\n")
    git("add", ".", cwd=source)
    git("commit", "-m", "Add feature", cwd=source)
    git("checkout", "main", cwd=source)

    origin = tmp_path / "origin" / "acme-widgets.git"
    origin.parent.mkdir()
    subprocess.run(
        ["git", "clone", "--bare", str(source), str(origin)],
        capture_output=True,
        check=True,
    )
    return origin


@pytest.fixture
def run_git():
    """Return a helper that runs git in a directory and returns stdout."""
    return git


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration made by CLI tests (bound to closed streams)."""
    yield
    structlog.reset_defaults()

"""Git integration module for rewit."""

from rewit.git.rewriter import FilterBranchRewriter, HistoryRewriter, RewriterFactory
from rewit.git.runner import GitRunner
from rewit.git.url import repo_dir_name, to_ssh_address

__all__ = [
    "FilterBranchRewriter",
    "GitRunner",
    "HistoryRewriter",
    "RewriterFactory",
    "repo_dir_name",
    "to_ssh_address",
]

"""Cached commit description lookups."""

from pathlib import Path

from git_unmerged.core.commit import CommitRecord
from git_unmerged.gateway.git.abc import Git


class CommitDescriber:
    """Resolve commit descriptions through git, once per SHA.

    Each describe() call for a SHA not seen before blocks on a `git log` query.
    """

    def __init__(self, git: Git, repo_root: Path) -> None:
        self._git = git
        self._repo_root = repo_root
        self._cache: dict[str, str] = {}

    def describe(self, commit: CommitRecord) -> str:
        if commit.sha not in self._cache:
            self._cache[commit.sha] = commit.resolve_description(self._git, self._repo_root)
        return self._cache[commit.sha]

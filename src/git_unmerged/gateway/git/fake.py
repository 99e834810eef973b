"""Fake git queries for testing."""

import subprocess
from pathlib import Path

from git_unmerged.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of Git.

    Constructor Injection: raw command output is pre-configured via the
    constructor. Queries with no configured output return an empty string.

    Query Tracking:
    ---------------
    Issued queries are recorded for test assertions via read-only properties:
    - cherry_calls: (upstream, branch) pairs passed to cherry()
    - log_calls: SHAs passed to log_commit()
    - listing_calls: "local"/"remote" for each branch listing
    """

    def __init__(
        self,
        *,
        repo_root: Path | None = None,
        local_branches: str = "",
        remote_branches: str = "",
        cherry_output: dict[tuple[str, str], str] | None = None,
        commit_logs: dict[str, str] | None = None,
        cherry_failures: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repo_root: Root returned by get_repo_root(), None to simulate
                running outside a repository
            local_branches: Raw `git branch` output
            remote_branches: Raw `git branch -r` output
            cherry_output: Mapping of (upstream, branch) -> raw `git cherry -v` output
            commit_logs: Mapping of sha -> raw `git log` description
            cherry_failures: Mapping of branch -> stderr; cherry() on that branch
                raises RuntimeError the way run_subprocess_with_context does
        """
        self._repo_root = repo_root
        self._local_branches = local_branches
        self._remote_branches = remote_branches
        self._cherry_output = cherry_output if cherry_output is not None else {}
        self._commit_logs = commit_logs if commit_logs is not None else {}
        self._cherry_failures = cherry_failures if cherry_failures is not None else {}

        self._cherry_calls: list[tuple[str, str]] = []
        self._log_calls: list[str] = []
        self._listing_calls: list[str] = []

    def get_repo_root(self, cwd: Path) -> Path | None:
        return self._repo_root

    def list_local_branches(self, repo_root: Path) -> str:
        self._listing_calls.append("local")
        return self._local_branches

    def list_remote_branches(self, repo_root: Path) -> str:
        self._listing_calls.append("remote")
        return self._remote_branches

    def cherry(self, repo_root: Path, upstream: str, branch: str) -> str:
        """Return configured cherry output, or raise a configured failure."""
        self._cherry_calls.append((upstream, branch))
        if branch in self._cherry_failures:
            cmd = ["git", "cherry", "-v", upstream, branch]
            stderr = self._cherry_failures[branch]
            raise RuntimeError(
                f"Failed to compare '{branch}' against '{upstream}': "
                f"command '{' '.join(cmd)}' exited with status 128\n{stderr}"
            ) from subprocess.CalledProcessError(128, cmd, stderr=stderr)
        return self._cherry_output.get((upstream, branch), "")

    def log_commit(self, repo_root: Path, sha: str) -> str:
        self._log_calls.append(sha)
        return self._commit_logs.get(sha, "")

    @property
    def cherry_calls(self) -> list[tuple[str, str]]:
        """Get the list of (upstream, branch) pairs compared.

        Returns a copy of the list to prevent external mutation.
        """
        return list(self._cherry_calls)

    @property
    def log_calls(self) -> list[str]:
        """Get the list of SHAs described."""
        return list(self._log_calls)

    @property
    def listing_calls(self) -> list[str]:
        """Get the list of branch listings issued ("local" or "remote")."""
        return list(self._listing_calls)

"""Production implementation of git queries using subprocess."""

import subprocess
from pathlib import Path

from git_unmerged.gateway.git.abc import Git
from git_unmerged.subprocess_utils import run_subprocess_with_context

COMMIT_LOG_FORMAT = "%h %ad %an - %s"


class RealGit(Git):
    """Production implementation of Git using subprocess.

    All queries execute actual git commands. Failures raise RuntimeError
    via run_subprocess_with_context.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize RealGit.

        Args:
            timeout: Seconds to allow each git command, or None for no limit
        """
        self._timeout = timeout

    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the root of the repository containing cwd."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def list_local_branches(self, repo_root: Path) -> str:
        """List local branches as printed by `git branch`."""
        result = run_subprocess_with_context(
            cmd=["git", "branch", "--no-color"],
            operation_context="list local branches",
            cwd=repo_root,
            timeout=self._timeout,
        )
        return result.stdout

    def list_remote_branches(self, repo_root: Path) -> str:
        """List remote-tracking branches as printed by `git branch -r`."""
        result = run_subprocess_with_context(
            cmd=["git", "branch", "-r", "--no-color"],
            operation_context="list remote branches",
            cwd=repo_root,
            timeout=self._timeout,
        )
        return result.stdout

    def cherry(self, repo_root: Path, upstream: str, branch: str) -> str:
        """Compare branch against upstream with `git cherry -v`."""
        result = run_subprocess_with_context(
            cmd=["git", "cherry", "-v", upstream, branch],
            operation_context=f"compare '{branch}' against '{upstream}'",
            cwd=repo_root,
            timeout=self._timeout,
        )
        return result.stdout

    def log_commit(self, repo_root: Path, sha: str) -> str:
        """Describe a single commit over the range `<sha>~1..<sha>`."""
        result = run_subprocess_with_context(
            cmd=["git", "log", f"--pretty=format:{COMMIT_LOG_FORMAT}", f"{sha}~1..{sha}"],
            operation_context=f"describe commit '{sha}'",
            cwd=repo_root,
            timeout=self._timeout,
        )
        return result.stdout

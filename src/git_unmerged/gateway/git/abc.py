"""Git query interface used by the branch comparison engine.

Architecture:
- Git: Abstract base class defining the read-only queries
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for the git queries git-unmerged issues.

    Every operation is read-only. Implementations return git's raw text output;
    parsing belongs to the core.
    """

    @abstractmethod
    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the root of the repository containing cwd.

        Args:
            cwd: Directory to start from

        Returns:
            Repository root, or None if cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path) -> str:
        """List local branches as printed by `git branch`.

        The current branch is marked with a leading "* ".

        Args:
            repo_root: Path to the repository root

        Returns:
            Raw newline-separated branch listing
        """
        ...

    @abstractmethod
    def list_remote_branches(self, repo_root: Path) -> str:
        """List remote-tracking branches as printed by `git branch -r`.

        Args:
            repo_root: Path to the repository root

        Returns:
            Raw newline-separated branch listing
        """
        ...

    @abstractmethod
    def cherry(self, repo_root: Path, upstream: str, branch: str) -> str:
        """Compare branch against upstream with `git cherry -v`.

        Args:
            repo_root: Path to the repository root
            upstream: Branch the commits are checked against
            branch: Branch whose commits are listed

        Returns:
            Raw output, one `<marker> <sha> <subject>` line per commit on branch
            that is not on upstream. "+" marks unmerged, "-" marks equivalent.
        """
        ...

    @abstractmethod
    def log_commit(self, repo_root: Path, sha: str) -> str:
        """Describe a single commit over the range `<sha>~1..<sha>`.

        Args:
            repo_root: Path to the repository root
            sha: Commit to describe

        Returns:
            Raw `git log` output formatted as "<short-sha> <date> <author> - <subject>"
        """
        ...

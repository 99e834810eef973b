"""Branch collection: load every candidate branch and compare it against upstream.

A BranchCollection starts unloaded. load() lists the branches for its scope,
drops the upstream itself, and runs `git cherry -v <upstream> <branch>` once
per remaining branch. The load is all-or-nothing: the first failing query
aborts it and the collection stays unloaded.
"""

import logging
import re
from pathlib import Path
from typing import Literal

from git_unmerged.core.branch import BranchRecord
from git_unmerged.core.commit import parse_cherry_output
from git_unmerged.gateway.git.abc import Git

logger = logging.getLogger(__name__)

BranchScope = Literal["local", "remote"]

# "* " marks the current branch, "+ " a branch checked out in another worktree
_SELECTION_MARKER_RE = re.compile(r"^[*+]\s+")


class BranchCollectionNotLoadedError(RuntimeError):
    """Branch data was requested before BranchCollection.load()."""


def clean_branch_output(output: str, upstream: str) -> list[str]:
    """Turn raw `git branch` output into sorted candidate branch names.

    Strips selection markers, skips blank lines, detached-HEAD entries such as
    "(HEAD detached at 1a2b3c4)" and symbolic refs such as
    "origin/HEAD -> origin/master". Any name containing upstream as a
    word-delimited token is excluded so upstream is never compared to itself.

    Args:
        output: Raw `git branch` or `git branch -r` output
        upstream: Upstream branch name

    Returns:
        Branch names sorted ascending
    """
    upstream_re = re.compile(rf"\b{re.escape(upstream)}\b")
    names: list[str] = []
    for line in output.splitlines():
        name = _SELECTION_MARKER_RE.sub("", line.strip())
        if not name or name.startswith("(") or " -> " in name:
            continue
        if upstream_re.search(name):
            continue
        names.append(name)
    return sorted(names)


def load_branch_record(git: Git, repo_root: Path, upstream: str, name: str) -> BranchRecord:
    """Compare one branch against upstream and build its record."""
    output = git.cherry(repo_root, upstream, name)
    commits = parse_cherry_output(output)
    logger.debug("branch=%s commits=%d", name, len(commits))
    return BranchRecord(name=name, commits=commits)


class BranchCollection:
    """Branch records for every local or remote branch, compared against upstream."""

    def __init__(self, git: Git, repo_root: Path, *, upstream: str, scope: BranchScope) -> None:
        self._git = git
        self._repo_root = repo_root
        self._upstream = upstream
        self._scope = scope
        self._branches: tuple[BranchRecord, ...] | None = None

    @property
    def upstream(self) -> str:
        return self._upstream

    @property
    def scope(self) -> BranchScope:
        return self._scope

    @property
    def is_loaded(self) -> bool:
        return self._branches is not None

    @property
    def branches(self) -> tuple[BranchRecord, ...]:
        """All loaded branch records, sorted by name.

        Raises:
            BranchCollectionNotLoadedError: If load() has not completed
        """
        if self._branches is None:
            raise BranchCollectionNotLoadedError(
                f"{self._scope} branches have not been loaded; call load() first"
            )
        return self._branches

    def load(self) -> None:
        """Query git for every candidate branch. Does nothing once loaded.

        Raises:
            RuntimeError: If any git query fails
            MalformedCommitRecordError: If cherry output has a malformed line
            UnrecognizedCommitMarkerError: If cherry output has an unknown marker
        """
        if self._branches is not None:
            logger.debug("%s branches already loaded, skipping", self._scope)
            return

        if self._scope == "remote":
            raw = self._git.list_remote_branches(self._repo_root)
        else:
            raw = self._git.list_local_branches(self._repo_root)

        names = clean_branch_output(raw, self._upstream)
        logger.debug("scope=%s upstream=%s candidates=%s", self._scope, self._upstream, names)

        self._branches = tuple(
            load_branch_record(self._git, self._repo_root, self._upstream, name) for name in names
        )

    def branches_with_pending_commits(self) -> list[BranchRecord]:
        """Branches with at least one commit not on upstream, sorted by name."""
        pending = [branch for branch in self.branches if branch.has_commits]
        return sorted(pending, key=lambda branch: branch.name)

    def has_pending_commits(self) -> bool:
        """True if any branch has a commit not on upstream."""
        return any(branch.has_commits for branch in self.branches)

"""Branch records: a branch name and the commits it holds beyond upstream."""

from dataclasses import dataclass

from git_unmerged.core.commit import CommitRecord


@dataclass(frozen=True)
class BranchRecord:
    """A branch and its commits not found on upstream, in `git cherry` order."""

    name: str
    commits: tuple[CommitRecord, ...]

    @property
    def has_commits(self) -> bool:
        return len(self.commits) > 0

    def unmerged_commits(self) -> list[CommitRecord]:
        """Commits with no equivalent change on upstream."""
        return [commit for commit in self.commits if commit.is_unmerged]

    def equivalent_commits(self) -> list[CommitRecord]:
        """Commits whose change is already on upstream under a different SHA."""
        return [commit for commit in self.commits if commit.is_equivalent]

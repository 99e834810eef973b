"""Commit records parsed from `git cherry -v` output.

Each line of `git cherry -v <upstream> <branch>` describes one commit on
branch that is not on upstream:

    + 1a2b3c4d add widget      (unmerged: no equivalent change upstream)
    - 5e6f7a8b fix typo        (equivalent: same patch upstream, different SHA)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from git_unmerged.gateway.git.abc import Git

CommitKind = Literal["unmerged", "equivalent"]

MARKER_KINDS: dict[str, CommitKind] = {
    "+": "unmerged",
    "-": "equivalent",
}


class MalformedCommitRecordError(ValueError):
    """A cherry line is missing its marker or SHA."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Malformed commit record: {line!r}")
        self.line = line


class UnrecognizedCommitMarkerError(ValueError):
    """A cherry line starts with a marker other than '+' or '-'."""

    def __init__(self, line: str, marker: str) -> None:
        super().__init__(f"Unrecognized commit marker {marker!r} in commit record: {line!r}")
        self.line = line
        self.marker = marker


@dataclass(frozen=True)
class CommitRecord:
    """One commit reported by `git cherry -v`.

    Attributes:
        line: The raw cherry line
        sha: Commit SHA (second token of the line)
        kind: "unmerged" for '+' lines, "equivalent" for '-' lines
    """

    line: str
    sha: str
    kind: CommitKind

    @property
    def is_unmerged(self) -> bool:
        return self.kind == "unmerged"

    @property
    def is_equivalent(self) -> bool:
        return self.kind == "equivalent"

    def resolve_description(self, git: Git, repo_root: Path) -> str:
        """Query git for a one-line description of this commit.

        Issues `git log` over `<sha>~1..<sha>` on every call and returns the
        output verbatim. Use CommitDescriber to reuse results.
        """
        return git.log_commit(repo_root, self.sha)


def parse_commit_line(line: str) -> CommitRecord:
    """Parse one line of `git cherry -v` output.

    Args:
        line: A non-blank cherry line

    Returns:
        The classified CommitRecord

    Raises:
        MalformedCommitRecordError: If the line has fewer than two tokens
        UnrecognizedCommitMarkerError: If the first token is not '+' or '-'
    """
    tokens = line.split()
    if len(tokens) < 2:
        raise MalformedCommitRecordError(line)

    marker = tokens[0]
    if marker not in MARKER_KINDS:
        raise UnrecognizedCommitMarkerError(line, marker)

    return CommitRecord(line=line, sha=tokens[1], kind=MARKER_KINDS[marker])


def parse_cherry_output(output: str) -> tuple[CommitRecord, ...]:
    """Parse full `git cherry -v` output, skipping blank lines."""
    return tuple(parse_commit_line(line) for line in output.splitlines() if line.strip())

"""Git query gateway."""

from git_unmerged.gateway.git.abc import Git
from git_unmerged.gateway.git.fake import FakeGit
from git_unmerged.gateway.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "FakeGit",
]

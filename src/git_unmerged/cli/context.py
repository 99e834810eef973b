"""Context object threaded through the CLI via Click's ctx.obj."""

from dataclasses import dataclass
from pathlib import Path

from git_unmerged.gateway.git.abc import Git
from git_unmerged.gateway.git.real import RealGit


@dataclass(frozen=True)
class UnmergedContext:
    """Dependencies for a git-unmerged run.

    Created at the CLI entry point. Tests build one around FakeGit and pass it
    as `obj` to CliRunner.invoke.
    """

    git: Git
    cwd: Path


def create_context() -> UnmergedContext:
    """Create the production context rooted at the current directory."""
    return UnmergedContext(git=RealGit(), cwd=Path.cwd())

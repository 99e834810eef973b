import tomllib
from dataclasses import dataclass
from pathlib import Path

from git_unmerged.core.branches import BranchScope

CONFIG_FILENAME = ".git-unmerged.toml"

DEFAULT_UPSTREAMS: dict[BranchScope, str] = {
    "local": "master",
    "remote": "origin/master",
}


@dataclass(frozen=True)
class FileConfig:
    """In-memory representation of `.git-unmerged.toml` at the repository root.

    Example:
      upstream = "main"
      remote_upstream = "origin/main"
      show_equivalent = true
    """

    upstream: str | None
    remote_upstream: str | None
    show_equivalent: bool | None


@dataclass(frozen=True)
class UnmergedConfig:
    """Settings for one git-unmerged run."""

    scope: BranchScope
    upstream: str
    show_equivalent: bool


def load_config(repo_root: Path) -> FileConfig:
    """Load .git-unmerged.toml from the repository root if present; otherwise return defaults."""
    cfg_path = repo_root / CONFIG_FILENAME
    if not cfg_path.exists():
        return FileConfig(upstream=None, remote_upstream=None, show_equivalent=None)

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    upstream = data.get("upstream")
    if upstream is not None:
        upstream = str(upstream)
    remote_upstream = data.get("remote_upstream")
    if remote_upstream is not None:
        remote_upstream = str(remote_upstream)
    show_equivalent = data.get("show_equivalent")
    if show_equivalent is not None:
        show_equivalent = bool(show_equivalent)

    return FileConfig(
        upstream=upstream,
        remote_upstream=remote_upstream,
        show_equivalent=show_equivalent,
    )


def resolve_config(
    file_config: FileConfig,
    *,
    scope: BranchScope,
    upstream: str | None,
    show_equivalent: bool,
) -> UnmergedConfig:
    """Merge command-line options over file config over built-in defaults.

    Args:
        file_config: Values read from .git-unmerged.toml
        scope: Which branches to compare
        upstream: --upstream value, None if not given
        show_equivalent: Whether -a was given

    Returns:
        Resolved UnmergedConfig
    """
    file_upstream = file_config.remote_upstream if scope == "remote" else file_config.upstream

    if upstream is not None:
        resolved_upstream = upstream
    elif file_upstream is not None:
        resolved_upstream = file_upstream
    else:
        resolved_upstream = DEFAULT_UPSTREAMS[scope]

    resolved_show_equivalent = show_equivalent or bool(file_config.show_equivalent)

    return UnmergedConfig(
        scope=scope,
        upstream=resolved_upstream,
        show_equivalent=resolved_show_equivalent,
    )

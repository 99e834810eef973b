"""Subprocess helpers for running git queries with error context."""

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment with interactive git prompts disabled."""
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a subprocess and re-raise failures with a descriptive message.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of what the command does,
            used in error messages (e.g. "list local branches")
        cwd: Working directory for the command
        check: Raise on non-zero exit status
        timeout: Seconds to wait before giving up, or None to wait forever

    Returns:
        The completed process with text stdout/stderr

    Raises:
        RuntimeError: If the command exits non-zero (when check=True) or times out.
            The original CalledProcessError/TimeoutExpired is available as __cause__.
    """
    logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=check,
            timeout=timeout,
            env=copied_env_for_git_subprocess(),
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = (
            f"Failed to {operation_context}: command '{' '.join(cmd)}' "
            f"exited with status {e.returncode}"
        )
        if stderr:
            message += f"\n{stderr}"
        raise RuntimeError(message) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(
            f"Failed to {operation_context}: command '{' '.join(cmd)}' "
            f"timed out after {e.timeout} seconds"
        ) from e

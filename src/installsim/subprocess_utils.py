"""Subprocess execution with enriched error reporting."""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Wraps subprocess.run() to catch CalledProcessError and FileNotFoundError and
    re-raise them as RuntimeError with operation context, output, and command
    details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance with text stdout/stderr captured

    Raises:
        RuntimeError: If command fails (with check=True) or is not found
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        stdout_stripped = (e.stdout or "").strip()
        if stdout_stripped:
            error_msg += f"\nstdout: {stdout_stripped}"

        stderr_stripped = (e.stderr or "").strip()
        if stderr_stripped:
            error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e

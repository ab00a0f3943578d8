"""Thin subprocess wrapper shared by provisioning and test execution."""

# ruff: noqa: S603

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
import subprocess  # nosec B404 - argv lists are built from validated tool paths

CommandRunner = Callable[..., "subprocess.CompletedProcess[str]"]


def run_command(
    argv: Sequence[str],
    *,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    capture: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run ``argv`` to completion without a shell.

    With ``capture`` unset the child inherits stdin, stdout and stderr.
    The caller inspects ``returncode``; this function never raises on a
    non-zero exit.
    """
    return subprocess.run(  # nosec S603
        list(argv),
        cwd=cwd,
        env=dict(env) if env is not None else None,
        capture_output=capture,
        text=True,
        check=False,
    )

"""Run prysk with inherited standard streams and normalize its exit status."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path

from cram_launcher.errors import LauncherError, TestRunFailed
from cram_launcher.process import CommandRunner, run_command
from cram_launcher.runner.command import PryskCommand

logger = logging.getLogger(__name__)


def execute(
    command: PryskCommand,
    *,
    cwd: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    runner: CommandRunner = run_command,
) -> None:
    """Run ``command`` and raise :class:`TestRunFailed` on a non-zero exit."""
    if cwd is not None and not Path(cwd).is_dir():
        raise LauncherError(f"Working directory does not exist: {cwd}")
    try:
        completed = runner(command.argv, cwd=cwd, env=environ)
    except FileNotFoundError as exc:
        missing = exc.filename or command.executable
        raise LauncherError(f"Cannot run prysk, not found: {missing}") from exc
    if completed.returncode != 0:
        raise TestRunFailed(completed.returncode)


def run_tests(
    command: PryskCommand,
    *,
    cwd: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    runner: CommandRunner = run_command,
) -> int:
    """Announce and run ``command``; return 0 on success and 1 on failure.

    prysk has already printed the failing tests to the inherited streams, so
    a failure adds nothing beyond the exit status.
    """
    print(f"Running {command.display()}", flush=True)
    try:
        execute(command, cwd=cwd, environ=environ, runner=runner)
    except TestRunFailed as exc:
        logger.debug("prysk exited with code %s", exc.returncode)
        return 1
    return 0

"""Exception hierarchy for the launcher."""

from __future__ import annotations

from collections.abc import Sequence


class LauncherError(RuntimeError):
    """Base class for failures the CLI reports and maps to exit code 1."""


class ToolNotAllowedError(LauncherError, ValueError):
    """Raised when a tool outside the allow-list is resolved."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Tool not allowed: {tool}")
        self.tool = tool


class ProvisioningError(LauncherError):
    """A provisioning step exited with a non-zero status."""

    def __init__(self, step: str, argv: Sequence[str], returncode: int) -> None:
        command = " ".join(argv)
        super().__init__(f"{step} failed with exit code {returncode}: {command}")
        self.step = step
        self.argv = list(argv)
        self.returncode = returncode


class TestRunFailed(LauncherError):
    """The prysk run exited with a non-zero status."""

    __test__ = False

    def __init__(self, returncode: int) -> None:
        super().__init__(f"prysk exited with code {returncode}")
        self.returncode = returncode

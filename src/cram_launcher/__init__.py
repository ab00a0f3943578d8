"""Provision a prysk environment and run the cram-style integration suite."""

from __future__ import annotations

from .errors import LauncherError, ProvisioningError, TestRunFailed, ToolNotAllowedError

__all__ = [
    "LauncherError",
    "ProvisioningError",
    "TestRunFailed",
    "ToolNotAllowedError",
]

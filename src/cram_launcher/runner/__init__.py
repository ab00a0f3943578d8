"""Compose and execute the prysk invocation."""

from __future__ import annotations

from .command import (
    PryskCommand,
    build_flags,
    compose_command,
    resolve_test_path,
)
from .execute import execute, run_tests

__all__ = [
    "PryskCommand",
    "build_flags",
    "compose_command",
    "execute",
    "resolve_test_path",
    "run_tests",
]

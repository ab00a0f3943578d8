"""Utilities package for the launcher: logging and version resolution."""

from __future__ import annotations

from .logger_manager import LoggerConfig, LoggerManager
from .version import get_runtime_version

__all__ = [
    "LoggerConfig",
    "LoggerManager",
    "get_runtime_version",
]

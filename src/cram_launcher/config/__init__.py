"""Launcher configuration: environment variables, defaults and YAML settings."""

from __future__ import annotations

from .env import interactive_requested, load_environment, suppress_update_notifiers
from .settings import LauncherConfig, LoggingConfig

__all__ = [
    "LauncherConfig",
    "LoggingConfig",
    "interactive_requested",
    "load_environment",
    "suppress_update_notifiers",
]

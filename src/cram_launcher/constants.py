"""Fixed names shared by the launcher."""

from __future__ import annotations

VENV_NAME = ".cram_env"
PRYSK_VERSION = "0.15.2"
"""Pinned prysk release installed into the launcher environment."""
TESTS_DIR = "tests"
DEFAULT_SHELL = "bash"

INTERACTIVE_ENV_VAR = "PRYSK_INTERACTIVE"
NOTIFIER_ENV_VAR = "NO_UPDATE_NOTIFIER"

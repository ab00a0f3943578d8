"""Explicit default settings for the launcher."""

from __future__ import annotations

from cram_launcher.constants import DEFAULT_SHELL, PRYSK_VERSION, TESTS_DIR, VENV_NAME

DEFAULT_CONFIG_PATH = "config/launcher.yml"

LAUNCHER_DEFAULTS: dict[str, object] = {
    "venv_name": VENV_NAME,
    "prysk_version": PRYSK_VERSION,
    "tests_dir": TESTS_DIR,
    "shell": DEFAULT_SHELL,
    "python": None,
}

LOGGING_DEFAULTS: dict[str, object] = {
    "log_level": "INFO",
    "log_dir": "artifacts/logs",
    "log_file_name": "cram-launcher.log",
    "structured_logging": False,
    "file_logging": False,
}

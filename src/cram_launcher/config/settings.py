"""Launcher settings parsed from an optional YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from cram_launcher.config.defaults import LAUNCHER_DEFAULTS, LOGGING_DEFAULTS
from cram_launcher.errors import LauncherError

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Controls how the launcher reports its own progress."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = str(LOGGING_DEFAULTS["log_level"])
    log_dir: str = str(LOGGING_DEFAULTS["log_dir"])
    log_file_name: str = str(LOGGING_DEFAULTS["log_file_name"])
    structured_logging: bool = bool(LOGGING_DEFAULTS["structured_logging"])
    file_logging: bool = bool(LOGGING_DEFAULTS["file_logging"])

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


class LauncherConfig(BaseModel):
    """Overrides for the environment name, prysk pin and invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    venv_name: str = str(LAUNCHER_DEFAULTS["venv_name"])
    prysk_version: str = str(LAUNCHER_DEFAULTS["prysk_version"])
    tests_dir: str = str(LAUNCHER_DEFAULTS["tests_dir"])
    shell: str = str(LAUNCHER_DEFAULTS["shell"])
    python: str | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("venv_name", "prysk_version", "tests_dir", "shell")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> LauncherConfig:
        return cls.model_validate(raw)

    @classmethod
    def load(cls, path: Path | str | None) -> LauncherConfig:
        """Load overrides from a YAML file if it exists."""
        if path is None:
            return cls()
        resolved = Path(path)
        if not resolved.is_file():
            return cls()
        try:
            raw = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise LauncherError(f"Invalid YAML in {resolved}: {exc}") from exc
        if not isinstance(raw, dict):
            raise LauncherError(
                f"Config file {resolved} must contain a mapping, "
                f"got {type(raw).__name__}"
            )
        try:
            return cls.from_mapping(raw)
        except ValidationError as exc:
            raise LauncherError(f"Invalid config in {resolved}: {exc}") from exc

"""Loads `.env` files and reads the environment variables the launcher honours."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
import os
from pathlib import Path

from dotenv import load_dotenv

from cram_launcher.constants import INTERACTIVE_ENV_VAR, NOTIFIER_ENV_VAR


def load_environment(dotenv_path: str | Path | None = None) -> bool:
    """Load a `.env` file when present; existing variables take precedence."""
    path = Path(dotenv_path) if dotenv_path else Path(".env")
    if not path.exists():
        return False
    return load_dotenv(dotenv_path=path, override=False)


def suppress_update_notifiers(
    environ: MutableMapping[str, str] | None = None,
) -> None:
    """Silence package-manager update notifiers in child processes."""
    target = os.environ if environ is None else environ
    target[NOTIFIER_ENV_VAR] = "1"


def interactive_requested(environ: Mapping[str, str] | None = None) -> bool:
    """True only when ``PRYSK_INTERACTIVE`` is exactly ``"true"``."""
    source = os.environ if environ is None else environ
    return source.get(INTERACTIVE_ENV_VAR) == "true"


__all__ = [
    "interactive_requested",
    "load_environment",
    "suppress_update_notifiers",
]

"""Runtime version resolution helpers."""

# ruff: noqa: S603

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import shutil
import subprocess  # nosec B404 - subprocess is used with fixed git arguments

DISTRIBUTION_NAME = "cram-launcher"


def _git(repo_root: Path, *args: str) -> str | None:
    git_exec = shutil.which("git")
    if not git_exec:
        return None
    try:
        result = subprocess.run(  # nosec S603
            [git_exec, *args],
            check=True,
            capture_output=True,
            text=True,
            cwd=repo_root,
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return result.stdout.strip() or None


def get_runtime_version() -> str:
    """Resolve the version from package metadata, then git, then a placeholder."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    repo_root = Path(__file__).resolve().parents[3]
    tag = _git(repo_root, "describe", "--tags", "--exact-match")
    if tag:
        return tag
    short_hash = _git(repo_root, "rev-parse", "--short", "HEAD")
    if short_hash:
        return f"dev+{short_hash}"
    return "dev+unknown"

from __future__ import annotations

from collections.abc import Sequence
import os
from pathlib import Path
import subprocess
import sys
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ALLOWED_ARTIFACTS_ROOT = PROJECT_ROOT / "artifacts" / "test"
sys.dont_write_bytecode = True
os.environ.setdefault("PYTHONDONTWRITEBYTECODE", "1")


class RecordingRunner:
    """Stand-in for ``run_command`` that records argv and replays exit codes."""

    def __init__(self, returncodes: Sequence[int] = (), stderr: str = "") -> None:
        self.calls: list[tuple[list[str], dict[str, Any]]] = []
        self._returncodes = list(returncodes)
        self._stderr = stderr

    def __call__(
        self, argv: Sequence[str], **kwargs: Any
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append((list(argv), kwargs))
        code = self._returncodes.pop(0) if self._returncodes else 0
        return subprocess.CompletedProcess(
            list(argv), code, stdout="", stderr=self._stderr if code else ""
        )

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def recording_runner() -> type[RecordingRunner]:
    return RecordingRunner


@pytest.fixture
def test_artifacts_dir(request) -> Path:
    safe_name = (
        request.node.nodeid.replace("::", "__").replace("/", "_").replace("\\", "_")
    )
    target = ALLOWED_ARTIFACTS_ROOT / safe_name
    target.mkdir(parents=True, exist_ok=True)
    return target


@pytest.fixture
def tmp_path(test_artifacts_dir: Path) -> Path:
    return test_artifacts_dir


@pytest.fixture
def forbid_subprocess(monkeypatch):
    """Fail the test if anything tries to spawn a process."""

    def _refuse(*args: Any, **kwargs: Any) -> None:
        raise AssertionError(f"unexpected subprocess spawn: {args!r}")

    monkeypatch.setattr(subprocess, "run", _refuse)
    monkeypatch.setattr(subprocess, "Popen", _refuse)

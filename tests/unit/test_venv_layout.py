from __future__ import annotations

import shutil

import pytest

from cram_launcher.enums import PlatformFamily, VenvTool
from cram_launcher.errors import LauncherError, ToolNotAllowedError
from cram_launcher.venv.layout import VenvLayout


@pytest.mark.parametrize("tool", ["python3", "pip", "prysk"])
def test_posix_tools_live_in_bin_without_suffix(tool: str) -> None:
    layout = VenvLayout(root="/work/integration", family=PlatformFamily.POSIX)
    assert layout.tool(tool) == f"/work/integration/.cram_env/bin/{tool}"


@pytest.mark.parametrize("tool", ["python3", "pip", "prysk"])
def test_windows_tools_live_in_scripts_with_exe(tool: str) -> None:
    layout = VenvLayout(root="C:\\work\\integration", family=PlatformFamily.WINDOWS)
    assert layout.tool(tool) == f"C:\\work\\integration\\.cram_env\\Scripts\\{tool}.exe"


@pytest.mark.parametrize(
    "tool", ["bash", "python", "../../bin/sh", "prysk; rm -rf /", "", "PIP"]
)
def test_disallowed_tools_fail_before_spawning(tool: str, forbid_subprocess) -> None:
    layout = VenvLayout(root="/work", family=PlatformFamily.POSIX)
    with pytest.raises(ToolNotAllowedError, match="Tool not allowed"):
        layout.tool(tool)


def test_tool_not_allowed_is_a_launcher_and_value_error() -> None:
    error = ToolNotAllowedError("node")
    assert isinstance(error, LauncherError)
    assert isinstance(error, ValueError)
    assert error.tool == "node"
    assert str(error) == "Tool not allowed: node"


def test_allow_list_is_exactly_three_tools() -> None:
    assert VenvTool.allowed() == ("python3", "pip", "prysk")


def test_custom_venv_name_is_respected() -> None:
    layout = VenvLayout(root="/work", name="envs", family=PlatformFamily.POSIX)
    assert str(layout.path) == "/work/envs"
    assert str(layout.bin_dir) == "/work/envs/bin"


def test_exists_reflects_directory(tmp_path) -> None:
    shutil.rmtree(tmp_path / "fresh-env", ignore_errors=True)
    layout = VenvLayout(root=tmp_path, name="fresh-env")
    assert not layout.exists()
    (tmp_path / "fresh-env").mkdir(exist_ok=True)
    assert layout.exists()

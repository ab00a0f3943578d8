"""Centralized enums for the launcher."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath
import sys


class PlatformFamily(str, Enum):
    """Host operating system families the launcher distinguishes."""

    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def current(cls) -> PlatformFamily:
        return cls.WINDOWS if sys.platform == "win32" else cls.POSIX

    @property
    def is_windows(self) -> bool:
        return self is PlatformFamily.WINDOWS

    @property
    def path_type(self) -> type[PurePath]:
        return PureWindowsPath if self.is_windows else PurePosixPath

    @property
    def sep(self) -> str:
        return "\\" if self.is_windows else "/"

    @property
    def bin_dir_name(self) -> str:
        return "Scripts" if self.is_windows else "bin"

    @property
    def executable_suffix(self) -> str:
        return ".exe" if self.is_windows else ""


class VenvTool(str, Enum):
    """Executables that may be resolved inside the launcher environment."""

    PYTHON3 = "python3"
    PIP = "pip"
    PRYSK = "prysk"

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        return tuple(tool.value for tool in cls)

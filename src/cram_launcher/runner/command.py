"""Build the prysk command line from the selector, platform and environment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cram_launcher.config.env import interactive_requested
from cram_launcher.constants import DEFAULT_SHELL, TESTS_DIR
from cram_launcher.enums import PlatformFamily, VenvTool
from cram_launcher.venv.layout import VenvLayout


@dataclass(frozen=True)
class PryskCommand:
    """A fully resolved prysk invocation."""

    executable: str
    flags: tuple[str, ...]
    tests: str

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.flags, self.tests]

    def display(self) -> str:
        return " ".join(self.argv)


def resolve_test_path(
    selector: str | None,
    family: PlatformFamily,
    tests_dir: str = TESTS_DIR,
) -> str:
    """Join the optional selector onto the tests directory.

    On Windows every ``/`` in the selector is rewritten to ``\\`` first. Leading
    separators are dropped, so ``"/run"`` joins like ``"run"``. Other segments,
    such as ``..`` or a Windows drive, are passed through unchanged.
    """
    if not selector:
        return tests_dir
    if family.is_windows:
        selector = selector.replace("/", family.sep)
    selector = selector.lstrip(family.sep)
    if not selector:
        return tests_dir
    return str(family.path_type(tests_dir, selector))


def build_flags(
    family: PlatformFamily,
    *,
    interactive: bool,
    shell: str = DEFAULT_SHELL,
) -> tuple[str, ...]:
    flags = [f"--shell={shell}"]
    if interactive:
        flags.append("--interactive")
    if family.is_windows:
        flags.append("--dos2unix")
    return tuple(flags)


def compose_command(
    layout: VenvLayout,
    selector: str | None,
    *,
    environ: Mapping[str, str],
    shell: str = DEFAULT_SHELL,
    tests_dir: str = TESTS_DIR,
) -> PryskCommand:
    """Resolve the prysk binary, flags and test path for ``layout``."""
    family = layout.family
    return PryskCommand(
        executable=layout.tool(VenvTool.PRYSK.value),
        flags=build_flags(
            family, interactive=interactive_requested(environ), shell=shell
        ),
        tests=resolve_test_path(selector, family, tests_dir),
    )

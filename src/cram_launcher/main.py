"""Command-line driver: provision the prysk environment and run the suite."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import sys

from cram_launcher.cli.helpers import bootstrap_logger, configure_logging
from cram_launcher.config.defaults import DEFAULT_CONFIG_PATH
from cram_launcher.config.env import load_environment, suppress_update_notifiers
from cram_launcher.config.settings import LauncherConfig
from cram_launcher.errors import LauncherError
from cram_launcher.runner.command import compose_command
from cram_launcher.runner.execute import run_tests
from cram_launcher.utilities.version import get_runtime_version
from cram_launcher.venv.layout import VenvLayout
from cram_launcher.venv.provision import provision

EXIT_INTERRUPTED = 130


class _VersionAction(argparse.Action):
    """Resolve the runtime version only when ``--version`` is requested."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(
            option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs
        )

    def __call__(self, parser, namespace, values, option_string=None):
        print(f"{parser.prog} {get_runtime_version()}")
        parser.exit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cram-launcher",
        description="Provision a prysk environment and run the integration tests.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action=_VersionAction,
        help="Show the runtime version and exit.",
    )
    parser.add_argument(
        "tests",
        nargs="?",
        default="",
        help="Subdirectory or file under the tests directory to run.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Directory holding the tests directory and the prysk environment.",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="Optional YAML file overriding launcher settings.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the prysk command without provisioning or running it.",
    )
    parser.add_argument(
        "--skip-provision",
        action="store_true",
        help="Reuse an existing environment instead of rebuilding it.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the log level from the config file.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the launcher and return its exit status."""
    args = parse_args(argv)
    load_environment()
    suppress_update_notifiers()

    try:
        config = LauncherConfig.load(args.config)
    except LauncherError as exc:
        bootstrap_logger().error(str(exc))
        return 1

    logger_manager = configure_logging(config.logging, log_level=args.log_level)
    logger = logger_manager.get_logger()
    root = Path(args.root).resolve()
    layout = VenvLayout(root=root, name=config.venv_name)

    try:
        with logger_manager.context(root=str(root), selector=args.tests):
            command = compose_command(
                layout,
                args.tests,
                environ=os.environ,
                shell=config.shell,
                tests_dir=config.tests_dir,
            )
            if args.dry_run:
                print(command.display())
                return 0

            if args.skip_provision:
                if not layout.exists():
                    raise LauncherError(
                        f"No prysk environment at {layout.path}; "
                        "rerun without --skip-provision"
                    )
                logger.info("Reusing environment at %s", layout.path)
            else:
                provision(
                    layout,
                    python=config.python,
                    prysk_version=config.prysk_version,
                )

            return run_tests(command, cwd=root, environ=os.environ)
    except LauncherError as exc:
        logger.error(str(exc))
        return 1
    finally:
        logger_manager.shutdown()


def run() -> None:
    """Console-script entry point."""
    try:
        code = main()
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        code = EXIT_INTERRUPTED
    sys.exit(code)


if __name__ == "__main__":
    run()

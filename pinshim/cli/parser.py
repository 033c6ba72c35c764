"""
pinshim CLI argument parser.

Builds the argparse interface, configures logging from the global flags and
hands the parsed arguments to the matching module under pinshim.cli.commands.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from pinshim.core.constants import EXECUTABLE_NAME, TOOLCHAIN_FILE
from pinshim.shell.completion import SUPPORTED_SHELLS

try:
    from importlib.metadata import version as _distribution_version

    __version__ = _distribution_version(EXECUTABLE_NAME)
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Subcommand name -> module exposing run(args) -> int
COMMANDS = {
    "setup": "pinshim.cli.commands.setup",
    "select": "pinshim.cli.commands.select_version",
    "path": "pinshim.cli.commands.path",
    "version": "pinshim.cli.commands.version",
    "list": "pinshim.cli.commands.list_toolchains",
    "run": "pinshim.cli.commands.run",
    "autocomplete": "pinshim.cli.commands.autocomplete",
}

_LOG_FORMATS = {
    logging.DEBUG: "%(levelname)s [%(name)s] %(message)s",
    logging.ERROR: "%(levelname)s: %(message)s",
    logging.INFO: "%(message)s",
}


class CLI:
    """pinshim command-line interface."""

    def __init__(self):
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=EXECUTABLE_NAME,
            description=f"{EXECUTABLE_NAME} - per-project Python toolchain manager",
            epilog=f'Use "{EXECUTABLE_NAME} COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        parser.add_argument(
            "--version", action="version", version=f"{EXECUTABLE_NAME} {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Log debug messages"
        )
        parser.add_argument(
            "--quiet", "-q", action="store_true", help="Only log errors"
        )
        parser.add_argument(
            "--home",
            type=Path,
            metavar="PATH",
            help="Configuration home (default: $PINSHIM_HOME or ~/.pinshim)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        setup = subparsers.add_parser(
            "setup",
            help="Configure the shell to use pinshim",
            description="Write shims and add pinshim's block to the shell startup files",
        )
        setup.add_argument("shell", choices=SUPPORTED_SHELLS, help="Shell to configure")

        select = subparsers.add_parser(
            "select",
            help="Pin a Python version for the current directory",
            description=f"Resolve a requirement and write it to {TOOLCHAIN_FILE}",
        )
        select.add_argument(
            "requirement",
            metavar="REQUIREMENT",
            help='Version range (e.g. "3.8", "~3.7.2", "latest") or interpreter directory',
        )

        subparsers.add_parser("path", help="Print the directory of the active interpreter")
        subparsers.add_parser("version", help="Print the version of the active interpreter")
        subparsers.add_parser("list", help="List installed interpreters")

        run = subparsers.add_parser(
            "run", help="Run a command with the active interpreter first on PATH"
        )
        run.add_argument("executable", metavar="COMMAND", help="Command to run")
        run.add_argument(
            "arguments",
            nargs=argparse.REMAINDER,
            metavar="ARG",
            help="Arguments passed to the command",
        )

        autocomplete = subparsers.add_parser(
            "autocomplete", help="Print the shell completion script"
        )
        autocomplete.add_argument(
            "shell", choices=SUPPORTED_SHELLS, help="Shell to generate for"
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Parse args and execute the selected command.

        Args:
            args: Command line without the program name (default: sys.argv[1:])

        Returns:
            Exit code of the command; 1 when it raised, 130 on Ctrl-C
        """
        namespace = self.parse_args(args)
        setup_logging(namespace.verbose, namespace.quiet)

        if not namespace.command:
            self.parser.print_help()
            return 1

        module = importlib.import_module(COMMANDS[namespace.command])
        try:
            return module.run(namespace)
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return 130
        except Exception as e:
            logger.error(f"Error: {e}")
            if namespace.verbose:
                traceback.print_exc()
            return 1


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr at the level chosen by the global flags."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    logging.basicConfig(level=level, format=_LOG_FORMATS[level], force=True)


def main():
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()

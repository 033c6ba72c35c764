"""
Shell autocompletion script generation.

The script is derived from the argparse parser, so new commands and
options are completed without further changes here.
"""

import argparse
import logging
from typing import Dict, List, TextIO

from pinshim.core.constants import EXECUTABLE_NAME
from pinshim.core.exceptions import UnsupportedShellError
from pinshim.shell.rendering import render_template

logger = logging.getLogger(__name__)

SUPPORTED_SHELLS = ["bash"]


def _words(parser: argparse.ArgumentParser) -> List[str]:
    """Option strings and positional choices accepted by a parser."""
    words: List[str] = []
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            continue
        if action.option_strings:
            words.extend(action.option_strings)
        elif action.choices:
            words.extend(str(choice) for choice in action.choices)
    return words


def _subcommands(parser: argparse.ArgumentParser) -> Dict[str, List[str]]:
    commands: Dict[str, List[str]] = {}
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            for name, subparser in action.choices.items():
                commands[name] = _words(subparser)
    return commands


def generate_bash(parser: argparse.ArgumentParser, prog: str = EXECUTABLE_NAME) -> str:
    commands = _subcommands(parser)
    return render_template(
        "completion.bash.j2",
        prog=prog,
        func="_" + prog.replace("-", "_"),
        commands=commands,
        top_level=list(commands) + _words(parser),
    )


def write_completion(shell: str, parser: argparse.ArgumentParser, f: TextIO) -> None:
    """
    Write the completion script for shell to f.

    Raises:
        UnsupportedShellError: If shell is not supported
    """
    if shell not in SUPPORTED_SHELLS:
        raise UnsupportedShellError(shell)

    logger.debug(f"Generating {shell} completion script")
    f.write(generate_bash(parser))

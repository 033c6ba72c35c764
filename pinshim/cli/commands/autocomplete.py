"""
Autocomplete command implementation.
"""

import sys

from pinshim.shell.completion import write_completion


def run(args) -> int:
    from pinshim.cli.parser import CLI

    write_completion(args.shell, CLI().parser, sys.stdout)
    return 0

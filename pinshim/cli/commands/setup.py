"""
Setup command implementation.

Writes the shims and wires pinshim into the shell startup files.
"""

import logging
from functools import partial

from pinshim.cli.utils import safe_print
from pinshim.core.config import load_settings
from pinshim.core.directory import ensure_home_structure, get_shims_dir
from pinshim.shell.bash import setup_bash
from pinshim.shell.completion import write_completion
from pinshim.shell.shims import write_shims

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the setup command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    from pinshim.cli.parser import CLI

    logger.debug(f"Arguments: {args}")

    settings = load_settings(args.home)
    home = ensure_home_structure(settings.home)

    shims = write_shims(get_shims_dir(home), settings.shim_names)
    logger.info(f"Wrote {len(shims)} shims to {get_shims_dir(home)}")

    updated = setup_bash(settings, partial(write_completion, args.shell, CLI().parser))

    for path in updated:
        safe_print(f"✓ Configured {path}")
    safe_print("Open a new shell (or source your startup file) to activate pinshim.")
    return 0

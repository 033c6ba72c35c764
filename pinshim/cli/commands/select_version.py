"""
Select command implementation.

Resolves a requirement against the installed interpreters and pins the
result in the current directory.
"""

import logging
from pathlib import Path

from pinshim.cli.utils import resolve_toolchain, safe_print
from pinshim.core.config import load_settings
from pinshim.core.constants import TOOLCHAIN_FILE
from pinshim.core.requirement import PathRequirement, parse
from pinshim.toolchain.installed import discover_or_raise

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the select command.

    A version range pins the exact version of the best installed match; a
    path pins the interpreter directory itself.

    Returns:
        Exit code (0 for success)
    """
    settings = load_settings(args.home)
    requirement = parse(args.requirement)

    if isinstance(requirement, PathRequirement):
        toolchain = discover_or_raise(requirement.path)
        toolchain.save_path()
    else:
        toolchain = resolve_toolchain(settings, requirement)
        toolchain.save_version()

    logger.debug(f"Selected {toolchain}")
    safe_print(
        f"✓ Selected Python {toolchain.version} from {toolchain.location} "
        f"(written to {Path.cwd() / TOOLCHAIN_FILE})"
    )
    return 0

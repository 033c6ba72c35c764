"""
List command implementation.

Shows every installed interpreter, marking the active one and whether it
was installed by pinshim or found on the system.
"""

import logging

from pinshim.cli.utils import resolve_active_toolchain, safe_print
from pinshim.core.config import load_settings
from pinshim.core.exceptions import ToolchainNotInstalledError
from pinshim.toolchain.installed import find_installed_toolchains

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Returns:
        Exit code (0 for success, 1 if no interpreter is installed)
    """
    settings = load_settings(args.home)
    toolchains = find_installed_toolchains(settings)
    if not toolchains:
        logger.error("No Python interpreter found")
        return 1

    try:
        _, active = resolve_active_toolchain(settings)
    except ToolchainNotInstalledError as e:
        logger.warning(str(e))
        active = None

    version_width = max(len(str(tc.version)) for tc in toolchains)
    safe_print(f"  {'Version':<{version_width}}  {'Source':<7}  Location")
    for toolchain in toolchains:
        marker = "→" if toolchain == active else " "
        source = "pinshim" if toolchain.is_custom_install() else "system"
        safe_print(
            f"{marker} {str(toolchain.version):<{version_width}}  {source:<7}  "
            f"{toolchain.location}"
        )
    return 0

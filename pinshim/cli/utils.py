"""
Shared utilities for CLI commands.

Provides toolchain resolution and output helpers used across commands.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from pinshim.core.config import Settings
from pinshim.core.exceptions import ToolchainNotInstalledError
from pinshim.core.requirement import VersionRequirement, parse
from pinshim.core.selected import SelectedVersion, load_selected_version
from pinshim.toolchain.installed import (
    InstalledToolchain,
    NotInstalledToolchain,
    find_installed_toolchains,
    select_toolchain,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Toolchain Resolution
# ============================================================================


def resolve_toolchain(
    settings: Settings, requirement: VersionRequirement
) -> InstalledToolchain:
    """
    Find the installed toolchain satisfying requirement.

    Raises:
        ToolchainNotInstalledError: If nothing satisfies it
    """
    toolchains = find_installed_toolchains(settings)
    result = select_toolchain(requirement, toolchains)
    if isinstance(result, NotInstalledToolchain):
        raise ToolchainNotInstalledError(result.requirement, result.location)
    return result


def resolve_active_toolchain(
    settings: Settings, start_dir: Optional[Path] = None
) -> Tuple[Optional[SelectedVersion], InstalledToolchain]:
    """
    Toolchain selected by the nearest pinning file.

    Without a pinning file, the highest installed toolchain is used.

    Returns:
        (selected version or None, toolchain)

    Raises:
        ToolchainNotInstalledError: If no toolchain qualifies
    """
    selected = load_selected_version(start_dir)
    if selected is not None:
        return selected, resolve_toolchain(settings, selected.requirement)

    logger.debug("No pinning file found, using the latest installed toolchain")
    return None, resolve_toolchain(settings, parse("latest"))


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe characters if Unicode can't be encoded.
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.replace("✓", "[OK]").replace("→", "->")
        print(safe_message, file=file)

"""
Path command implementation.
"""

from pinshim.cli.utils import resolve_active_toolchain
from pinshim.core.config import load_settings


def run(args) -> int:
    """Print the directory of the active interpreter."""
    settings = load_settings(args.home)
    _, toolchain = resolve_active_toolchain(settings)
    print(toolchain.location)
    return 0

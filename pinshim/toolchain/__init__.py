"""
Toolchain discovery for pinshim.

This module provides functionality for:
- Interpreter detection in a directory
- Selection of the installed toolchain satisfying a requirement
"""

from pinshim.toolchain.system_detector import (
    InterpreterVersionExtractor,
    candidate_directories,
    list_versions,
    parse_python_version,
)
from pinshim.toolchain.installed import (
    InstalledToolchain,
    NotInstalledToolchain,
    discover,
    discover_or_raise,
    find_installed_toolchains,
    select_toolchain,
)

__all__ = [
    "InterpreterVersionExtractor",
    "candidate_directories",
    "list_versions",
    "parse_python_version",
    "InstalledToolchain",
    "NotInstalledToolchain",
    "discover",
    "discover_or_raise",
    "find_installed_toolchains",
    "select_toolchain",
]

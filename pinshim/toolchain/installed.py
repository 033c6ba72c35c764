"""
Installed toolchains.

An InstalledToolchain is one interpreter directory together with the
concrete version it provides. Discovery never raises for a directory
without interpreters; it returns None or a NotInstalledToolchain instead.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

import semantic_version

from pinshim.core.config import Settings
from pinshim.core.constants import INFO_FILE, TOOLCHAIN_FILE
from pinshim.core.exceptions import InvalidToolchainError
from pinshim.core.requirement import (
    PathRequirement,
    RangeRequirement,
    VersionRequirement,
    exact,
    format_requirement,
    matches,
)
from pinshim.core.selected import write_selection
from pinshim.toolchain import system_detector

logger = logging.getLogger(__name__)

ListVersions = Callable[[Path], Sequence[Tuple[semantic_version.Version, Path]]]


@dataclass(frozen=True)
class InstalledToolchain:
    """
    An interpreter found on disk.

    Attributes:
        location: Directory containing the interpreter executable
        version: Concrete version the interpreter reports
    """

    location: Path
    version: semantic_version.Version

    def __str__(self) -> str:
        return f"{self.version} ({self.location})"

    def is_custom_install(self) -> bool:
        """True if pinshim installed this toolchain, False if found on the system."""
        parent = self.location.parent
        if parent == self.location:
            logger.error(f"Cannot get parent directory of {self.location}")
            return False
        return (parent / INFO_FILE).exists()

    def save_version(self, directory: Optional[Path] = None) -> int:
        """Pin this toolchain's exact version; returns bytes written."""
        return _save(format_requirement(exact(self.version)), directory)

    def save_path(self, directory: Optional[Path] = None) -> int:
        """Pin this toolchain's location; returns bytes written."""
        return _save(str(self.location), directory)


@dataclass(frozen=True)
class NotInstalledToolchain:
    """The requirement and/or location that failed to resolve."""

    requirement: Optional[VersionRequirement] = None
    location: Optional[Path] = None


ToolchainResolution = Union[InstalledToolchain, NotInstalledToolchain]


def _save(content: str, directory: Optional[Path]) -> int:
    directory = Path.cwd() if directory is None else Path(directory)
    return write_selection(content, directory / TOOLCHAIN_FILE)


def discover(
    path: Path, list_versions: ListVersions = system_detector.list_versions
) -> Optional[InstalledToolchain]:
    """
    Find the highest interpreter version available in path.

    Args:
        path: Directory believed to contain an installation
        list_versions: Enumerates (version, location) pairs under path

    Returns:
        InstalledToolchain for the highest version, or None if path holds
        no interpreter
    """
    versions_found = list(list_versions(path))
    logger.debug(f"versions_found: {versions_found}")

    if not versions_found:
        return None

    version, location = max(versions_found, key=lambda entry: entry[0])
    logger.debug(f"highest_version: {version} at {location}")
    return InstalledToolchain(location=Path(location), version=version)


def discover_or_raise(
    path: Path, list_versions: ListVersions = system_detector.list_versions
) -> InstalledToolchain:
    """
    Like discover(), for paths the user explicitly pointed at.

    Raises:
        InvalidToolchainError: If path holds no interpreter
    """
    toolchain = discover(path, list_versions)
    if toolchain is None:
        raise InvalidToolchainError(path)
    return toolchain


def find_installed_toolchains(
    settings: Settings, list_versions: ListVersions = system_detector.list_versions
) -> List[InstalledToolchain]:
    """
    Discover one toolchain per candidate directory.

    Returns:
        Toolchains sorted by descending version; directories without an
        interpreter are skipped
    """
    toolchains = []
    for directory in system_detector.candidate_directories(settings):
        toolchain = discover(directory, list_versions)
        if toolchain is not None:
            toolchains.append(toolchain)

    toolchains.sort(key=lambda tc: tc.version, reverse=True)
    return toolchains


def select_toolchain(
    requirement: VersionRequirement,
    toolchains: Sequence[InstalledToolchain],
    list_versions: ListVersions = system_detector.list_versions,
) -> ToolchainResolution:
    """
    Pick the toolchain that satisfies a requirement.

    For a range, the installed toolchain with the highest matching version
    wins. For a path, the directory itself is inspected.
    """
    if isinstance(requirement, PathRequirement):
        toolchain = discover(requirement.path, list_versions)
        if toolchain is None:
            return NotInstalledToolchain(location=requirement.path)
        return toolchain

    if not isinstance(requirement, RangeRequirement):
        raise TypeError(f"Not a version requirement: {requirement!r}")

    compatible = [tc for tc in toolchains if matches(requirement, tc.version)]
    if not compatible:
        logger.debug(f"No installed toolchain matches {requirement}")
        return NotInstalledToolchain(requirement=requirement)

    return max(compatible, key=lambda tc: tc.version)

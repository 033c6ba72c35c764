"""
Pinning file handling.

A pinning file (``.python-version``) names the toolchain a directory tree
requires. Only its first line is read; any following lines are free-form
and may hold comments.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pinshim.core.constants import TOOLCHAIN_FILE
from pinshim.core.exceptions import EmptyPinningFileError
from pinshim.core.requirement import VersionRequirement, format_requirement, parse

logger = logging.getLogger(__name__)


def write_selection(content: str, path: Union[str, Path]) -> int:
    """
    Overwrite a pinning file with a single line.

    Returns:
        Number of bytes written
    """
    logger.debug(f"Writing toolchain selection to file {path}")

    data = f"{content}\n".encode("utf-8")
    with open(path, "wb") as output:
        return output.write(data)


@dataclass
class SelectedVersion:
    """A version requirement read from, or destined for, a pinning file."""

    requirement: VersionRequirement

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SelectedVersion":
        """
        Load the requirement from the first line of a pinning file.

        Raises:
            EmptyPinningFileError: If the file contains no line
            RequirementParseError: If the line is not a valid requirement
            OSError: If the file cannot be read
        """
        logger.debug(f"Reading configuration from file {path}")

        with open(path, "r", encoding="utf-8") as f:
            line = f.readline()

        if not line:
            raise EmptyPinningFileError(path)

        requirement = parse(line.rstrip("\r\n"))
        logger.debug(f'Found version "{requirement}"')
        return cls(requirement)

    def save(self, directory: Optional[Path] = None) -> int:
        """Write to the pinning file of directory (default: current directory)."""
        directory = Path.cwd() if directory is None else Path(directory)
        return self.save_to(directory / TOOLCHAIN_FILE)

    def save_to(self, path: Union[str, Path]) -> int:
        return write_selection(format_requirement(self.requirement), path)


def find_nearest_pinning_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Walk up from start_dir looking for a pinning file.

    Args:
        start_dir: Directory to start from (default: current directory)

    Returns:
        Path of the nearest pinning file, or None once the filesystem root
        has been checked without finding one
    """
    path = Path.cwd() if start_dir is None else Path(start_dir).absolute()

    while True:
        toolchain_file = path / TOOLCHAIN_FILE
        if toolchain_file.is_file():
            logger.debug(f"Found file {toolchain_file}")
            return toolchain_file

        if path.parent == path:
            # Root directory reached without finding anything.
            return None

        path = path.parent


def load(path: Union[str, Path]) -> SelectedVersion:
    return SelectedVersion.from_file(path)


def load_selected_version(start_dir: Optional[Path] = None) -> Optional[SelectedVersion]:
    """Load the nearest pinning file, or return None when there is none."""
    toolchain_file = find_nearest_pinning_file(start_dir)
    if toolchain_file is None:
        logger.debug(f"No {TOOLCHAIN_FILE} found")
        return None
    return load(toolchain_file)

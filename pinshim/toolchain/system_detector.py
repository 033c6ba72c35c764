"""
pinshim/toolchain/system_detector.py

Interpreter detection - finds Python interpreters in a directory and the
directories worth scanning for them.
"""

import logging
import os
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

import semantic_version
from packaging import version as packaging_version

from pinshim.core.config import Settings
from pinshim.core.directory import get_installed_dir, get_shims_dir
from pinshim.core.filesystem import IS_WINDOWS, is_executable_file, normalize_path

logger = logging.getLogger(__name__)

_EXECUTABLE_RE = re.compile(
    r"^python(\d+(\.\d+)?)?(\.exe)?$" if IS_WINDOWS else r"^python(\d+(\.\d+)?)?$"
)

_VERSION_RE = re.compile(r"\b\d+\.\d+(?:\.\d+)?(?:(?:a|b|rc)\d+)?")


def parse_python_version(output: str) -> Optional[semantic_version.Version]:
    """
    Parse the output of ``python --version``.

    Handles "Python 3.8.10", "Python 3.9.0rc1" (becomes 3.9.0-rc.1) and
    "Python 3.7" (becomes 3.7.0).

    Returns:
        Version, or None if no version number was found
    """
    match = _VERSION_RE.search(output)
    if not match:
        return None

    try:
        release = packaging_version.Version(match.group(0))
    except packaging_version.InvalidVersion:
        return None

    major, minor, patch = (list(release.release) + [0, 0])[:3]
    prerelease = ()
    if release.pre:
        prerelease = (release.pre[0], str(release.pre[1]))
    return semantic_version.Version(
        major=major, minor=minor, patch=patch, prerelease=prerelease
    )


class InterpreterVersionExtractor:
    """
    Extract the version of an interpreter executable.

    Runs the interpreter with --version; Python 2 prints it on stderr.
    """

    def __init__(self, timeout: float = 5):
        self.timeout = timeout

    def extract_version(self, executable: Path) -> Optional[semantic_version.Version]:
        try:
            result = subprocess.run(
                [str(executable), "--version"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Timeout extracting version from {executable}")
            return None
        except OSError as e:
            logger.debug(f"Failed to run {executable}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"{executable} --version returned {result.returncode}")
            return None

        output = result.stdout + result.stderr
        version = parse_python_version(output)
        if version is None:
            logger.debug(f"Could not parse version from output: {output[:200]}")
        else:
            logger.debug(f"Extracted version {version} from {executable}")
        return version


def find_interpreters(path: Path) -> List[Path]:
    """List interpreter executables directly inside path, sorted by name."""
    if not path.is_dir():
        return []
    try:
        entries = sorted(path.iterdir())
    except OSError as e:
        logger.debug(f"Cannot list {path}: {e}")
        return []
    return [
        entry
        for entry in entries
        if _EXECUTABLE_RE.match(entry.name) and is_executable_file(entry)
    ]


def list_versions(
    path: Path, extractor: Optional[InterpreterVersionExtractor] = None
) -> List[Tuple[semantic_version.Version, Path]]:
    """
    Every distinct interpreter version found directly inside path.

    Args:
        path: Directory to inspect
        extractor: Version extractor (default: InterpreterVersionExtractor())

    Returns:
        (version, directory) pairs, one per distinct version
    """
    extractor = extractor or InterpreterVersionExtractor()
    found: List[Tuple[semantic_version.Version, Path]] = []
    seen = set()

    for executable in find_interpreters(path):
        version = extractor.extract_version(executable)
        if version is None or version in seen:
            continue
        seen.add(version)
        found.append((version, path))

    return found


def candidate_directories(settings: Settings) -> List[Path]:
    """
    Directories that may hold interpreters, in priority order.

    Custom installations (<home>/installed/*/bin) come first, then the
    configured search paths, then PATH without the shims directory.
    Duplicates are removed after normalization.
    """
    candidates: List[Path] = []

    installed = get_installed_dir(settings.home)
    if installed.is_dir():
        for install_dir in sorted(installed.iterdir()):
            bin_dir = install_dir if IS_WINDOWS else install_dir / "bin"
            if bin_dir.is_dir():
                candidates.append(bin_dir)

    candidates.extend(settings.search_paths)

    path_env = os.environ.get("PATH", "")
    candidates.extend(Path(p) for p in path_env.split(os.pathsep) if p)

    shims = normalize_path(get_shims_dir(settings.home))
    result: List[Path] = []
    seen = set()
    for candidate in candidates:
        if not candidate.is_dir():
            continue
        normalized = normalize_path(candidate)
        if normalized == shims or normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)

    return result

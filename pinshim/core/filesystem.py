"""
File system utilities for pinshim.

Path normalization, executable lookup and atomic text writes.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union

IS_WINDOWS = os.name == "nt"

EXECUTABLE_EXTENSIONS = ["", ".exe", ".bat", ".cmd"] if IS_WINDOWS else [""]


def normalize_path(path: Union[str, Path]) -> Path:
    """Absolute path with symlinks and relative segments resolved."""
    return Path(path).resolve()


def is_executable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_executable(name: str, directories: Iterable[Path]) -> Optional[Path]:
    """
    Look up an executable by name in the given directories, in order.

    On Windows the usual executable extensions are tried as well.

    Returns:
        Path of the first match, or None
    """
    for directory in directories:
        for ext in EXECUTABLE_EXTENSIONS:
            candidate = Path(directory) / f"{name}{ext}"
            if is_executable_file(candidate):
                return candidate
    return None


def make_executable(path: Path) -> None:
    """Add the executable bits matching the file's read bits."""
    mode = path.stat().st_mode
    path.chmod(mode | ((mode & 0o444) >> 2) | stat.S_IXUSR)


def atomic_write(file_path: Union[str, Path], content: str, encoding: str = "utf-8") -> None:
    """
    Replace file_path with content in a single rename.

    The scratch file lives next to the target so the rename never crosses
    file systems. Readers see either the old or the new content; on failure
    the scratch file is removed and the target is left as it was.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    fd, scratch = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with open(fd, "w", encoding=encoding, newline="\n") as f:
            f.write(content)
        os.replace(scratch, file_path)
    except BaseException:
        Path(scratch).unlink(missing_ok=True)
        raise

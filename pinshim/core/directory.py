"""
Directory structure management for pinshim.

This module resolves the configuration home and the fixed layout beneath
it, and creates that layout on demand.

Directory Structure:
    Home ($PINSHIM_HOME, default ~/.pinshim/ or %USERPROFILE%\\.pinshim\\):
        - installed/         : Interpreters installed by pinshim
        - shims/             : Indirection executables prepended to PATH
        - cache/             : Scratch space (shell file rewrites)
        - shell/bash/        : Generated shell configuration
        - config.yaml        : Optional user settings
        - pinshim.bash-completion
"""

import os
from pathlib import Path
from typing import Optional

from pinshim.core.constants import DEFAULT_DOT_DIR, EXECUTABLE_NAME, home_env_variable
from pinshim.core.exceptions import DirectoryError


class DirectoryCreationError(DirectoryError):
    """Raised when directory creation fails."""

    pass


SHELL_CONFIG_FILE_NAME = "config.sh"


def get_user_home() -> Path:
    """
    Get the user's home directory, where shell startup files live.

    Raises:
        DirectoryError: If the home directory cannot be determined.
    """
    if os.name == "nt":
        user_profile = os.environ.get("USERPROFILE")
        if not user_profile:
            raise DirectoryError(
                "USERPROFILE environment variable is not set. "
                "Cannot determine home directory."
            )
        return Path(user_profile)
    try:
        return Path.home()
    except RuntimeError as e:
        raise DirectoryError(f"Cannot determine home directory: {e}")


def get_home_dir() -> Path:
    """
    Get pinshim's configuration home.

    Returns:
        Path: $PINSHIM_HOME when set, otherwise ~/.pinshim

    Example:
        >>> get_home_dir()
        PosixPath('/home/user/.pinshim')  # on Linux
    """
    override = os.environ.get(home_env_variable())
    if override:
        return Path(override).expanduser()
    return get_user_home() / DEFAULT_DOT_DIR


def _home(home: Optional[Path]) -> Path:
    return get_home_dir() if home is None else Path(home)


def get_cache_dir(home: Optional[Path] = None) -> Path:
    """Scratch directory used for temporary files."""
    return _home(home) / "cache"


def get_shims_dir(home: Optional[Path] = None) -> Path:
    """Directory holding the shims prepended to PATH."""
    return _home(home) / "shims"


def get_installed_dir(home: Optional[Path] = None) -> Path:
    """Directory under which pinshim-managed interpreters are installed."""
    return _home(home) / "installed"


def shell_config_dir_relative(shell: str = "bash") -> Path:
    """Shell configuration directory, relative to the home directory."""
    return Path("shell") / shell


def shell_config_dir(home: Optional[Path] = None, shell: str = "bash") -> Path:
    return _home(home) / shell_config_dir_relative(shell)


def shell_config_file(home: Optional[Path] = None, shell: str = "bash") -> Path:
    """Dedicated configuration file sourced from the shell startup files."""
    return shell_config_dir(home, shell) / SHELL_CONFIG_FILE_NAME


def completion_file(home: Optional[Path] = None, shell: str = "bash") -> Path:
    return _home(home) / f"{EXECUTABLE_NAME}.{shell}-completion"


def verify_directory_writable(path: Path) -> bool:
    """
    Verify that a directory exists and is writable.

    Args:
        path: Directory path to verify.

    Returns:
        bool: True if directory exists and is writable, False otherwise.
    """
    if not path.exists():
        return False

    if not path.is_dir():
        return False

    # Try to create a temporary file to test write permissions
    try:
        test_file = path / ".write_test"
        test_file.touch()
        test_file.unlink()
        return True
    except OSError:
        return False


def ensure_home_structure(home: Optional[Path] = None) -> Path:
    """
    Create the home directory structure if it doesn't exist.

    Creates the home directory itself, then installed/, shims/, cache/
    and shell/bash/ below it.

    Returns:
        Path: The home directory path.

    Raises:
        DirectoryCreationError: If directory creation fails.
        DirectoryError: If the home directory is not writable.
    """
    home = _home(home)

    try:
        home.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"Failed to create home directory at {home}: {e}"
        )

    if not verify_directory_writable(home):
        raise DirectoryError(
            f"Home directory at {home} is not writable. "
            "Please check directory permissions."
        )

    for subdir in (
        get_installed_dir(home),
        get_shims_dir(home),
        get_cache_dir(home),
        shell_config_dir(home),
    ):
        try:
            subdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(f"Failed to create subdirectory {subdir}: {e}")

    return home

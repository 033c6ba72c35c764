"""
Core functionality for pinshim.

This package contains the foundational modules that other components depend on.
"""

from .directory import (
    get_home_dir,
    get_user_home,
    get_cache_dir,
    get_shims_dir,
    get_installed_dir,
    ensure_home_structure,
    verify_directory_writable,
)

from .config import Settings, load_settings

from .requirement import (
    RangeRequirement,
    PathRequirement,
    VersionRequirement,
    parse,
    format_requirement,
    exact,
    matches,
)

from .selected import (
    SelectedVersion,
    find_nearest_pinning_file,
    load,
    load_selected_version,
)

from .exceptions import (
    PinshimError,
    NotFoundError,
    RequirementParseError,
    RequirementNotFoundError,
    EmptyPinningFileError,
    ToolchainNotInstalledError,
    InvalidToolchainError,
    ConfigError,
    DirectoryError,
    ShellError,
    ShellConfigError,
    UnterminatedBlockError,
    UnsupportedShellError,
    TemplateRenderError,
)

__all__ = [
    "get_home_dir",
    "get_user_home",
    "get_cache_dir",
    "get_shims_dir",
    "get_installed_dir",
    "ensure_home_structure",
    "verify_directory_writable",
    "Settings",
    "load_settings",
    "RangeRequirement",
    "PathRequirement",
    "VersionRequirement",
    "parse",
    "format_requirement",
    "exact",
    "matches",
    "SelectedVersion",
    "find_nearest_pinning_file",
    "load",
    "load_selected_version",
    "PinshimError",
    "NotFoundError",
    "RequirementParseError",
    "RequirementNotFoundError",
    "EmptyPinningFileError",
    "ToolchainNotInstalledError",
    "InvalidToolchainError",
    "ConfigError",
    "DirectoryError",
    "ShellError",
    "ShellConfigError",
    "UnterminatedBlockError",
    "UnsupportedShellError",
    "TemplateRenderError",
]

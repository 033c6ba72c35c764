"""
Centralized exception hierarchy for pinshim.

All failures raised by the resolution engine are ordinary exceptions that
the CLI layer reports and converts into an exit status.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class PinshimError(Exception):
    """Base exception for all pinshim errors."""

    pass


class NotFoundError(PinshimError):
    """Base exception when something required cannot be found."""

    pass


# ============================================================================
# Version Requirement Exceptions
# ============================================================================


class RequirementParseError(PinshimError):
    """Raised when a string is not a usable version requirement."""

    pass


class RequirementNotFoundError(RequirementParseError, NotFoundError):
    """Raised when a string is neither a version range nor an existing path."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"{text!r} is not a valid version requirement and path {text!r} "
            "was not found"
        )


# ============================================================================
# Pinning File Exceptions
# ============================================================================


class EmptyPinningFileError(PinshimError):
    """Raised when a pinning file does not contain a single line."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Pinning file {path} does not even contain a line")


# ============================================================================
# Toolchain Exceptions
# ============================================================================


class ToolchainNotInstalledError(NotFoundError):
    """Raised when no installed toolchain satisfies a requirement."""

    def __init__(self, requirement=None, location=None):
        self.requirement = requirement
        self.location = location
        if location is not None:
            msg = f"No Python toolchain found at {location}"
        else:
            msg = f"Python version {requirement} not found!"
        super().__init__(msg)


class InvalidToolchainError(PinshimError):
    """Raised when a directory holds no version-bearing executable."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"No Python interpreter found in {path}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(PinshimError):
    """Raised when the settings file cannot be parsed."""

    pass


class DirectoryError(PinshimError):
    """Raised when a pinshim directory cannot be located or created."""

    pass


# ============================================================================
# Shell Integration Exceptions
# ============================================================================


class ShellError(PinshimError):
    """Base exception for shell integration errors."""

    pass


class ShellConfigError(ShellError):
    """Raised when a shell startup file cannot be rewritten."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Failed to configure {path}: {reason}")


class UnterminatedBlockError(ShellError):
    """Raised when a configuration block has a start marker but no end."""

    pass


class UnsupportedShellError(ShellError):
    """Raised when asked to integrate with a shell pinshim does not know."""

    def __init__(self, shell: str):
        self.shell = shell
        super().__init__(f"Unsupported shell: {shell}")


class TemplateRenderError(ShellError):
    """Raised when a generated shell script cannot be rendered."""

    pass

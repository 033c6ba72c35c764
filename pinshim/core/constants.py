"""
Names shared across pinshim.

Everything user-visible that pinshim writes to disk (pinning file, marker
file, shell configuration sentinels, environment variables) derives from
EXECUTABLE_NAME so that the generated files stay self-identifying.
"""

EXECUTABLE_NAME = "pinshim"

# Default hidden configuration directory, relative to the user's home.
DEFAULT_DOT_DIR = f".{EXECUTABLE_NAME}"

# Pinning file looked up in the current directory and its ancestors.
TOOLCHAIN_FILE = ".python-version"

# Written by the installer next to a custom installation's own directory.
INFO_FILE = f"installed_by_{EXECUTABLE_NAME}.txt"

CONFIG_FILE = "config.yaml"

SHELL_CONFIG_IDENTIFYING_PATTERN_START = (
    f"{EXECUTABLE_NAME.upper()}_CONFIG_BLOCK_START"
)
SHELL_CONFIG_IDENTIFYING_PATTERN_END = f"{EXECUTABLE_NAME.upper()}_CONFIG_BLOCK_END"

SHELL_CONFIG_BORDER = "#" * 77


def home_env_variable() -> str:
    """Environment variable pointing at pinshim's configuration home."""
    return f"{EXECUTABLE_NAME.upper()}_HOME"


def initialized_env_variable() -> str:
    """Guard variable set once the shell configuration has been sourced."""
    return f"{EXECUTABLE_NAME.upper()}_INITIALIZED"

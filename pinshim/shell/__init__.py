"""
Shell integration for pinshim: startup file blocks, completion and shims.
"""

from pinshim.shell.bash import (
    remove_block,
    setup_bash,
    build_config_lines,
)
from pinshim.shell.completion import write_completion, SUPPORTED_SHELLS
from pinshim.shell.shims import write_shims

__all__ = [
    "remove_block",
    "setup_bash",
    "build_config_lines",
    "write_completion",
    "SUPPORTED_SHELLS",
    "write_shims",
]

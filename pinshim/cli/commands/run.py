"""
Run command implementation.

Executes a command with the active interpreter's directory first on PATH.
This is what the shims call.
"""

import logging
import os
import subprocess

from pinshim.cli.utils import resolve_active_toolchain
from pinshim.core.config import load_settings
from pinshim.core.directory import get_shims_dir
from pinshim.core.filesystem import find_executable, normalize_path

logger = logging.getLogger(__name__)


def build_environment(location, shims_dir, environ=None):
    """
    Environment for the child process.

    The shims directory is removed from PATH so the child cannot recurse
    into pinshim, and location is prepended.
    """
    environ = dict(os.environ if environ is None else environ)
    shims = str(normalize_path(shims_dir))
    entries = [
        entry
        for entry in environ.get("PATH", "").split(os.pathsep)
        if entry and str(normalize_path(entry)) != shims
    ]
    environ["PATH"] = os.pathsep.join([str(location)] + entries)
    return environ


def run(args) -> int:
    """
    Run the run command.

    Returns:
        Exit code of the executed command
    """
    settings = load_settings(args.home)
    _, toolchain = resolve_active_toolchain(settings)

    env = build_environment(toolchain.location, get_shims_dir(settings.home))
    # Windows does not search the PATH of the child environment.
    executable = find_executable(args.executable, [toolchain.location]) or args.executable
    command = [str(executable)] + list(args.arguments)
    logger.debug(f"Running {command} with Python {toolchain.version}")

    try:
        result = subprocess.run(command, env=env, check=False)
    except FileNotFoundError:
        logger.error(f"Command not found: {args.executable}")
        return 127
    return result.returncode

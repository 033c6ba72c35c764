"""
Bash integration.

pinshim owns a single block at the end of each bash startup file. The block
is delimited by two sentinel lines, each wrapped one line inside a border
line, and only exports PINSHIM_HOME and sources the dedicated configuration
file generated under the pinshim home. Setup removes any previous block and
appends a fresh one, so running it repeatedly leaves the file unchanged.

Each startup file is rebuilt in a scratch file and renamed over the
original; a shell starting concurrently sees either the old or the new file,
never a partial one.
"""

import enum
import io
import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

from pinshim.core.config import Settings
from pinshim.core.constants import (
    EXECUTABLE_NAME,
    SHELL_CONFIG_BORDER,
    SHELL_CONFIG_IDENTIFYING_PATTERN_END,
    SHELL_CONFIG_IDENTIFYING_PATTERN_START,
    home_env_variable,
    initialized_env_variable,
)
from pinshim.core.directory import (
    completion_file,
    ensure_home_structure,
    get_cache_dir,
    get_user_home,
    shell_config_dir_relative,
    shell_config_file,
)
from pinshim.core.exceptions import (
    ShellConfigError,
    ShellError,
    UnterminatedBlockError,
)
from pinshim.core.filesystem import atomic_write

logger = logging.getLogger(__name__)

# Preserve undecodable bytes of the user's files verbatim.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

# Blank lines write_header_to emits before the border.
_HEADER_PADDING = 2


class BlockState(enum.Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def remove_block(
    f_in: TextIO,
    f_out: TextIO,
    start_marker: str = SHELL_CONFIG_IDENTIFYING_PATTERN_START,
    end_marker: str = SHELL_CONFIG_IDENTIFYING_PATTERN_END,
) -> List[int]:
    """
    Copy f_in to f_out without the pinshim block.

    The line before the start marker and the line after the end marker are
    the block's border lines and are dropped together with it, whatever
    they contain. Every emitted line is terminated by a newline; a carriage
    return ending the line in f_in is kept.

    Returns:
        For each removed block, the number of lines emitted before it

    Raises:
        UnterminatedBlockError: If a start marker has no matching end marker
    """
    lines = [line[:-1] if line.endswith("\n") else line for line in f_in]

    removed_at: List[int] = []
    emitted = 0
    state = BlockState.OUTSIDE
    idx = 0
    while idx < len(lines):
        current_line = lines[idx]
        next_line = lines[idx + 1] if idx + 1 < len(lines) else None

        if state is BlockState.OUTSIDE:
            if next_line is not None and start_marker in next_line:
                # Current line is the header border.
                state = BlockState.INSIDE
                removed_at.append(emitted)
            else:
                f_out.write(current_line + "\n")
                emitted += 1
        elif end_marker in current_line:
            # Next line is the footer border; skip it too.
            state = BlockState.OUTSIDE
            idx += 1

        idx += 1

    if state is BlockState.INSIDE:
        raise UnterminatedBlockError(
            f"Found '{start_marker}' without a matching '{end_marker}'"
        )
    return removed_at


def file_contains(f: Iterable[str], line_to_check: str) -> bool:
    """Check whether f has a line equal to line_to_check, ignoring a '# ' prefix."""
    line_to_check = line_to_check.lstrip("#").strip()
    for line in f:
        if line.rstrip("\n").lstrip("#").strip() == line_to_check:
            logger.debug(f"File already contains {EXECUTABLE_NAME} setup.")
            return True
    return False


def build_config_lines(settings: Settings) -> List[str]:
    """
    Shell code of the dedicated configuration file.

    The shims directory is prepended to PATH once per shell session, guarded
    by PINSHIM_INITIALIZED. Sourcing the file again re-enables the shim,
    unless one of the conflicting environment variables is set, in which case
    the shims directory is removed from PATH.
    """
    home = home_env_variable()
    initialized = initialized_env_variable()
    shims = f"${{{home}}}/shims"
    strip_shims = f"${{PATH//${{{home}}}\\/shims:/}}"
    enable = f'export PATH="{shims}:{strip_shims}"'

    lines = [
        "# Add the shims directory to path, removing all other",
        "# occurrences of it from current $PATH.",
        f"if [ -z ${{{initialized}+x}} ]; then",
        f"    # Setup {EXECUTABLE_NAME}: prepends the shims directory to PATH",
        f"    {enable}",
        f"    export {initialized}=1",
        "else",
        f"    # Shell already setup for {EXECUTABLE_NAME}.",
    ]

    if not settings.conflicting_env_vars:
        lines.append(f"    {enable}")
        lines.append("fi")
        return lines

    names = ", ".join(settings.conflicting_env_vars)
    inactive = " && ".join(
        f"[ -z ${{{name}+x}} ]" for name in settings.conflicting_env_vars
    )
    lines.extend(
        [
            f"    # Disable in case {names} is set",
            f"    if {inactive}; then",
            f"        {enable}",
            "    else",
            f'        echo "{EXECUTABLE_NAME} detected an active environment ({names}), disabling the shim."',
            f'        export PATH="{strip_shims}"',
            "    fi",
            "fi",
        ]
    )
    return lines


def write_header_to(f: TextIO) -> None:
    lines = [
        "",
        "",
        SHELL_CONFIG_BORDER,
        f"# {SHELL_CONFIG_IDENTIFYING_PATTERN_START}",
        f"# These lines were added by {EXECUTABLE_NAME} and are required for it to function",
        "# properly (including the comments!)",
        f"# WARNING: Those lines _need_ to be at the end of the file: {EXECUTABLE_NAME} needs to",
        "#          appear as soon as possible in the $PATH environment variable to",
        "#          function properly.",
    ]
    for line in lines:
        f.write(line + "\n")


def write_footer_to(f: TextIO) -> None:
    for line in (f"# {SHELL_CONFIG_IDENTIFYING_PATTERN_END}", SHELL_CONFIG_BORDER):
        f.write(line + "\n")


def write_config_to(f: TextIO, lines_to_append: Iterable[str], autocomplete_file: Path) -> None:
    for line in lines_to_append:
        f.write(line + "\n")
    f.write(f'source "{autocomplete_file}"\n')


def export_lines(home: Path) -> List[str]:
    """Lines of the startup file block between header and footer."""
    home_var = home_env_variable()
    config = shell_config_dir_relative("bash") / shell_config_file(home).name
    return [
        f'export {home_var}="{home}"',
        f"source ${{{home_var}}}/{config.as_posix()}",
    ]


def _drop_header_padding(content: str, removed_at: List[int]) -> str:
    """Remove the blank lines write_header_to put in front of each removed block."""
    # remove_block terminates every line it emits with "\n"
    lines = content.split("\n")[:-1]
    for position in reversed(removed_at):
        start = position
        while start > position - _HEADER_PADDING and start > 0 and lines[start - 1] == "":
            start -= 1
        del lines[start:position]
    return "".join(line + "\n" for line in lines)


def rewrite_shell_file(target: Path, tmp_file_path: Path, block_lines: List[str]) -> None:
    """
    Replace the pinshim block of target with a fresh one.

    Everything outside the block is kept byte for byte, line endings
    included. The blank lines opening a previous header are removed with
    it, so that rewriting a file produced by this function yields identical
    content.

    Raises:
        OSError: If target cannot be read or replaced
        UnterminatedBlockError: If target holds a damaged block
    """
    logger.info(f"Adding configuration to {target}...")

    with open(target, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as config_reader:
        original = config_reader.read()

    if file_contains(io.StringIO(original), f"# {SHELL_CONFIG_IDENTIFYING_PATTERN_START}"):
        logger.debug(f"Replacing the existing block in {target}")

    kept = io.StringIO()
    removed_at = remove_block(io.StringIO(original), kept)
    content = _drop_header_padding(kept.getvalue(), removed_at)

    try:
        with open(
            tmp_file_path, "w", encoding=_ENCODING, errors=_ERRORS, newline=""
        ) as tmp_file:
            tmp_file.write(content)
            write_header_to(tmp_file)
            for line in block_lines:
                tmp_file.write(line + "\n")
            write_footer_to(tmp_file)

        # Move tmp file back atomically
        os.replace(tmp_file_path, target)
    except BaseException:
        tmp_file_path.unlink(missing_ok=True)
        raise


def setup_bash(
    settings: Settings,
    write_completion: Callable[[TextIO], None],
    user_home: Optional[Path] = None,
) -> List[Path]:
    """
    Configure bash to use pinshim.

    Writes the completion script and the dedicated configuration file under
    the pinshim home, then refreshes the block in every startup file named
    by settings.bash_files.

    Args:
        settings: Resolved settings; settings.home is exported as PINSHIM_HOME
        write_completion: Writes the bash completion script to a stream
        user_home: Directory holding the startup files (default: user's home)

    Returns:
        Startup files that were updated

    Raises:
        ShellConfigError: On the first startup file that cannot be updated;
            remaining files are left untouched
    """
    home = ensure_home_structure(settings.home)
    user_home = get_user_home() if user_home is None else Path(user_home)

    autocomplete_file = completion_file(home, "bash")
    with open(autocomplete_file, "w", encoding=_ENCODING, newline="\n") as f:
        write_completion(f)

    config = io.StringIO()
    write_config_to(config, build_config_lines(settings), autocomplete_file)
    config_file = shell_config_file(home, "bash")
    atomic_write(config_file, config.getvalue())
    logger.debug(f"Wrote {config_file}")

    block_lines = export_lines(home)
    updated = []
    for bash_config_file in settings.bash_files:
        target = user_home / bash_config_file
        tmp_file_path = get_cache_dir(home) / Path(bash_config_file).name
        try:
            rewrite_shell_file(target, tmp_file_path, block_lines)
        except (OSError, ShellError) as e:
            raise ShellConfigError(target, str(e)) from e
        updated.append(target)

    return updated

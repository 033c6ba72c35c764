"""
Shim scripts.

A shim is a tiny script named like an interpreter executable. The shims
directory sits first on PATH, so invoking ``python`` runs the shim, which
hands over to ``pinshim run python`` to pick the pinned interpreter.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from pinshim.core.constants import EXECUTABLE_NAME
from pinshim.core.filesystem import atomic_write, make_executable
from pinshim.shell.rendering import render_template

logger = logging.getLogger(__name__)


def render_shim(name: str) -> str:
    return render_template("shim.sh.j2", executable=EXECUTABLE_NAME, name=name)


def write_shims(shims_dir: Path, names: Iterable[str]) -> List[Path]:
    """
    Write one executable shim per name into shims_dir.

    Existing shims are replaced atomically.

    Returns:
        Paths of the written shims
    """
    shims_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name in names:
        shim = shims_dir / name
        atomic_write(shim, render_shim(name))
        make_executable(shim)
        logger.debug(f"Wrote shim {shim}")
        written.append(shim)
    return written

"""Reusable interpreter fixtures for testing.

This module provides pytest fixtures that create fake interpreter directories
for testing discovery without requiring real Python installations.
"""

import os
import pytest
from pathlib import Path
from typing import Dict, List, Tuple

import semantic_version


def make_fake_interpreter(directory: Path, name: str, version_output: str) -> Path:
    """
    Create an executable script that prints version_output on --version.

    Python 2 prints its version on stderr, so the script does the same
    when the output starts with "Python 2".
    """
    directory.mkdir(parents=True, exist_ok=True)
    redirect = " >&2" if version_output.startswith("Python 2") else ""
    exe_path = directory / name
    exe_path.write_text(f'#!/bin/sh\necho "{version_output}"{redirect}\n')
    exe_path.chmod(0o755)
    return exe_path


@pytest.fixture
def fake_python_dir(tmp_path) -> Path:
    """
    Create a bin directory holding python3 (3.8.10) and python3.9 (3.9.1).

    Example:
        def test_scan(fake_python_dir):
            assert (fake_python_dir / "python3").exists()
    """
    if os.name == "nt":
        pytest.skip("Fake interpreters are shell scripts")

    bin_dir = tmp_path / "fake-python" / "bin"
    make_fake_interpreter(bin_dir, "python3", "Python 3.8.10")
    make_fake_interpreter(bin_dir, "python3.9", "Python 3.9.1")
    (bin_dir / "python3-config").write_text("#!/bin/sh\n")
    (bin_dir / "python3-config").chmod(0o755)
    return bin_dir


@pytest.fixture
def fake_list_versions():
    """
    Build a list_versions replacement from a {directory: [versions]} table.

    Example:
        def test_discover(fake_list_versions):
            list_versions = fake_list_versions({Path("/opt/py"): ["3.8.0"]})
    """

    def factory(table: Dict[Path, List[str]]):
        def list_versions(path: Path) -> List[Tuple[semantic_version.Version, Path]]:
            return [
                (semantic_version.Version(v), Path(path))
                for v in table.get(Path(path), [])
            ]

        return list_versions

    return factory

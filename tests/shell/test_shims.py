"""
Tests for pinshim.shell.shims module.
"""

import os

import pytest

from pinshim.shell.shims import render_shim, write_shims


class TestShims:
    """Tests for shim generation."""

    def test_render(self):
        assert 'exec pinshim run python3 "$@"' in render_shim("python3")

    def test_write_shims(self, tmp_path):
        shims_dir = tmp_path / "shims"

        written = write_shims(shims_dir, ["python", "pip"])

        assert written == [shims_dir / "python", shims_dir / "pip"]
        assert (shims_dir / "pip").read_text() == render_shim("pip")

    def test_shims_are_executable(self, tmp_path):
        if os.name == "nt":
            pytest.skip("Executable bit is not used on Windows")
        (shim,) = write_shims(tmp_path, ["python"])
        assert os.access(shim, os.X_OK)

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "python").write_text("stale")
        write_shims(tmp_path, ["python"])
        assert (tmp_path / "python").read_text() == render_shim("python")

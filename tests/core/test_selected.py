"""
Unit tests for pinshim.core.selected module.
"""

import pytest
import semantic_version

from pinshim.core.exceptions import EmptyPinningFileError, RequirementNotFoundError
from pinshim.core.requirement import PathRequirement, exact, parse
from pinshim.core.selected import (
    SelectedVersion,
    find_nearest_pinning_file,
    load,
    load_selected_version,
)

PINNING_FILE = ".pinshim-test-version"


@pytest.fixture(autouse=True)
def unique_pinning_file(monkeypatch):
    """Use a file name no ancestor of tmp_path can already contain."""
    monkeypatch.setattr("pinshim.core.selected.TOOLCHAIN_FILE", PINNING_FILE)


class TestFindNearestPinningFile:
    """Tests for find_nearest_pinning_file function."""

    def test_file_in_start_directory(self, tmp_path):
        """Test the start directory itself is checked first."""
        (tmp_path / PINNING_FILE).write_text("3.8\n")
        assert find_nearest_pinning_file(tmp_path) == tmp_path / PINNING_FILE

    def test_closest_ancestor_wins(self, tmp_path):
        """Test the nearest of several ancestors is returned."""
        outer = tmp_path / "a"
        inner = outer / "b" / "c"
        start = inner / "d" / "e"
        start.mkdir(parents=True)
        (outer / PINNING_FILE).write_text("3.7\n")
        (inner / PINNING_FILE).write_text("3.8\n")

        assert find_nearest_pinning_file(start) == inner / PINNING_FILE

    def test_none_up_to_root(self, tmp_path):
        """Test None is returned when no ancestor has a pinning file."""
        start = tmp_path / "x" / "y"
        start.mkdir(parents=True)
        assert find_nearest_pinning_file(start) is None

    def test_directory_with_same_name_ignored(self, tmp_path):
        """Test a directory named like the pinning file is not a match."""
        (tmp_path / PINNING_FILE).mkdir()
        assert find_nearest_pinning_file(tmp_path) is None

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        """Test the walk starts at the working directory by default."""
        (tmp_path / PINNING_FILE).write_text("3.8\n")
        sub = tmp_path / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)

        assert find_nearest_pinning_file() == tmp_path / PINNING_FILE


class TestLoad:
    """Tests for reading pinning files."""

    def test_first_line_only(self, tmp_path):
        """Test trailing lines are ignored."""
        path = tmp_path / PINNING_FILE
        path.write_text("~3.7\n# project needs 3.7 for legacy deps\nnot a version\n")

        assert load(path).requirement == parse("~3.7")

    def test_without_trailing_newline(self, tmp_path):
        """Test a single line without newline."""
        path = tmp_path / PINNING_FILE
        path.write_text("3.8")
        assert load(path).requirement == parse("3.8")

    def test_path_requirement(self, tmp_path):
        """Test a pinning file naming an interpreter directory."""
        interpreter_dir = tmp_path / "python" / "bin"
        interpreter_dir.mkdir(parents=True)
        path = tmp_path / PINNING_FILE
        path.write_text(f"{interpreter_dir}\n")

        assert load(path).requirement == PathRequirement(interpreter_dir.resolve())

    def test_empty_file(self, tmp_path):
        """Test an empty file raises EmptyPinningFileError."""
        path = tmp_path / PINNING_FILE
        path.write_text("")

        with pytest.raises(EmptyPinningFileError):
            load(path)

    def test_invalid_first_line(self, tmp_path):
        """Test parse failures propagate."""
        path = tmp_path / PINNING_FILE
        path.write_text("/no/such/python\n")

        with pytest.raises(RequirementNotFoundError):
            load(path)

    def test_missing_file(self, tmp_path):
        """Test I/O errors propagate."""
        with pytest.raises(OSError):
            load(tmp_path / PINNING_FILE)

    def test_load_selected_version(self, tmp_path):
        """Test find + load, and None without a pinning file."""
        start = tmp_path / "project" / "src"
        start.mkdir(parents=True)
        assert load_selected_version(start) is None

        (tmp_path / "project" / PINNING_FILE).write_text("3.9\n")
        assert load_selected_version(start) == SelectedVersion(parse("3.9"))


class TestSave:
    """Tests for writing pinning files."""

    def test_save_to_returns_bytes_written(self, tmp_path):
        """Test the written content and byte count."""
        path = tmp_path / PINNING_FILE
        written = SelectedVersion(parse("~3.7")).save_to(path)

        assert path.read_text() == "~3.7\n"
        assert written == len("~3.7\n")

    def test_save_then_load(self, tmp_path):
        """Test an exact requirement survives a save/load cycle."""
        version = semantic_version.Version("3.8.2")
        SelectedVersion(exact(version)).save(tmp_path)

        assert load(tmp_path / PINNING_FILE).requirement == exact(version)

    def test_save_overwrites(self, tmp_path):
        """Test saving replaces previous content."""
        path = tmp_path / PINNING_FILE
        path.write_text("3.6\n# old comment\n")

        SelectedVersion(parse("3.9")).save_to(path)

        assert path.read_text() == "^3.9\n"

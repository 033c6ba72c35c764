"""
Tests for pinshim.shell.completion module.
"""

import io

import pytest

from pinshim.cli.parser import CLI
from pinshim.core.exceptions import UnsupportedShellError
from pinshim.shell.completion import generate_bash, write_completion


class TestGenerateBash:
    """Tests for the bash completion script."""

    def test_registers_function(self):
        script = generate_bash(CLI().parser)
        assert script.startswith("# bash completion for pinshim\n")
        assert script.rstrip().endswith("complete -F _pinshim -o default pinshim")

    def test_lists_commands_and_options(self):
        script = generate_bash(CLI().parser)

        for command in ("setup", "select", "path", "version", "list", "run"):
            assert f"        {command})" in script
        assert "--verbose" in script
        assert "--home" in script

    def test_positional_choices(self):
        """Test choices of a subcommand's positional are offered."""
        lines = generate_bash(CLI().parser).splitlines()
        setup_index = lines.index("        setup)")
        assert '"-h --help bash"' in lines[setup_index + 1]


class TestWriteCompletion:
    """Tests for write_completion function."""

    def test_bash(self):
        out = io.StringIO()
        write_completion("bash", CLI().parser, out)
        assert "complete -F _pinshim" in out.getvalue()

    def test_unsupported_shell(self):
        with pytest.raises(UnsupportedShellError):
            write_completion("tcsh", CLI().parser, io.StringIO())

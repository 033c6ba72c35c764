"""
Tests for CLI argument parser.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from pinshim.cli.parser import CLI


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        """Test CLI can be created."""
        cli = CLI()
        assert cli is not None
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        result = CLI().run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        with pytest.raises(SystemExit) as exc_info:
            CLI().run(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("pinshim ")

    def test_global_options(self):
        args = CLI().parse_args(["--verbose", "--home", "/tmp/h", "path"])

        assert args.verbose is True
        assert args.quiet is False
        assert args.home == Path("/tmp/h")
        assert args.command == "path"


class TestCommandParsing:
    """Test subcommand parsing."""

    def test_setup(self):
        args = CLI().parse_args(["setup", "bash"])
        assert args.command == "setup"
        assert args.shell == "bash"

    def test_setup_unsupported_shell(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["setup", "fish"])

    def test_select(self):
        args = CLI().parse_args(["select", "~3.7"])
        assert args.command == "select"
        assert args.requirement == "~3.7"

    def test_select_requires_argument(self):
        with pytest.raises(SystemExit):
            CLI().parse_args(["select"])

    def test_run_keeps_command_options(self):
        """Test options after the command belong to the command."""
        args = CLI().parse_args(["run", "python", "-c", "print(1)", "--verbose"])

        assert args.executable == "python"
        assert args.arguments == ["-c", "print(1)", "--verbose"]
        assert args.verbose is False

    @pytest.mark.parametrize("command", ["path", "version", "list"])
    def test_commands_without_arguments(self, command):
        assert CLI().parse_args([command]).command == command


class TestDispatch:
    """Test command dispatch and error handling."""

    def test_dispatch_to_module(self):
        with patch("pinshim.cli.commands.version.run", return_value=0) as mock_run:
            result = CLI().run(["version"])

        assert result == 0
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0].command == "version"

    def test_error_returns_one(self):
        with patch(
            "pinshim.cli.commands.path.run", side_effect=RuntimeError("boom")
        ):
            assert CLI().run(["path"]) == 1

    def test_keyboard_interrupt(self):
        with patch("pinshim.cli.commands.path.run", side_effect=KeyboardInterrupt):
            assert CLI().run(["path"]) == 130

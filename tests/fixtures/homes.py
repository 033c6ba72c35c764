"""Reusable home directory fixtures for testing.

This module provides pytest fixtures for the pinshim configuration home and
for a user home holding shell startup files.
"""

import pytest
from pathlib import Path

from pinshim.core.config import Settings


@pytest.fixture
def pinshim_home(tmp_path) -> Path:
    """Path of a not yet created pinshim home."""
    return tmp_path / ".pinshim"


@pytest.fixture
def settings(pinshim_home) -> Settings:
    """Default settings rooted at pinshim_home."""
    return Settings(home=pinshim_home)


@pytest.fixture
def user_home(tmp_path) -> Path:
    """
    Create a user home with .bashrc and .bash_profile.

    Example:
        def test_setup(user_home):
            assert (user_home / ".bashrc").read_text().startswith("# ~/.bashrc")
    """
    home = tmp_path / "user"
    home.mkdir()
    (home / ".bashrc").write_text(
        "# ~/.bashrc\nexport EDITOR=vim\nalias ll='ls -l'\n"
    )
    (home / ".bash_profile").write_text(
        "# ~/.bash_profile\n[ -f ~/.bashrc ] && . ~/.bashrc\n"
    )
    return home

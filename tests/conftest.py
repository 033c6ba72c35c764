"""
Pytest configuration and shared fixtures for pinshim tests.
"""

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.interpreters import fake_python_dir, fake_list_versions
from tests.fixtures.homes import pinshim_home, settings, user_home


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep tests away from the real PINSHIM_HOME and pinning files."""
    monkeypatch.delenv("PINSHIM_HOME", raising=False)
    monkeypatch.delenv("PINSHIM_INITIALIZED", raising=False)

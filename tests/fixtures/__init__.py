"""Test fixtures for pinshim tests.

Fixtures are organized by type:

- interpreters: Fake interpreter directories and list_versions replacements
- homes: pinshim home, settings and a user home with shell startup files

Import fixtures in your tests using:
    from tests.fixtures.interpreters import fake_python_dir
    from tests.fixtures.homes import user_home
"""

__all__ = [
    "interpreters",
    "homes",
]

"""
Entry point for running pinshim CLI as a module.

Usage: python -m pinshim.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()

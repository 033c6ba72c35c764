"""
Entry point for running pinshim as a module.

Usage: python -m pinshim [command] [options]
"""

from pinshim.cli.parser import main

if __name__ == "__main__":
    main()

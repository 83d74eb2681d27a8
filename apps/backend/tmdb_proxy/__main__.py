"""
Entry point for running the proxy as a module.

Usage:
    python -m tmdb_proxy <command>
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Character roster CLI.

Command-line and interactive menu interface for the roster, built with
Click and Rich.
"""

from rostermgr.cli.main import cli, main

__all__ = ["cli", "main"]

"""
Command-line interface for the verse package.
"""

from verse.cli.main import app, run

__all__ = ["app", "run"]

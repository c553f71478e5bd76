"""
Command-line interface for the folkets dictionary viewer.
"""

from folkets.cli.main import app, run

__all__ = ["app", "run"]

"""
Data Package.

This package provides access to the bundled dictionary database.
"""

from folkets.data.store import LexiconStore

__all__ = ["LexiconStore"]

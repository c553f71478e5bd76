"""
Folkets: a viewer for the Folkets Swedish/English dictionary.

This package decodes raw rows of the bundled lexical database into typed,
immutable dictionary entries and renders them for display.
"""

__version__ = "0.1.0"

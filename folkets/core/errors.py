"""
Exceptions raised while turning raw database rows into entries.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for records that cannot be decoded into an entry."""


class MissingFieldError(ParseError, KeyError):
    """A required field is absent from the raw record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Missing required field: {self.field}"


class UnrecognizedCodeError(ParseError, ValueError):
    """A word type code is not one the parser knows about."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unrecognized word type code: {self.code!r}"


class StoreError(Exception):
    """The dictionary database is missing or cannot be read."""

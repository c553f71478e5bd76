"""
Core Utilities Module.

This module provides the string primitives shared by the field parsers.
"""

from typing import List, Optional

from folkets.core.constants import ASTERISK_SEPARATOR


def is_empty(text: Optional[str]) -> bool:
    """
    Check whether a raw field carries no content.

    Args:
        text: Raw field text, possibly None

    Returns:
        bool: True if text is None or only whitespace
    """
    return text is None or len(text.strip()) == 0


def has_length(text: Optional[str]) -> bool:
    """Inverse of :func:`is_empty`."""
    return not is_empty(text)


def clean(text: Optional[str]) -> str:
    """Strip surrounding whitespace, mapping None to an empty string."""
    return text.strip() if text is not None else ""


def split_list(text: Optional[str], separator: str = ASTERISK_SEPARATOR) -> List[str]:
    """
    Split a raw field into its items.

    Args:
        text: Raw field text
        separator: Item delimiter (default: asterisk)

    Returns:
        List[str]: Unstripped items in source order, or an empty list for blank text
    """
    if is_empty(text):
        return []
    return text.split(separator)

"""
Rendering Package.

Turns parsed entries into display text.
"""

from folkets.rendering.text import build_sections, render_entry

__all__ = ["build_sections", "render_entry"]

"""Font access layer for glyphlayout.

This module handles reading font files using fonttools and exposing them to
the shaper as raw tables plus scaling information.

Key classes:
- FontInstance: Protocol a font collaborator must satisfy
- TTFontInstance: fontTools-backed implementation
"""

from glyphlayout.io.font_instance import FontInstance, TTFontInstance

__all__ = [
    "FontInstance",
    "TTFontInstance",
]

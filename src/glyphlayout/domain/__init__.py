"""Domain models for glyphlayout.

This module contains the models that flow through a layout call. They are
plain dataclasses, frozen where possible, and independent of uharfbuzz and
fontTools.

Key classes:
- TextRun: The run being shaped and its context buffer
- ShapedGlyph: A cluster-tagged glyph produced by the shaper
- GlyphRecord: A finalized glyph with char index and position
- GlyphSequence: Ordered glyph records plus the caret position
"""

from glyphlayout.domain.glyph import FILLER_GLYPH, GlyphRecord, GlyphSequence, ShapedGlyph
from glyphlayout.domain.run import TextRun

__all__: list[str] = [
    # Constants
    "FILLER_GLYPH",
    # Core types
    "TextRun",
    "ShapedGlyph",
    "GlyphRecord",
    "GlyphSequence",
]

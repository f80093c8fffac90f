"""Glyphlayout - per-unit glyph layout on top of HarfBuzz.

Glyphlayout runs a text run through HarfBuzz and reconciles the shaped,
cluster-tagged output into a legacy glyph sequence: every input unit is
attributed to at least one glyph record, records follow the run's reading
direction, and a trailing caret position marks where the pen stops.

Example:
    $ glyphlayout layout NotoSans-Regular.ttf "office"

This prints one row per glyph record (glyph id, char index, x, y) followed by
the caret position.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]

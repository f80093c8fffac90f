"""Shaped glyph and glyph record models.

``ShapedGlyph`` is what the shaper hands back; ``GlyphRecord`` and
``GlyphSequence`` are what the caller finally sees after cluster
reconciliation.
"""

from dataclasses import dataclass
from typing import Any

FILLER_GLYPH = 0xFFFF
"""Glyph id of a filler record: the unit produced no visible glyph."""


@dataclass(frozen=True)
class ShapedGlyph:
    """A glyph emitted by the shaper, in visual order.

    Attributes:
        glyph_id: Glyph identifier in the font
        cluster: Index of the input unit that produced this glyph
        x_offset: Horizontal offset applied before advancing the pen
        y_offset: Vertical offset applied before advancing the pen
        x_advance: Horizontal pen advance after drawing
        y_advance: Vertical pen advance after drawing
    """

    glyph_id: int
    cluster: int
    x_offset: float = 0.0
    y_offset: float = 0.0
    x_advance: float = 0.0
    y_advance: float = 0.0


@dataclass(frozen=True)
class GlyphRecord:
    """A finalized glyph with provenance and pen position.

    Attributes:
        glyph_id: 16-bit glyph id, ``FILLER_GLYPH`` for fillers
        char_index: Input unit this record is attributed to
        x: Pen-advanced x position
        y: Pen-advanced y position
    """

    glyph_id: int
    char_index: int
    x: float
    y: float

    @property
    def is_filler(self) -> bool:
        """True if this record stands in for a unit with no glyph."""
        return self.glyph_id == FILLER_GLYPH

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the record
        """
        return {
            "glyph_id": self.glyph_id,
            "char_index": self.char_index,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True)
class GlyphSequence:
    """Glyph records in iteration order plus the trailing caret position."""

    records: tuple[GlyphRecord, ...] = ()
    caret: tuple[float, float] = (0.0, 0.0)
    right_to_left: bool = False

    def __len__(self) -> int:
        return len(self.records)

    @property
    def glyph_count(self) -> int:
        """Number of glyph records, caret excluded."""
        return len(self.records)

    @property
    def char_indices(self) -> list[int]:
        """Char index of every record, in order."""
        return [record.char_index for record in self.records]

    @property
    def filler_count(self) -> int:
        """Number of filler records."""
        return sum(1 for record in self.records if record.is_filler)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the records, the caret and the direction
        """
        return {
            "glyph_count": self.glyph_count,
            "right_to_left": self.right_to_left,
            "records": [record.to_dict() for record in self.records],
            "caret": {"x": self.caret[0], "y": self.caret[1]},
        }

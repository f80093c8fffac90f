"""Font instances: the font collaborator a shaping session reads from.

A font instance hands out raw table bytes and the scaling needed to turn font
units into layout coordinates. ``TTFontInstance`` implements it on top of
fontTools.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from fontTools.ttLib import TTFont

from glyphlayout.exceptions import FontLoadError


@runtime_checkable
class FontInstance(Protocol):
    """Font access needed by the shaper.

    Table bytes returned by ``get_font_table`` are borrowed: the instance must
    keep them alive for as long as it is in use.
    """

    def get_font_table(self, tag: str) -> bytes | None: ...

    @property
    def units_per_em(self) -> int: ...

    @property
    def x_pixels_per_em(self) -> float: ...

    @property
    def y_pixels_per_em(self) -> float: ...

    def transform_funits(self, x: float, y: float) -> tuple[float, float]: ...


class TTFontInstance:
    """Font instance backed by a fontTools ``TTFont``.

    Example:
        with TTFontInstance(Path("font.ttf"), pixels_per_em=16) as font:
            print(font.units_per_em)
    """

    def __init__(
        self,
        font_path: Path,
        pixels_per_em: float | None = None,
        font_number: int = 0,
    ) -> None:
        """Initialize the font instance.

        Args:
            font_path: Path to the TTF, OTF or TTC font file
            pixels_per_em: Pixel size used for position scaling; None keeps
                positions in font units
            font_number: Face index inside a collection
        """
        self._font_path = font_path
        self._pixels_per_em = pixels_per_em
        self._font_number = font_number
        self._font: TTFont | None = None
        self._tables: dict[str, bytes | None] = {}

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be parsed as a font
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path), fontNumber=self._font_number, lazy=True)
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    def get_font_table(self, tag: str) -> bytes | None:
        """Return the raw bytes of a font table.

        Bytes are cached per tag, so repeated requests return the same object
        for the lifetime of this instance.

        Args:
            tag: Four-character table tag (e.g. "GSUB", "OS/2", "CFF ")

        Returns:
            Table bytes, or None if the font has no such table

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if tag not in self._tables:
            # Prefer the untouched bytes from the file over a recompiled table
            if font.reader is not None and tag in font.reader:
                self._tables[tag] = font.reader[tag]
            elif tag in font:
                self._tables[tag] = font.getTableData(tag)
            else:
                self._tables[tag] = None
        return self._tables[tag]

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def x_pixels_per_em(self) -> float:
        """Horizontal pixels per em (units per em when unscaled)."""
        if self._pixels_per_em is None:
            return float(self.units_per_em)
        return self._pixels_per_em

    @property
    def y_pixels_per_em(self) -> float:
        """Vertical pixels per em (units per em when unscaled)."""
        return self.x_pixels_per_em

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._require_font()["maxp"].numGlyphs

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavored fonts, 'TrueType' otherwise."""
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    def transform_funits(self, x: float, y: float) -> tuple[float, float]:
        """Scale a point from font units to layout coordinates."""
        upm = self.units_per_em
        return (x * self.x_pixels_per_em / upm, y * self.y_pixels_per_em / upm)

    def close(self) -> None:
        """Close the font file and drop cached tables."""
        if self._font is not None:
            self._font.close()
            self._font = None
        self._tables.clear()

    def __enter__(self) -> "TTFontInstance":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

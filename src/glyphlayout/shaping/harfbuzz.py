"""HarfBuzz shaping backend.

Wraps uharfbuzz: one face built from the font instance's tables, one font
scaled to the face's units per em, and one buffer reused across calls.
"""

import uharfbuzz as hb

from glyphlayout.domain import ShapedGlyph, TextRun
from glyphlayout.io import FontInstance
from glyphlayout.shaping.shaper import SegmentProperties


class HarfBuzzShaper:
    """Shaper backed by HarfBuzz.

    Font tables are pulled lazily through ``FontInstance.get_font_table`` and
    kept referenced here, since HarfBuzz reads them without copying.

    Example:
        shaper = HarfBuzzShaper(font_instance)
        glyphs = shaper.shape(run, SegmentProperties(script="Latn"))
        shaper.close()
    """

    def __init__(self, font_instance: FontInstance, filter_zero_width: bool = True) -> None:
        """Initialize the shaper.

        Args:
            font_instance: Font collaborator providing tables and scaling
            filter_zero_width: Remove default-ignorable characters from the
                output so they surface as filler records
        """
        self._font_instance = font_instance
        self._filter_zero_width = filter_zero_width
        self._tables: dict[str, bytes] = {}

        upem = font_instance.units_per_em
        self._face = hb.Face.create_for_tables(self._reference_table, None)
        self._font = hb.Font(self._face)
        self._font.scale = (upem, upem)
        self._buffer: hb.Buffer | None = hb.Buffer()

    def _reference_table(self, _face: hb.Face, tag: str, _user_data: object) -> bytes:
        if tag not in self._tables:
            self._tables[tag] = self._font_instance.get_font_table(tag) or b""
        return self._tables[tag]

    def _buffer_flags(self, run: TextRun) -> hb.BufferFlags:
        flags = hb.BufferFlags.DEFAULT
        if run.start_of_text:
            flags |= hb.BufferFlags.BOT
        if run.end_of_text:
            flags |= hb.BufferFlags.EOT
        if self._filter_zero_width:
            flags |= hb.BufferFlags.REMOVE_DEFAULT_IGNORABLES
        return flags

    def shape(self, run: TextRun, segment: SegmentProperties) -> list[ShapedGlyph]:
        """Shape a run with HarfBuzz.

        The whole context buffer is added, with only the run marked as the
        item to shape, so joining decisions at the run edges can see the
        neighbouring units.

        Args:
            run: Run to shape
            segment: Direction, script and language for the buffer

        Returns:
            Shaped glyphs in visual order, positions in layout coordinates
            with y growing downwards

        Raises:
            RuntimeError: If the shaper has been closed
        """
        if self._buffer is None:
            raise RuntimeError("Shaper closed")

        buf = self._buffer
        try:
            buf.add_codepoints(run.context, run.offset, run.count)
            buf.direction = segment.direction
            if segment.script is not None:
                buf.script = segment.script
            if segment.language is not None:
                buf.language = segment.language
            buf.flags = self._buffer_flags(run)

            hb.shape(self._font, buf)

            transform = self._font_instance.transform_funits
            glyphs: list[ShapedGlyph] = []
            for info, pos in zip(buf.glyph_infos, buf.glyph_positions, strict=True):
                x_offset, y_offset = transform(pos.x_offset, -pos.y_offset)
                x_advance, y_advance = transform(pos.x_advance, -pos.y_advance)
                glyphs.append(
                    ShapedGlyph(
                        glyph_id=info.codepoint,
                        cluster=info.cluster,
                        x_offset=x_offset,
                        y_offset=y_offset,
                        x_advance=x_advance,
                        y_advance=y_advance,
                    )
                )
            return glyphs
        finally:
            buf.clear_contents()

    def close(self) -> None:
        """Drop the buffer, font and face."""
        self._buffer = None
        self._font = None
        self._face = None
        self._tables.clear()

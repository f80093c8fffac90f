"""Glyph storage: the caller-visible output of a layout call.

Holds three parallel arrays (glyph ids, char indices, positions). The position
array has one extra entry for the caret. Every operation takes a
``LayoutStatus`` and does nothing if it has already failed.
"""

from glyphlayout.domain import FILLER_GLYPH, GlyphRecord, GlyphSequence
from glyphlayout.status import ErrorCode, LayoutStatus


class GlyphStorage:
    """Pre-sizable container of glyph id / char index / position triples."""

    def __init__(self) -> None:
        self._glyphs: list[int] | None = None
        self._char_indices: list[int] | None = None
        self._positions: list[tuple[float, float]] | None = None
        self._right_to_left = False

    def __len__(self) -> int:
        return self.get_glyph_count()

    @property
    def right_to_left(self) -> bool:
        """Direction flag given at allocation."""
        return self._right_to_left

    def get_glyph_count(self) -> int:
        """Number of glyph records, caret excluded (0 before any layout)."""
        return len(self._glyphs) if self._glyphs is not None else 0

    def allocate_glyph_array(self, count: int, right_to_left: bool, status: LayoutStatus) -> None:
        """Size the glyph id and char index arrays for ``count`` records."""
        if status.failed:
            return
        if count < 0:
            status.fail(ErrorCode.ILLEGAL_ARGUMENT_ERROR)
            return
        try:
            self._glyphs = [0] * count
            self._char_indices = [0] * count
        except MemoryError:
            self.reset()
            status.fail(ErrorCode.MEMORY_ALLOCATION_ERROR)
            return
        self._right_to_left = right_to_left

    def allocate_positions(self, status: LayoutStatus) -> None:
        """Allocate ``glyph_count + 1`` positions, the last one for the caret."""
        if status.failed:
            return
        if self._glyphs is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return
        try:
            self._positions = [(0.0, 0.0)] * (len(self._glyphs) + 1)
        except MemoryError:
            self.reset()
            status.fail(ErrorCode.MEMORY_ALLOCATION_ERROR)

    def _check_index(self, index: int, size: int, status: LayoutStatus) -> bool:
        if index < 0 or index >= size:
            status.fail(ErrorCode.INDEX_OUT_OF_BOUNDS_ERROR)
            return False
        return True

    def set_glyph_id(self, index: int, glyph_id: int, status: LayoutStatus) -> None:
        if status.failed:
            return
        if self._glyphs is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return
        if self._check_index(index, len(self._glyphs), status):
            self._glyphs[index] = glyph_id

    def set_char_index(self, index: int, char_index: int, status: LayoutStatus) -> None:
        if status.failed:
            return
        if self._char_indices is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return
        if self._check_index(index, len(self._char_indices), status):
            self._char_indices[index] = char_index

    def set_position(self, index: int, x: float, y: float, status: LayoutStatus) -> None:
        """Set the position at ``index``; ``glyph_count`` addresses the caret."""
        if status.failed:
            return
        if self._positions is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return
        if self._check_index(index, len(self._positions), status):
            self._positions[index] = (x, y)

    def get_glyphs(self, status: LayoutStatus, extra_bits: int | None = None) -> list[int]:
        """Copy out the glyph ids.

        Args:
            status: Sticky status
            extra_bits: If given, OR'd into every glyph id (widened form)

        Returns:
            Glyph ids in record order, empty on failure
        """
        if status.failed:
            return []
        if self._glyphs is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return []
        if extra_bits is None:
            return list(self._glyphs)
        return [glyph | extra_bits for glyph in self._glyphs]

    def get_char_indices(self, status: LayoutStatus, index_base: int = 0) -> list[int]:
        """Copy out the char indices, each offset by ``index_base``."""
        if status.failed:
            return []
        if self._char_indices is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return []
        return [char_index + index_base for char_index in self._char_indices]

    def get_glyph_positions(self, status: LayoutStatus) -> list[tuple[float, float]]:
        """Copy out all ``glyph_count + 1`` positions, caret last."""
        if status.failed:
            return []
        if self._positions is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return []
        return list(self._positions)

    def get_glyph_position(self, index: int, status: LayoutStatus) -> tuple[float, float]:
        """Position of one record; ``index == glyph_count`` gives the caret."""
        if status.failed:
            return (0.0, 0.0)
        if self._positions is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return (0.0, 0.0)
        if not self._check_index(index, len(self._positions), status):
            return (0.0, 0.0)
        return self._positions[index]

    def count_fillers(self) -> int:
        """Number of filler records currently stored."""
        if self._glyphs is None:
            return 0
        return sum(1 for glyph in self._glyphs if glyph == FILLER_GLYPH)

    def to_sequence(self, status: LayoutStatus) -> GlyphSequence:
        """Snapshot the stored records as a ``GlyphSequence``."""
        if status.failed:
            return GlyphSequence()
        if self._glyphs is None or self._char_indices is None or self._positions is None:
            status.fail(ErrorCode.NO_LAYOUT_ERROR)
            return GlyphSequence()
        records = tuple(
            GlyphRecord(glyph_id=glyph, char_index=char_index, x=x, y=y)
            for glyph, char_index, (x, y) in zip(
                self._glyphs, self._char_indices, self._positions, strict=False
            )
        )
        return GlyphSequence(
            records=records,
            caret=self._positions[-1],
            right_to_left=self._right_to_left,
        )

    def reset(self) -> None:
        """Drop all stored glyph state."""
        self._glyphs = None
        self._char_indices = None
        self._positions = None
        self._right_to_left = False

"""Shaping session orchestration.

A ``ShapingSession`` is the legacy layout-engine surface: it validates a run,
shapes it once through its shaper, reconciles the clusters into its glyph
storage and exposes the result through simple getters.

Key components:
- ShapingSession: Owns the shaper and the glyph storage for one font,
  script and language
"""

import time
from collections.abc import Sequence

import structlog

from glyphlayout.config import LayoutSettings, TypoFlags
from glyphlayout.core.reconciler import ClusterReconciler
from glyphlayout.core.storage import GlyphStorage
from glyphlayout.domain import GlyphSequence, TextRun
from glyphlayout.io import FontInstance
from glyphlayout.shaping import HarfBuzzShaper, SegmentProperties, Shaper, language_tag, script_tag
from glyphlayout.status import ErrorCode, LayoutStatus
from glyphlayout.utils import LayoutLogger, LayoutStats


class ShapingSession:
    """Lays out text runs for one font, script and language.

    Not safe for concurrent use; independent sessions share no state.

    Example:
        status = LayoutStatus()
        with ShapingSession.create(font, LATIN_SCRIPT_CODE, 0, status) as session:
            count = session.layout_chars("office", 0, 6, 6, False, 0.0, 0.0, status)
            glyphs = session.get_glyphs(status)
    """

    def __init__(
        self,
        font_instance: FontInstance,
        script_code: int,
        language_code: int,
        typo_flags: int = TypoFlags.DEFAULT,
        shaper: Shaper | None = None,
        filter_zero_width: bool = True,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            font_instance: Font collaborator
            script_code: Legacy script code (see ``shaping.tags``)
            language_code: Legacy language code (see ``shaping.tags``)
            typo_flags: Kerning/ligature flags; stored, not passed to the shaper
            shaper: Shaping backend; a ``HarfBuzzShaper`` if None
            filter_zero_width: Turn default-ignorable characters into fillers
            logger: Bound logger; the "glyphlayout" logger if None
        """
        self._font_instance = font_instance
        self._script_code = script_code
        self._language_code = language_code
        self._typo_flags = TypoFlags(typo_flags)
        self._filter_zero_width = filter_zero_width
        self._storage = GlyphStorage()
        self._reconciler = ClusterReconciler()
        self._shaper: Shaper | None = (
            shaper if shaper is not None else HarfBuzzShaper(font_instance, filter_zero_width)
        )
        self.logger = logger if logger is not None else structlog.get_logger("glyphlayout")
        self.layout_logger = LayoutLogger(self.logger)

    @classmethod
    def create(
        cls,
        font_instance: FontInstance,
        script_code: int,
        language_code: int,
        status: LayoutStatus,
        typo_flags: int = TypoFlags.DEFAULT,
        shaper: Shaper | None = None,
    ) -> "ShapingSession | None":
        """Factory returning a session, or None with ``status`` set on failure."""
        if status.failed:
            return None
        try:
            return cls(font_instance, script_code, language_code, typo_flags, shaper=shaper)
        except MemoryError:
            status.fail(ErrorCode.MEMORY_ALLOCATION_ERROR)
            return None

    @classmethod
    def from_settings(
        cls,
        font_instance: FontInstance,
        settings: LayoutSettings,
        status: LayoutStatus,
        shaper: Shaper | None = None,
    ) -> "ShapingSession | None":
        """Factory configured from ``LayoutSettings``."""
        if status.failed:
            return None
        shaping = settings.shaping
        try:
            return cls(
                font_instance,
                shaping.script_code,
                shaping.language_code,
                shaping.flags,
                shaper=shaper,
                filter_zero_width=shaping.filter_zero_width,
            )
        except MemoryError:
            status.fail(ErrorCode.MEMORY_ALLOCATION_ERROR)
            return None

    @property
    def script_code(self) -> int:
        return self._script_code

    @property
    def language_code(self) -> int:
        return self._language_code

    @property
    def typo_flags(self) -> TypoFlags:
        """Typography flags given at construction."""
        return self._typo_flags

    @property
    def stats(self) -> LayoutStats:
        """Statistics over the runs laid out so far."""
        return self.layout_logger.stats

    def layout_chars(
        self,
        units: Sequence[int] | str | None,
        offset: int,
        count: int,
        limit: int,
        right_to_left: bool,
        x: float,
        y: float,
        status: LayoutStatus,
    ) -> int:
        """Shape and reconcile ``units[offset:offset + count]``.

        The whole buffer ``units[:limit]`` is shaping context; only the run
        gets glyphs.

        Args:
            units: Code units of the whole buffer, or a string (one unit per
                character)
            offset: First unit of the run
            count: Number of units in the run
            limit: Length of the context buffer
            right_to_left: Reading direction of the run
            x: Starting pen x
            y: Starting pen y
            status: Sticky status; ILLEGAL_ARGUMENT_ERROR on bad bounds,
                MEMORY_ALLOCATION_ERROR if buffers cannot be allocated

        Returns:
            Number of glyph records, 0 on failure
        """
        if status.failed:
            return 0

        if (
            units is None
            or offset < 0
            or count < 0
            or limit < 0
            or offset >= limit
            or offset + count > limit
            or limit > len(units)
        ):
            status.fail(ErrorCode.ILLEGAL_ARGUMENT_ERROR)
            self.layout_logger.log_run_failed(
                "illegal argument", offset=offset, count=count, limit=limit
            )
            return 0

        if self._shaper is None:
            raise RuntimeError("Session closed")

        start_time = time.time()
        self.layout_logger.log_run_start(offset, count, limit, right_to_left)

        if self._storage.get_glyph_count() > 0:
            self._storage.reset()

        if isinstance(units, str):
            units = [ord(ch) for ch in units]

        run = TextRun(
            units=units,
            offset=offset,
            count=count,
            limit=limit,
            right_to_left=right_to_left,
        )
        language = language_tag(self._language_code)
        segment = SegmentProperties.for_run(
            run,
            script=script_tag(self._script_code),
            language=language.bcp47 if language is not None else None,
        )

        try:
            shaped = self._shaper.shape(run, segment)
        except MemoryError:
            status.fail(ErrorCode.MEMORY_ALLOCATION_ERROR)
            self.layout_logger.log_run_failed("shaper allocation failed")
            return 0

        self.layout_logger.log_shaped(len(shaped), segment.script, segment.language)

        glyph_count = self._reconciler.reconcile(shaped, run, x, y, self._storage, status)
        if status.failed:
            self.layout_logger.log_run_failed("reconciliation failed", status=status.code.name)
            return 0

        duration_ms = (time.time() - start_time) * 1000
        self.layout_logger.log_run_complete(
            glyph_count=glyph_count,
            filler_count=self._storage.count_fillers(),
            duration_ms=duration_ms,
        )
        return glyph_count

    def get_glyph_count(self) -> int:
        return self._storage.get_glyph_count()

    def get_glyphs(self, status: LayoutStatus, extra_bits: int | None = None) -> list[int]:
        """Glyph ids of the last layout; ``extra_bits`` OR'd in when given."""
        return self._storage.get_glyphs(status, extra_bits)

    def get_glyph_positions(self, status: LayoutStatus) -> list[tuple[float, float]]:
        """All ``glyph_count + 1`` positions, caret last."""
        return self._storage.get_glyph_positions(status)

    def get_glyph_position(self, index: int, status: LayoutStatus) -> tuple[float, float]:
        return self._storage.get_glyph_position(index, status)

    def get_char_indices(self, status: LayoutStatus, index_base: int = 0) -> list[int]:
        """Char indices of the last layout, each offset by ``index_base``."""
        return self._storage.get_char_indices(status, index_base)

    def get_glyph_sequence(self, status: LayoutStatus) -> GlyphSequence:
        """The last layout as a ``GlyphSequence``."""
        return self._storage.to_sequence(status)

    def reset(self) -> None:
        """Clear stored glyph state; the shaper is kept."""
        self._storage.reset()

    def close(self) -> None:
        """Release the shaper and the stored glyphs."""
        if self._shaper is not None:
            self._shaper.close()
            self._shaper = None
        self._storage.reset()

    def __enter__(self) -> "ShapingSession":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

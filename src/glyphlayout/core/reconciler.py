"""Cluster reconciliation.

The shaper may merge several units into one glyph, split one unit into several
glyphs, or drop a unit entirely. Reconciliation walks the shaped glyphs
alongside the run's units and produces a glyph sequence where:

- every unit the walk passes without a glyph gets a filler record
  (glyph id ``0xFFFF``) at the current pen position;
- each shaped glyph becomes one record attributed to its cluster;
- records follow the run's iteration order (ascending char index for
  left-to-right, descending for right-to-left);
- a trailing caret position records where the pen stops.

The walk runs twice: once to size the storage, once to fill it. Both passes
group contiguous glyphs by cluster and move a cursor through the run one unit
per cluster, so the sizes always agree.

Known edge case: a cluster standing for several units (a ligature) is
attributed only to its representative index. The other units it spans are
only covered when the cursor walk later passes them as gaps.
"""

from collections.abc import Sequence
from itertools import groupby
from operator import attrgetter

from glyphlayout.core.storage import GlyphStorage
from glyphlayout.domain import FILLER_GLYPH, ShapedGlyph, TextRun
from glyphlayout.status import LayoutStatus

_by_cluster = attrgetter("cluster")


class ClusterReconciler:
    """Two-pass reconciler from shaped glyphs to glyph records."""

    def count_slots(self, glyphs: Sequence[ShapedGlyph], run: TextRun) -> int:
        """Pass 1: number of records the run will produce, caret excluded.

        Args:
            glyphs: Shaped glyphs in visual order
            run: Run the glyphs were shaped from

        Returns:
            Exact record count for ``materialize``
        """
        step = run.step
        cursor = run.first
        total = 0

        for cluster, group in groupby(glyphs, key=_by_cluster):
            # Units skipped between the cursor and this cluster
            total += max(0, step * (cluster - cursor))
            total += sum(1 for _ in group)
            cursor = cluster + step

        total += max(0, step * (run.end - cursor))
        return total

    def materialize(
        self,
        glyphs: Sequence[ShapedGlyph],
        run: TextRun,
        x: float,
        y: float,
        storage: GlyphStorage,
        status: LayoutStatus,
    ) -> int:
        """Pass 2: write records and the caret into pre-sized storage.

        Pen advances accumulate in emission order. The shaper already lays
        glyphs out visually, so this holds for right-to-left runs too.

        Args:
            glyphs: Shaped glyphs in visual order
            run: Run the glyphs were shaped from
            x: Starting pen x
            y: Starting pen y
            storage: Storage sized by ``count_slots``
            status: Sticky status

        Returns:
            Number of records written
        """
        if status.failed:
            return 0

        step = run.step
        cursor = run.first
        pen_x, pen_y = x, y
        slot = 0

        def emit(glyph_id: int, char_index: int, px: float, py: float) -> None:
            nonlocal slot
            storage.set_glyph_id(slot, glyph_id, status)
            storage.set_char_index(slot, char_index, status)
            storage.set_position(slot, px, py, status)
            slot += 1

        for cluster, group in groupby(glyphs, key=_by_cluster):
            for char_index in range(cursor, cluster, step):
                emit(FILLER_GLYPH, char_index, pen_x, pen_y)

            for glyph in group:
                emit(glyph.glyph_id, cluster, pen_x + glyph.x_offset, pen_y + glyph.y_offset)
                pen_x += glyph.x_advance
                pen_y += glyph.y_advance

            cursor = cluster + step

        for char_index in range(cursor, run.end, step):
            emit(FILLER_GLYPH, char_index, pen_x, pen_y)

        # Caret
        storage.set_position(slot, pen_x, pen_y, status)
        return slot

    def reconcile(
        self,
        glyphs: Sequence[ShapedGlyph],
        run: TextRun,
        x: float,
        y: float,
        storage: GlyphStorage,
        status: LayoutStatus,
    ) -> int:
        """Size the storage, then fill it.

        Either the whole sequence is committed or the storage is left empty.

        Returns:
            Glyph count, 0 on failure
        """
        if status.failed:
            return 0

        out_count = self.count_slots(glyphs, run)

        storage.allocate_glyph_array(out_count, run.right_to_left, status)
        storage.allocate_positions(status)
        if status.failed:
            storage.reset()
            return 0

        written = self.materialize(glyphs, run, x, y, storage, status)
        if status.failed:
            storage.reset()
            return 0

        return written

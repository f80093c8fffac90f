"""Core layout logic for glyphlayout.

This module contains the layout pipeline:

- ShapingSession: Validates runs, drives the shaper, exposes the results
- ClusterReconciler: Two-pass conversion of shaped clusters to glyph records
- GlyphStorage: Caller-visible glyph id / char index / position arrays
"""

from glyphlayout.core.reconciler import ClusterReconciler
from glyphlayout.core.session import ShapingSession
from glyphlayout.core.storage import GlyphStorage

__all__ = [
    "ClusterReconciler",
    "GlyphStorage",
    "ShapingSession",
]

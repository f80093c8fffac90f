"""Shaper capability interface.

A shaper turns a text run into cluster-tagged glyphs in visual order. The
session talks to it only through this interface, so backends can be swapped
and tests can substitute a scripted shaper.
"""

from dataclasses import dataclass
from typing import Protocol

from glyphlayout.domain import ShapedGlyph, TextRun


@dataclass(frozen=True)
class SegmentProperties:
    """Buffer properties configured before shaping.

    Attributes:
        direction: "ltr" or "rtl"
        script: ISO 15924 script tag, None to leave unset
        language: BCP 47 language tag, None to leave unset
    """

    direction: str = "ltr"
    script: str | None = None
    language: str | None = None

    @classmethod
    def for_run(
        cls, run: TextRun, script: str | None, language: str | None
    ) -> "SegmentProperties":
        """Build the properties for a run's direction."""
        return cls(
            direction="rtl" if run.right_to_left else "ltr",
            script=script,
            language=language,
        )


class Shaper(Protocol):
    """Shaping backend owned by a session."""

    def shape(self, run: TextRun, segment: SegmentProperties) -> list[ShapedGlyph]:
        """Shape ``run`` using the whole buffer as context.

        Returns glyphs for ``[run.offset, run.offset + run.count)`` only, in
        visual order, with cluster values indexing ``run.units``.
        """
        ...

    def close(self) -> None:
        """Release the backend's buffers."""
        ...

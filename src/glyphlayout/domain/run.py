"""Text run model.

A run is the slice ``[offset, offset + count)`` of a larger buffer of
``limit`` units. The whole buffer is shaping context; only the slice gets
glyphs.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of input units within a context buffer.

    Attributes:
        units: Integer code units of the whole context buffer
        offset: Index of the first unit of the run
        count: Number of units in the run
        limit: Length of the context buffer
        right_to_left: Reading direction of the run
    """

    units: Sequence[int]
    offset: int
    count: int
    limit: int
    right_to_left: bool = False

    @property
    def step(self) -> int:
        """+1 for left-to-right runs, -1 for right-to-left runs."""
        return -1 if self.right_to_left else 1

    @property
    def first(self) -> int:
        """First unit in iteration order."""
        if self.right_to_left:
            return self.offset + self.count - 1
        return self.offset

    @property
    def end(self) -> int:
        """One past the last unit in iteration order."""
        if self.right_to_left:
            return self.offset - 1
        return self.offset + self.count

    @property
    def start_of_text(self) -> bool:
        """The run starts at the beginning of the context buffer."""
        return self.offset == 0

    @property
    def end_of_text(self) -> bool:
        """The run ends at the end of the context buffer."""
        return self.offset + self.count == self.limit

    @property
    def context(self) -> list[int]:
        """The context buffer handed to the shaper."""
        return list(self.units[: self.limit])

    def unit_indices(self) -> range:
        """Unit indices of the run in iteration order."""
        return range(self.first, self.end, self.step)

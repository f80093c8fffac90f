"""Sticky status codes threaded through layout calls.

Every public layout operation takes a ``LayoutStatus`` as its last argument.
An operation that finds the status already failed returns its default value
without doing any work, so a caller can chain calls and check once at the end.
"""

from dataclasses import dataclass
from enum import IntEnum

from glyphlayout.exceptions import (
    IllegalArgumentError,
    IndexOutOfBoundsError,
    LayoutError,
    MemoryAllocationError,
    MissingFontTableError,
    NoLayoutError,
)


class ErrorCode(IntEnum):
    """Status codes. Values above zero are failures."""

    SUCCESS = 0
    ILLEGAL_ARGUMENT_ERROR = 1
    MISSING_FONT_TABLE_ERROR = 6
    MEMORY_ALLOCATION_ERROR = 7
    INDEX_OUT_OF_BOUNDS_ERROR = 8
    NO_LAYOUT_ERROR = 16


_EXCEPTIONS: dict[ErrorCode, type[Exception]] = {
    ErrorCode.ILLEGAL_ARGUMENT_ERROR: IllegalArgumentError,
    ErrorCode.MISSING_FONT_TABLE_ERROR: MissingFontTableError,
    ErrorCode.MEMORY_ALLOCATION_ERROR: MemoryAllocationError,
    ErrorCode.INDEX_OUT_OF_BOUNDS_ERROR: IndexOutOfBoundsError,
    ErrorCode.NO_LAYOUT_ERROR: NoLayoutError,
}


@dataclass
class LayoutStatus:
    """Mutable status holder passed through layout calls.

    Attributes:
        code: Current status code
    """

    code: ErrorCode = ErrorCode.SUCCESS

    @property
    def failed(self) -> bool:
        """True once any operation has reported a failure."""
        return self.code > ErrorCode.SUCCESS

    @property
    def succeeded(self) -> bool:
        """True while no failure has been reported."""
        return not self.failed

    def fail(self, code: ErrorCode) -> None:
        """Record a failure code."""
        self.code = code

    def clear(self) -> None:
        """Reset to success so the caller can retry."""
        self.code = ErrorCode.SUCCESS

    def raise_for_status(self) -> None:
        """Raise the exception matching a failed status.

        Raises:
            LayoutError: Subclass matching the current code, if failed
        """
        if self.succeeded:
            return
        exc_type = _EXCEPTIONS.get(self.code)
        if exc_type is None:
            raise LayoutError(f"Layout failed with status {self.code.name}")
        raise exc_type()

"""Exception hierarchy for Glyphlayout."""


class GlyphLayoutError(Exception):
    """Base exception for all Glyphlayout errors."""

    pass


class LayoutError(GlyphLayoutError):
    """Errors reported by a layout call through its status."""

    pass


class IllegalArgumentError(LayoutError):
    """Malformed run bounds or missing input buffer."""

    def __init__(self, message: str = "Illegal argument") -> None:
        super().__init__(message)


class MemoryAllocationError(LayoutError):
    """Could not allocate the shaping buffer, glyph storage or session."""

    def __init__(self, message: str = "Memory allocation failed") -> None:
        super().__init__(message)


class IndexOutOfBoundsError(LayoutError):
    """Glyph index outside the stored glyph sequence."""

    def __init__(self, message: str = "Glyph index out of bounds") -> None:
        super().__init__(message)


class NoLayoutError(LayoutError):
    """Glyph storage queried before any layout was performed."""

    def __init__(self, message: str = "No layout has been performed") -> None:
        super().__init__(message)


class FontError(GlyphLayoutError):
    """Errors related to font loading or table access."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class MissingFontTableError(FontError):
    """A table the shaper needs is absent from the font."""

    def __init__(self, tag: str = "") -> None:
        self.tag = tag
        message = f"Font table '{tag}' is missing" if tag else "Font table is missing"
        super().__init__(message)

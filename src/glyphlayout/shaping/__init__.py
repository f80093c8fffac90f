"""Text shaping for glyphlayout.

This subpackage provides:
- The Shaper capability interface
- The HarfBuzz backend
- Script and language code tables
"""

from glyphlayout.shaping.harfbuzz import HarfBuzzShaper
from glyphlayout.shaping.shaper import SegmentProperties, Shaper
from glyphlayout.shaping.tags import (
    LANGUAGE_TAGS,
    SCRIPT_TAGS,
    LanguageTag,
    language_code_for_tag,
    language_tag,
    script_code_for_tag,
    script_tag,
)

__all__ = [
    "HarfBuzzShaper",
    "SegmentProperties",
    "Shaper",
    "LANGUAGE_TAGS",
    "SCRIPT_TAGS",
    "LanguageTag",
    "language_code_for_tag",
    "language_tag",
    "script_code_for_tag",
    "script_tag",
]

"""Shared fixtures: a tiny TrueType font and a scripted shaper."""

from collections.abc import Sequence
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphlayout.domain import ShapedGlyph, TextRun
from glyphlayout.shaping import SegmentProperties
from glyphlayout.utils import remove_logging_handlers

# name -> (codepoint, advance width)
TEST_GLYPHS: dict[str, tuple[int | None, int]] = {
    ".notdef": (None, 500),
    "A": (ord("A"), 600),
    "B": (ord("B"), 700),
    "C": (ord("C"), 800),
    "space": (ord(" "), 250),
}
GLYPH_IDS = {name: gid for gid, name in enumerate(TEST_GLYPHS)}


def _box_glyph(width: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((width - 50, 700))
    pen.lineTo((width - 50, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a five-glyph TrueType font with box outlines."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(TEST_GLYPHS))
    fb.setupCharacterMap(
        {codepoint: name for name, (codepoint, _) in TEST_GLYPHS.items() if codepoint is not None}
    )

    glyphs = {}
    metrics = {}
    for name, (_, advance) in TEST_GLYPHS.items():
        if name == "space":
            glyphs[name] = TTGlyphPen(None).glyph()
            metrics[name] = (advance, 0)
        else:
            glyphs[name] = _box_glyph(advance)
            metrics[name] = (advance, 50)

    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Glyphlayout Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def test_font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to the tiny test font."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "GlyphlayoutTest.ttf")


class ScriptedShaper:
    """Shaper returning a fixed glyph list and recording every call."""

    def __init__(self, glyphs: Sequence[ShapedGlyph] = ()) -> None:
        self.glyphs = list(glyphs)
        self.calls: list[tuple[TextRun, SegmentProperties]] = []
        self.closed = False

    def shape(self, run: TextRun, segment: SegmentProperties) -> list[ShapedGlyph]:
        self.calls.append((run, segment))
        return list(self.glyphs)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def scripted_shaper() -> ScriptedShaper:
    """A scripted shaper with no glyphs; tests set ``glyphs`` as needed."""
    return ScriptedShaper()


@pytest.fixture(autouse=True)
def _detach_logging_handlers():
    """Drop root handlers left behind by configure_logging (e.g. via the CLI)."""
    yield
    remove_logging_handlers()

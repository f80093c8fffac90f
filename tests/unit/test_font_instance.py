"""Tests for the fontTools-backed font instance."""

from pathlib import Path

import pytest
from conftest import TEST_GLYPHS

from glyphlayout.exceptions import FontLoadError
from glyphlayout.io import FontInstance, TTFontInstance


class TestTTFontInstance:
    """Tests for TTFontInstance."""

    def test_satisfies_protocol(self, test_font_path: Path):
        with TTFontInstance(test_font_path) as font:
            assert isinstance(font, FontInstance)

    def test_metrics(self, test_font_path: Path):
        with TTFontInstance(test_font_path) as font:
            assert font.units_per_em == 1000
            assert font.glyph_count == len(TEST_GLYPHS)
            assert font.format == "TrueType"

    def test_get_font_table(self, test_font_path: Path):
        with TTFontInstance(test_font_path) as font:
            cmap = font.get_font_table("cmap")

            assert isinstance(cmap, bytes)
            assert len(cmap) > 0
            assert font.get_font_table("cmap") is cmap

    def test_missing_table(self, test_font_path: Path):
        with TTFontInstance(test_font_path) as font:
            assert font.get_font_table("GSUB") is None
            assert font.get_font_table("GSUB") is None

    def test_unscaled_positions_stay_in_font_units(self, test_font_path: Path):
        with TTFontInstance(test_font_path) as font:
            assert font.x_pixels_per_em == 1000.0
            assert font.transform_funits(600, -50) == (600.0, -50.0)

    def test_scaled_positions(self, test_font_path: Path):
        with TTFontInstance(test_font_path, pixels_per_em=20.0) as font:
            assert font.x_pixels_per_em == font.y_pixels_per_em == 20.0
            assert font.transform_funits(600, 250) == pytest.approx((12.0, 5.0))

    def test_not_loaded(self, test_font_path: Path):
        font = TTFontInstance(test_font_path)
        with pytest.raises(RuntimeError, match="Font not loaded"):
            font.get_font_table("head")

    def test_closed(self, test_font_path: Path):
        font = TTFontInstance(test_font_path)
        font.load()
        font.close()
        with pytest.raises(RuntimeError):
            _ = font.units_per_em

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            TTFontInstance(tmp_path / "missing.ttf").load()

    def test_garbage_file(self, tmp_path: Path):
        path = tmp_path / "garbage.ttf"
        path.write_bytes(b"not a font at all")

        with pytest.raises(FontLoadError) as exc_info:
            TTFontInstance(path).load()
        assert exc_info.value.path == str(path)

"""Tests for the command line interface."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from glyphlayout import __version__
from glyphlayout.cli.app import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["layout", "--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_tags():
    result = runner.invoke(app, ["tags"])

    assert result.exit_code == 0
    assert "Latn" in result.output
    assert "ENG" in result.output


def test_layout_table(test_font_path: Path):
    result = runner.invoke(app, ["layout", str(test_font_path), "ABC"])

    assert result.exit_code == 0
    assert "caret" in result.output
    assert "Complete" in result.output


def test_layout_json(test_font_path: Path):
    result = runner.invoke(
        app, ["layout", str(test_font_path), "ABC", "--json", "--language", "en"]
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["glyph_count"] == 3
    assert [r["char_index"] for r in data["records"]] == [0, 1, 2]
    assert data["caret"] == {"x": 2100.0, "y": 0.0}


def test_layout_json_rtl_subrun(test_font_path: Path):
    result = runner.invoke(
        app,
        ["layout", str(test_font_path), "ABC", "--offset", "1", "--rtl", "--json"],
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["right_to_left"] is True
    assert [r["char_index"] for r in data["records"]] == [2, 1]


def test_missing_font(tmp_path: Path):
    result = runner.invoke(app, ["layout", str(tmp_path / "missing.ttf"), "ABC"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_unknown_script(test_font_path: Path):
    result = runner.invoke(app, ["layout", str(test_font_path), "ABC", "--script", "Xxxx"])

    assert result.exit_code == 1
    assert "Unknown script" in result.output


def test_unknown_language(test_font_path: Path):
    result = runner.invoke(app, ["layout", str(test_font_path), "ABC", "-l", "xx"])

    assert result.exit_code == 1
    assert "Unknown language" in result.output


def test_bad_bounds(test_font_path: Path):
    result = runner.invoke(app, ["layout", str(test_font_path), "ABC", "--offset", "5"])

    assert result.exit_code == 1
    assert "Layout failed" in result.output


def test_unreadable_font(tmp_path: Path):
    path = tmp_path / "garbage.ttf"
    path.write_bytes(b"not a font at all")

    result = runner.invoke(app, ["layout", str(path), "ABC"])

    assert result.exit_code == 1
    assert "Could not load font" in result.output


def test_session_not_created(test_font_path: Path):
    with patch("glyphlayout.cli.app.ShapingSession.from_settings", return_value=None):
        result = runner.invoke(app, ["layout", str(test_font_path), "ABC"])

    assert result.exit_code == 1
    assert "Could not create a layout session" in result.output


def test_repeated_runs_keep_one_console_handler(test_font_path: Path):
    before = list(logging.getLogger().handlers)

    for _ in range(2):
        result = runner.invoke(app, ["layout", str(test_font_path), "ABC", "--json"])
        assert result.exit_code == 0

    added = [h for h in logging.getLogger().handlers if h not in before]
    assert len(added) == 1

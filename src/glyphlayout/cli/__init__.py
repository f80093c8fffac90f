"""Command-line interface for glyphlayout.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Glyph record tables with filler and caret rows
- JSON output of the glyph sequence
- Script and language code listing
"""

from glyphlayout.cli.app import cli, main

__all__ = ["cli", "main"]

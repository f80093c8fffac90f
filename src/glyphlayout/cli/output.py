"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphlayout.domain import GlyphSequence
from glyphlayout.shaping import LANGUAGE_TAGS, SCRIPT_TAGS

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphlayout[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_run_info(offset: int, count: int, limit: int, right_to_left: bool, script: str) -> None:
    """Print the run being laid out."""
    direction = "rtl" if right_to_left else "ltr"
    console.print(
        f"  units {offset}..{offset + count} of {limit} {SYM_DOT} {direction} {SYM_DOT} {script}"
    )


def print_glyph_table(sequence: GlyphSequence) -> None:
    """Print glyph records and the caret as a table.

    Args:
        sequence: Laid-out glyph sequence
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("glyph", justify="right")
    table.add_column("char", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")

    for index, record in enumerate(sequence.records):
        glyph = "[dim]filler[/dim]" if record.is_filler else str(record.glyph_id)
        table.add_row(
            str(index), glyph, str(record.char_index), f"{record.x:.2f}", f"{record.y:.2f}"
        )

    caret_x, caret_y = sequence.caret
    table.add_row(
        str(sequence.glyph_count), "[dim]caret[/dim]", "", f"{caret_x:.2f}", f"{caret_y:.2f}"
    )
    console.print(table)


def print_success(glyph_count: int, filler_count: int, duration_ms: float | None) -> None:
    """Print the layout summary line."""
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    summary = f"  {glyph_count} glyphs {SYM_DOT} {filler_count} fillers"
    if duration_ms is not None:
        summary += f" {SYM_DOT} {duration_ms:.2f}ms"
    console.print(summary)


def print_tag_tables() -> None:
    """Print the script and language code tables."""
    scripts = Table(title="Scripts", header_style="bold", box=None, padding=(0, 2))
    scripts.add_column("code", justify="right")
    scripts.add_column("tag")
    for code, tag in enumerate(SCRIPT_TAGS):
        scripts.add_row(str(code), tag)
    console.print(scripts)

    languages = Table(title="Languages", header_style="bold", box=None, padding=(0, 2))
    languages.add_column("code", justify="right")
    languages.add_column("OpenType")
    languages.add_column("BCP 47")
    for code, entry in enumerate(LANGUAGE_TAGS):
        if entry is None:
            languages.add_row(str(code), "-", "-")
        else:
            languages.add_row(str(code), entry.ot_tag.strip(), entry.bcp47)
    console.print(languages)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

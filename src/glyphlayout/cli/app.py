"""CLI application entry point for glyphlayout.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphlayout import __version__
from glyphlayout.cli.output import (
    console,
    print_error,
    print_font_info,
    print_glyph_table,
    print_header,
    print_run_info,
    print_step,
    print_success,
    print_tag_tables,
)
from glyphlayout.config import LayoutSettings, LoggingConfig, ShapingConfig, TypoFlags
from glyphlayout.core import ShapingSession
from glyphlayout.exceptions import FontLoadError, GlyphLayoutError, LayoutError
from glyphlayout.io import TTFontInstance
from glyphlayout.shaping import language_code_for_tag, script_code_for_tag
from glyphlayout.status import LayoutStatus
from glyphlayout.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphlayout",
    help="Lay out text runs as per-unit glyph sequences using HarfBuzz.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphlayout[/bold blue] v{__version__}")
        raise typer.Exit()


def _resolve_codes(script: str, language: str | None) -> tuple[int, int]:
    script_code = script_code_for_tag(script)
    if script_code is None:
        print_error(
            f"Unknown script: {script}",
            details="Use an ISO 15924 tag such as Latn, Arab or Deva (see 'glyphlayout tags').",
        )
        raise typer.Exit(code=1)

    if language is None:
        return script_code, 0

    language_code = language_code_for_tag(language)
    if language_code is None:
        print_error(
            f"Unknown language: {language}",
            details="Use an OpenType tag (ENG) or a BCP 47 tag (en) (see 'glyphlayout tags').",
        )
        raise typer.Exit(code=1)
    return script_code, language_code


@app.command()
def layout(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text buffer; the whole buffer is shaping context",
            show_default=False,
        ),
    ],
    offset: Annotated[
        int,
        typer.Option("--offset", help="First unit of the run", min=0),
    ] = 0,
    count: Annotated[
        int | None,
        typer.Option("--count", help="Units in the run (default: rest of the text)", min=0),
    ] = None,
    rtl: Annotated[
        bool,
        typer.Option("--rtl", help="Lay the run out right-to-left"),
    ] = False,
    script: Annotated[
        str,
        typer.Option("--script", "-s", help="ISO 15924 script tag"),
    ] = "Latn",
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="OpenType or BCP 47 language tag"),
    ] = None,
    x: Annotated[
        float,
        typer.Option("--x", help="Starting pen x"),
    ] = 0.0,
    y: Annotated[
        float,
        typer.Option("--y", help="Starting pen y"),
    ] = 0.0,
    ppem: Annotated[
        float | None,
        typer.Option("--ppem", help="Pixels per em (default: font units)", min=1.0),
    ] = None,
    no_kerning: Annotated[
        bool,
        typer.Option("--no-kerning", help="Clear the kerning typography flag"),
    ] = False,
    no_ligatures: Annotated[
        bool,
        typer.Option("--no-ligatures", help="Clear the ligatures typography flag"),
    ] = False,
    keep_zero_width: Annotated[
        bool,
        typer.Option("--keep-zero-width", help="Shape default-ignorable characters"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the glyph sequence as JSON"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Lay out a run of TEXT with INPUT_FONT and print the glyph records.

    Every unit of the run gets at least one record; units the font produces no
    glyph for appear as fillers. The last row is the caret position.

    Example:
        glyphlayout layout NotoSans-Regular.ttf "office"
    """
    # Validate input file exists
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    script_code, language_code = _resolve_codes(script, language)

    typo_flags = TypoFlags.DEFAULT
    if no_kerning:
        typo_flags &= ~TypoFlags.KERNING
    if no_ligatures:
        typo_flags &= ~TypoFlags.LIGATURES

    run_count = count if count is not None else max(0, len(text) - offset)
    show = not quiet and not as_json

    # Create settings from CLI arguments
    settings = LayoutSettings(
        shaping=ShapingConfig(
            script_code=script_code,
            language_code=language_code,
            typo_flags=int(typo_flags),
            filter_zero_width=not keep_zero_width,
            pixels_per_em=ppem,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if show:
        print_header(__version__)
        print_step("Loading font")

    try:
        with TTFontInstance(input_font, pixels_per_em=settings.shaping.pixels_per_em) as font:
            if show:
                print_font_info(
                    font_path=str(input_font),
                    font_type=font.format,
                    glyph_count=font.glyph_count,
                    upm=font.units_per_em,
                )
                print_step("Laying out")
                print_run_info(offset, run_count, len(text), rtl, script)

            status = LayoutStatus()
            session = ShapingSession.from_settings(font, settings, status)
            status.raise_for_status()
            if session is None:
                print_error("Could not create a layout session")
                raise typer.Exit(code=1)

            with session:
                session.layout_chars(text, offset, run_count, len(text), rtl, x, y, status)
                sequence = session.get_glyph_sequence(status)
                status.raise_for_status()
                stats = session.stats

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except LayoutError as e:
        print_error(
            f"Layout failed: {e}",
            details=f"offset={offset} count={run_count} length={len(text)}",
        )
        raise typer.Exit(code=1)
    except GlyphLayoutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(data=sequence.to_dict())
        return

    if not quiet:
        print_glyph_table(sequence)
        print_success(
            glyph_count=sequence.glyph_count,
            filler_count=sequence.filler_count,
            duration_ms=stats.avg_run_time_ms,
        )


@app.command()
def tags() -> None:
    """List the script and language codes understood by the layout engine."""
    print_tag_tables()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""CLI application entry point for glyphbridge.

This module provides the main CLI interface using Typer.
"""

import math
import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphbridge import __version__
from glyphbridge.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_cancelled,
    print_corner_table,
    print_error,
    print_failures,
    print_font_info,
    print_header,
    print_processing_info,
    print_step,
    print_success,
)
from glyphbridge.config import (
    BridgeConfig,
    GlyphBridgeSettings,
    LoggingConfig,
    ProcessingConfig,
)
from glyphbridge.core import FontProcessor, RenderDataAssembler
from glyphbridge.exceptions import FontLoadError, FontSaveError, GlyphBridgeError
from glyphbridge.io import FontReader, RenderDataWriter
from glyphbridge.utils import configure_logging

app = typer.Typer(
    name="glyphbridge",
    help="Find corner bridges so glyph outlines can be traced as a single stroke.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphbridge[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def extract(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF font file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-render.json)",
        ),
    ] = None,
    glyphs: Annotated[
        list[str] | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Only process this glyph (repeatable)",
        ),
    ] = None,
    max_distance: Annotated[
        float,
        typer.Option(
            "--max-distance",
            help="Bridge length, in font units, at which the distance penalty reaches 1",
            min=1.0,
        ),
    ] = 64.0,
    min_corner_angle: Annotated[
        float,
        typer.Option(
            "--min-corner-angle",
            help="Clockwise turn, in degrees, a vertex must exceed to be a corner",
            min=0.1,
            max=179.9,
        ),
    ] = 18.0,
    min_tangent_distance: Annotated[
        float,
        typer.Option(
            "--min-tangent-distance",
            help="Curve controls closer than this to a vertex fall back to the chord tangent",
            min=0.0,
        ),
    ] = 4.0,
    reversal_penalty: Annotated[
        float,
        typer.Option(
            "--reversal-penalty",
            help="Score penalty for bridging a corner pair in reverse",
            min=0.0,
        ),
    ] = 0.5,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    list_corners: Annotated[
        bool,
        typer.Option(
            "--list-corners",
            help="List corner and bridge counts per glyph and exit",
        ),
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Compute corners and bridges for every glyph of a font.

    Reads the quadratic outlines of a TrueType font, detects sharp concave
    corners and pairs them with bridges, then writes the endpoints, bridges
    and serialized path of each glyph to a JSON file.

    Example:
        glyphbridge Roboto-Regular.ttf

    This will create Roboto-Regular-render.json next to the font.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        settings = GlyphBridgeSettings(
            bridge=BridgeConfig(
                max_bridge_distance=max_distance,
                min_corner_angle=math.radians(min_corner_angle),
                min_corner_tangent_distance=min_tangent_distance,
                reversal_penalty=reversal_penalty,
            ),
            processing=ProcessingConfig(
                max_workers=workers,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid configuration", details=str(e))
        raise typer.Exit(code=1)

    glyph_names = set(glyphs) if glyphs else None

    if not quiet:
        print_header(__version__)

    try:
        if list_corners:
            _handle_list_corners(input_font, settings, glyph_names, quiet)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Loading font")

        try:
            with FontReader(input_font) as reader:
                font_type = reader.format
                glyph_count = reader.glyph_count
                upm = reader.units_per_em
        except GlyphBridgeError:
            raise
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        if not quiet:
            print_font_info(
                font_path=str(input_font),
                font_type=font_type,
                glyph_count=glyph_count,
                upm=upm,
            )
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step("Processing")
            print_processing_info(actual_workers, is_auto=(workers is None))

        actual_output_path = output or RenderDataWriter.get_output_path(input_font)

        processor = FontProcessor(settings)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Processing glyphs", total=None, glyph="")

                    def update_progress(
                        completed: int, total: int, glyph_name: str, success: bool
                    ) -> None:
                        label = glyph_name if success else f"{glyph_name} (failed)"
                        progress.update(task_id, completed=completed, total=total, glyph=label)

                    stats = processor.process(
                        font_path=input_font,
                        output_path=actual_output_path,
                        glyph_names=glyph_names,
                        max_workers=workers,
                        progress_callback=update_progress,
                    )
            else:
                stats = processor.process(
                    font_path=input_font,
                    output_path=actual_output_path,
                    glyph_names=glyph_names,
                    max_workers=workers,
                )
        except KeyboardInterrupt:
            if not quiet:
                print_cancelled(processor.stats)
            raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code

        if not quiet:
            print_success(
                output_path=str(actual_output_path),
                file_size=_format_file_size(actual_output_path),
                stats=stats,
                show_all_failures=verbose,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save render data: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphBridgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_list_corners(
    font_path: Path,
    settings: GlyphBridgeSettings,
    glyph_names: set[str] | None,
    quiet: bool,
) -> None:
    """Handle --list-corners mode.

    Runs the pipeline in-process and prints per-glyph counts without
    writing any output.

    Args:
        font_path: Path to font file
        settings: Glyphbridge settings
        glyph_names: Only list these glyphs (all glyphs if None)
        quiet: Suppress output other than the table
    """
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_step("Loading font")

    assembler = RenderDataAssembler(settings.bridge)
    rows: list[tuple[str, int, int]] = []
    failures: list[tuple[str, str]] = []

    try:
        with FontReader(font_path) as reader:
            if not quiet:
                print_font_info(
                    font_path=str(font_path),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                )
                print_step("Finding corners")

            for name in reader.glyph_names:
                if glyph_names is not None and name not in glyph_names:
                    continue
                try:
                    glyph = reader.get_glyph(name)
                    if glyph is None or glyph.is_empty():
                        continue
                    render_data = assembler.assemble(glyph.path)
                except GlyphBridgeError as e:
                    failures.append((name, str(e)))
                    continue
                rows.append((name, len(render_data.corners), len(render_data.bridges)))
    except GlyphBridgeError:
        raise
    except Exception as e:
        print_error(f"Could not analyze font: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"\n[bold]{len(rows)} glyphs with outlines[/bold]\n")
    print_corner_table(rows)
    print_failures(failures, limit=len(failures))

    if not quiet:
        console.print(f"\n[bold green]{SYM_OK} Listing complete[/bold green] - no output written")


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

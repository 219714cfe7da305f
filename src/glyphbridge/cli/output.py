"""Rich console output for the glyphbridge CLI.

Progress, font summaries, corner tables and the end-of-run report are all
printed through the shared ``console``.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from glyphbridge.utils import ProcessingStats

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"

# Failing glyphs listed in the summary before the rest are elided
MAX_LISTED_FAILURES = 10


def create_progress() -> Progress:
    """Create a progress display showing glyph count and the latest glyph.

    Tasks are expected to carry a ``glyph`` field, updated as results arrive.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=32),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("[dim]{task.fields[glyph]}[/dim]"),
        console=console,
    )


def print_header(version: str) -> None:
    console.rule(f"[bold]glyphbridge[/bold] {version}", align="left")


def print_step(message: str) -> None:
    console.print(f"{SYM_STEP} [bold]{message}[/bold]")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print the loaded font as a two-column key/value grid."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="dim")
    grid.add_column()
    grid.add_row("  font", Text(font_path))
    grid.add_row("  outlines", font_type)
    grid.add_row("  glyphs", f"{glyph_count:,}")
    grid.add_row("  units/em", f"{upm:,}")
    console.print(grid)


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    source = "cpu count" if is_auto else "requested"
    console.print(f"  {workers} worker processes ({source}), Ctrl+C cancels")


def print_corner_table(rows: list[tuple[str, int, int]]) -> None:
    """Print corner and bridge counts per glyph.

    Args:
        rows: (glyph name, corner count, bridge count) tuples
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Glyph")
    table.add_column("Corners", justify="right")
    table.add_column("Bridges", justify="right")
    for name, corners, bridges in rows:
        table.add_row(name, str(corners), str(bridges))
    console.print(table)


def print_failures(failures: list[tuple[str, str]], limit: int = MAX_LISTED_FAILURES) -> None:
    """Print failing glyphs with their error, at most ``limit`` of them."""
    for name, error in failures[:limit]:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(name, style="bold")
        line.append(f": {error}", style="default")
        console.print(line)
    if len(failures) > limit:
        console.print(f"  [dim]... {len(failures) - limit} more, see the log for details[/dim]")


def print_success(
    output_path: str,
    file_size: str,
    stats: ProcessingStats,
    show_all_failures: bool = False,
) -> None:
    """Print the end-of-run report.

    Args:
        output_path: Path to the written JSON file
        file_size: Human-readable size of that file
        stats: Statistics of the finished run
        show_all_failures: List every failing glyph instead of the first few
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {stats.duration_seconds:.2f}s"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {stats.processed_count} glyphs written {SYM_DOT} "
        f"{stats.skipped_count} skipped {SYM_DOT} "
        f"{stats.corners_found} corners {SYM_DOT} {stats.bridges_added} bridges"
    )

    if stats.errors:
        console.print(f"  [red]{stats.error_count} glyphs failed[/red]")
        limit = len(stats.errors) if show_all_failures else MAX_LISTED_FAILURES
        print_failures(stats.errors, limit=limit)


def print_cancelled(stats: ProcessingStats | None) -> None:
    """Print what was finished before the run was interrupted."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold], no output file written")
    if stats is not None:
        console.print(
            f"  {stats.processed_count} glyphs finished {SYM_DOT} "
            f"{stats.cancelled_count} still queued"
        )


def print_error(message: str, details: str | None = None) -> None:
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
